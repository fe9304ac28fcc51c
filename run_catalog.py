#!/usr/bin/env python3
"""
Run script for the agent catalog API.

Examples: PORT=8011 python run_catalog.py
          AGENTS_FILE=/data/agents.json python run_catalog.py
          SSL_KEYFILE=key.pem SSL_CERTFILE=cert.pem python run_catalog.py  # HTTPS
"""

import os

import uvicorn

from agent_catalog.config import get_agents_file, get_host, get_port, get_log_level
from agent_catalog.logger import get_logger, log_info

logger = get_logger("agent_catalog.server")


def main():
    from agent_catalog.api.main import app

    host = get_host()
    port = get_port()
    # HTTPS only when both SSL_KEYFILE and SSL_CERTFILE are set
    ssl_keyfile = os.getenv("SSL_KEYFILE")
    ssl_certfile = os.getenv("SSL_CERTFILE")
    use_https = bool(ssl_keyfile and ssl_certfile)
    scheme = "https" if use_https else "http"

    log_info(
        logger,
        f"Backend server listening at {scheme}://{host}:{port}",
        agents_file=str(get_agents_file()),
    )

    kwargs = {"host": host, "port": port, "log_level": get_log_level().lower()}
    if use_https:
        kwargs["ssl_keyfile"] = ssl_keyfile
        kwargs["ssl_certfile"] = ssl_certfile
    uvicorn.run(app, **kwargs)


if __name__ == "__main__":
    main()
