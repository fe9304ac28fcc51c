"""Runtime settings, read from the environment on every call."""

import os
from pathlib import Path


def get_agents_file() -> Path:
    """
    Get the backing JSON file path.

    Uses AGENTS_FILE environment variable if set, otherwise defaults to
    repo_root/agents.json relative to this file.
    """
    if os.environ.get("AGENTS_FILE"):
        return Path(os.environ["AGENTS_FILE"])

    # Path: agent_catalog/config.py -> repo root
    repo_root = Path(__file__).resolve().parent.parent
    return repo_root / "agents.json"


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    return int(os.getenv("PORT", "3001"))


def get_cors_origins() -> list[str]:
    """
    Allowed CORS origins from CORS_ORIGINS (comma-separated).

    Returns:
        List of origins; ["*"] when unset
    """
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_dir() -> Path | None:
    """Directory for rotating log files, or None for console-only logging."""
    if not os.environ.get("LOG_DIR"):
        return None
    return Path(os.environ["LOG_DIR"])
