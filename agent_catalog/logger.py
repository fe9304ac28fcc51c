import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from .config import get_log_dir, get_log_level


# ------------------------------------------------------------
# FORMATTER: JSON structured logs
# ------------------------------------------------------------
class JsonFormatter(logging.Formatter):
    def format(self, record):
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if hasattr(record, "extra"):
            log.update(record.extra)

        # exception stack trace
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


# ------------------------------------------------------------
# LOGGER FACTORY
# ------------------------------------------------------------
_loggers_cache = {}


def get_logger(name: str):
    """
    Returns a structured JSON logger with console output, plus a rotating
    file handler when LOG_DIR is set.
    Cached so all imports reuse the same logger.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    level = getattr(logging, get_log_level(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        # ---- Console handler ----
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(JsonFormatter())
        logger.addHandler(ch)

        # ---- File handler ----
        log_dir = get_log_dir()
        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                log_dir / f"{name}.log",
                maxBytes=5_000_000,
                backupCount=5,
                encoding="utf-8"
            )
            fh.setLevel(level)
            fh.setFormatter(JsonFormatter())
            logger.addHandler(fh)

    _loggers_cache[name] = logger
    return logger


# ------------------------------------------------------------
# UTILITY: log with extra metadata
# ------------------------------------------------------------
def log_info(logger, msg, **kwargs):
    logger.info(msg, extra={"extra": kwargs})


def log_warning(logger, msg, **kwargs):
    logger.warning(msg, extra={"extra": kwargs})


def log_error(logger, msg, exc_info=None, **kwargs):
    logger.error(msg, exc_info=exc_info, extra={"extra": kwargs})
