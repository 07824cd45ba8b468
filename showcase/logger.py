# showcase/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(force: bool = False):
    """
    Configure the root logger once from the LOG_* environment variables.
    Handlers already attached to the root logger are left alone.
    """
    global _configured
    if _configured and not force:
        return

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_to_file = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    log_file = os.getenv("LOG_FILE", "logs/trade_showcase.log")
    log_max_bytes = int(os.getenv("LOG_MAX_BYTES", str(2 * 1024 * 1024)))
    log_backups = int(os.getenv("LOG_BACKUPS", "3"))
    log_to_stdout = os.getenv("LOG_TO_STDOUT", "true").lower() == "true"

    level = getattr(logging, log_level, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Avoid duplicate handlers
    if not root.handlers:
        if log_to_stdout:
            ch = logging.StreamHandler(sys.stdout)
            ch.setLevel(level)
            ch.setFormatter(formatter)
            root.addHandler(ch)

        if log_to_file:
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                fh = RotatingFileHandler(
                    log_file,
                    maxBytes=log_max_bytes,
                    backupCount=log_backups,
                    encoding="utf-8",
                )
                fh.setLevel(level)
                fh.setFormatter(formatter)
                root.addHandler(fh)
            except OSError as e:
                root.warning("Failed to initialize file logging: %s", e)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
