"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR


def _is_audit(record) -> bool:
    return record["extra"].get("audit", False)


def setup_logging(level: str = "INFO", to_file: bool = True):
    """Configure console logging plus optional app and admin-audit log files.

    Messages bound with ``audit=True`` (admin vote mutations) also go to
    ``audit_*.log``.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "voting_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.add(
            LOG_DIR / "audit_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}",
            level="INFO",
            filter=_is_audit,
            rotation="00:00",
            retention="90 days",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
