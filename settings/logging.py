"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, component: str = "app"):
    """Configure logging with console and optional file output.

    The page and the CLI log to separate daily files (``app_*.log`` /
    ``cli_*.log``) and tag every record with their component name.
    """
    logger.remove()
    logger.configure(extra={"component": component})

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[component]}</cyan> | "
        "<level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / f"{component}_{{time:YYYY-MM-DD}}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[component]} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
            encoding="utf-8",
            enqueue=True,
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
