import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def env_log_level(default: str = "INFO") -> str:
    """Return log level string from LOG_LEVEL env (fallback to ``default``)."""
    return os.getenv("LOG_LEVEL", default).upper()


def configure_logger(level: Optional[str] = None, log_file: Optional[str] = None, log_dir: str = "logs"):
    """
    Configure loguru for the CLI.

    Console output always goes to stderr so stdout stays clean for the JSON dump.
    A rotating file sink is added only when ``log_file`` is given.
    """
    level = (level or env_log_level()).upper()

    # Remove default handler to avoid duplicate logs
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )

    if log_file:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / log_file,
            rotation="10 MB",
            retention="10 days",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {extra} - {message}",
            backtrace=True,
            diagnose=True,
        )
