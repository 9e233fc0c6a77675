"""Logger configuration for liftguard.

The library only emits records through loguru. Applications that want
liftguard's default sinks call configure_logging() once at startup.
Structured fields passed as logger keyword arguments (muscle=, exercise=,
code=...) land in {extra}, so both sinks print them.
"""

import sys
from pathlib import Path

from loguru import logger

from liftguard.config.settings import get_settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure loguru logger with console and optional file output.

    Args:
        level: Logging level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    # Remove default handler (and any sinks from a previous call)
    logger.remove()

    # Console handler with color; guardian corrections show up at DEBUG
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=True,
        )

    logger.info("Logger initialized", level=level, log_file=log_file)


def configure_logging() -> None:
    """Configure sinks from LIFTGUARD_* settings.

    Not called on import: liftguard is a library, so sinks belong to the
    application.
    """
    settings = get_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)
