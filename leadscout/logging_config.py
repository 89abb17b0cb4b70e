import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "INFO") -> int:
    """Route loguru output to stderr at ``level``. Returns the sink id."""
    logger.remove()
    return logger.add(sys.stderr, level=level, format=LOG_FORMAT)
