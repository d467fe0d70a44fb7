import sys

from loguru import logger


def init_logger(debug: bool = False) -> None:
    """Configure the single stderr sink.

    Debug mode logs everything with source locations; otherwise INFO and
    above are shown with timestamps, since the process runs unattended.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ) if debug else (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<level>{message}</level>"
    )
    logger.add(sys.stderr, level=level, format=log_format)
