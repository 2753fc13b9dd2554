import sys
from loguru import logger
from template_selector.config import settings

def setup_logging():
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    # Optional file logging
    if settings.LOG_FILE:
        logger.add(settings.LOG_FILE, rotation="10 MB", level="DEBUG")

setup_logging()
