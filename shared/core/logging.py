import logging

from shared.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=LOG_FORMAT
)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
