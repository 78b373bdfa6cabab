# app/core/logger.py

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
