# chatrelay/utils/logger.py

import logging

from chatrelay.core.config import get_settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def setup_logger() -> logging.Logger:
    """Configure root logging once for the whole process."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
    return logging.getLogger("chatrelay")
