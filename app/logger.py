import logging
from .config import settings

_configured = False

def get_logger(name: str = "app") -> logging.Logger:
    """Return the application logger, configuring the root handler on first use"""
    global _configured
    if not _configured:
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
        )
        _configured = True
    return logging.getLogger(name)
