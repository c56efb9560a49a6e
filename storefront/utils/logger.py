"""
Storefront logging

Handlers, routers and stores log under ``storefront.<area>``; the level of
the whole tree follows ``settings.LOG_LEVEL``.
"""
import logging
import sys

from storefront.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("storefront")
logger.setLevel(settings.LOG_LEVEL.upper())

# Importing twice (reloads, test collection) must not stack handlers
if not logger.handlers:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(stdout_handler)

# uvicorn configures the root logger too
logger.propagate = False


def get_logger(area: str = None) -> logging.Logger:
    """Logger for one area of the service, e.g. ``get_logger("orders")``"""
    if area:
        return logger.getChild(area)
    return logger
