# analytics/utils/logger.py
"""Shared `analytics` logger; the server passes the same resolved level to uvicorn."""
import logging
import sys
from analytics.utils.config import settings


def resolve_log_level(name: str) -> int:
    """Maps a level name such as 'debug' or 'WARN' to its numeric value, falling back to INFO."""
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger("analytics")
logger.setLevel(resolve_log_level(settings.log_level))

# Uvicorn's --reload re-imports this module; avoid stacking handlers.
if logger.hasHandlers():
    logger.handlers.clear()

handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
logger.addHandler(handler)

# Request and startup messages go to stdout once, not again via the root logger.
logger.propagate = False
