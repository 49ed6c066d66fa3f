# analytics/utils/db.py
from fastapi import Request

from analytics.services.store import (
    LogStore,
    StoreConnectionError,
    UnavailableStore,
    initialize_store,
)
from analytics.utils.config import StoreConfig
from analytics.utils.logger import logger


def open_store(config: StoreConfig) -> LogStore:
    """
    Connects to the document store. On failure the service keeps running in
    degraded mode: /health reports db_down and every /log write fails.
    """
    try:
        return initialize_store(config)
    except StoreConnectionError as e:
        logger.warning(
            f"Failed to connect to Firestore: {e}. "
            "Check GOOGLE_APPLICATION_CREDENTIALS / CREDENTIALS_SOURCE."
        )
        return UnavailableStore(str(e))


def get_store(request: Request) -> LogStore:
    """Dependency returning the store opened at startup."""
    return request.app.state.store
