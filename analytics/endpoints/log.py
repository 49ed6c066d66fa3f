# Ingestion endpoint for analytics events
# analytics/endpoints/log.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from analytics.models.enums import LogEventType
from analytics.models.log import LogEntry
from analytics.services.store import LogStore, StorageError
from analytics.utils.db import get_store
from analytics.utils.logger import logger

router = APIRouter(tags=["Logs"])

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Go clients send 0001-01-01T00:00:00Z for an unset time
_GO_ZERO = datetime(1, 1, 1, tzinfo=timezone.utc)


def _is_zero_timestamp(ts: datetime | None) -> bool:
    if ts is None:
        return True
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts == _EPOCH or ts == _GO_ZERO


@router.post("/log")
async def handle_log(entry: LogEntry, store: LogStore = Depends(get_store)):
    """Validates an analytics event, stamps it if needed and appends it to the store."""
    if _is_zero_timestamp(entry.timestamp):
        entry.timestamp = datetime.now(timezone.utc)

    if not LogEventType.is_known(entry.event_type):
        logger.debug(f"Received unrecognised event type '{entry.event_type}'")

    try:
        # The Firestore client blocks, so keep it off the event loop.
        await run_in_threadpool(store.save, entry)
    except StorageError as e:
        logger.error(f"Failed to save log: {e}")
        return JSONResponse(status_code=500, content={"error": "failed to save log"})

    return {"status": "captured"}
