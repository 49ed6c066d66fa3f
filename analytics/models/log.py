# Data model for analytics events posted by the web frontend
# analytics/models/log.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Dict

class LogEntry(BaseModel):
    user_id: str | None = None
    event_type: str = Field(..., min_length=1)  # e.g., "view_page", "click_button"
    path: str | None = None
    meta: Dict[str, str] | None = None
    timestamp: datetime | None = None  # filled in by the /log handler when missing
