# analytics/models/enums.py
from enum import Enum

class LogEventType(str, Enum):
    """Event kinds emitted by the web frontend. Other values are still accepted."""
    VIEW_PAGE = "view_page"
    CLICK_BUTTON = "click_button"
    SEARCH = "search"
    CONVERSION = "conversion"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in cls._value2member_map_
