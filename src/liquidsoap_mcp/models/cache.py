from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Raw HTML of a documentation page as last fetched."""

    url: str
    content: str  # Raw response body, not extracted text
    fetched_at: datetime
