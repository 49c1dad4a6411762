"""
Type models for the lock and state file backends.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .constants import ATTR_HOLDER_ID, ATTR_INFO, ATTR_LOCK_KEY


class CursorState(Enum):
    """States of a paginated listing cursor."""

    FRESH = "fresh"
    PAGED_MID_BUFFER = "paged_mid_buffer"
    PAGED_EXHAUSTED_BUFFER = "paged_exhausted_buffer"
    TERMINAL = "terminal"


@dataclass
class LockRecord:
    """Lock record stored as a single DynamoDB item per lock key."""

    lock_key: str
    holder_id: str
    info: str | None = None

    def to_item(self) -> dict[str, Any]:
        item = {ATTR_LOCK_KEY: self.lock_key, ATTR_HOLDER_ID: self.holder_id}
        if self.info is not None:
            item[ATTR_INFO] = self.info
        return item

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "LockRecord":
        return cls(
            lock_key=item[ATTR_LOCK_KEY],
            holder_id=item.get(ATTR_HOLDER_ID, ""),
            info=item.get(ATTR_INFO),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"lock_key": self.lock_key, "holder_id": self.holder_id, "info": self.info}


@dataclass
class ObjectEntry:
    """Single object entry returned by an S3 listing."""

    key: str
    size: int = 0
    last_modified: datetime | None = None
    etag: str | None = None

    @classmethod
    def from_s3(cls, content: dict[str, Any]) -> "ObjectEntry":
        return cls(
            key=content["Key"],
            size=content.get("Size", 0),
            last_modified=content.get("LastModified"),
            etag=content.get("ETag"),
        )


@dataclass
class ObjectPage:
    """One bounded page of a listing plus its continuation token."""

    entries: list[ObjectEntry] = field(default_factory=list)
    next_continuation_token: str | None = None
