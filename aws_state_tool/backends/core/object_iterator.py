"""
Lazy iterator over a paginated S3 object listing.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from dataclasses import dataclass, field
from typing import Protocol

from ..constants import DEFAULT_PAGE_SIZE
from ..exceptions import ExhaustedIteratorError
from ..logging_config import get_logger
from ..models import CursorState, ObjectEntry, ObjectPage

logger = get_logger(__name__)


class ListingClient(Protocol):
    """Anything that can return one page of an object listing."""

    def list_objects(
        self,
        bucket: str,
        prefix: str,
        continuation_token: str | None = None,
        max_keys: int = ...,
    ) -> ObjectPage: ...


@dataclass
class ListingCursor:
    """Position within the most recently fetched page."""

    buffer: list[ObjectEntry] = field(default_factory=list)
    index: int = 0
    continuation_token: str | None = None
    fetched: bool = False

    @property
    def state(self) -> CursorState:
        if self.index < len(self.buffer):
            return CursorState.PAGED_MID_BUFFER
        if not self.fetched:
            return CursorState.FRESH
        if self.continuation_token is None:
            return CursorState.TERMINAL
        return CursorState.PAGED_EXHAUSTED_BUFFER

    def advance(self, page: ObjectPage) -> None:
        """
        Apply a freshly fetched page.

        An empty page keeps the exhausted buffer as-is, so entries that were
        already handed out are never replayed.
        """
        if page.entries:
            self.buffer = list(page.entries)
            self.index = 0
        self.continuation_token = page.next_continuation_token
        self.fetched = True

    def take(self) -> ObjectEntry:
        entry = self.buffer[self.index]
        self.index += 1
        return entry


class S3ObjectIterator:
    """
    Pull-based sequence of object entries under bucket/prefix.

    Pages are fetched only when the current one is used up. The listing ends
    when a fetched page carries no continuation token. An iterator cannot be
    restarted; build a new one to list again. Not thread-safe.
    """

    def __init__(
        self,
        bucket: str,
        prefix: str,
        client: ListingClient,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.bucket = bucket
        self.prefix = prefix
        self.page_size = page_size
        self._client = client
        self._cursor = ListingCursor()

    @property
    def state(self) -> CursorState:
        return self._cursor.state

    def has_next(self) -> bool:
        """
        Check whether another entry is available, fetching pages as needed.

        Listing failures propagate unretried.
        """
        while True:
            state = self._cursor.state
            if state is CursorState.PAGED_MID_BUFFER:
                return True
            if state is CursorState.TERMINAL:
                return False
            self.fetch_next_page()

    def next(self) -> ObjectEntry:
        """
        Return the next entry.

        Raises:
            ExhaustedIteratorError: If the listing has no remaining entries
        """
        if not self.has_next():
            raise ExhaustedIteratorError(
                f"No more objects under s3://{self.bucket}/{self.prefix}"
            )
        return self._cursor.take()

    def fetch_next_page(self) -> ObjectPage | None:
        """
        Fetch the page after the current continuation token and apply it.

        Only fetches once the buffer is used up. While entries remain this is
        a no-op returning None.

        Raises:
            ExhaustedIteratorError: If the listing has already ended
        """
        cursor = self._cursor
        state = cursor.state
        if state is CursorState.TERMINAL:
            raise ExhaustedIteratorError(
                f"Listing of s3://{self.bucket}/{self.prefix} has ended"
            )
        if state is CursorState.PAGED_MID_BUFFER:
            return None

        logger.debug(
            f"Listing s3://{self.bucket}/{self.prefix} "
            f"(token={cursor.continuation_token}, max_keys={self.page_size})"
        )
        page = self._client.list_objects(
            self.bucket,
            self.prefix,
            continuation_token=cursor.continuation_token,
            max_keys=self.page_size,
        )
        cursor.advance(page)
        logger.debug(
            f"Fetched {len(page.entries)} entries, more pages: "
            f"{page.next_continuation_token is not None}"
        )
        return page

    def __iter__(self) -> "S3ObjectIterator":
        return self

    def __next__(self) -> ObjectEntry:
        return self.next()
