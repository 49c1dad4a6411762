"""
S3 file backend for state files.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..constants import STATE_FILE_SUFFIX
from ..logging_config import get_logger
from .client import S3Client
from .object_iterator import S3ObjectIterator

logger = get_logger(__name__)


class S3FileBackend:
    """Stores state files under an optional prefix in one bucket."""

    def __init__(
        self,
        bucket: str,
        prefix: str | None = None,
        suffix: str = STATE_FILE_SUFFIX,
        region: str | None = None,
        profile: str | None = None,
        client: S3Client | None = None,
    ):
        self.bucket = bucket
        self.prefix = prefix or None
        self.suffix = suffix
        self.region = region
        self.profile = profile
        self._client = client

    @classmethod
    def from_settings(cls, settings: Any) -> "S3FileBackend":
        return cls(
            bucket=settings.bucket,
            prefix=settings.prefix,
            suffix=settings.suffix,
            region=settings.region,
            profile=settings.profile,
        )

    @property
    def client(self) -> S3Client:
        if self._client is None:
            self._client = S3Client(self.region, self.profile)
        return self._client

    def list(self) -> Iterator[str]:
        """Yield state file names (prefix removed) lazily, page by page."""
        objects = S3ObjectIterator(self.bucket, self.prefixed(""), self.client)
        for entry in objects:
            if entry.key.endswith(self.suffix):
                yield self.remove_prefix(entry.key)

    def open_input(self, file: str) -> Any:
        """
        Open a state file for reading.

        Raises:
            StateFileNotFoundError: If the file does not exist
        """
        return self.client.get_object(self.bucket, self.prefixed(file))

    @contextmanager
    def open_output(self, file: str) -> Iterator[io.BytesIO]:
        """Buffer writes and upload them when the block exits cleanly."""
        buffer = io.BytesIO()
        yield buffer
        key = self.prefixed(file)
        logger.info(f"Uploading s3://{self.bucket}/{key}")
        self.client.put_object(self.bucket, key, buffer.getvalue())

    def delete(self, file: str) -> None:
        key = self.prefixed(file)
        logger.info(f"Deleting s3://{self.bucket}/{key}")
        self.client.delete_object(self.bucket, key)

    def exists(self, file: str) -> bool:
        return self.client.head_object(self.bucket, self.prefixed(file))

    def copy(self, source: str, destination: str) -> None:
        logger.info(f"Copying {source} to {destination} in s3://{self.bucket}")
        self.client.copy_object(self.bucket, self.prefixed(source), self.prefixed(destination))

    def prefixed(self, file: str) -> str:
        return f"{self.prefix}/{file}" if self.prefix is not None else file

    def remove_prefix(self, key: str) -> str:
        if self.prefix is not None and key.startswith(self.prefix + "/"):
            return key[len(self.prefix) + 1 :]
        return key
