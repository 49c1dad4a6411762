"""Lock and state file backends backed by DynamoDB and S3."""

from .config import (
    BACKEND_TYPES,
    DynamoDbLockSettings,
    S3FileSettings,
    create_backend,
    settings_from_env,
    settings_from_mapping,
)
from .core.file_backend import S3FileBackend
from .core.lock_backend import DynamoDbLockBackend
from .core.object_iterator import S3ObjectIterator
from .exceptions import (
    BackendError,
    BackendUnavailableError,
    ConfigurationError,
    ExhaustedIteratorError,
    LockHeldError,
    LockOwnershipError,
)
from .models import LockRecord, ObjectEntry, ObjectPage

__all__ = [
    "BACKEND_TYPES",
    "BackendError",
    "BackendUnavailableError",
    "ConfigurationError",
    "DynamoDbLockBackend",
    "DynamoDbLockSettings",
    "ExhaustedIteratorError",
    "LockHeldError",
    "LockOwnershipError",
    "LockRecord",
    "ObjectEntry",
    "ObjectPage",
    "S3FileBackend",
    "S3FileSettings",
    "S3ObjectIterator",
    "create_backend",
    "settings_from_env",
    "settings_from_mapping",
]
