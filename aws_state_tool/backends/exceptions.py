"""
Custom exceptions for the lock and state file backends.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""


class BackendError(Exception):
    """Base exception for backend operations."""

    pass


class ConditionFailedError(BackendError):
    """Conditional write was rejected by DynamoDB."""

    pass


class LockConflictError(BackendError):
    """Base for lock errors that carry the current holder diagnostics."""

    def __init__(self, message: str, holder_id: str | None = None, info: str | None = None):
        super().__init__(message)
        self.holder_id = holder_id
        self.info = info


class LockHeldError(LockConflictError):
    """Lock is already held (acquire found an existing record)."""

    pass


class LockOwnershipError(LockConflictError):
    """Lock is missing or held by another holder (release/update rejected)."""

    pass


class BackendUnavailableError(BackendError):
    """Underlying AWS call failed for infrastructure reasons."""

    pass


class TableNotFoundError(BackendUnavailableError):
    """DynamoDB table does not exist."""

    pass


class AWSThrottlingError(BackendUnavailableError):
    """DynamoDB or S3 throttling occurred."""

    pass


class AWSPermissionError(BackendUnavailableError):
    """AWS permission denied."""

    pass


class TableAlreadyExistsError(BackendError):
    """DynamoDB table already exists."""

    pass


class StateFileNotFoundError(BackendError):
    """State file does not exist in the bucket."""

    pass


class ExhaustedIteratorError(BackendError, StopIteration):
    """next() was called on a listing with no remaining entries."""

    pass


class ConfigurationError(BackendError):
    """Backend settings are missing or invalid."""

    pass
