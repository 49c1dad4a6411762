"""
DynamoDB lock backend.

Serializes convergence runs with a single item per lock key. Every state
transition is one conditional write, so DynamoDB evaluates the ownership check
atomically with the mutation. There is no lease and no retry: a conflicting
caller fails immediately and a crashed holder keeps the lock until it is
released with force_unlock().

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

from ..constants import (
    ATTR_HOLDER_ID,
    ATTR_INFO,
    ATTR_LOCK_KEY,
    CONDITION_HELD_BY,
    CONDITION_LOCK_ABSENT,
    DEFAULT_LOCK_KEY,
    UPDATE_SET_INFO,
)
from ..exceptions import (
    BackendError,
    ConditionFailedError,
    LockHeldError,
    LockOwnershipError,
)
from ..logging_config import get_logger
from ..models import LockRecord
from .client import DynamoDBClient

logger = get_logger(__name__)


class DynamoDbLockBackend:
    """Mutual exclusion over a named lock key stored in a DynamoDB table."""

    def __init__(
        self,
        table_name: str,
        lock_key: str | None = None,
        region: str | None = None,
        profile: str | None = None,
        client: DynamoDBClient | None = None,
    ):
        """
        Initialize the lock backend.

        Args:
            table_name: DynamoDB table holding lock records
            lock_key: Logical lock name (blank means 'default')
            region: AWS region (optional)
            profile: AWS profile (optional)
            client: Pre-built DynamoDB client (optional)
        """
        self.table_name = table_name
        self.lock_key = lock_key or DEFAULT_LOCK_KEY
        self.region = region
        self.profile = profile
        self._client = client

    @classmethod
    def from_settings(cls, settings: Any) -> "DynamoDbLockBackend":
        return cls(
            table_name=settings.table_name,
            lock_key=settings.lock_key,
            region=settings.region,
            profile=settings.profile,
        )

    @property
    def client(self) -> DynamoDBClient:
        if self._client is None:
            self._client = DynamoDBClient(self.table_name, self.region, self.profile)
        return self._client

    def lock(self, holder_id: str) -> LockRecord:
        """
        Acquire the lock by creating its record.

        Args:
            holder_id: Identifier of the caller acquiring the lock

        Returns:
            The created lock record

        Raises:
            LockHeldError: If a record already exists for the lock key
            BackendUnavailableError: If DynamoDB cannot be reached
        """
        record = LockRecord(lock_key=self.lock_key, holder_id=holder_id)
        logger.info(f"Acquiring lock '{self.lock_key}' in '{self.table_name}' as {holder_id}")

        try:
            self.client.put_item(
                record.to_item(),
                condition_expression=CONDITION_LOCK_ABSENT,
                expression_attribute_names={"#key": ATTR_LOCK_KEY},
            )
        except ConditionFailedError:
            current = self._lookup_current_lock()
            raise LockHeldError(
                f"State is currently locked!{self._diagnostics(current)}",
                holder_id=current.holder_id if current else None,
                info=current.info if current else None,
            )

        logger.debug(f"Lock '{self.lock_key}' acquired by {holder_id}")
        return record

    def unlock(self, holder_id: str) -> None:
        """
        Release the lock by deleting its record if held by holder_id.

        Args:
            holder_id: Identifier of the caller releasing the lock

        Raises:
            LockOwnershipError: If the record is missing or held by someone else
            BackendUnavailableError: If DynamoDB cannot be reached
        """
        logger.info(f"Releasing lock '{self.lock_key}' as {holder_id}")

        try:
            self.client.delete_item(
                self._key(),
                condition_expression=CONDITION_HELD_BY,
                expression_attribute_names={"#holder": ATTR_HOLDER_ID},
                expression_attribute_values={":id": holder_id},
            )
        except ConditionFailedError:
            self._raise_ownership_error(
                f"Cannot unlock '{holder_id}' as it is no longer the active lock!"
            )

        logger.debug(f"Lock '{self.lock_key}' released by {holder_id}")

    def update_lock_info(self, holder_id: str, info: str) -> None:
        """
        Publish holder status on the lock record without releasing it.

        Args:
            holder_id: Identifier of the current holder
            info: Human-readable status (e.g. "applying resource 3 of 12")

        Raises:
            LockOwnershipError: If the record is missing or held by someone else
            BackendUnavailableError: If DynamoDB cannot be reached
        """
        logger.debug(f"Updating info on lock '{self.lock_key}' as {holder_id}: {info}")

        try:
            self.client.update_item(
                self._key(),
                update_expression=UPDATE_SET_INFO,
                condition_expression=CONDITION_HELD_BY,
                expression_attribute_names={"#holder": ATTR_HOLDER_ID, "#info": ATTR_INFO},
                expression_attribute_values={":id": holder_id, ":info": info},
            )
        except ConditionFailedError:
            self._raise_ownership_error(
                f"Cannot update info for '{holder_id}' as it is no longer the active lock!"
            )

    def current_lock(self) -> LockRecord | None:
        """
        Read the current lock record.

        Returns:
            The lock record if the lock is held, None if free
        """
        item = self.client.get_item(self._key())
        if not item:
            return None
        return LockRecord.from_item(item)

    def force_unlock(self) -> LockRecord | None:
        """
        Remove the lock record regardless of holder.

        Operator escape hatch for locks leaked by crashed holders.

        Returns:
            The removed record, or None if the lock was free
        """
        logger.warning(f"Force releasing lock '{self.lock_key}' in '{self.table_name}'")
        response = self.client.delete_item(self._key(), return_values="ALL_OLD")
        attributes = response.get("Attributes")
        if not attributes:
            return None
        return LockRecord.from_item(attributes)

    def describe_current_holder(self) -> str:
        """
        Best-effort description of the current holder for error messages.

        Returns:
            Diagnostic suffix, or an empty string if the lookup failed or the
            lock is free
        """
        return self._diagnostics(self._lookup_current_lock())

    def _lookup_current_lock(self) -> LockRecord | None:
        try:
            return self.current_lock()
        except BackendError as e:
            logger.debug(f"Could not read current holder of lock '{self.lock_key}': {e}")
            return None

    def _raise_ownership_error(self, message: str) -> None:
        current = self._lookup_current_lock()
        raise LockOwnershipError(
            f"{message}{self._diagnostics(current)}",
            holder_id=current.holder_id if current else None,
            info=current.info if current else None,
        )

    @staticmethod
    def _diagnostics(current: LockRecord | None) -> str:
        if current is None:
            return ""
        lines = [f"\nCurrent lock ID: '{current.holder_id}'."]
        if current.info:
            lines.append(current.info)
        return "\n".join(lines)

    def _key(self) -> dict[str, Any]:
        return {ATTR_LOCK_KEY: self.lock_key}
