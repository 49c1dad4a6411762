"""
DynamoDB and S3 client wrappers with error handling.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any, NoReturn

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..constants import PRIVATE_ACL
from ..exceptions import (
    AWSPermissionError,
    AWSThrottlingError,
    BackendUnavailableError,
    ConditionFailedError,
    StateFileNotFoundError,
    TableNotFoundError,
)
from ..models import ObjectEntry, ObjectPage

THROTTLING_CODES = {
    "ProvisionedThroughputExceededException",
    "RequestLimitExceeded",
    "ThrottlingException",
    "SlowDown",
}
PERMISSION_CODES = {"AccessDeniedException", "AccessDenied", "UnrecognizedClientException"}
MISSING_OBJECT_CODES = {"NoSuchKey", "404", "NotFound"}


def translate_client_error(error: ClientError, resource: str) -> NoReturn:
    """
    Convert boto3 errors to backend exceptions.

    Args:
        error: ClientError from boto3
        resource: Table or bucket name used in messages

    Raises:
        ConditionFailedError: If condition check failed
        TableNotFoundError: If table not found
        StateFileNotFoundError: If the S3 object does not exist
        AWSThrottlingError: If throttled
        AWSPermissionError: If permission denied
        BackendUnavailableError: For other errors
    """
    code = error.response.get("Error", {}).get("Code", "")

    if code == "ConditionalCheckFailedException":
        raise ConditionFailedError(f"Condition failed: {error}") from error
    elif code == "ResourceNotFoundException":
        raise TableNotFoundError(f"Table '{resource}' not found") from error
    elif code in MISSING_OBJECT_CODES:
        raise StateFileNotFoundError(f"Object not found in '{resource}'") from error
    elif code in THROTTLING_CODES:
        raise AWSThrottlingError(f"AWS throttling on '{resource}': {error}") from error
    elif code in PERMISSION_CODES:
        raise AWSPermissionError(f"AWS permission denied on '{resource}'") from error
    else:
        raise BackendUnavailableError(f"AWS error on '{resource}': {error}") from error


def translate_botocore_error(error: BotoCoreError, resource: str) -> NoReturn:
    """Convert transport and credential failures to BackendUnavailableError."""
    raise BackendUnavailableError(f"AWS unavailable for '{resource}': {error}") from error


class DynamoDBClient:
    """DynamoDB client wrapper with error handling."""

    def __init__(
        self,
        table_name: str,
        region: str | None = None,
        profile: str | None = None,
        session: boto3.Session | None = None,
    ):
        """
        Initialize DynamoDB client.

        Args:
            table_name: DynamoDB table name
            region: AWS region (optional, uses SDK default)
            profile: AWS profile (optional, uses SDK default)
            session: Pre-built boto3 session (optional)
        """
        session = session or boto3.Session(profile_name=profile, region_name=region)
        self.dynamodb = session.resource("dynamodb")
        self.table = self.dynamodb.Table(table_name)
        self.table_name = table_name

    def put_item(
        self,
        item: dict[str, Any],
        condition_expression: str | None = None,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Put item with optional condition.

        Args:
            item: Item to put
            condition_expression: Optional condition expression
            expression_attribute_names: Optional expression attribute names
            expression_attribute_values: Optional expression attribute values

        Returns:
            Response from DynamoDB

        Raises:
            ConditionFailedError: If condition fails
            BackendUnavailableError: For other DynamoDB errors
        """
        kwargs: dict[str, Any] = {"Item": item}
        self._add_expressions(
            kwargs, condition_expression, expression_attribute_names, expression_attribute_values
        )
        return self._call(self.table.put_item, **kwargs)

    def get_item(self, key: dict[str, Any]) -> dict[str, Any] | None:
        """
        Get item by key with a strongly consistent read.

        Args:
            key: Key to retrieve

        Returns:
            Item if found, None otherwise

        Raises:
            BackendUnavailableError: For DynamoDB errors
        """
        response = self._call(self.table.get_item, Key=key, ConsistentRead=True)
        return response.get("Item")

    def delete_item(
        self,
        key: dict[str, Any],
        condition_expression: str | None = None,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
        return_values: str | None = None,
    ) -> dict[str, Any]:
        """
        Delete item with optional condition.

        Args:
            key: Key to delete
            condition_expression: Optional condition expression
            expression_attribute_names: Optional expression attribute names
            expression_attribute_values: Optional expression attribute values
            return_values: Optional ReturnValues setting (e.g. ALL_OLD)

        Returns:
            Response from DynamoDB

        Raises:
            ConditionFailedError: If condition fails
            BackendUnavailableError: For other DynamoDB errors
        """
        kwargs: dict[str, Any] = {"Key": key}
        self._add_expressions(
            kwargs, condition_expression, expression_attribute_names, expression_attribute_values
        )
        if return_values:
            kwargs["ReturnValues"] = return_values
        return self._call(self.table.delete_item, **kwargs)

    def update_item(
        self,
        key: dict[str, Any],
        update_expression: str,
        condition_expression: str | None = None,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
        return_values: str | None = None,
    ) -> dict[str, Any]:
        """
        Update item with optional condition.

        Args:
            key: Key to update
            update_expression: Update expression (e.g. SET #info = :info)
            condition_expression: Optional condition expression
            expression_attribute_names: Optional expression attribute names
            expression_attribute_values: Optional expression attribute values
            return_values: Optional ReturnValues setting (e.g. ALL_NEW)

        Returns:
            Response from DynamoDB

        Raises:
            ConditionFailedError: If condition fails
            BackendUnavailableError: For other DynamoDB errors
        """
        kwargs: dict[str, Any] = {"Key": key, "UpdateExpression": update_expression}
        self._add_expressions(
            kwargs, condition_expression, expression_attribute_names, expression_attribute_values
        )
        if return_values:
            kwargs["ReturnValues"] = return_values
        return self._call(self.table.update_item, **kwargs)

    @staticmethod
    def _add_expressions(
        kwargs: dict[str, Any],
        condition_expression: str | None,
        expression_attribute_names: dict[str, str] | None,
        expression_attribute_values: dict[str, Any] | None,
    ) -> None:
        if condition_expression:
            kwargs["ConditionExpression"] = condition_expression
        if expression_attribute_names:
            kwargs["ExpressionAttributeNames"] = expression_attribute_names
        if expression_attribute_values:
            kwargs["ExpressionAttributeValues"] = expression_attribute_values

    def _call(self, operation: Any, **kwargs: Any) -> dict[str, Any]:
        try:
            return operation(**kwargs)  # type: ignore[no-any-return]
        except ClientError as e:
            translate_client_error(e, self.table_name)
        except BotoCoreError as e:
            translate_botocore_error(e, self.table_name)


class S3Client:
    """S3 client wrapper with error handling."""

    def __init__(
        self,
        region: str | None = None,
        profile: str | None = None,
        session: boto3.Session | None = None,
    ):
        """
        Initialize S3 client.

        Args:
            region: AWS region (optional, uses SDK default)
            profile: AWS profile (optional, uses SDK default)
            session: Pre-built boto3 session (optional)
        """
        session = session or boto3.Session(profile_name=profile, region_name=region)
        self.client = session.client("s3")

    def list_objects(
        self,
        bucket: str,
        prefix: str,
        continuation_token: str | None = None,
        max_keys: int = 1000,
    ) -> ObjectPage:
        """
        List one page of objects.

        Args:
            bucket: Bucket name
            prefix: Key prefix to filter by
            continuation_token: Token returned by the previous page (optional)
            max_keys: Maximum entries in the page

        Returns:
            ObjectPage with entries and the next continuation token

        Raises:
            BackendUnavailableError: For S3 errors
        """
        kwargs: dict[str, Any] = {"Bucket": bucket, "Prefix": prefix, "MaxKeys": max_keys}
        if continuation_token:
            kwargs["ContinuationToken"] = continuation_token

        response = self._call(bucket, self.client.list_objects_v2, **kwargs)
        entries = [ObjectEntry.from_s3(content) for content in response.get("Contents", [])]
        return ObjectPage(
            entries=entries,
            next_continuation_token=response.get("NextContinuationToken"),
        )

    def get_object(self, bucket: str, key: str) -> Any:
        """
        Open an object for reading.

        Returns:
            Streaming body of the object

        Raises:
            StateFileNotFoundError: If the object does not exist
        """
        response = self._call(bucket, self.client.get_object, Bucket=bucket, Key=key)
        return response["Body"]

    def put_object(self, bucket: str, key: str, body: bytes) -> None:
        """Upload an object with a private ACL."""
        self._call(
            bucket, self.client.put_object, Bucket=bucket, Key=key, Body=body, ACL=PRIVATE_ACL
        )

    def delete_object(self, bucket: str, key: str) -> None:
        """Delete an object (S3 treats missing keys as deleted)."""
        self._call(bucket, self.client.delete_object, Bucket=bucket, Key=key)

    def head_object(self, bucket: str, key: str) -> bool:
        """
        Check if an object exists.

        Returns:
            True if the object exists, False otherwise
        """
        try:
            self._call(bucket, self.client.head_object, Bucket=bucket, Key=key)
        except StateFileNotFoundError:
            return False
        return True

    def copy_object(self, bucket: str, source_key: str, destination_key: str) -> None:
        """Copy an object within a bucket with a private ACL."""
        self._call(
            bucket,
            self.client.copy_object,
            CopySource={"Bucket": bucket, "Key": source_key},
            Bucket=bucket,
            Key=destination_key,
            ACL=PRIVATE_ACL,
        )

    def _call(self, bucket: str, operation: Any, **kwargs: Any) -> dict[str, Any]:
        try:
            return operation(**kwargs)  # type: ignore[no-any-return]
        except ClientError as e:
            translate_client_error(e, bucket)
        except BotoCoreError as e:
            translate_botocore_error(e, bucket)
