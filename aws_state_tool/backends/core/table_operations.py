"""
Lock table management operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any, Literal

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..constants import ATTR_LOCK_KEY
from ..exceptions import TableAlreadyExistsError, TableNotFoundError
from ..logging_config import get_logger
from .client import translate_botocore_error, translate_client_error

logger = get_logger(__name__)


def create_lock_table(
    table_name: str,
    region: str | None = None,
    profile: str | None = None,
    billing_mode: Literal["PAY_PER_REQUEST", "PROVISIONED"] = "PAY_PER_REQUEST",
) -> dict[str, Any]:
    """
    Create DynamoDB table for lock records.

    Args:
        table_name: Table name
        region: AWS region (optional)
        profile: AWS profile (optional)
        billing_mode: Billing mode (PAY_PER_REQUEST or PROVISIONED)

    Returns:
        Table description

    Raises:
        TableAlreadyExistsError: If table already exists
        BackendUnavailableError: For other AWS errors
    """
    session = boto3.Session(profile_name=profile, region_name=region)
    dynamodb = session.client("dynamodb")

    kwargs: dict[str, Any] = {
        "TableName": table_name,
        "KeySchema": [{"AttributeName": ATTR_LOCK_KEY, "KeyType": "HASH"}],
        "AttributeDefinitions": [{"AttributeName": ATTR_LOCK_KEY, "AttributeType": "S"}],
        "BillingMode": billing_mode,
        "Tags": [
            {"Key": "ManagedBy", "Value": "aws-state-tool"},
            {"Key": "Purpose", "Value": "state-lock"},
        ],
    }
    if billing_mode == "PROVISIONED":
        kwargs["ProvisionedThroughput"] = {"ReadCapacityUnits": 1, "WriteCapacityUnits": 1}

    logger.info(f"Creating lock table '{table_name}' ({billing_mode})")

    try:
        response = dynamodb.create_table(**kwargs)
        return response["TableDescription"]  # type: ignore[no-any-return]
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            raise TableAlreadyExistsError(f"Table '{table_name}' already exists") from e
        translate_client_error(e, table_name)
    except BotoCoreError as e:
        translate_botocore_error(e, table_name)


def drop_lock_table(
    table_name: str, region: str | None = None, profile: str | None = None
) -> dict[str, Any]:
    """
    Drop the lock table.

    Args:
        table_name: Table name
        region: AWS region (optional)
        profile: AWS profile (optional)

    Returns:
        Table description

    Raises:
        TableNotFoundError: If table does not exist
    """
    session = boto3.Session(profile_name=profile, region_name=region)
    dynamodb = session.client("dynamodb")

    logger.info(f"Dropping lock table '{table_name}'")

    try:
        response = dynamodb.delete_table(TableName=table_name)
        return response["TableDescription"]  # type: ignore[no-any-return]
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceNotFoundException":
            raise TableNotFoundError(f"Table '{table_name}' not found") from e
        translate_client_error(e, table_name)
    except BotoCoreError as e:
        translate_botocore_error(e, table_name)


def check_table_exists(
    table_name: str, region: str | None = None, profile: str | None = None
) -> bool:
    """
    Check if table exists.

    Args:
        table_name: Table name
        region: AWS region (optional)
        profile: AWS profile (optional)

    Returns:
        True if table exists, False otherwise
    """
    session = boto3.Session(profile_name=profile, region_name=region)
    dynamodb = session.client("dynamodb")

    try:
        dynamodb.describe_table(TableName=table_name)
        return True
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceNotFoundException":
            return False
        translate_client_error(e, table_name)
