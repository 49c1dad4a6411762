"""
Tests for lock table provisioning
"""

import boto3
import pytest

from aws_state_tool.backends.core.table_operations import (
    check_table_exists,
    create_lock_table,
    drop_lock_table,
)
from aws_state_tool.backends.exceptions import TableAlreadyExistsError, TableNotFoundError

from .conftest import REGION


def test_create_lock_table_schema(mocked_aws):
    create_lock_table("locks", region=REGION)

    table = boto3.client("dynamodb", region_name=REGION).describe_table(TableName="locks")["Table"]
    assert table["KeySchema"] == [{"AttributeName": "lock_key", "KeyType": "HASH"}]
    assert check_table_exists("locks", region=REGION) is True


def test_create_provisioned_table(mocked_aws):
    create_lock_table("locks", region=REGION, billing_mode="PROVISIONED")

    table = boto3.client("dynamodb", region_name=REGION).describe_table(TableName="locks")["Table"]
    assert table["ProvisionedThroughput"]["WriteCapacityUnits"] == 1


def test_create_existing_table(mocked_aws):
    create_lock_table("locks", region=REGION)

    with pytest.raises(TableAlreadyExistsError):
        create_lock_table("locks", region=REGION)


def test_drop_lock_table(mocked_aws):
    create_lock_table("locks", region=REGION)

    drop_lock_table("locks", region=REGION)

    assert check_table_exists("locks", region=REGION) is False


def test_drop_missing_table(mocked_aws):
    with pytest.raises(TableNotFoundError):
        drop_lock_table("locks", region=REGION)
