import boto3
import pytest
from moto import mock_aws

from aws_state_tool.backends.core.client import DynamoDBClient, S3Client
from aws_state_tool.backends.core.file_backend import S3FileBackend
from aws_state_tool.backends.core.lock_backend import DynamoDbLockBackend
from aws_state_tool.backends.core.table_operations import create_lock_table

REGION = "us-east-1"
TABLE_NAME = "test-state-locks"
BUCKET_NAME = "test-state-bucket"


@pytest.fixture(scope="function")
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture(scope="function")
def mocked_aws(aws_credentials):
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def lock_table(mocked_aws):
    """Create the lock table inside moto."""
    create_lock_table(TABLE_NAME, region=REGION)
    return TABLE_NAME


@pytest.fixture(scope="function")
def lock_backend(lock_table):
    return DynamoDbLockBackend(lock_table, region=REGION)


@pytest.fixture(scope="function")
def raw_table(lock_table):
    """Direct boto3 handle on the lock table for asserting stored items."""
    return boto3.resource("dynamodb", region_name=REGION).Table(lock_table)


@pytest.fixture(scope="function")
def dynamodb_client(lock_table):
    return DynamoDBClient(lock_table, region=REGION)


@pytest.fixture(scope="function")
def bucket(mocked_aws):
    boto3.client("s3", region_name=REGION).create_bucket(Bucket=BUCKET_NAME)
    return BUCKET_NAME


@pytest.fixture(scope="function")
def s3(bucket):
    """Direct boto3 S3 client for seeding and asserting objects."""
    return boto3.client("s3", region_name=REGION)


@pytest.fixture(scope="function")
def s3_client(bucket):
    return S3Client(region=REGION)


@pytest.fixture(scope="function")
def file_backend(bucket):
    return S3FileBackend(bucket, prefix="prod", region=REGION)
