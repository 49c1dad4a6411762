"""
Tests for backend settings mapping and the backend registry
"""

import pytest

from aws_state_tool.backends.config import (
    DynamoDbLockSettings,
    S3FileSettings,
    create_backend,
    normalize_key,
    settings_from_env,
    settings_from_mapping,
)
from aws_state_tool.backends.core.file_backend import S3FileBackend
from aws_state_tool.backends.core.lock_backend import DynamoDbLockBackend
from aws_state_tool.backends.exceptions import ConfigurationError


class TestNormalizeKey:
    @pytest.mark.parametrize("key", ["table-name", "tableName", "table_name", "TableName", "TABLE_NAME"])
    def test_spellings(self, key):
        assert normalize_key(key) == "table_name"


class TestSettingsFromMapping:
    """Test reflecting mappings onto settings dataclasses"""

    def test_lock_settings_defaults(self):
        settings = settings_from_mapping(DynamoDbLockSettings, {"table-name": "locks"})

        assert settings == DynamoDbLockSettings(table_name="locks", lock_key="default")

    def test_lock_settings_all_fields(self):
        settings = settings_from_mapping(
            DynamoDbLockSettings,
            {"tableName": "locks", "lockKey": "prod", "region": "eu-west-1", "profile": "ops"},
        )

        assert settings.lock_key == "prod"
        assert settings.region == "eu-west-1"
        assert settings.profile == "ops"

    def test_blank_values_fall_back_to_defaults(self):
        settings = settings_from_mapping(
            DynamoDbLockSettings, {"table-name": "locks", "lock-key": "  ", "region": None}
        )

        assert settings.lock_key == "default"
        assert settings.region is None

    def test_credentials_is_an_alias_for_profile(self):
        settings = settings_from_mapping(DynamoDbLockSettings, {"table-name": "locks", "credentials": "ops"})

        assert settings.profile == "ops"

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown setting 'bukket'"):
            settings_from_mapping(S3FileSettings, {"bucket": "b", "bukket": "b"})

    def test_missing_required(self):
        with pytest.raises(ConfigurationError, match="bucket"):
            settings_from_mapping(S3FileSettings, {"prefix": "prod"})


class TestSettingsFromEnv:
    """Test environment variable settings"""

    def test_prefixed_variables(self):
        environ = {
            "AWS_STATE_LOCK_TABLE": "locks",
            "AWS_STATE_LOCK_KEY": "prod",
            "AWS_REGION": "eu-west-1",
        }

        settings = settings_from_env(DynamoDbLockSettings, environ)

        assert settings == DynamoDbLockSettings("locks", "prod", "eu-west-1", None)

    def test_table_name_reads_the_cli_variable(self):
        environ = {"AWS_STATE_LOCK_TABLE": "locks", "AWS_STATE_TABLE_NAME": "ignored"}

        assert settings_from_env(DynamoDbLockSettings, environ).table_name == "locks"

    def test_prefix_reads_the_cli_variable(self):
        environ = {"AWS_STATE_BUCKET": "state", "AWS_STATE_PREFIX": "prod"}

        assert settings_from_env(S3FileSettings, environ).prefix == "prod"

    def test_prefixed_region_wins(self):
        environ = {
            "AWS_STATE_BUCKET": "state",
            "AWS_STATE_REGION": "us-west-2",
            "AWS_REGION": "eu-west-1",
        }

        assert settings_from_env(S3FileSettings, environ).region == "us-west-2"

    def test_missing_required(self):
        with pytest.raises(ConfigurationError):
            settings_from_env(S3FileSettings, {})


class TestCreateBackend:
    """Test building backends by type name"""

    def test_dynamo_db(self):
        backend = create_backend("dynamo-db", {"table-name": "locks", "lock-key": "prod"})

        assert isinstance(backend, DynamoDbLockBackend)
        assert backend.table_name == "locks"
        assert backend.lock_key == "prod"

    def test_s3(self):
        backend = create_backend("s3", {"bucket": "state", "prefix": "prod"})

        assert isinstance(backend, S3FileBackend)
        assert backend.prefixed("main.gyro") == "prod/main.gyro"

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError, match="Unknown backend type 'gcs'"):
            create_backend("gcs", {})
