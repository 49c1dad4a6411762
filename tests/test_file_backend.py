"""
Tests for the S3 state file backend
"""

import pytest

from aws_state_tool.backends.core.file_backend import S3FileBackend
from aws_state_tool.backends.exceptions import BackendUnavailableError, StateFileNotFoundError

from .conftest import REGION


def put(s3, bucket, key, body=b"{}"):
    s3.put_object(Bucket=bucket, Key=key, Body=body)


class TestList:
    """Test listing state files"""

    def test_list_filters_suffix_and_strips_prefix(self, s3, bucket, file_backend):
        put(s3, bucket, "prod/main.gyro")
        put(s3, bucket, "prod/network/vpc.gyro")
        put(s3, bucket, "prod/notes.txt")
        put(s3, bucket, "staging/main.gyro")

        assert sorted(file_backend.list()) == ["main.gyro", "network/vpc.gyro"]

    def test_list_without_prefix(self, s3, bucket):
        put(s3, bucket, "main.gyro")
        put(s3, bucket, "prod/main.gyro")
        backend = S3FileBackend(bucket, region=REGION)

        assert sorted(backend.list()) == ["main.gyro", "prod/main.gyro"]

    def test_list_pages_through_more_than_one_page(self, s3, bucket, file_backend):
        for i in range(230):
            put(s3, bucket, f"prod/state-{i:03d}.gyro")

        files = list(file_backend.list())

        assert len(files) == 230
        assert files == [f"state-{i:03d}.gyro" for i in range(230)]

    def test_list_custom_suffix(self, s3, bucket):
        put(s3, bucket, "prod/main.state")
        put(s3, bucket, "prod/main.gyro")
        backend = S3FileBackend(bucket, "prod", suffix=".state", region=REGION)

        assert list(backend.list()) == ["main.state"]

    def test_list_is_lazy(self, bucket):
        backend = S3FileBackend("no-such-bucket", region=REGION)

        files = backend.list()

        with pytest.raises(BackendUnavailableError):
            next(files)


class TestReadWrite:
    """Test state file input/output"""

    def test_open_output_uploads_on_exit(self, s3, bucket, file_backend):
        with file_backend.open_output("main.gyro") as output:
            output.write(b"resource 'x'")
            assert not file_backend.exists("main.gyro")

        body = s3.get_object(Bucket=bucket, Key="prod/main.gyro")["Body"].read()
        assert body == b"resource 'x'"

    def test_open_output_skips_upload_on_error(self, file_backend):
        with pytest.raises(RuntimeError):
            with file_backend.open_output("main.gyro") as output:
                output.write(b"partial")
                raise RuntimeError("render failed")

        assert not file_backend.exists("main.gyro")

    def test_open_input_reads_written_file(self, file_backend):
        with file_backend.open_output("main.gyro") as output:
            output.write(b"state")

        assert file_backend.open_input("main.gyro").read() == b"state"

    def test_open_input_missing_file(self, file_backend):
        with pytest.raises(StateFileNotFoundError):
            file_backend.open_input("missing.gyro")


class TestFileOperations:
    """Test delete, exists and copy"""

    def test_exists(self, s3, bucket, file_backend):
        put(s3, bucket, "prod/main.gyro")

        assert file_backend.exists("main.gyro") is True
        assert file_backend.exists("other.gyro") is False

    def test_delete(self, s3, bucket, file_backend):
        put(s3, bucket, "prod/main.gyro")

        file_backend.delete("main.gyro")

        assert file_backend.exists("main.gyro") is False

    def test_delete_missing_file_succeeds(self, file_backend):
        file_backend.delete("missing.gyro")

    def test_copy(self, s3, bucket, file_backend):
        put(s3, bucket, "prod/main.gyro", b"v1")

        file_backend.copy("main.gyro", "main.gyro.bak")

        body = s3.get_object(Bucket=bucket, Key="prod/main.gyro.bak")["Body"].read()
        assert body == b"v1"
        assert file_backend.exists("main.gyro")


class TestPrefix:
    """Test key prefixing"""

    def test_prefixed(self):
        assert S3FileBackend("b", "prod").prefixed("main.gyro") == "prod/main.gyro"
        assert S3FileBackend("b").prefixed("main.gyro") == "main.gyro"

    def test_blank_prefix_is_no_prefix(self):
        assert S3FileBackend("b", "").prefixed("main.gyro") == "main.gyro"

    def test_remove_prefix(self):
        backend = S3FileBackend("b", "prod")

        assert backend.remove_prefix("prod/main.gyro") == "main.gyro"
        assert backend.remove_prefix("production/main.gyro") == "production/main.gyro"
        assert S3FileBackend("b").remove_prefix("prod/main.gyro") == "prod/main.gyro"
