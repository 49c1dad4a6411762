"""
Constants for the lock and state file backends.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

# Default DynamoDB lock table and lock key
DEFAULT_LOCK_TABLE_NAME = "aws-state-tool-locks"
DEFAULT_LOCK_KEY = "default"

# DynamoDB attribute names for lock records
ATTR_LOCK_KEY = "lock_key"
ATTR_HOLDER_ID = "holder_id"
ATTR_INFO = "info"

# Condition and update expressions (attribute names go through placeholders)
CONDITION_LOCK_ABSENT = "attribute_not_exists(#key)"
CONDITION_HELD_BY = "#holder = :id"
UPDATE_SET_INFO = "SET #info = :info"

# S3 listing behavior
DEFAULT_PAGE_SIZE = 100
STATE_FILE_SUFFIX = ".gyro"
PRIVATE_ACL = "private"

# Environment variables read by the CLI and the settings mapper
ENV_PREFIX = "AWS_STATE_"
ENV_LOCK_TABLE = "AWS_STATE_LOCK_TABLE"
ENV_LOCK_KEY = "AWS_STATE_LOCK_KEY"
ENV_BUCKET = "AWS_STATE_BUCKET"
ENV_PREFIX_PATH = "AWS_STATE_PREFIX"

# Settings field -> environment variable, where it differs from ENV_PREFIX + FIELD
ENV_SETTINGS = {
    "table_name": ENV_LOCK_TABLE,
    "lock_key": ENV_LOCK_KEY,
    "bucket": ENV_BUCKET,
    "prefix": ENV_PREFIX_PATH,
}

# Alternate setting names accepted by the settings mapper
SETTING_ALIASES = {"credentials": "profile"}

# CLI exit codes
EXIT_NOT_FOUND = 1
EXIT_OWNERSHIP = 2
EXIT_BACKEND = 3
EXIT_LOCK_HELD = 4
