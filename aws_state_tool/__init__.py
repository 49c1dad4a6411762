"""DynamoDB lock and S3 state file backends for infrastructure runs."""

__version__ = "0.1.0"
