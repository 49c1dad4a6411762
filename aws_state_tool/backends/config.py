"""
Typed settings for the backends.

Backend settings arrive as loose mappings (engine configuration, environment
variables). settings_from_mapping() reflects them onto the settings dataclass
fields, accepting kebab-case, camelCase and snake_case keys.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import dataclasses
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from .constants import DEFAULT_LOCK_KEY, ENV_PREFIX, ENV_SETTINGS, SETTING_ALIASES, STATE_FILE_SUFFIX
from .core.file_backend import S3FileBackend
from .core.lock_backend import DynamoDbLockBackend
from .exceptions import ConfigurationError

T = TypeVar("T")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


@dataclass
class DynamoDbLockSettings:
    """Settings for the 'dynamo-db' lock backend."""

    table_name: str
    lock_key: str = DEFAULT_LOCK_KEY
    region: str | None = None
    profile: str | None = None


@dataclass
class S3FileSettings:
    """Settings for the 's3' file backend."""

    bucket: str
    prefix: str | None = None
    suffix: str = STATE_FILE_SUFFIX
    region: str | None = None
    profile: str | None = None


def normalize_key(key: str) -> str:
    """
    Convert a setting name to its field name.

    Examples:
        'table-name', 'tableName' and 'table_name' all become 'table_name'
    """
    key = _CAMEL_BOUNDARY.sub(r"_\1", key.strip())
    return key.replace("-", "_").lower()


def settings_from_mapping(cls: type[T], values: Mapping[str, Any]) -> T:
    """
    Build a settings dataclass from a mapping.

    Args:
        cls: Settings dataclass
        values: Raw settings

    Returns:
        Settings instance

    Raises:
        ConfigurationError: On unknown keys or missing required fields
    """
    fields = {f.name: f for f in dataclasses.fields(cls)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}

    for raw_key, value in values.items():
        name = normalize_key(raw_key)
        name = SETTING_ALIASES.get(name, name)
        if name not in fields:
            raise ConfigurationError(
                f"Unknown setting '{raw_key}' for {cls.__name__}; "
                f"expected one of: {', '.join(sorted(fields))}"
            )
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            continue
        kwargs[name] = value

    missing = [
        name
        for name, f in fields.items()
        if name not in kwargs
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]
    if missing:
        raise ConfigurationError(f"Missing required setting(s) for {cls.__name__}: {', '.join(missing)}")

    return cls(**kwargs)


def settings_from_env(cls: type[T], environ: Mapping[str, str] | None = None) -> T:
    """
    Build a settings dataclass from the environment variables the CLI reads.

    Fields listed in ENV_SETTINGS use their CLI variable (table_name reads
    AWS_STATE_LOCK_TABLE); any other field reads AWS_STATE_<FIELD>.
    AWS_REGION and AWS_PROFILE fill region and profile when the prefixed
    variables are not set.
    """
    environ = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    for f in dataclasses.fields(cls):  # type: ignore[arg-type]
        value = environ.get(ENV_SETTINGS.get(f.name, f"{ENV_PREFIX}{f.name.upper()}"))
        if value is None and f.name in ("region", "profile"):
            value = environ.get(f"AWS_{f.name.upper()}")
        if value is not None:
            values[f.name] = value

    return settings_from_mapping(cls, values)


BACKEND_TYPES: dict[str, tuple[type, type]] = {
    "dynamo-db": (DynamoDbLockSettings, DynamoDbLockBackend),
    "s3": (S3FileSettings, S3FileBackend),
}


def create_backend(type_name: str, values: Mapping[str, Any]) -> Any:
    """
    Build a backend from its registered type name and raw settings.

    Args:
        type_name: 'dynamo-db' or 's3'
        values: Raw settings mapping

    Returns:
        DynamoDbLockBackend or S3FileBackend

    Raises:
        ConfigurationError: On unknown type or invalid settings
    """
    try:
        settings_cls, backend_cls = BACKEND_TYPES[type_name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown backend type '{type_name}'; expected one of: {', '.join(sorted(BACKEND_TYPES))}"
        ) from None

    settings = settings_from_mapping(settings_cls, values)
    return backend_cls.from_settings(settings)
