"""
Errors raised while building a record from environment variables.

The hierarchy is flat: every failure is an EnvError subclass and none of
them wrap another exception.
"""

from typing import Any, Optional


class EnvError(Exception):
    """Base class for all configuration loading errors."""


class InvalidType(EnvError):
    """The requested target is not a dataclass type."""

    def __init__(self, record_type: Any, reason: Optional[str] = None):
        self.record_type = record_type
        self.reason = reason
        super().__init__(reason or f"{record_type!r} is not a dataclass type")


class StructFieldMissing(EnvError):
    """A required field has no environment variable and no default."""

    def __init__(self, field: str, key: str):
        self.field = field
        self.key = key
        super().__init__(f"missing required field '{field}' (env var {key})")


class InvalidValue(EnvError):
    """A value was present but did not match the field's type."""

    def __init__(
        self,
        value: str,
        expected: str,
        field: Optional[str] = None,
        key: Optional[str] = None,
    ):
        self.value = value
        self.expected = expected
        self.field = field
        self.key = key
        where = f" for field '{field}' (env var {key})" if field else ""
        super().__init__(f"invalid {expected} value {value!r}{where}")


class Unimplemented(EnvError):
    """The field's type is not one the value parser supports."""

    def __init__(self, annotation: Any, field: Optional[str] = None):
        self.annotation = annotation
        self.field = field
        where = f" (field '{field}')" if field else ""
        super().__init__(f"value type {annotation!r} not supported{where}")


__all__ = [
    'EnvError',
    'InvalidType',
    'StructFieldMissing',
    'InvalidValue',
    'Unimplemented',
]
