"""
Record building: map a flat string mapping onto a dataclass.

from_mapping() is a pure function of its arguments. It never reads the
process environment; see envrecord.env for that.

Usage:
    @dataclass
    class Config:
        port: U16
        debug: bool = False

    config = from_mapping(Config, {"APP_PORT": "8080"}, EnvOptions(prefix="APP_"))
"""

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from envrecord.errors import StructFieldMissing
from envrecord.fields import FieldDescriptor, describe
from envrecord.options import EnvOptions
from envrecord.parsers import parse_optional, parse_value

logger = logging.getLogger(__name__)

T = TypeVar('T')

_ASCII_UPPER = str.maketrans('abcdefghijklmnopqrstuvwxyz', 'ABCDEFGHIJKLMNOPQRSTUVWXYZ')


def ascii_upper(name: str) -> str:
    """Upper-case ASCII letters only; everything else is left as is."""
    return name.translate(_ASCII_UPPER)


def lookup_key(name: str, options: Optional[EnvOptions] = None) -> str:
    """Environment variable name for a field, e.g. my_field -> {prefix}MY_FIELD."""
    prefix = options.prefix if options is not None and options.prefix else ""
    return f"{prefix}{ascii_upper(name)}"


def resolve_field(
    descriptor: FieldDescriptor,
    env: Mapping[str, str],
    options: Optional[EnvOptions] = None,
) -> Any:
    """
    Resolve one field's value.

    Order: optional fields always go through parse_optional (a missing
    key gives None), then a present value is parsed, then the declared
    default is used, otherwise the field is missing.
    """
    key = lookup_key(descriptor.name, options)
    raw = env.get(key)

    if descriptor.optional:
        return parse_optional(descriptor, raw, key=key)

    if raw is not None:
        return parse_value(descriptor, raw, key=key)

    if descriptor.default is not None:
        return descriptor.default()

    logger.debug("missing struct field: '%s' (%s)", descriptor.name, descriptor.type_name)
    raise StructFieldMissing(descriptor.name, key)


def from_mapping(
    record_type: Type[T],
    env: Mapping[str, str],
    options: Optional[EnvOptions] = None,
) -> T:
    """
    Populate record_type from env.

    Fields are resolved in declaration order and the first error is
    raised unchanged; no partially filled record is ever created.

    Raises:
        InvalidType: record_type is not a dataclass class.
        StructFieldMissing: a required field is absent.
        InvalidValue: a present value is malformed.
        Unimplemented: a field's type is not supported.
    """
    options = options or EnvOptions()
    descriptors = describe(record_type)

    values = {}
    for descriptor in descriptors:
        values[descriptor.name] = resolve_field(descriptor, env, options)

    return record_type(**values)


__all__ = ['ascii_upper', 'lookup_key', 'resolve_field', 'from_mapping']
