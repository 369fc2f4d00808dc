"""
Value parsers: turn one environment string into one typed field value.
"""

import enum
import logging
import re
from typing import Any, Optional, Type

from envrecord.errors import InvalidValue, Unimplemented
from envrecord.fields import FieldDescriptor, FieldKind, IntBounds

logger = logging.getLogger(__name__)

# Checked in order; matching is exact and case-sensitive.
BOOL_LITERALS = (
    ('true', True),
    ('1', True),
    ('false', False),
    ('0', False),
)

# single underscores may separate digits, e.g. 1_000
_INT_RE = re.compile(r'[+-]?[0-9]+(?:_[0-9]+)*')


def parse_int(raw: str, bounds: Optional[IntBounds] = None) -> int:
    """Parse a base-10 integer, optionally limited to a bit width."""
    if not _INT_RE.fullmatch(raw):
        raise InvalidValue(raw, bounds.name if bounds else 'int')
    value = int(raw, 10)
    if bounds is not None and not bounds.contains(value):
        raise InvalidValue(raw, bounds.name)
    return value


def parse_float(raw: str) -> float:
    """Parse a decimal float. Whitespace and digit separators are rejected."""
    if raw != raw.strip() or '_' in raw:
        raise InvalidValue(raw, 'float')
    try:
        return float(raw)
    except ValueError:
        raise InvalidValue(raw, 'float') from None


def parse_bool(raw: str) -> bool:
    for literal, value in BOOL_LITERALS:
        if raw == literal:
            return value
    raise InvalidValue(raw, 'bool')


def parse_enum(enum_type: Type[enum.Enum], raw: str) -> enum.Enum:
    """Match raw against member names in declaration order."""
    for name, member in enum_type.__members__.items():
        if name == raw:
            return member
    raise InvalidValue(raw, enum_type.__name__)


def parse_value(descriptor: FieldDescriptor, raw: str, key: Optional[str] = None) -> Any:
    """
    Convert raw into a value of the descriptor's scalar type.

    Raises:
        InvalidValue: raw does not match the type's grammar.
        Unimplemented: the field's type category is not supported.
    """
    kind = descriptor.kind
    try:
        if kind is FieldKind.INTEGER:
            return parse_int(raw, descriptor.bounds)
        if kind is FieldKind.FLOAT:
            return parse_float(raw)
        if kind is FieldKind.BOOLEAN:
            return parse_bool(raw)
        if kind is FieldKind.TEXT:
            return raw
        if kind is FieldKind.ENUM:
            return parse_enum(descriptor.inner, raw)
    except InvalidValue as e:
        raise InvalidValue(raw, e.expected, field=descriptor.name, key=key) from None

    logger.error("value type %s not supported", descriptor.type_name)
    raise Unimplemented(descriptor.annotation, field=descriptor.name)


def parse_optional(descriptor: FieldDescriptor, raw: Optional[str], key: Optional[str] = None) -> Any:
    """Return None for a missing value, otherwise parse it."""
    if raw is None:
        return None
    return parse_value(descriptor, raw, key=key)


__all__ = [
    'BOOL_LITERALS',
    'parse_int',
    'parse_float',
    'parse_bool',
    'parse_enum',
    'parse_value',
    'parse_optional',
]
