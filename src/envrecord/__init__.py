"""
envrecord - typed configuration from environment variables.

Declare a dataclass, then populate it from the environment:

    from dataclasses import dataclass
    from typing import Optional

    import envrecord
    from envrecord import EnvOptions, U16, U64

    @dataclass
    class Config:
        foo: U16
        bar: bool
        baz: str
        boom: Optional[U64] = None

    config = envrecord.parse(Config, EnvOptions(prefix="MY_APP_"))

Field ``foo`` is read from ``MY_APP_FOO``, ``bar`` from ``MY_APP_BAR``
and so on.
"""

__version__ = "0.1.0"

from envrecord.errors import EnvError, InvalidType, StructFieldMissing, InvalidValue, Unimplemented
from envrecord.options import EnvOptions
from envrecord.fields import (
    FieldKind, IntBounds, FieldDescriptor, describe,
    U8, U16, U32, U64, I8, I16, I32, I64, F16, F32, F64,
)
from envrecord.resolver import lookup_key, from_mapping
from envrecord.env import parse, snapshot

__all__ = [
    'EnvError',
    'InvalidType',
    'StructFieldMissing',
    'InvalidValue',
    'Unimplemented',
    'EnvOptions',
    'FieldKind',
    'IntBounds',
    'FieldDescriptor',
    'describe',
    'lookup_key',
    'from_mapping',
    'parse',
    'snapshot',
    'U8', 'U16', 'U32', 'U64',
    'I8', 'I16', 'I32', 'I64',
    'F16', 'F32', 'F64',
]
