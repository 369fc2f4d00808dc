"""
Field descriptors for dataclass record types.

describe() reflects over a dataclass and returns one FieldDescriptor per
constructor field. Each descriptor carries a FieldKind tag that the value
parser dispatches on, so supporting a new scalar type means adding a tag
here and a branch in envrecord.parsers.

Integer width aliases (U8 ... I64) attach an IntBounds marker through
typing.Annotated; the parser rejects values that do not fit.
"""

import dataclasses
import enum
import sys
import types
from dataclasses import dataclass
from typing import Annotated, Any, Callable, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from envrecord.errors import InvalidType


class FieldKind(enum.Enum):
    """Scalar categories the value parser knows about."""
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'
    TEXT = 'text'
    ENUM = 'enum'
    SEQUENCE = 'sequence'
    UNSUPPORTED = 'unsupported'


@dataclass(frozen=True)
class IntBounds:
    """Bit width and signedness of a fixed-size integer field."""
    bits: int
    signed: bool = True

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"


U8 = Annotated[int, IntBounds(8, signed=False)]
U16 = Annotated[int, IntBounds(16, signed=False)]
U32 = Annotated[int, IntBounds(32, signed=False)]
U64 = Annotated[int, IntBounds(64, signed=False)]
I8 = Annotated[int, IntBounds(8)]
I16 = Annotated[int, IntBounds(16)]
I32 = Annotated[int, IntBounds(32)]
I64 = Annotated[int, IntBounds(64)]

# Python floats are always doubles; the aliases only document intent.
F16 = float
F32 = float
F64 = float

_SEQUENCE_TYPES = (list, tuple, set, frozenset, bytes, bytearray)

if sys.version_info >= (3, 10):
    _UNION_TYPES = (Union, types.UnionType)
else:
    _UNION_TYPES = (Union,)


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Reflection-time metadata for one record field.

    Attributes:
        name: Field name as declared on the dataclass.
        annotation: The declared type, Annotated extras included.
        kind: Scalar category of the (unwrapped) field type.
        inner: The field type with Optional and Annotated stripped.
        optional: True for Optional[X] / X | None fields.
        bounds: Integer width limits, if any.
        default: Zero-argument callable producing the default value.
    """
    name: str
    annotation: Any
    kind: FieldKind
    inner: Any
    optional: bool = False
    bounds: Optional[IntBounds] = None
    default: Optional[Callable[[], Any]] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def type_name(self) -> str:
        """Human-readable type, e.g. 'u32' or 'Optional[str]'."""
        if self.bounds is not None and self.kind is FieldKind.INTEGER:
            name = self.bounds.name
        else:
            name = getattr(self.inner, '__name__', repr(self.inner))
        return f"Optional[{name}]" if self.optional else name


def is_record_type(record_type: Any) -> bool:
    """Check whether record_type is a dataclass class (not an instance)."""
    return isinstance(record_type, type) and dataclasses.is_dataclass(record_type)


def _strip_annotated(tp: Any) -> Tuple[Any, Tuple[Any, ...]]:
    if get_origin(tp) is Annotated:
        return tp.__origin__, tp.__metadata__
    return tp, ()


def _classify(tp: Any) -> FieldKind:
    # bool and IntEnum subclass int, so they are checked first
    if tp is bool:
        return FieldKind.BOOLEAN
    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        return FieldKind.ENUM
    if tp is int:
        return FieldKind.INTEGER
    if tp is float:
        return FieldKind.FLOAT
    if tp is str:
        return FieldKind.TEXT
    if tp in _SEQUENCE_TYPES or get_origin(tp) in _SEQUENCE_TYPES:
        return FieldKind.SEQUENCE
    return FieldKind.UNSUPPORTED


def _unwrap(annotation: Any) -> Tuple[Any, bool, Optional[IntBounds]]:
    """Strip Annotated/Optional wrappers, returning (inner, optional, bounds)."""
    tp, metadata = _strip_annotated(annotation)
    optional = False

    if get_origin(tp) in _UNION_TYPES:
        args = get_args(tp)
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1 and len(members) != len(args):
            optional = True
            tp, inner_metadata = _strip_annotated(members[0])
            metadata = metadata + inner_metadata

    bounds = next((m for m in metadata if isinstance(m, IntBounds)), None)
    return tp, optional, bounds


def _constant(value: Any) -> Callable[[], Any]:
    return lambda: value


def describe(record_type: Any) -> List[FieldDescriptor]:
    """
    Build the field descriptor list for a dataclass type.

    Fields declared with init=False are skipped since the record's
    constructor does not accept them.

    Raises:
        InvalidType: If record_type is not a dataclass class, or one of its
            postponed annotations names a type that cannot be resolved.
    """
    if not is_record_type(record_type):
        raise InvalidType(record_type)

    try:
        hints = get_type_hints(record_type, include_extras=True)
    except NameError as e:
        raise InvalidType(
            record_type,
            f"cannot resolve field annotations of {record_type.__qualname__}: {e}",
        ) from e
    descriptors = []
    for field in dataclasses.fields(record_type):
        if not field.init:
            continue

        annotation = hints.get(field.name, field.type)
        inner, optional, bounds = _unwrap(annotation)

        default = None
        if field.default is not dataclasses.MISSING:
            default = _constant(field.default)
        elif field.default_factory is not dataclasses.MISSING:
            default = field.default_factory

        descriptors.append(FieldDescriptor(
            name=field.name,
            annotation=annotation,
            kind=_classify(inner),
            inner=inner,
            optional=optional,
            bounds=bounds,
            default=default,
        ))

    return descriptors


__all__ = [
    'FieldKind',
    'IntBounds',
    'FieldDescriptor',
    'describe',
    'is_record_type',
    'U8', 'U16', 'U32', 'U64',
    'I8', 'I16', 'I32', 'I64',
    'F16', 'F32', 'F64',
]
