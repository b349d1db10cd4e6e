"""
signature_types.py
Type tree produced by the signature parser. Nodes compare structurally so tests and callers can
match a parsed signature against a hand-built expected tree.
"""
from enum import Enum
from typing import Iterable, Tuple


class PrimitiveKind(Enum):
    BYTE = "byte"
    BOOLEAN = "boolean"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    DOUBLE = "double"
    STRING = "string"
    OBJECT_PATH = "object-path"
    SIGNATURE = "type-signature"
    VARIANT = "dynamic-value"


# D-Bus single-character type codes
PRIMITIVE_CODES = {
    'y': PrimitiveKind.BYTE,
    'b': PrimitiveKind.BOOLEAN,
    'n': PrimitiveKind.INT16,
    'q': PrimitiveKind.UINT16,
    'i': PrimitiveKind.INT32,
    'u': PrimitiveKind.UINT32,
    'x': PrimitiveKind.INT64,
    't': PrimitiveKind.UINT64,
    'd': PrimitiveKind.DOUBLE,
    's': PrimitiveKind.STRING,
    'o': PrimitiveKind.OBJECT_PATH,
    'g': PrimitiveKind.SIGNATURE,
    'v': PrimitiveKind.VARIANT,
}


class TypeExpression:
    def _key(self) -> tuple:
        raise NotImplementedError("Subclasses must implement _key()")

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))


class Primitive(TypeExpression):
    def __init__(self, kind: PrimitiveKind):
        self.kind = kind

    def _key(self):
        return (self.kind,)

    def __repr__(self):
        return f"Primitive({self.kind.name})"


class Sequence(TypeExpression):
    def __init__(self, element: TypeExpression):
        self.element = element

    def _key(self):
        return (self.element,)

    def __repr__(self):
        return f"Sequence({self.element!r})"


class Mapping(TypeExpression):
    def __init__(self, key: TypeExpression, value: TypeExpression):
        self.key = key
        self.value = value

    def _key(self):
        return (self.key, self.value)

    def __repr__(self):
        return f"Mapping({self.key!r}, {self.value!r})"


class Tuple_(TypeExpression):
    """D-Bus struct. Named with a trailing underscore so it does not shadow typing.Tuple."""
    def __init__(self, fields: Iterable[TypeExpression] = ()):
        self.fields: Tuple[TypeExpression, ...] = tuple(fields)

    def _key(self):
        return self.fields

    def __repr__(self):
        return f"Tuple_({list(self.fields)!r})"


class Unknown(TypeExpression):
    def _key(self):
        return ()

    def __repr__(self):
        return "Unknown()"
