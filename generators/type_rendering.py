"""
Renders TypeExpression trees as Rust type expressions for zbus trait signatures.
"""
from typing import List, Optional

from signature_parser import parse_signature
from signature_types import Mapping, Primitive, PrimitiveKind, Sequence, Tuple_, TypeExpression

# --- Type Mapping ---
PRIMITIVE_TO_RUST = {
    PrimitiveKind.BYTE: 'u8',
    PrimitiveKind.BOOLEAN: 'bool',
    PrimitiveKind.INT16: 'i16',
    PrimitiveKind.UINT16: 'u16',
    PrimitiveKind.INT32: 'i32',
    PrimitiveKind.UINT32: 'u32',
    PrimitiveKind.INT64: 'i64',
    PrimitiveKind.UINT64: 'u64',
    PrimitiveKind.DOUBLE: 'f64',
    PrimitiveKind.STRING: 'String',
    PrimitiveKind.OBJECT_PATH: 'zbus::zvariant::ObjectPath<{lifetime}>',
    PrimitiveKind.SIGNATURE: 'zbus::zvariant::Signature<{lifetime}>',
    PrimitiveKind.VARIANT: 'zbus::zvariant::Value<{lifetime}>',
}

UNIT_TYPE = '()'


class RenderContext:
    """
    Target-language knobs for rendering. `lifetime` is used by the borrowed zvariant types
    (signal emitters render with 'a, everything else with '_).
    """
    def __init__(self, lifetime: str = "'_", map_type: str = "std::collections::HashMap"):
        self.lifetime = lifetime
        self.map_type = map_type


DEFAULT_CONTEXT = RenderContext()


def render_type(expr: TypeExpression, context: Optional[RenderContext] = None) -> str:
    """Map a parsed signature to a Rust type string. Never fails."""
    context = context or DEFAULT_CONTEXT
    if isinstance(expr, Primitive):
        return PRIMITIVE_TO_RUST[expr.kind].format(lifetime=context.lifetime)
    if isinstance(expr, Sequence):
        return f"Vec<{render_type(expr.element, context)}>"
    if isinstance(expr, Mapping):
        return f"{context.map_type}<{render_type(expr.key, context)}, {render_type(expr.value, context)}>"
    if isinstance(expr, Tuple_):
        return render_tuple([render_type(f, context) for f in expr.fields])
    return PRIMITIVE_TO_RUST[PrimitiveKind.VARIANT].format(lifetime=context.lifetime)


def render_tuple(rendered_fields: List[str]) -> str:
    """Zero fields is the unit type and a single field is returned unwrapped."""
    if not rendered_fields:
        return UNIT_TYPE
    if len(rendered_fields) == 1:
        return rendered_fields[0]
    return f"({', '.join(rendered_fields)})"


def rust_type_for_signature(signature: str, warnings: Optional[List[str]] = None,
                            context: Optional[RenderContext] = None) -> str:
    return render_type(parse_signature(signature, warnings), context)
