"""
Shared utilities for the Rust trait generators (client proxy and server trait).
Handles annotation doc comments, parameter lists and the common assembly entry point.
"""
from typing import Iterable, List, Optional

from declaration_assembler import AccessorStyle, DeclarationAssembler
from declaration_model import AssembledInterface, DeclaredParameter
from generators.type_rendering import RenderContext
from interface_model import Annotation, InterfaceDescription
from introspection_loader import parse_introspection_xml

RESULT_TYPE = "zbus::Result"


def escape_doc_value(value: str) -> str:
    return value.replace('\n', '\\n')


def annotation_docs(annotations: Iterable[Annotation], indent: str = "") -> List[str]:
    """One `/// [annotation] name = "value"` line per annotation."""
    return [f'{indent}/// [annotation] {ann.name} = "{escape_doc_value(ann.value)}"' for ann in annotations]


def arg_annotation_docs(parameters: Iterable[DeclaredParameter], indent: str = "") -> List[str]:
    lines = []
    for param in parameters:
        for ann in param.annotations:
            lines.append(
                f'{indent}/// [arg: {param.wire_name or "unnamed"}] [annotation] {ann.name} = "{escape_doc_value(ann.value)}"'
            )
    return lines


def render_params(parameters: Iterable[DeclaredParameter]) -> str:
    return ", ".join(f"{p.identifier}: {p.rust_type}" for p in parameters)


def render_receiver_and_params(receiver: str, parameters: List[DeclaredParameter]) -> str:
    """`&self` or `&self, a: i32, b: String`"""
    params = render_params(parameters)
    return f"{receiver}, {params}" if params else receiver


def render_result(rust_type: str) -> str:
    return f"{RESULT_TYPE}<{rust_type}>"


def assemble_all(interfaces: Iterable[InterfaceDescription], accessor_style: AccessorStyle,
                 notification_context: Optional[RenderContext] = None,
                 verbose: bool = False) -> List[AssembledInterface]:
    assembler = DeclarationAssembler(accessor_style, notification_context=notification_context, verbose=verbose)
    return [assembler.assemble(iface) for iface in interfaces]


def interfaces_from_xml(xml: str) -> List[InterfaceDescription]:
    return parse_introspection_xml(xml)
