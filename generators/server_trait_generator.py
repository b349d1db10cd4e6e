"""
Server trait generator.
Outputs a `<Name>Server` trait per D-Bus interface for service implementors: methods take `&mut self`,
properties become get_/set_ accessors, signals become `emit_*` functions taking a SignalEmitter.
Annotations from the introspection data are carried over as doc comments.
"""
from typing import List, Optional

from declaration_assembler import AccessorStyle, DeclarationAssembler
from declaration_model import AssembledInterface, Declaration, DeclarationRole
from generators.generator_utils import (
    annotation_docs, arg_annotation_docs, assemble_all, interfaces_from_xml, render_params,
    render_receiver_and_params, render_result,
)
from generators.type_rendering import RenderContext
from interface_model import InterfaceDescription

SIGNAL_EMITTER_USE = "use zbus::object_server::SignalEmitter;"
SIGNAL_LIFETIME = "'a"
SIGNAL_RETURN = "impl std::future::Future<Output = zbus::Result<()>> + Send"
INDENT = "    "


def signal_context() -> RenderContext:
    return RenderContext(lifetime=SIGNAL_LIFETIME)


def _signal_body(decl: Declaration) -> str:
    names = [p.identifier for p in decl.parameters]
    if len(names) == 1:
        return f"&({names[0]},)"
    return f"&({', '.join(names)})"


def _emit_method(decl: Declaration, lines: List[str]):
    lines.extend(annotation_docs(decl.annotations, INDENT))
    lines.extend(arg_annotation_docs(decl.parameters, INDENT))
    if decl.needs_wire_name:
        lines.append(f"{INDENT}/// D-Bus name: {decl.wire_name}")
    lines.append(f"{INDENT}fn {decl.identifier}({render_receiver_and_params('&mut self', decl.parameters)}) "
                 f"-> {render_result(decl.return_type)};")
    lines.append("")


def _emit_property(accessors: List[Declaration], lines: List[str]):
    first = accessors[0]
    lines.append(f"{INDENT}/// property: {first.wire_name}")
    lines.extend(annotation_docs(first.annotations, INDENT))
    for decl in accessors:
        receiver = '&self' if decl.role == DeclarationRole.ATTRIBUTE_GETTER else '&mut self'
        lines.append(f"{INDENT}fn {decl.identifier}({render_receiver_and_params(receiver, decl.parameters)}) "
                     f"-> {render_result(decl.return_type)};")
    lines.append("")


def _emit_signal(decl: Declaration, lines: List[str]):
    lines.extend(annotation_docs(decl.annotations, INDENT))
    lines.append(f"{INDENT}/// emits {decl.wire_name} with body {_signal_body(decl)}")
    if decl.needs_wire_name:
        lines.append(f"{INDENT}/// D-Bus name: {decl.wire_name}")
    params = render_params(decl.parameters)
    params = f", {params}" if params else ""
    lines.append(f"{INDENT}fn {decl.identifier}<{SIGNAL_LIFETIME}>("
                 f"emitter: &SignalEmitter<{SIGNAL_LIFETIME}>{params}) -> {SIGNAL_RETURN};")
    lines.append("")


def _group_property_accessors(declarations: List[Declaration]) -> List[List[Declaration]]:
    """Getter and setter of the same property are adjacent in assembler output."""
    groups: List[List[Declaration]] = []
    for decl in declarations:
        if (groups and decl.role == DeclarationRole.ATTRIBUTE_SETTER
                and groups[-1][-1].role == DeclarationRole.ATTRIBUTE_GETTER
                and groups[-1][-1].wire_name == decl.wire_name):
            groups[-1].append(decl)
        else:
            groups.append([decl])
    return groups


def render_server_trait(assembled: AssembledInterface) -> str:
    lines = annotation_docs(assembled.annotations)
    lines.append(f"pub trait {assembled.trait_name}Server {{")
    for group in _group_property_accessors(assembled.declarations):
        role = group[0].role
        if role == DeclarationRole.OPERATION:
            _emit_method(group[0], lines)
        elif role == DeclarationRole.NOTIFICATION:
            _emit_signal(group[0], lines)
        else:
            _emit_property(group, lines)
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_server_trait(interface: InterfaceDescription, warnings: Optional[List[str]] = None) -> str:
    assembled = DeclarationAssembler(AccessorStyle.SERVER, notification_context=signal_context()).assemble(interface)
    if warnings is not None:
        warnings.extend(assembled.warnings)
    return render_server_trait(assembled)


def generate_server_traits(interfaces: List[InterfaceDescription], warnings: Optional[List[str]] = None,
                           verbose: bool = False) -> str:
    assembled = assemble_all(interfaces, AccessorStyle.SERVER, signal_context(), verbose=verbose)
    if warnings is not None:
        for item in assembled:
            warnings.extend(item.warnings)
    traits = "\n".join(render_server_trait(a) for a in assembled)
    if any(a.notifications for a in assembled):
        return SIGNAL_EMITTER_USE + "\n\n" + traits
    return traits


def generate_server_traits_from_xml(xml: str, warnings: Optional[List[str]] = None, verbose: bool = False) -> str:
    """
    Generate one server trait per interface in the document.
    Raises IntrospectionError for invalid XML and MalformedSignatureError for broken signatures.
    """
    return generate_server_traits(interfaces_from_xml(xml), warnings, verbose)
