"""
Client proxy generator.
Outputs one `#[proxy]` trait per D-Bus interface: a method per D-Bus method and getter/setter
methods for properties. Signals are not part of the client trait.
"""
from typing import List, Optional

from declaration_assembler import AccessorStyle, DeclarationAssembler
from declaration_model import AssembledInterface, Declaration, DeclarationRole
from generators.generator_utils import assemble_all, interfaces_from_xml, render_receiver_and_params, render_result
from interface_model import InterfaceDescription

PROXY_USE = "use zbus::proxy;"
INDENT = "  "


def _emit_method(decl: Declaration, lines: List[str]):
    lines.append(f"{INDENT}/// {decl.wire_name} method")
    if decl.needs_wire_name:
        lines.append(f'{INDENT}#[zbus(name = "{decl.wire_name}")]')
    lines.append(f"{INDENT}fn {decl.identifier}({render_receiver_and_params('&self', decl.parameters)}) "
                 f"-> {render_result(decl.return_type)};")
    lines.append("")


def _emit_property_accessor(decl: Declaration, lines: List[str]):
    if decl.role == DeclarationRole.ATTRIBUTE_GETTER:
        lines.append(f"{INDENT}/// {decl.wire_name} property")
    else:
        lines.append(f"{INDENT}/// Set the {decl.wire_name} property")
    if decl.needs_wire_name:
        lines.append(f'{INDENT}#[zbus(property, name = "{decl.wire_name}")]')
    else:
        lines.append(f"{INDENT}#[zbus(property)]")
    lines.append(f"{INDENT}fn {decl.identifier}({render_receiver_and_params('&self', decl.parameters)}) "
                 f"-> {render_result(decl.return_type)};")
    lines.append("")


def render_client_proxy(assembled: AssembledInterface) -> str:
    lines = [
        f'#[proxy(interface = "{assembled.name}", assume_defaults = true)]',
        f"pub trait {assembled.trait_name} {{",
    ]
    for decl in assembled.declarations:
        if decl.role == DeclarationRole.OPERATION:
            _emit_method(decl, lines)
        elif decl.role in (DeclarationRole.ATTRIBUTE_GETTER, DeclarationRole.ATTRIBUTE_SETTER):
            _emit_property_accessor(decl, lines)
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_client_proxy(interface: InterfaceDescription, warnings: Optional[List[str]] = None) -> str:
    """Generate the proxy trait for a single interface. Type warnings are appended to `warnings`."""
    assembled = DeclarationAssembler(AccessorStyle.PROXY).assemble(interface)
    if warnings is not None:
        warnings.extend(assembled.warnings)
    return render_client_proxy(assembled)


def generate_client_proxies(interfaces: List[InterfaceDescription], warnings: Optional[List[str]] = None,
                            verbose: bool = False) -> str:
    assembled = assemble_all(interfaces, AccessorStyle.PROXY, verbose=verbose)
    if warnings is not None:
        for item in assembled:
            warnings.extend(item.warnings)
    return PROXY_USE + "\n" + "\n".join(render_client_proxy(a) for a in assembled)


def generate_client_proxies_from_xml(xml: str, warnings: Optional[List[str]] = None, verbose: bool = False) -> str:
    """
    Generate `use zbus::proxy;` followed by one proxy trait per interface in the document.
    Raises IntrospectionError for invalid XML and MalformedSignatureError for broken signatures.
    """
    return generate_client_proxies(interfaces_from_xml(xml), warnings, verbose)
