"""
declaration_assembler.py
Walks one InterfaceDescription and produces the ordered Declaration records the generators render.

Methods and property accessors share one naming scope per interface, so a property accessor can
never shadow a method. When the accessor style gives signals a prefix (server traits declare
`emit_*` functions), signals join that shared scope as well. Without a prefix signals are not trait
members and get a scope of their own, so a signal may reuse a method's name. Argument names are
unique per argument list only.
"""
import sys
from enum import Enum
from typing import List, Optional

from declaration_model import AssembledInterface, Declaration, DeclarationRole, DeclaredParameter
from generators.type_rendering import UNIT_TYPE, RenderContext, render_tuple, render_type
from interface_model import Attribute, InterfaceDescription, Notification, Operation, Parameter
from naming.identifier_synthesizer import IdentifierRole, synthesize
from naming.naming_scope import NamingScope
from signature_parser import MalformedSignatureError, parse_signature

SETTER_VALUE_NAME = "value"


class AccessorStyle(Enum):
    """Prefixes for (getter, setter, signal) names: zbus proxies use the bare name for getters."""
    PROXY = ("", "set_", "")
    SERVER = ("get_", "set_", "emit_")

    @property
    def getter_prefix(self) -> str:
        return self.value[0]

    @property
    def setter_prefix(self) -> str:
        return self.value[1]

    @property
    def notification_prefix(self) -> str:
        return self.value[2]


def trait_name_for(interface_name: str) -> str:
    """org.example.Foo -> Foo"""
    return interface_name.rsplit('.', 1)[-1] or "Iface"


class DeclarationAssembler:
    def __init__(self, accessor_style: AccessorStyle = AccessorStyle.PROXY,
                 context: Optional[RenderContext] = None,
                 notification_context: Optional[RenderContext] = None,
                 verbose: bool = False):
        self.accessor_style = accessor_style
        self.context = context or RenderContext()
        self.notification_context = notification_context or self.context
        self.verbose = verbose
        self.warnings: List[str] = []
        self._interface_name = ""

    def _debug(self, message: str):
        if self.verbose:
            print(f"[DEBUG] DeclarationAssembler: {message}", file=sys.stderr)

    def assemble(self, interface: InterfaceDescription) -> AssembledInterface:
        """
        Build the declarations for one interface: methods, then properties, then signals.
        Raises MalformedSignatureError (naming the offending member) if any signature is malformed;
        unknown type codes only add warnings.
        """
        self.warnings = []
        self._interface_name = interface.name
        member_scope = NamingScope(f"{interface.name} members")
        if self.accessor_style.notification_prefix:
            signal_scope = member_scope
        else:
            signal_scope = NamingScope(f"{interface.name} signals")
        declarations: List[Declaration] = []

        for operation in interface.operations:
            declarations.append(self._assemble_operation(operation, member_scope))
        for attribute in interface.attributes:
            declarations.extend(self._assemble_attribute(attribute, member_scope))
        for notification in interface.notifications:
            declarations.append(self._assemble_notification(notification, signal_scope))

        self._debug(f"{interface.name}: {len(declarations)} declarations, {len(self.warnings)} warnings")
        return AssembledInterface(
            name=interface.name,
            trait_name=trait_name_for(interface.name),
            declarations=declarations,
            warnings=list(self.warnings),
            annotations=interface.annotations,
        )

    def _render(self, signature: str, member: str, context: RenderContext) -> str:
        try:
            expr = parse_signature(signature, self.warnings)
        except MalformedSignatureError as exc:
            raise MalformedSignatureError(f"{self._interface_name}.{member}: {exc}") from exc
        return render_type(expr, context)

    def _declare_parameters(self, parameters: List[Parameter], member: str,
                            context: RenderContext) -> List[DeclaredParameter]:
        arg_scope = NamingScope(f"{member} arguments")
        declared = []
        for param in parameters:
            ident = synthesize(param.name, IdentifierRole.ARGUMENT, arg_scope)
            declared.append(DeclaredParameter(
                identifier=ident.name,
                rust_type=self._render(param.signature, member, context),
                wire_name=param.name,
                annotations=param.annotations,
            ))
        return declared

    def _assemble_operation(self, operation: Operation, scope: NamingScope) -> Declaration:
        ident = synthesize(operation.name, IdentifierRole.OPERATION, scope)
        self._debug(f"method {operation.name} -> {ident.name}")
        params = self._declare_parameters(operation.in_parameters, operation.name, self.context)
        out_types = [self._render(p.signature, operation.name, self.context) for p in operation.out_parameters]
        return Declaration(
            role=DeclarationRole.OPERATION,
            identifier=ident.name,
            wire_name=operation.name,
            parameters=params,
            return_type=render_tuple(out_types),
            needs_wire_name=ident.diverges,
            annotations=operation.annotations,
        )

    def _setter_parameter(self, member: str, rust_type: str) -> DeclaredParameter:
        ident = synthesize(SETTER_VALUE_NAME, IdentifierRole.ARGUMENT, NamingScope(f"{member} setter arguments"))
        return DeclaredParameter(ident.name, rust_type)

    def _assemble_attribute(self, attribute: Attribute, scope: NamingScope) -> List[Declaration]:
        rust_type = self._render(attribute.signature, attribute.name, self.context)
        declarations = []
        if attribute.access.readable:
            getter = synthesize(attribute.name, IdentifierRole.ATTRIBUTE, scope,
                                prefix=self.accessor_style.getter_prefix)
            self._debug(f"property {attribute.name} getter -> {getter.name}")
            declarations.append(Declaration(
                role=DeclarationRole.ATTRIBUTE_GETTER,
                identifier=getter.name,
                wire_name=attribute.name,
                return_type=rust_type,
                needs_wire_name=getter.diverges,
                annotations=attribute.annotations,
            ))
        if attribute.access.writable:
            setter = synthesize(attribute.name, IdentifierRole.ATTRIBUTE, scope,
                                prefix=self.accessor_style.setter_prefix)
            self._debug(f"property {attribute.name} setter -> {setter.name}")
            declarations.append(Declaration(
                role=DeclarationRole.ATTRIBUTE_SETTER,
                identifier=setter.name,
                wire_name=attribute.name,
                parameters=[self._setter_parameter(attribute.name, rust_type)],
                return_type=UNIT_TYPE,
                needs_wire_name=setter.diverges,
                annotations=attribute.annotations,
            ))
        return declarations

    def _assemble_notification(self, notification: Notification, scope: NamingScope) -> Declaration:
        ident = synthesize(notification.name, IdentifierRole.NOTIFICATION, scope,
                           prefix=self.accessor_style.notification_prefix)
        self._debug(f"signal {notification.name} -> {ident.name}")
        return Declaration(
            role=DeclarationRole.NOTIFICATION,
            identifier=ident.name,
            wire_name=notification.name,
            parameters=self._declare_parameters(list(notification.parameters), notification.name,
                                                self.notification_context),
            return_type=None,
            needs_wire_name=ident.diverges,
            annotations=notification.annotations,
        )


def assemble_interface(interface: InterfaceDescription, accessor_style: AccessorStyle = AccessorStyle.PROXY,
                       context: Optional[RenderContext] = None) -> AssembledInterface:
    return DeclarationAssembler(accessor_style, context).assemble(interface)
