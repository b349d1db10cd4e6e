"""
declaration_model.py
Generator-ready records produced by the declaration assembler: one Declaration per trait member
(method, property getter, property setter, signal), with synthesized identifiers and rendered Rust types.
"""
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from interface_model import Annotation


class DeclarationRole(Enum):
    OPERATION = "operation"
    ATTRIBUTE_GETTER = "attribute-getter"
    ATTRIBUTE_SETTER = "attribute-setter"
    NOTIFICATION = "notification"


class DeclaredParameter:
    def __init__(self, identifier: str, rust_type: str, wire_name: Optional[str] = None,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.identifier = identifier
        self.rust_type = rust_type
        self.wire_name = wire_name
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def __repr__(self):
        return f"DeclaredParameter({self.identifier!r}: {self.rust_type!r})"


class Declaration:
    """
    `return_type` is None for signals, which only carry a parameter list.
    `needs_wire_name` is set when `identifier` no longer maps back to `wire_name` by plain case
    conversion, so the emitted code must name the D-Bus member explicitly.
    """
    def __init__(self, role: DeclarationRole, identifier: str, wire_name: str,
                 parameters: Optional[List[DeclaredParameter]] = None,
                 return_type: Optional[str] = None, needs_wire_name: bool = False,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.role = role
        self.identifier = identifier
        self.wire_name = wire_name
        self.parameters = parameters or []
        self.return_type = return_type
        self.needs_wire_name = needs_wire_name
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def __repr__(self):
        return (f"Declaration(role={self.role.value!r}, identifier={self.identifier!r}, "
                f"parameters={self.parameters!r}, return_type={self.return_type!r})")


class AssembledInterface:
    """All declarations for one interface, in emission order, plus warnings gathered on the way."""
    def __init__(self, name: str, trait_name: str, declarations: List[Declaration],
                 warnings: Optional[List[str]] = None, annotations: Optional[Iterable[Annotation]] = None):
        self.name = name
        self.trait_name = trait_name
        self.declarations = declarations
        self.warnings = warnings or []
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def by_role(self, role: DeclarationRole) -> List[Declaration]:
        return [d for d in self.declarations if d.role == role]

    @property
    def operations(self) -> List[Declaration]:
        return self.by_role(DeclarationRole.OPERATION)

    @property
    def getters(self) -> List[Declaration]:
        return self.by_role(DeclarationRole.ATTRIBUTE_GETTER)

    @property
    def setters(self) -> List[Declaration]:
        return self.by_role(DeclarationRole.ATTRIBUTE_SETTER)

    @property
    def notifications(self) -> List[Declaration]:
        return self.by_role(DeclarationRole.NOTIFICATION)
