"""
interface_model.py
In-memory representation of a parsed D-Bus introspection document: interfaces with their methods (operations),
properties (attributes) and signals (notifications). Built by introspection_loader.py, consumed by the
declaration assembler. Sequences are stored as tuples so an interface is not mutated once built.
"""
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class ArgDirection(Enum):
    IN = "in"
    OUT = "out"


class PropertyAccess(Enum):
    READ = "read"
    WRITE = "write"
    READWRITE = "readwrite"

    @property
    def readable(self) -> bool:
        return self in (PropertyAccess.READ, PropertyAccess.READWRITE)

    @property
    def writable(self) -> bool:
        return self in (PropertyAccess.WRITE, PropertyAccess.READWRITE)


class Annotation:
    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Annotation) and (self.name, self.value) == (other.name, other.value)

    def __hash__(self):
        return hash((self.name, self.value))

    def __repr__(self):
        return f"Annotation(name={self.name!r}, value={self.value!r})"


class Parameter:
    """
    A method or signal argument. `name` may be None: introspection data often leaves arguments unnamed.
    """
    def __init__(self, name: Optional[str], signature: str, direction: ArgDirection = ArgDirection.IN,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.name = name
        self.signature = signature
        self.direction = direction
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def __repr__(self):
        return f"Parameter(name={self.name!r}, signature={self.signature!r}, direction={self.direction.value!r})"


class Operation:
    def __init__(self, name: str, parameters: Optional[Iterable[Parameter]] = None,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.name = name
        self.parameters: Tuple[Parameter, ...] = tuple(parameters or ())
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    @property
    def in_parameters(self) -> List[Parameter]:
        return [p for p in self.parameters if p.direction == ArgDirection.IN]

    @property
    def out_parameters(self) -> List[Parameter]:
        return [p for p in self.parameters if p.direction == ArgDirection.OUT]

    def __repr__(self):
        return f"Operation(name={self.name!r}, parameters={list(self.parameters)!r})"


class Attribute:
    def __init__(self, name: str, signature: str, access: PropertyAccess,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.name = name
        self.signature = signature
        self.access = access
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def __repr__(self):
        return f"Attribute(name={self.name!r}, signature={self.signature!r}, access={self.access.value!r})"


class Notification:
    def __init__(self, name: str, parameters: Optional[Iterable[Parameter]] = None,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.name = name
        self.parameters: Tuple[Parameter, ...] = tuple(parameters or ())
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def __repr__(self):
        return f"Notification(name={self.name!r}, parameters={list(self.parameters)!r})"


class InterfaceDescription:
    def __init__(self, name: str, operations: Optional[Iterable[Operation]] = None,
                 attributes: Optional[Iterable[Attribute]] = None,
                 notifications: Optional[Iterable[Notification]] = None,
                 annotations: Optional[Iterable[Annotation]] = None):
        self.name = name
        self.operations: Tuple[Operation, ...] = tuple(operations or ())
        self.attributes: Tuple[Attribute, ...] = tuple(attributes or ())
        self.notifications: Tuple[Notification, ...] = tuple(notifications or ())
        self.annotations: Tuple[Annotation, ...] = tuple(annotations or ())

    def __repr__(self):
        return (f"InterfaceDescription(name={self.name!r}, operations={len(self.operations)}, "
                f"attributes={len(self.attributes)}, notifications={len(self.notifications)})")
