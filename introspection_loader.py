# introspection_loader.py
# Reads D-Bus introspection XML (<node>/<interface>/...) into InterfaceDescription objects.
import xml.etree.ElementTree as ET
from typing import List, Optional

from interface_model import (
    Annotation, ArgDirection, Attribute, InterfaceDescription, Notification, Operation, Parameter, PropertyAccess,
)


class IntrospectionError(ValueError):
    pass


# Convenience function to load an introspection file and return its interfaces

def load_introspection_file(xml_path: str) -> List[InterfaceDescription]:
    with open(xml_path, 'r', encoding='utf-8') as f:
        text = f.read()
    return parse_introspection_xml(text, source=xml_path)


def parse_introspection_xml(text: str, source: Optional[str] = None) -> List[InterfaceDescription]:
    """
    Parse an introspection document and return every interface it declares, in document order.
    Interfaces of nested <node> children are included.
    """
    where = source or "<string>"
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise IntrospectionError(f"{where}: invalid introspection XML: {exc}") from exc
    if root.tag == 'interface':
        return [_parse_interface(root, where)]
    if root.tag != 'node':
        raise IntrospectionError(f"{where}: expected a <node> root element, got <{root.tag}>")
    return [_parse_interface(el, where) for el in root.iter('interface')]


def _annotations(element) -> List[Annotation]:
    return [Annotation(a.get('name', ''), a.get('value', '')) for a in element.findall('annotation')]


def _required(element, attr: str, where: str) -> str:
    value = element.get(attr)
    if value is None:
        raise IntrospectionError(f"{where}: <{element.tag}> is missing the '{attr}' attribute")
    return value


def _parse_args(element, default_direction: ArgDirection, where: str) -> List[Parameter]:
    params = []
    for arg in element.findall('arg'):
        direction_raw = arg.get('direction')
        if direction_raw is None:
            direction = default_direction
        else:
            try:
                direction = ArgDirection(direction_raw)
            except ValueError:
                raise IntrospectionError(f"{where}: unknown arg direction '{direction_raw}'") from None
        params.append(Parameter(
            name=arg.get('name'),
            signature=_required(arg, 'type', where),
            direction=direction,
            annotations=_annotations(arg),
        ))
    return params


def _parse_interface(element, where: str) -> InterfaceDescription:
    name = _required(element, 'name', where)
    operations = []
    for method in element.findall('method'):
        method_name = _required(method, 'name', where)
        # D-Bus: method args default to "in"
        operations.append(Operation(
            name=method_name,
            parameters=_parse_args(method, ArgDirection.IN, f"{where}: {name}.{method_name}"),
            annotations=_annotations(method),
        ))

    attributes = []
    for prop in element.findall('property'):
        prop_name = _required(prop, 'name', where)
        access_raw = _required(prop, 'access', where)
        try:
            access = PropertyAccess(access_raw)
        except ValueError:
            raise IntrospectionError(
                f"{where}: property {name}.{prop_name} has unknown access '{access_raw}'"
            ) from None
        attributes.append(Attribute(
            name=prop_name,
            signature=_required(prop, 'type', where),
            access=access,
            annotations=_annotations(prop),
        ))

    notifications = []
    for signal in element.findall('signal'):
        signal_name = _required(signal, 'name', where)
        # Signal args are always emitted values
        notifications.append(Notification(
            name=signal_name,
            parameters=_parse_args(signal, ArgDirection.OUT, f"{where}: {name}.{signal_name}"),
            annotations=_annotations(signal),
        ))

    return InterfaceDescription(
        name=name,
        operations=operations,
        attributes=attributes,
        notifications=notifications,
        annotations=_annotations(element),
    )
