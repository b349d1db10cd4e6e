import pytest
from interface_model import Annotation, ArgDirection, PropertyAccess
from introspection_loader import IntrospectionError, load_introspection_file, parse_introspection_xml

MIXED_XML = """
<node>
  <interface name="org.example.Mixed">
    <annotation name="org.example.Owner" value="core"/>
    <method name="DoThing">
      <arg name="val" type="i" direction="in"/>
      <arg name="result" type="i" direction="out"/>
    </method>
    <method name="Defaulted">
      <arg name="implicit" type="s"/>
    </method>
    <property name="SomeProp" type="s" access="readwrite">
      <annotation name="org.freedesktop.DBus.Property.EmitsChangedSignal" value="false"/>
    </property>
    <signal name="Notify">
      <arg name="msg" type="s"/>
      <arg type="u"/>
    </signal>
  </interface>
</node>
"""


def test_members_are_read_in_document_order():
    (iface,) = parse_introspection_xml(MIXED_XML)
    assert iface.name == "org.example.Mixed"
    assert [op.name for op in iface.operations] == ["DoThing", "Defaulted"]
    assert [a.name for a in iface.attributes] == ["SomeProp"]
    assert [n.name for n in iface.notifications] == ["Notify"]


def test_argument_directions():
    (iface,) = parse_introspection_xml(MIXED_XML)
    do_thing, defaulted = iface.operations
    assert [(p.name, p.signature, p.direction) for p in do_thing.parameters] == [
        ("val", "i", ArgDirection.IN),
        ("result", "i", ArgDirection.OUT),
    ]
    assert defaulted.parameters[0].direction == ArgDirection.IN
    assert all(p.direction == ArgDirection.OUT for p in iface.notifications[0].parameters)


def test_unnamed_argument_has_no_name():
    (iface,) = parse_introspection_xml(MIXED_XML)
    assert iface.notifications[0].parameters[1].name is None


def test_property_access_and_annotations():
    (iface,) = parse_introspection_xml(MIXED_XML)
    prop = iface.attributes[0]
    assert prop.access == PropertyAccess.READWRITE
    assert prop.signature == "s"
    assert prop.annotations == (Annotation("org.freedesktop.DBus.Property.EmitsChangedSignal", "false"),)
    assert iface.annotations == (Annotation("org.example.Owner", "core"),)


def test_multiple_and_nested_interfaces():
    xml = """
    <node>
      <interface name="org.example.A"/>
      <interface name="org.example.B"/>
      <node name="child">
        <interface name="org.example.C"/>
      </node>
    </node>
    """
    assert [i.name for i in parse_introspection_xml(xml)] == ["org.example.A", "org.example.B", "org.example.C"]


def test_bare_interface_root_is_accepted():
    (iface,) = parse_introspection_xml('<interface name="org.example.Bare"><method name="Ping"/></interface>')
    assert iface.name == "org.example.Bare"
    assert iface.operations[0].parameters == ()


def test_empty_node_has_no_interfaces():
    assert parse_introspection_xml("<node/>") == []


@pytest.mark.parametrize("xml,fragment", [
    ("<node><interface name='x'>", "invalid introspection XML"),
    ("<root/>", "<root>"),
    ("<node><interface/></node>", "'name'"),
    ("<node><interface name='x'><method name='M'><arg name='a'/></method></interface></node>", "'type'"),
    ("<node><interface name='x'><method name='M'><arg type='s' direction='sideways'/></method></interface></node>",
     "sideways"),
    ("<node><interface name='x'><property name='P' type='s' access='sometimes'/></interface></node>", "sometimes"),
    ("<node><interface name='x'><property name='P' type='s'/></interface></node>", "'access'"),
])
def test_invalid_documents_are_rejected(xml, fragment):
    with pytest.raises(IntrospectionError) as excinfo:
        parse_introspection_xml(xml)
    assert fragment in str(excinfo.value)


def test_load_from_file_reports_path_in_errors(xml_file):
    path = xml_file("<node><interface/></node>", name="broken.xml")
    with pytest.raises(IntrospectionError) as excinfo:
        load_introspection_file(path)
    assert "broken.xml" in str(excinfo.value)


def test_load_from_file(xml_file):
    path = xml_file(MIXED_XML)
    (iface,) = load_introspection_file(path)
    assert iface.name == "org.example.Mixed"


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load_introspection_file(str(tmp_path / "nope.xml"))
