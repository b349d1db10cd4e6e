import pytest
from generators.client_proxy_generator import (
    PROXY_USE, generate_client_proxies_from_xml, generate_client_proxy,
)
from interface_model import Attribute, InterfaceDescription, PropertyAccess
from signature_parser import MalformedSignatureError
from tests.test_utils import assert_contains, assert_not_contains, in_arg, interface_with_methods, method, out_arg

MIXED_XML = """
<node>
  <interface name="org.example.Mixed">
    <method name="DoThing">
      <arg name="val" type="i" direction="in"/>
      <arg name="result" type="i" direction="out"/>
    </method>
    <property name="SomeProp" type="s" access="readwrite"/>
    <signal name="Notify">
      <arg name="msg" type="s"/>
    </signal>
  </interface>
</node>
"""


def test_mixed_interface_proxy():
    output = generate_client_proxies_from_xml(MIXED_XML)
    assert output.startswith(PROXY_USE + "\n")
    assert_contains(output, '#[proxy(interface = "org.example.Mixed", assume_defaults = true)]\npub trait Mixed {')
    assert_contains(output, "  /// DoThing method\n  fn do_thing(&self, val: i32) -> zbus::Result<i32>;")
    assert_contains(output, "  /// SomeProp property\n  #[zbus(property)]\n  fn some_prop(&self) -> zbus::Result<String>;")
    assert_contains(
        output,
        "  /// Set the SomeProp property\n  #[zbus(property)]\n"
        "  fn set_some_prop(&self, value: String) -> zbus::Result<()>;",
    )
    assert output.rstrip().endswith("}")


def test_signals_are_not_emitted():
    output = generate_client_proxies_from_xml(MIXED_XML)
    assert_not_contains(output, "notify")
    assert_not_contains(output, "SignalEmitter")


def test_property_access_modes():
    iface = InterfaceDescription("org.example.Props", attributes=[
        Attribute("ro", "s", PropertyAccess.READ),
        Attribute("rw", "s", PropertyAccess.READWRITE),
        Attribute("wo", "u", PropertyAccess.WRITE),
    ])
    output = generate_client_proxy(iface)
    assert_contains(output, "fn ro(&self) -> zbus::Result<String>;")
    assert_not_contains(output, "fn set_ro(")
    assert_contains(output, "fn rw(&self) -> zbus::Result<String>;")
    assert_contains(output, "fn set_rw(&self, value: String) -> zbus::Result<()>;")
    assert_contains(output, "fn set_wo(&self, value: u32) -> zbus::Result<()>;")
    assert_not_contains(output, "fn wo(&self)")


def test_acronym_property_is_folded():
    iface = InterfaceDescription("org.example.Keys", attributes=[Attribute("APIKey", "s", PropertyAccess.READ)])
    assert_contains(generate_client_proxy(iface), "fn api_key(&self) -> zbus::Result<String>;")


def test_colliding_methods_keep_wire_name():
    output = generate_client_proxy(interface_with_methods(method("Conflict"), method("conflict")))
    assert_contains(output, "fn conflict(&self) -> zbus::Result<()>;")
    assert_contains(output, '  #[zbus(name = "conflict")]\n  fn conflict_2(&self) -> zbus::Result<()>;')
    assert output.count("#[zbus(name") == 1


def test_renamed_property_keeps_wire_name():
    iface = InterfaceDescription(
        "org.example.Clash",
        operations=[method("Status")],
        attributes=[Attribute("Status", "s", PropertyAccess.READ)],
    )
    output = generate_client_proxy(iface)
    assert_contains(output, '#[zbus(property, name = "Status")]\n  fn status_prop(&self) -> zbus::Result<String>;')


def test_reserved_words_are_escaped():
    iface = interface_with_methods(method("Type", in_arg("fn", "i"), in_arg("type", "s")))
    assert_contains(generate_client_proxy(iface), "fn type_(&self, fn_: i32, type_: String) -> zbus::Result<()>;")


def test_return_tuple_and_unit():
    iface = interface_with_methods(
        method("Pair", out_arg("a", "s"), out_arg("b", "a{sv}")),
        method("Nothing", in_arg("x", "y")),
    )
    output = generate_client_proxy(iface)
    assert_contains(
        output,
        "fn pair(&self) -> zbus::Result<(String, std::collections::HashMap<String, zbus::zvariant::Value<'_>>)>;",
    )
    assert_contains(output, "fn nothing(&self, x: u8) -> zbus::Result<()>;")


def test_unknown_types_warn_but_generate():
    warnings = []
    iface = interface_with_methods(method("Odd", in_arg("x", "z")))
    output = generate_client_proxy(iface, warnings)
    assert_contains(output, "fn odd(&self, x: zbus::zvariant::Value<'_>) -> zbus::Result<()>;")
    assert len(warnings) == 1


def test_malformed_signature_stops_generation():
    xml = '<node><interface name="org.example.Bad"><method name="M"><arg type="a{s"/></method></interface></node>'
    with pytest.raises(MalformedSignatureError):
        generate_client_proxies_from_xml(xml)


def test_multiple_interfaces_share_one_use_line():
    xml = """
    <node>
      <interface name="org.example.First"><method name="Ping"/></interface>
      <interface name="org.example.Second"><method name="Ping"/></interface>
    </node>
    """
    output = generate_client_proxies_from_xml(xml)
    assert output.count(PROXY_USE) == 1
    assert_contains(output, "pub trait First {")
    assert_contains(output, "pub trait Second {")
    assert output.index("pub trait First") < output.index("pub trait Second")


def test_empty_interface_is_an_empty_trait():
    output = generate_client_proxies_from_xml('<node><interface name="org.example.Empty"/></node>')
    assert_contains(output, "pub trait Empty {\n}")


def test_generation_is_deterministic():
    assert generate_client_proxies_from_xml(MIXED_XML) == generate_client_proxies_from_xml(MIXED_XML)
