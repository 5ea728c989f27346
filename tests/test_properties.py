import xml.etree.ElementTree as ET

from tmxload.properties import PropertyHolder


def test_add_and_get_property():
    holder = PropertyHolder()
    holder.add_property("speed", "3")
    assert holder.get_property("speed") == "3"


def test_missing_property_is_empty():
    assert PropertyHolder().get_property("absent") == ""


def test_add_property_replaces_value():
    holder = PropertyHolder()
    holder.add_property("k", "first")
    holder.add_property("k", "second")
    assert holder.properties == {"k": "second"}


def test_instances_do_not_share_properties():
    first = PropertyHolder()
    second = PropertyHolder()
    first.add_property("k", "v")
    assert second.properties == {}


def test_parse_properties_reads_all():
    node = ET.fromstring(
        "<map><properties>"
        '<property name="music" value="theme.ogg"/>'
        '<property name="gravity" value="9"/>'
        "</properties></map>"
    )
    holder = PropertyHolder()
    holder.parse_properties(node)
    assert holder.properties == {"music": "theme.ogg", "gravity": "9"}


def test_parse_properties_without_container():
    node = ET.fromstring('<map><layer name="x"/></map>')
    holder = PropertyHolder()
    holder.parse_properties(node)
    assert holder.properties == {}


def test_parse_properties_missing_value_stored_empty():
    node = ET.fromstring('<map><properties><property name="flag"/></properties></map>')
    holder = PropertyHolder()
    holder.parse_properties(node)
    assert holder.get_property("flag") == ""
    assert "flag" in holder.properties


def test_parse_properties_uses_only_first_container():
    node = ET.fromstring(
        "<map>"
        '<properties><property name="a" value="1"/></properties>'
        '<properties><property name="b" value="2"/></properties>'
        "</map>"
    )
    holder = PropertyHolder()
    holder.parse_properties(node)
    assert holder.properties == {"a": "1"}


def test_parse_properties_ignores_nested_children():
    node = ET.fromstring(
        '<map><tileset><properties><property name="inner" value="1"/></properties></tileset></map>'
    )
    holder = PropertyHolder()
    holder.parse_properties(node)
    assert holder.get_property("inner") == ""


def test_parse_properties_later_duplicate_wins():
    node = ET.fromstring(
        "<map><properties>"
        '<property name="k" value="old"/>'
        '<property name="k" value="new"/>'
        "</properties></map>"
    )
    holder = PropertyHolder()
    holder.parse_properties(node)
    assert holder.get_property("k") == "new"