"""Named string properties attached to map elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from tmxload.xmlelement import XMLElement


@dataclass
class PropertyHolder:
    """Holds a mapping of property names to string values."""

    properties: dict[str, str] = field(default_factory=dict)

    def add_property(self, key: str, value: str) -> None:
        """Set a property, replacing any earlier value."""
        self.properties[key] = value

    def get_property(self, key: str) -> str:
        """Return the property's value, or an empty string if it is not set."""
        return self.properties.get(key, "")

    def parse_properties(self, node: ET.Element) -> None:
        """Read the ``property`` children of the node's first ``properties`` element."""
        container = node.find("properties")
        if container is None:
            return
        for prop in container.iterfind("property"):
            element = XMLElement(prop)
            self.add_property(element.get_string("name"), element.get_string("value"))