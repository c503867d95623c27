"""Thin read-only wrapper over an XML request document.

Paths are ElementTree paths evaluated from the root element, so
``"AvailDestinations/Destination"`` matches children of ``<AvailRQ>``.
"""

import xml.etree.ElementTree as ET

from app.exceptions.custom import MalformedDocumentError


class RequestDocument:
    def __init__(self, root: ET.Element):
        self._root = root

    @classmethod
    def load(cls, xml: str | bytes) -> "RequestDocument":
        try:
            root = ET.fromstring(xml)
        except ET.ParseError as exc:
            raise MalformedDocumentError(f"Not well-formed XML: {exc}") from exc
        return cls(root)

    @property
    def root(self) -> ET.Element:
        return self._root

    def query(self, path: str, context: ET.Element | None = None) -> list[ET.Element]:
        return (context if context is not None else self._root).findall(path)

    def first(self, path: str, context: ET.Element | None = None) -> ET.Element | None:
        return (context if context is not None else self._root).find(path)

    def text(self, path: str) -> str | None:
        """Stripped text of the first match, ``None`` if the node is absent."""
        node = self.first(path)
        if node is None:
            return None
        return (node.text or "").strip()
