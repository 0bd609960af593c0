"""
Typed document tree over parsed OOXML.

ElementTree exposes namespaced tags in Clark notation (``{uri}local``). The
formatters work in terms of the prefixed names used throughout the Office
Open XML documentation (``a:rPr``, ``p:txBody``), so parsing converts every
element into an :class:`ElementNode` whose tag and attribute names carry the
canonical prefix of their namespace, regardless of the prefix the document
itself declares.

Parsing never raises: malformed input yields an empty :class:`DocumentTree`.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union
from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)

# Canonical prefixes for the namespaces found in notes slides
NAMESPACES = {
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "m": "http://schemas.openxmlformats.org/officeDocument/2006/math",
    "mc": "http://schemas.openxmlformats.org/markup-compatibility/2006",
    "p14": "http://schemas.microsoft.com/office/powerpoint/2010/main",
    "xml": "http://www.w3.org/XML/1998/namespace",
}

# Strict Open XML spells the same vocabularies with purl.oclc.org URIs
STRICT_NAMESPACES = {
    "p": "http://purl.oclc.org/ooxml/presentationml/main",
    "a": "http://purl.oclc.org/ooxml/drawingml/main",
    "r": "http://purl.oclc.org/ooxml/officeDocument/relationships",
    "m": "http://purl.oclc.org/ooxml/officeDocument/math",
}

_PREFIX_BY_URI = {
    uri: prefix
    for namespaces in (STRICT_NAMESPACES, NAMESPACES)
    for prefix, uri in namespaces.items()
}

XML_CONTENT_TYPES = {"text/xml", "application/xml"}


class NodeKind(enum.Enum):
    ELEMENT = "element"
    TEXT = "text"


@dataclass(frozen=True)
class TextNode:
    value: str

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT


@dataclass
class ElementNode:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["XmlNode"] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ELEMENT

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def child_elements(self) -> Iterator["ElementNode"]:
        for child in self.children:
            if isinstance(child, ElementNode):
                yield child

    def iter_descendants(self, tag: str) -> Iterator["ElementNode"]:
        """Yield descendant elements named ``tag`` in document order (self excluded)."""
        stack = list(reversed(list(self.child_elements())))
        while stack:
            elem = stack.pop()
            if elem.tag == tag:
                yield elem
            stack.extend(reversed(list(elem.child_elements())))

    def get_elements_by_tag_name(self, tag: str) -> list["ElementNode"]:
        return list(self.iter_descendants(tag))

    def find_descendant(self, tag: str) -> Optional["ElementNode"]:
        return next(self.iter_descendants(tag), None)

    def text_content(self) -> str:
        """Concatenate every text node below this element in document order."""
        parts: list[str] = []
        stack: list[XmlNode] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if isinstance(node, TextNode):
                parts.append(node.value)
            else:
                stack.extend(reversed(node.children))
        return "".join(parts)


XmlNode = Union[ElementNode, TextNode]


@dataclass
class DocumentTree:
    root: Optional[ElementNode] = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def get_elements_by_tag_name(self, tag: str) -> list[ElementNode]:
        """All elements named ``tag`` in document order, the root included."""
        if self.root is None:
            return []
        found = [self.root] if self.root.tag == tag else []
        found.extend(self.root.iter_descendants(tag))
        return found

    def find_element(self, tag: str) -> Optional[ElementNode]:
        found = self.get_elements_by_tag_name(tag)
        return found[0] if found else None


def qualified_name(clark_name: str) -> str:
    """Turn ``{uri}local`` into ``prefix:local`` using the canonical prefixes."""
    if not clark_name.startswith("{"):
        return clark_name
    uri, _, local = clark_name[1:].partition("}")
    prefix = _PREFIX_BY_URI.get(uri)
    return f"{prefix}:{local}" if prefix else local


def _new_node(elem: ET.Element) -> ElementNode:
    return ElementNode(
        tag=qualified_name(elem.tag),
        attributes={qualified_name(k): v for k, v in elem.attrib.items()},
    )


def _convert(root: ET.Element) -> ElementNode:
    """Copy an ElementTree into ElementNodes without recursing per nesting level."""
    root_node = _new_node(root)
    stack = [(root, root_node)]
    while stack:
        elem, node = stack.pop()
        if elem.text:
            node.children.append(TextNode(elem.text))
        for child in elem:
            child_node = _new_node(child)
            node.children.append(child_node)
            if child.tail:
                node.children.append(TextNode(child.tail))
            stack.append((child, child_node))
    return root_node


def parse_document(text: str, content_type: str = "text/xml") -> DocumentTree:
    """
    Parse an XML payload into a :class:`DocumentTree`.

    Args:
        text: The decoded XML document.
        content_type: Declared content kind; only XML kinds are accepted.

    Returns:
        The parsed tree, or an empty tree when the payload is not well-formed.

    Raises:
        ValueError: If ``content_type`` is not an XML content type.
    """
    if content_type not in XML_CONTENT_TYPES:
        raise ValueError(f"Unsupported content type: {content_type}")
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        logger.debug(f"Silently degrading - XML payload is not well-formed: {e}")
        return DocumentTree()
    return DocumentTree(root=_convert(root))
