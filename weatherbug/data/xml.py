"""Node queries over parsed WeatherBug documents.

Every lookup the data layer performs goes through the three queries defined
here. Paths are XPath 1.0 expressions evaluated relative to the given node,
with the ``aws`` prefix bound to the WeatherBug namespace.
"""

from __future__ import annotations

import logging
from typing import Any, Final

from lxml import etree

from ..errors import WeatherBugParseError

_LOGGER = logging.getLogger(__name__)

AWS_NAMESPACE: Final = "http://www.aws.com/aws"

NAMESPACES: Final[dict[str, str]] = {"aws": AWS_NAMESPACE}

Node = etree._Element
Document = etree._ElementTree
NodeOrDocument = etree._Element | etree._ElementTree


def parse_document(data: bytes | str) -> Node:
    """Parse raw XML into its root element.

    Raises:
        WeatherBugParseError: If the payload is not well-formed XML.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        return etree.fromstring(data)
    except etree.XMLSyntaxError as err:
        raise WeatherBugParseError(f"Malformed WeatherBug document: {err}") from err


def root_of(node: NodeOrDocument) -> Node:
    """Return the root element of a document, or the element itself."""
    if isinstance(node, etree._ElementTree):
        return node.getroot()
    return node


def _xpath(node: Node, expression: str) -> Any:
    return node.xpath(expression, namespaces=NAMESPACES)


def value_of(node: Node | None, path: str) -> str:
    """Return the XPath string value of ``path`` relative to ``node``.

    A path that selects nothing yields ``""``, as does a ``None`` node or an
    expression lxml cannot evaluate.
    """
    if node is None:
        return ""
    try:
        value = _xpath(node, f"string({path})")
    except etree.XPathError as err:
        _LOGGER.debug("Cannot evaluate path %r: %s", path, err)
        return ""
    return str(value)


def select_nodes(node: NodeOrDocument | None, path: str) -> list[Node]:
    """Return the elements selected by ``path``, in document order."""
    if node is None:
        return []
    try:
        result = _xpath(root_of(node), path)
    except etree.XPathError as err:
        _LOGGER.debug("Cannot evaluate path %r: %s", path, err)
        return []
    if not isinstance(result, list):
        return []
    return [item for item in result if isinstance(item, etree._Element)]


def select_single(node: NodeOrDocument | None, path: str) -> Node | None:
    """Return the first element selected by ``path``, or ``None``."""
    nodes = select_nodes(node, path)
    return nodes[0] if nodes else None
