"""Host document helpers on top of xml.dom.minidom.

The builders create nodes in a default document, the stand-in for a
browser's global `document`. Swap it with set_document() or, for a limited
scope, use_document().
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator
from xml.dom import minidom

from domsignal._context import ReactiveContext
from domsignal.binding import Binding


class BoundText(minidom.Text):
    """A text node whose data is kept current by a Binding.

    The node owns its binding; signals only hold it weakly.
    """

    __slots__ = ("binding",)

    def __init__(self) -> None:
        super().__init__()
        self.binding: Binding | None = None


def new_document() -> minidom.Document:
    """Create an empty HTML document: <html><body/></html>."""
    doc = minidom.getDOMImplementation().createDocument(None, "html", None)
    doc.documentElement.appendChild(doc.createElement("body"))
    return doc


_document: minidom.Document | None = None


def get_document() -> minidom.Document:
    """The default document, created on first use."""
    global _document
    if _document is None:
        _document = new_document()
    return _document


def set_document(document: minidom.Document | None) -> None:
    """Replace the default document. None resets to a fresh one on next use."""
    global _document
    _document = document


@contextmanager
def use_document(document: minidom.Document) -> Iterator[minidom.Document]:
    """Make document the default for the duration of the block."""
    global _document
    previous = _document
    _document = document
    try:
        yield document
    finally:
        _document = previous


def body(document: minidom.Document | None = None) -> minidom.Element | None:
    """The document's <body> element, if it has one."""
    doc = document if document is not None else get_document()
    found = doc.getElementsByTagName("body")
    return found[0] if found else None


def find_by_id(root: minidom.Node, element_id: str) -> minidom.Element | None:
    """First element under root (root included) whose id attribute matches."""
    stack = [root]
    while stack:
        node = stack.pop()
        if (
            node.nodeType == node.ELEMENT_NODE
            and node.hasAttribute("id")
            and node.getAttribute("id") == element_id
        ):
            return node
        # Reversed so the walk is document order.
        stack.extend(reversed(node.childNodes))
    return None


def bound_text(
    render: Callable[[], str],
    *,
    document: minidom.Document | None = None,
    context: ReactiveContext | None = None,
) -> BoundText:
    """A text node whose data is render()'s result, kept current.

    render may read any number of signals. The binding is installed before
    this returns, so the node starts populated.
    """
    node = BoundText()
    node.ownerDocument = document if document is not None else get_document()

    def update() -> None:
        node.data = render()

    node.binding = Binding(update, context=context).install()
    return node


def serialize(node: minidom.Node) -> str:
    """XML text of node and its subtree."""
    return node.toxml()
