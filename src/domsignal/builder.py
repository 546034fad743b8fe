"""Element builder — curried constructors for DOM trees.

    div({"class": "App"})(h1()(counter), p()("text"))

element(tag) builds an element from its children; attribute() wraps such a
constructor so it takes an attribute mapping first. Children are appended in
the order given. A Signal child becomes a text node bound to the signal.
"""

from __future__ import annotations

from typing import Callable, Mapping
from xml.dom import minidom

from domsignal.content import Content, Literal, Node, as_content
from domsignal.dom import bound_text, get_document
from domsignal.errors import UnsupportedContentError

Constructor = Callable[..., minidom.Element]


def _child_node(content: Content, document: minidom.Document) -> minidom.Node:
    if isinstance(content, Literal):
        return document.createTextNode(content.text)
    if isinstance(content, Node):
        return content.node
    sig, fmt = content.signal, content.format
    return bound_text(lambda: fmt(sig.read()), document=document, context=sig._context)


def element(tag: str, *, document: minidom.Document | None = None) -> Constructor:
    """Return a constructor that builds a <tag> element from its children.

    The document is resolved when the constructor is called, so builders
    defined at import time follow set_document().
    """

    def construct(*children) -> minidom.Element:
        # Coerce everything first: bad content fails before any node is made.
        contents = [as_content(child) for child in children]
        doc = document if document is not None else get_document()
        el = doc.createElement(tag)
        for content in contents:
            el.appendChild(_child_node(content, doc))
        return el

    construct.__name__ = tag
    return construct


def attribute(fn: Constructor) -> Callable[[Mapping[str, str] | None], Constructor]:
    """Wrap a constructor so it takes an attribute mapping first.

    attribute(element("a"))({"href": "/"})("home") -> <a href="/">home</a>
    """

    def with_attrs(attrs: Mapping[str, str] | None = None) -> Constructor:
        if attrs is not None:
            for key, value in attrs.items():
                if not isinstance(value, str):
                    raise UnsupportedContentError(
                        f"attribute {key!r} must be a str, got {type(value).__name__}"
                    )

        def construct(*children) -> minidom.Element:
            el = fn(*children)
            if attrs is None:
                return el
            for key, value in attrs.items():
                el.setAttribute(key, value)
            return el

        return construct

    return with_attrs


div = attribute(element("div"))
h1 = attribute(element("h1"))
h2 = attribute(element("h2"))
p = attribute(element("p"))
span = attribute(element("span"))
ul = attribute(element("ul"))
li = attribute(element("li"))
button = attribute(element("button"))
