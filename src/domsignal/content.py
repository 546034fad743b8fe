"""Element content — the three kinds of child an element can take.

Content is one of:
- Literal(text): a text node, created once and never updated.
- Node(node): an already-built element or text node, appended as is.
- Reactive(signal): a text node bound to the signal's value
  (None shows as empty text).

Builders accept the plain values too (str, minidom nodes, Signal) and
coerce them with as_content(); anything else is rejected at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union
from xml.dom import minidom

from domsignal.errors import UnsupportedContentError
from domsignal.signal import Signal


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Node:
    node: minidom.Element | minidom.Text


def text_of(value: object) -> str:
    """Text for a bound value. None renders as an empty node."""
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Reactive:
    signal: Signal
    format: Callable[[Any], str] = text_of


Content = Union[Literal, Node, Reactive]


def as_content(value: object) -> Content:
    """Coerce a builder argument to its Content variant."""
    if isinstance(value, (Literal, Node, Reactive)):
        return value
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, Signal):
        return Reactive(value)
    if isinstance(value, (minidom.Element, minidom.Text)):
        return Node(value)
    raise UnsupportedContentError(
        f"unsupported content type {type(value).__name__}: "
        "expected str, Signal, or a built element"
    )
