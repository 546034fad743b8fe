"""domsignal: implicit-dependency signals bound to DOM text nodes."""

from importlib.metadata import version as _version

__version__ = _version("domsignal")

from domsignal._context import ReactiveContext, current_binding
from domsignal.signal import Signal, signal, set_scheduler
from domsignal.binding import Binding, bind
from domsignal.content import Literal, Node, Reactive
from domsignal.dom import (
    BoundText,
    body,
    bound_text,
    find_by_id,
    get_document,
    new_document,
    serialize,
    set_document,
    use_document,
)
from domsignal.builder import attribute, element, div, h1, h2, p, span, ul, li, button
from domsignal.mount import mount, mount_by_id
from domsignal.errors import (
    DomSignalError,
    MountTargetNotFound,
    AlreadyMountedError,
    ReactiveCycleError,
    UnsupportedContentError,
)
# textual NOT auto-imported — opt-in only

__all__ = [
    "ReactiveContext",
    "current_binding",
    "Signal",
    "signal",
    "set_scheduler",
    "Binding",
    "bind",
    "Literal",
    "Node",
    "Reactive",
    "BoundText",
    "body",
    "bound_text",
    "find_by_id",
    "get_document",
    "new_document",
    "serialize",
    "set_document",
    "use_document",
    "attribute",
    "element",
    "div",
    "h1",
    "h2",
    "p",
    "span",
    "ul",
    "li",
    "button",
    "mount",
    "mount_by_id",
    "DomSignalError",
    "MountTargetNotFound",
    "AlreadyMountedError",
    "ReactiveCycleError",
    "UnsupportedContentError",
]
