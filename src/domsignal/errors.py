"""Exceptions raised by domsignal.

All of them are programmer errors surfaced at construction, mount or write
time. Nothing here is retried.
"""


class DomSignalError(Exception):
    """Base class for every domsignal error."""


class MountTargetNotFound(DomSignalError, LookupError):
    """The host element a tree should be mounted into does not exist."""


class AlreadyMountedError(DomSignalError):
    """A tree was mounted a second time."""


class ReactiveCycleError(DomSignalError, RuntimeError):
    """A binding was re-triggered while it was still running."""


class UnsupportedContentError(DomSignalError, TypeError):
    """Content or attribute value of a type the element builder can't place."""
