"""Signals — mutable values that track the bindings reading them.

When a Signal is read while a Binding runs, the binding is registered as a
subscriber. When the Signal is written, every subscriber re-runs, in the
order it first subscribed, before write() returns.

Subscribers are held weakly: the node a binding updates owns the binding,
the Signal only points back at it.

Thread safety: call set_scheduler() once from the main thread. After that,
any .write() from a background thread is handed to the scheduler instead of
running inline. Main-thread writes remain synchronous.
"""

from __future__ import annotations

import threading
import weakref
from typing import TYPE_CHECKING, Generic, TypeVar

from domsignal._context import ReactiveContext, default_context

if TYPE_CHECKING:
    from domsignal.binding import Binding

T = TypeVar("T")

# ─── Auto-marshal ────────────────────────────────────────────────────────────
_scheduler = None
_scheduler_thread = None


def set_scheduler(scheduler) -> None:
    """Set the scheduler that receives writes issued off the main thread.

    Call once from the main/UI thread:
        domsignal.set_scheduler(app.call_from_thread)

    Pass None to go back to running every write inline.
    """
    global _scheduler, _scheduler_thread
    _scheduler = scheduler
    _scheduler_thread = threading.current_thread() if scheduler is not None else None


class Signal(Generic[T]):
    """A mutable value cell with implicit subscriber tracking."""

    __slots__ = ("_value", "_subscribers", "_context", "__weakref__")

    def __init__(self, value: T, *, context: ReactiveContext | None = None) -> None:
        self._value = value
        # Ordered: WeakKeyDictionary is backed by a plain dict.
        self._subscribers: weakref.WeakKeyDictionary[Binding, None] = (
            weakref.WeakKeyDictionary()
        )
        self._context = context if context is not None else default_context

    def read(self) -> T:
        """Return the value. If a binding is running, subscribe it."""
        binding = self._context.current()
        if binding is not None and not binding._disposed:
            if binding not in self._subscribers:
                self._subscribers[binding] = None
            binding._dependencies[self] = None
        return self._value

    def peek(self) -> T:
        """Return the value without subscribing anyone."""
        return self._value

    def write(self, value: T) -> None:
        """Store a new value and re-run every subscriber.

        There is no equality check: writing the current value again still
        notifies.
        """
        if _scheduler is not None and threading.current_thread() != _scheduler_thread:
            _scheduler(lambda v=value: self._write_direct(v))
        else:
            self._write_direct(value)

    def _write_direct(self, value: T) -> None:
        self._value = value
        self._notify()

    def _notify(self) -> None:
        # Snapshot: subscribers may unsubscribe or die while we iterate.
        for binding in list(self._subscribers):
            # Still running and not read yet this run: the subscription is stale.
            if binding._running and self not in binding._dependencies:
                continue
            binding._run()

    def _remove_subscriber(self, binding: Binding) -> None:
        """Drop a subscriber. Called when a binding stops reading us."""
        self._subscribers.pop(binding, None)

    @property
    def subscribers(self) -> tuple[Binding, ...]:
        """Live subscribers, in notification order."""
        return tuple(self._subscribers)

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"


def signal(initial_value: T, *, context: ReactiveContext | None = None) -> Signal[T]:
    """Create a Signal.

    Usage:
        counter = signal(0)
        counter.read()    # 0
        counter.write(1)  # re-runs every binding that read counter
    """
    return Signal(initial_value, context=context)
