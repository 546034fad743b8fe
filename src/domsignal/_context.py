"""Reactive context — records which Binding is currently executing.

Uses contextvars to hold the active binding. While a binding runs, any
Signal.read() call registers that binding as a subscriber, building the
dependency graph implicitly.

The slot is save/restore, never clear: run() resets the variable to the
token it obtained, so a binding created inside another binding hands
control back to its parent when it finishes.
"""

from __future__ import annotations

import contextvars
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domsignal.binding import Binding


class ReactiveContext:
    """A single-slot register for the binding currently executing.

    Single-threaded by contract. Each thread (and each asyncio task) sees its
    own slot through contextvars, but a Signal must still only be written
    from the thread that owns the graph (see signal.set_scheduler).
    """

    __slots__ = ("_active",)

    def __init__(self, name: str = "domsignal.active_binding") -> None:
        self._active: contextvars.ContextVar[Binding | None] = contextvars.ContextVar(
            name, default=None
        )

    def current(self) -> Binding | None:
        """The active binding, or None outside of any binding run."""
        return self._active.get()

    def run(self, binding: Binding) -> None:
        """Call binding() with it installed as the active binding."""
        token = self._active.set(binding)
        try:
            binding()
        finally:
            self._active.reset(token)

    def __repr__(self) -> str:
        return f"ReactiveContext(active={self.current()!r})"


# Shared by every Signal and Binding that is not given an explicit context.
default_context = ReactiveContext()


def current_binding() -> Binding | None:
    """The binding executing in the default context. Useful for testing."""
    return default_context.current()
