"""Bindings — render callbacks re-run whenever a Signal they read changes.

A Binding wraps a zero-argument render function. It runs once on install()
and again every time one of the signals it read is written. Each run
re-tracks dependencies: a signal read last time but not this time is
unsubscribed when the run ends.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from domsignal._context import ReactiveContext, default_context
from domsignal.errors import ReactiveCycleError

if TYPE_CHECKING:
    from domsignal.signal import Signal

logger = logging.getLogger("domsignal.binding")


class Binding:
    """A render callback that re-runs when its dependencies change."""

    __slots__ = ("_render", "_context", "_dependencies", "_running", "_disposed", "__weakref__")

    def __init__(
        self,
        render: Callable[[], None],
        *,
        context: ReactiveContext | None = None,
    ) -> None:
        self._render = render
        self._context = context if context is not None else default_context
        # Ordered set of signals read during the most recent run.
        self._dependencies: dict[Signal, None] = {}
        self._running = False
        self._disposed = False

    def __call__(self) -> None:
        self._render()

    def install(self) -> Binding:
        """Run once now, populating the target and subscribing to every read."""
        logger.debug("Installing %r", self)
        self._run()
        return self

    def _run(self) -> None:
        """Re-evaluate the render function, re-tracking dependencies."""
        if self._disposed:
            return
        if self._running:
            raise ReactiveCycleError(
                f"reactive cycle detected: {self!r} was re-triggered while running"
            )

        previous = self._dependencies
        self._dependencies = {}
        self._running = True
        try:
            self._context.run(self)
        finally:
            self._running = False
            for dep in previous:
                if dep not in self._dependencies:
                    dep._remove_subscriber(self)

    def dispose(self) -> None:
        """Stop this binding. Disconnects from all signals."""
        self._disposed = True
        for dep in self._dependencies:
            dep._remove_subscriber(self)
        self._dependencies.clear()
        logger.debug("Disposed %r", self)

    @property
    def dependencies(self) -> tuple[Signal, ...]:
        """Signals read by the most recent run."""
        return tuple(self._dependencies)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "active"
        name = getattr(self._render, "__name__", repr(self._render))
        return f"Binding({name}, {state})"


def bind(
    render: Callable[[], None],
    *,
    context: ReactiveContext | None = None,
) -> Binding:
    """Run render immediately, then re-run it whenever a signal it reads changes.

    Returns the Binding. Signals only hold bindings weakly, so keep the
    returned object alive for as long as the binding should fire (the
    element builder does this by storing it on the text node it updates).

    Usage:
        counter = signal(0)
        log = []

        b = bind(lambda: log.append(counter.read()))
        # log == [0] — ran immediately

        counter.write(1)
        # log == [0, 1]

        b.dispose()
        counter.write(2)
        # log == [0, 1] — stopped
    """
    return Binding(render, context=context).install()
