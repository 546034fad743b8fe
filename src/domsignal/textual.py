"""Textual host for domsignal. Opt-in — requires textual.

drive() plays the part of the animation-frame loop: an app timer calls a
tick function once per frame, the tick writes signals, and the mounted tree
is repainted into a widget. bind_widget() pushes a binding's output straight
into a widget.

Widget writes are guarded here, not at callsites: skipped while the app is
paused or not running, NoMatches from the widget query is ignored, and
off-thread runs are marshalled with call_from_thread.
"""

import logging
import threading
import time
from contextlib import contextmanager

from textual.css.query import NoMatches

from domsignal.binding import Binding
from domsignal.dom import serialize

logger = logging.getLogger("domsignal.textual")

# Keyed by id(app) so multiple apps work in tests. An id is present only
# inside a pause() block.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend widget writes while the widget tree is being replaced."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Can widgets be queried and updated right now?"""
    return app.is_running and id(app) not in _paused_apps


def _push(app, selector, text):
    try:
        app.query_one(selector).update(text)
    except NoMatches:
        pass


def drive(app, tick, *, root=None, selector="#document", fps=60.0):
    """Call tick(elapsed_seconds) once per frame from an app timer.

    If root is given, its serialized markup is pushed into the widget
    matching selector after every tick. Returns the Textual timer; call
    .stop() on it to end the loop.
    """
    start = time.monotonic()

    def _frame():
        if not is_safe(app):
            return
        tick(time.monotonic() - start)
        if root is not None:
            _push(app, selector, serialize(root))

    logger.debug("Driving %r at %s fps", tick, fps)
    return app.set_interval(1 / fps, _frame)


def bind_widget(app, selector, render):
    """Install a Binding that writes render() into the widget at selector.

    render is always called, so the binding keeps tracking its signals
    while writes are paused. Returns the Binding; keep it alive.
    """
    _main = threading.get_ident()

    def _update():
        text = render()
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_push, app, selector, text)
        else:
            _push(app, selector, text)

    return Binding(_update).install()
