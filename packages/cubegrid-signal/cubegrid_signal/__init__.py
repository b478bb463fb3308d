"""cubegrid-signal - Lifecycle events for the cube grid animation."""
from __future__ import annotations

from cubegrid_signal.bus import LifecycleBus, LifecycleHandler
from cubegrid_signal.callback import SignalCallback, make_flush_repaint
from cubegrid_signal.events import Lifecycle, LifecycleEvent

__all__ = [
    "Lifecycle",
    "LifecycleBus",
    "LifecycleEvent",
    "LifecycleHandler",
    "SignalCallback",
    "make_flush_repaint",
]
