"""Event system: bus and event types for import resolution."""

from atimport.events.bus import EventBus
from atimport.events.types import (
    DropReason,
    ImportDropped,
    ImportEvent,
    ImportResolved,
    ImportsEmitted,
)

__all__ = [
    "EventBus",
    "DropReason",
    "ImportEvent",
    "ImportDropped",
    "ImportResolved",
    "ImportsEmitted",
]
