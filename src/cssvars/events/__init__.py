"""Event system: bus and event types for the regeneration lifecycle."""

from cssvars.events.bus import EventBus
from cssvars.events.types import (
    FormattingFailed,
    RegenerationFailed,
    RegenerationStarted,
    RegenerationSucceeded,
)

__all__ = [
    "EventBus",
    "FormattingFailed",
    "RegenerationFailed",
    "RegenerationStarted",
    "RegenerationSucceeded",
]
