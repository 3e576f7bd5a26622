from __future__ import annotations

from collections import deque

from lostdoctor.application.services.event_bus import EventBus
from lostdoctor.domain.events import ItemAcquired, ItemExchanged, NarrativeAdvanced, SessionEnded
from lostdoctor.domain.models.narrative import NarrativeState


class StoryJournal:
    """Short player-facing log of pickups and story beats, fed from the event bus."""

    _MAX_ENTRIES = 12

    def __init__(self, event_bus: EventBus, max_entries: int = _MAX_ENTRIES) -> None:
        self.event_bus = event_bus
        self._entries: deque[str] = deque(maxlen=max(1, int(max_entries)))

    def register_handlers(self) -> None:
        self.event_bus.subscribe(ItemAcquired, self.on_item_acquired, priority=50)
        self.event_bus.subscribe(ItemExchanged, self.on_item_exchanged, priority=50)
        self.event_bus.subscribe(NarrativeAdvanced, self.on_narrative_advanced, priority=50)
        self.event_bus.subscribe(SessionEnded, self.on_session_ended, priority=50)

    def entries(self) -> list[str]:
        return list(self._entries)

    def on_item_acquired(self, event: ItemAcquired) -> None:
        self._entries.append(f"Picked up: {event.name}")

    def on_item_exchanged(self, event: ItemExchanged) -> None:
        self._entries.append(f"Traded for: {event.name}")

    def on_narrative_advanced(self, event: NarrativeAdvanced) -> None:
        label = NarrativeState(event.to_value).label().replace("_", " ")
        self._entries.append(f"Story: {label}")

    def on_session_ended(self, event: SessionEnded) -> None:
        self._entries.append("The doctor is safe.")
