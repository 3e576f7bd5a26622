from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum


logger = logging.getLogger(__name__)


class Milestone(IntEnum):
    PROLOGUE = 0
    WARNED = 10
    DOCTOR_MISSING = 15
    QUESTIONED = 20
    POLICE_DISTRACTED = 30
    SOLVENT_FOUND = 40
    TOILET_BLOCKED = 50
    GUARD_DISTRACTED = 60
    DOOR_CORRODED = 70
    ESCAPED = 80


TERMINAL_MILESTONE = Milestone.ESCAPED


@dataclass
class NarrativeState:
    """Single forward-only story marker.

    Every story branch tests this one value; side states are not tracked.
    """

    value: int = Milestone.PROLOGUE

    def advance(self, milestone: int) -> bool:
        target = int(milestone)
        if target < self.value:
            logger.warning("Refused narrative regression from %s to %s", self.value, target)
            return False
        if target == self.value:
            return False
        self.value = target
        return True

    @property
    def is_terminal(self) -> bool:
        return self.value >= TERMINAL_MILESTONE

    def label(self) -> str:
        try:
            return Milestone(self.value).name.lower()
        except ValueError:
            return str(self.value)
