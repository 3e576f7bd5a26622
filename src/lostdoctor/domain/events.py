from dataclasses import dataclass


@dataclass
class ActorMoved:
    from_x: int
    from_y: int
    to_x: int
    to_y: int
    scrolled: bool


@dataclass
class TransitionFired:
    rule_name: str
    x: int
    y: int
    narrative: int


@dataclass
class NarrativeAdvanced:
    from_value: int
    to_value: int


@dataclass
class ItemAcquired:
    item_id: int
    name: str


@dataclass
class ItemExchanged:
    old_id: int
    new_id: int
    name: str


@dataclass
class SessionEnded:
    narrative: int
