from dataclasses import dataclass, field
from typing import List


@dataclass
class ActionResult:
    messages: List[str] = field(default_factory=list)
    game_over: bool = False
    moved: bool = False
    transition: str | None = None


@dataclass
class InventoryItemView:
    item_id: int
    name: str


@dataclass
class GameView:
    origin_x: int
    origin_y: int
    actor_x: int
    actor_y: int
    narrative: int
    narrative_label: str
    items: List[InventoryItemView] = field(default_factory=list)
    game_over: bool = False
    journal: List[str] = field(default_factory=list)
