from __future__ import annotations

from dataclasses import dataclass, field

from lostdoctor.domain.models.actor import Actor
from lostdoctor.domain.models.inventory import Inventory
from lostdoctor.domain.models.narrative import NarrativeState
from lostdoctor.domain.models.world_grid import Viewport, WorldGrid


@dataclass
class GameSession:
    """Everything that changes while one game is being played."""

    grid: WorldGrid
    viewport: Viewport
    actor: Actor
    inventory: Inventory
    narrative: NarrativeState = field(default_factory=NarrativeState)
    walk_frame: int = 0
    ended: bool = False

    def actor_position(self) -> tuple[int, int]:
        return self.actor.absolute(self.viewport)

    def cell_under_actor(self) -> int:
        x, y = self.actor_position()
        return self.grid.get_cell(y, x)

    def place_actor_absolute(self, x: int, y: int) -> None:
        """Move the actor to a world coordinate, scrolling only if it is off screen."""

        if not self.viewport.contains(x, y):
            self.viewport.move_to(x - self.actor.x, y - self.actor.y)
        self.actor.place(x - self.viewport.origin_x, y - self.viewport.origin_y, self.viewport)
