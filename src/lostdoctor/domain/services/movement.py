from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from lostdoctor.domain.models.cell import is_walkable
from lostdoctor.domain.models.session import GameSession


logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class MoveOutcome:
    moved: bool
    scrolled: bool = False
    blocked_by: int | None = None


def _at_edge(session: GameSession, direction: Direction) -> bool:
    actor, viewport = session.actor, session.viewport
    if direction == Direction.LEFT:
        return actor.x <= 0
    if direction == Direction.RIGHT:
        return actor.x >= viewport.width - 1
    if direction == Direction.UP:
        return actor.y <= 0
    return actor.y >= viewport.height - 1


def move(session: GameSession, direction: Direction) -> MoveOutcome:
    """Walk one tile, scrolling the camera when the actor reaches the edge.

    A blocked step leaves actor and viewport untouched. When the camera can
    scroll, the actor stays one tile inside the edge so the world slides
    under it; at the world border the actor steps onto the edge tile.
    """

    if _at_edge(session, direction):
        return MoveOutcome(moved=False)

    actor, viewport = session.actor, session.viewport
    dx, dy = direction.delta
    actor.x += dx
    actor.y += dy

    target = session.cell_under_actor()
    if not is_walkable(target):
        actor.x -= dx
        actor.y -= dy
        logger.debug("Move %s blocked by cell %s", direction.value, target)
        return MoveOutcome(moved=False, blocked_by=target)

    scrolled = False
    if _at_edge(session, direction):
        scrolled = viewport.scroll(dy, dx)
        if scrolled:
            actor.x -= dx
            actor.y -= dy
    return MoveOutcome(moved=True, scrolled=scrolled)
