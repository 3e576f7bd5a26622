from __future__ import annotations

from dataclasses import dataclass

from lostdoctor.domain.models.world_grid import Viewport


@dataclass
class Actor:
    """The player's position in viewport-local tile coordinates."""

    x: int
    y: int
    visible: bool = True

    def absolute(self, viewport: Viewport) -> tuple[int, int]:
        return viewport.origin_x + self.x, viewport.origin_y + self.y

    def place(self, x: int, y: int, viewport: Viewport) -> None:
        self.x = max(0, min(viewport.width - 1, int(x)))
        self.y = max(0, min(viewport.height - 1, int(y)))
