"""Declarative building blocks for scripted world rules.

A :class:`Rule` pairs an area of absolute world coordinates with an optional
guard and an ordered tuple of effects. Rules are plain data: the rule engine
decides which one fires, and the script runner applies its effects. Guards
read the *current* cells and narrative value, which is how one-shot rules
stop matching after they have changed the world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from lostdoctor.domain.models.session import GameSession


@dataclass(frozen=True)
class RuleContext:
    session: "GameSession"
    item: Optional[int] = None

    @property
    def position(self) -> tuple[int, int]:
        return self.session.actor_position()


# ---------------------------------------------------------------- areas


class Area(Protocol):
    def contains(self, x: int, y: int) -> bool: ...


@dataclass(frozen=True)
class At:
    x: int
    y: int

    def contains(self, x: int, y: int) -> bool:
        return x == self.x and y == self.y


@dataclass(frozen=True)
class AtAny:
    points: tuple[tuple[int, int], ...]

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self.points


@dataclass(frozen=True)
class Span:
    """Every cell whose x is in ``xs`` and whose y is in ``ys``."""

    xs: tuple[int, ...]
    ys: tuple[int, ...]

    def contains(self, x: int, y: int) -> bool:
        return x in self.xs and y in self.ys


@dataclass(frozen=True)
class Anywhere:
    def contains(self, x: int, y: int) -> bool:
        return True


# ---------------------------------------------------------------- guards


class Guard(Protocol):
    def holds(self, ctx: RuleContext) -> bool: ...


@dataclass(frozen=True)
class NarrativeIs:
    values: tuple[int, ...]

    def holds(self, ctx: RuleContext) -> bool:
        return ctx.session.narrative.value in self.values


@dataclass(frozen=True)
class NarrativeAtLeast:
    value: int

    def holds(self, ctx: RuleContext) -> bool:
        return ctx.session.narrative.value >= self.value


@dataclass(frozen=True)
class NarrativeBelow:
    value: int

    def holds(self, ctx: RuleContext) -> bool:
        return ctx.session.narrative.value < self.value


@dataclass(frozen=True)
class CellIs:
    row: int
    col: int
    cell: int

    def holds(self, ctx: RuleContext) -> bool:
        return ctx.session.grid.get_cell(self.row, self.col) == self.cell


@dataclass(frozen=True)
class CanAcquire:
    item: int

    def holds(self, ctx: RuleContext) -> bool:
        return ctx.session.inventory.can_add(self.item)


@dataclass(frozen=True)
class ItemIs:
    item: int

    def holds(self, ctx: RuleContext) -> bool:
        return ctx.item is not None and int(ctx.item) == int(self.item)


@dataclass(frozen=True)
class AllOf:
    guards: tuple[Guard, ...]

    def holds(self, ctx: RuleContext) -> bool:
        return all(guard.holds(ctx) for guard in self.guards)


def when(*guards: Guard) -> Optional[Guard]:
    if not guards:
        return None
    if len(guards) == 1:
        return guards[0]
    return AllOf(tuple(guards))


# ---------------------------------------------------------------- effects


@dataclass(frozen=True)
class Line:
    speaker: int
    text: str


@dataclass(frozen=True)
class Sprite:
    cell: int
    tile_x: int
    tile_y: int


@dataclass(frozen=True)
class Reposition:
    origin_x: int
    origin_y: int
    actor_x: int
    actor_y: int


@dataclass(frozen=True)
class SetCells:
    changes: tuple[tuple[int, int, int], ...]


@dataclass(frozen=True)
class AdvanceNarrative:
    milestone: int


@dataclass(frozen=True)
class Say:
    lines: tuple[Line, ...]


@dataclass(frozen=True)
class Render:
    overlays: tuple[Sprite, ...] = ()
    # Draws the actor as ``actor_sprite`` instead of the walking sprite.
    actor_sprite: Optional[int] = None


@dataclass(frozen=True)
class Pause:
    ms: Optional[int] = None


@dataclass(frozen=True)
class Bump:
    dx: int = 0
    dy: int = 0


@dataclass(frozen=True)
class AddItem:
    item: int


@dataclass(frozen=True)
class ExchangeItem:
    old: int
    new: int


@dataclass(frozen=True)
class AnimationStep:
    changes: tuple[tuple[int, int, int], ...] = ()
    overlays: tuple[Sprite, ...] = ()
    say: tuple[Line, ...] = ()
    render: bool = True
    pause: bool = True
    clear: bool = False


@dataclass(frozen=True)
class Animate:
    steps: tuple[AnimationStep, ...]
    hide_actor: bool = True


@dataclass(frozen=True)
class WithCamera:
    """Run ``effects`` with the viewport moved, then restore it."""

    origin_x: int
    origin_y: int
    effects: tuple[object, ...]


@dataclass(frozen=True)
class ClearScreen:
    pass


@dataclass(frozen=True)
class EndSession:
    pass


@dataclass(frozen=True)
class Rule:
    name: str
    area: Area
    guard: Optional[Guard] = None
    effects: tuple[object, ...] = field(default_factory=tuple)

    def matches(self, ctx: RuleContext) -> bool:
        x, y = ctx.position
        if not self.area.contains(x, y):
            return False
        return self.guard is None or self.guard.holds(ctx)


def lines(*pairs: tuple[int, str]) -> tuple[Line, ...]:
    return tuple(Line(int(speaker), text) for speaker, text in pairs)


def say(*pairs: tuple[int, str]) -> Say:
    return Say(lines(*pairs))


def cells(*changes: Sequence[int]) -> SetCells:
    return SetCells(tuple((int(row), int(col), int(cell)) for row, col, cell in changes))


__all__ = [
    "AddItem",
    "AdvanceNarrative",
    "AllOf",
    "Animate",
    "AnimationStep",
    "Anywhere",
    "At",
    "AtAny",
    "Bump",
    "CanAcquire",
    "CellIs",
    "ClearScreen",
    "EndSession",
    "ExchangeItem",
    "ItemIs",
    "Line",
    "lines",
    "NarrativeAtLeast",
    "NarrativeBelow",
    "NarrativeIs",
    "Pause",
    "Render",
    "Reposition",
    "Rule",
    "RuleContext",
    "Say",
    "SetCells",
    "Span",
    "Sprite",
    "WithCamera",
    "cells",
    "say",
    "when",
]
