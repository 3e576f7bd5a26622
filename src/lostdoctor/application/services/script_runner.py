from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from lostdoctor.application.services.event_bus import EventBus
from lostdoctor.domain.events import ItemAcquired, ItemExchanged, NarrativeAdvanced, SessionEnded
from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.script import (
    AddItem,
    AdvanceNarrative,
    Animate,
    AnimationStep,
    Bump,
    ClearScreen,
    EndSession,
    ExchangeItem,
    Line,
    Pause,
    Render,
    Reposition,
    Say,
    SetCells,
    Sprite,
    WithCamera,
)
from lostdoctor.domain.models.session import GameSession
from lostdoctor.domain.ports import Clock, MessageDisplay, Renderer


logger = logging.getLogger(__name__)

DEFAULT_ANIMATION_DELAY_MS = 200


def walking_sprite(session: GameSession) -> int:
    return Cell.MAN if session.walk_frame % 2 == 0 else Cell.MAN2


class ScriptRunner:
    """Applies rule effects to a session through the output ports.

    Effects run strictly in order and block on the clock and the message
    display, so a cut-scene finishes before control returns to the caller.
    Every line shown is also returned so hosts without a display can log it.
    """

    def __init__(
        self,
        renderer: Renderer,
        messages: MessageDisplay,
        clock: Clock,
        event_bus: EventBus | None = None,
        *,
        animation_delay_ms: int = DEFAULT_ANIMATION_DELAY_MS,
    ) -> None:
        self.renderer = renderer
        self.messages = messages
        self.clock = clock
        self.event_bus = event_bus
        self.animation_delay_ms = max(0, int(animation_delay_ms))

    def run(self, session: GameSession, effects: Iterable[object]) -> list[str]:
        shown: list[str] = []
        for effect in effects:
            self._apply(session, effect, shown)
        return shown

    def render_frame(
        self,
        session: GameSession,
        overlays: Sequence[Sprite] = (),
        actor_sprite: Optional[int] = None,
    ) -> None:
        for tile_x, tile_y, cell in session.viewport.visible_cells(session.grid):
            self.renderer.draw(cell, tile_x, tile_y)
        actor = session.actor
        if actor.visible:
            sprite = walking_sprite(session) if actor_sprite is None else actor_sprite
            self.renderer.draw(sprite, actor.x, actor.y)
        self._draw_overlays(overlays)
        self.renderer.refresh()

    def _draw_overlays(self, overlays: Sequence[Sprite]) -> None:
        for overlay in overlays:
            self.renderer.draw(overlay.cell, overlay.tile_x, overlay.tile_y)

    def _say(self, lines: Sequence[Line], shown: list[str]) -> None:
        for line in lines:
            self.messages.show(line.speaker, line.text)
            shown.append(line.text)

    def _apply(self, session: GameSession, effect: object, shown: list[str]) -> None:
        if isinstance(effect, Say):
            self._say(effect.lines, shown)
        elif isinstance(effect, Reposition):
            session.viewport.move_to(effect.origin_x, effect.origin_y)
            session.actor.place(effect.actor_x, effect.actor_y, session.viewport)
        elif isinstance(effect, SetCells):
            for row, col, cell in effect.changes:
                session.grid.set_cell(row, col, cell)
        elif isinstance(effect, Render):
            self.render_frame(session, effect.overlays, effect.actor_sprite)
        elif isinstance(effect, Pause):
            self.clock.delay(self.animation_delay_ms if effect.ms is None else effect.ms)
        elif isinstance(effect, Bump):
            x, y = session.actor_position()
            session.place_actor_absolute(x + effect.dx, y + effect.dy)
        elif isinstance(effect, AdvanceNarrative):
            self._advance(session, effect.milestone)
        elif isinstance(effect, AddItem):
            if session.inventory.add(effect.item):
                name = session.inventory.list()[-1].name
                logger.info("Picked up %s", name)
                self._publish(ItemAcquired(item_id=int(effect.item), name=name))
        elif isinstance(effect, ExchangeItem):
            if session.inventory.exchange(effect.old, effect.new):
                name = next(item.name for item in session.inventory if item.id == int(effect.new))
                logger.info("Exchanged item %s for %s", int(effect.old), name)
                self._publish(ItemExchanged(old_id=int(effect.old), new_id=int(effect.new), name=name))
        elif isinstance(effect, Animate):
            self._animate(session, effect, shown)
        elif isinstance(effect, WithCamera):
            self._with_camera(session, effect, shown)
        elif isinstance(effect, ClearScreen):
            self.renderer.clear()
        elif isinstance(effect, EndSession):
            session.ended = True
            logger.info("Session ended at narrative %s", session.narrative.value)
            self._publish(SessionEnded(narrative=session.narrative.value))
        else:
            raise TypeError(f"Unknown effect: {effect!r}")

    def _advance(self, session: GameSession, milestone: int) -> None:
        before = session.narrative.value
        if session.narrative.advance(milestone):
            logger.info("Narrative advanced from %s to %s", before, session.narrative.value)
            self._publish(NarrativeAdvanced(from_value=before, to_value=session.narrative.value))

    def _animate(self, session: GameSession, animation: Animate, shown: list[str]) -> None:
        actor = session.actor
        was_visible = actor.visible
        if animation.hide_actor:
            actor.visible = False
        try:
            for step in animation.steps:
                self._step(session, step, shown)
        finally:
            actor.visible = was_visible

    def _step(self, session: GameSession, step: AnimationStep, shown: list[str]) -> None:
        if step.clear:
            self.renderer.clear()
        for row, col, cell in step.changes:
            session.grid.set_cell(row, col, cell)
        if step.render:
            self.render_frame(session, step.overlays)
        elif step.overlays:
            self._draw_overlays(step.overlays)
            self.renderer.refresh()
        self._say(step.say, shown)
        if step.pause:
            self.clock.delay(self.animation_delay_ms)

    def _with_camera(self, session: GameSession, effect: WithCamera, shown: list[str]) -> None:
        viewport, actor = session.viewport, session.actor
        saved_origin = (viewport.origin_x, viewport.origin_y)
        saved_local = (actor.x, actor.y)
        saved_visible = actor.visible
        absolute = session.actor_position()

        viewport.move_to(effect.origin_x, effect.origin_y)
        if viewport.contains(*absolute):
            actor.x = absolute[0] - viewport.origin_x
            actor.y = absolute[1] - viewport.origin_y
        else:
            actor.visible = False
        try:
            for inner in effect.effects:
                self._apply(session, inner, shown)
        finally:
            viewport.move_to(*saved_origin)
            actor.x, actor.y = saved_local
            actor.visible = saved_visible

    def _publish(self, event: object) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)
