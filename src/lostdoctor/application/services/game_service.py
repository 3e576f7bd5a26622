from __future__ import annotations

import logging
from typing import Optional, Sequence

from lostdoctor.application.dtos import ActionResult, GameView, InventoryItemView
from lostdoctor.application.services.event_bus import EventBus
from lostdoctor.application.services.interaction_service import InteractionDispatcher
from lostdoctor.application.services.script_runner import ScriptRunner
from lostdoctor.application.services.story_journal import StoryJournal
from lostdoctor.application.services.transition_table import build_transition_table
from lostdoctor.domain.events import ActorMoved, TransitionFired
from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.script import Rule, RuleContext
from lostdoctor.domain.models.session import GameSession
from lostdoctor.domain.ports import NO_SELECTION, ChoiceMenu, Key
from lostdoctor.domain.services.movement import Direction, move
from lostdoctor.domain.services.rule_engine import RuleTable


logger = logging.getLogger(__name__)

DEFAULT_TRANSITION_PAUSE_MS = 100

ACTION_MENU_TITLE = "Action"
ACTION_MENU_OPTIONS = ("Talk", "Search", "Use item")

HELP_PAGES = (
    "Controls\n\n"
    "Arrow keys (or W/A/S/D) walk around town.\n"
    "ENTER opens the action menu: Talk, Search or Use item.\n"
    "ESC (or Q) closes a menu. H shows these pages again.",
    "Getting on\n\n"
    "Stand next to people and things before you act on them.\n"
    "Talk to everyone, search cupboards and try your items in odd places.\n"
    "Doors and gates sometimes need the right item to open.",
    "The Lost Doctor\n\n"
    "Your neighbour the doctor has finished a formula that others want.\n"
    "One night he goes missing. Find him and bring him home.\n\n"
    "Press any key to return to the game.",
)

_DIRECTION_KEYS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class GameService:
    """Single-session controller: one input event in, one rendered frame out."""

    def __init__(
        self,
        session: GameSession,
        runner: ScriptRunner,
        dispatcher: InteractionDispatcher,
        menu: ChoiceMenu,
        *,
        transitions: RuleTable | None = None,
        event_bus: EventBus | None = None,
        transition_pause_ms: int = DEFAULT_TRANSITION_PAUSE_MS,
        help_pages: Sequence[str] = HELP_PAGES,
        journal: StoryJournal | None = None,
    ) -> None:
        self.session = session
        self.runner = runner
        self.dispatcher = dispatcher
        self.menu = menu
        self.transitions = build_transition_table() if transitions is None else transitions
        self.event_bus = event_bus
        self.transition_pause_ms = max(0, int(transition_pause_ms))
        self.help_pages = tuple(help_pages)
        self.journal = journal

    def handle_input(self, key: Optional[Key]) -> ActionResult:
        session = self.session
        if session.ended:
            return ActionResult(game_over=True)

        result = ActionResult()
        session.walk_frame += 1
        direction = _DIRECTION_KEYS.get(key) if key is not None else None
        if direction is not None:
            result.moved = self._walk(direction)
        elif key == Key.ENTER:
            result.messages.extend(self._open_action_menu())
        elif key == Key.HELP:
            self.show_help()

        if not session.ended:
            fired = self._evaluate_transitions()
            if fired is not None:
                result.transition = fired.name
                result.messages.extend(self.runner.run(session, fired.effects))
                if not session.ended:
                    self.runner.clock.delay(self.transition_pause_ms)
                    # Standing pose now; the next event shows MAN again.
                    session.walk_frame = 1
                    self.runner.render_frame(session, actor_sprite=Cell.MAN)
                result.game_over = session.ended
                return result

        if not session.ended:
            self.render_frame()
        result.game_over = session.ended
        return result

    def render_frame(self) -> None:
        self.runner.render_frame(self.session)

    def show_help(self) -> None:
        for page in self.help_pages:
            self.runner.messages.show_page(page)

    def get_game_view(self) -> GameView:
        session = self.session
        x, y = session.actor_position()
        return GameView(
            origin_x=session.viewport.origin_x,
            origin_y=session.viewport.origin_y,
            actor_x=x,
            actor_y=y,
            narrative=session.narrative.value,
            narrative_label=session.narrative.label(),
            items=[InventoryItemView(item_id=item.id, name=item.name) for item in session.inventory],
            game_over=session.ended,
            journal=self.journal.entries() if self.journal is not None else [],
        )

    def _walk(self, direction: Direction) -> bool:
        session = self.session
        from_x, from_y = session.actor_position()
        outcome = move(session, direction)
        if not outcome.moved:
            return False
        to_x, to_y = session.actor_position()
        logger.debug("Actor moved %s to (%s, %s)", direction.value, to_x, to_y)
        self._publish(ActorMoved(from_x=from_x, from_y=from_y, to_x=to_x, to_y=to_y, scrolled=outcome.scrolled))
        return True

    def _open_action_menu(self) -> list[str]:
        choice = self.menu.choose(ACTION_MENU_TITLE, list(ACTION_MENU_OPTIONS))
        if choice == NO_SELECTION:
            return []
        if choice == 0:
            return self.dispatcher.talk(self.session)
        if choice == 1:
            return self.dispatcher.search(self.session)
        if choice == 2:
            return self.dispatcher.use(self.session)
        logger.warning("Ignoring unknown action menu index %s", choice)
        return []

    def _evaluate_transitions(self) -> Rule | None:
        session = self.session
        rule = self.transitions.first_match(RuleContext(session))
        if rule is None:
            return None
        x, y = session.actor_position()
        logger.debug("Transition %s fired at (%s, %s)", rule.name, x, y)
        self._publish(TransitionFired(rule_name=rule.name, x=x, y=y, narrative=session.narrative.value))
        return rule

    def _publish(self, event: object) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)
