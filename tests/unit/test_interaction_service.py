import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lostdoctor.application.services.event_bus import EventBus
from lostdoctor.application.services.interaction_service import (
    CHEMICAL_ON_LOCK,
    ENDING,
    GUARD_LEAVES_POST,
    POLICE_LEAVES_POST,
    SEARCH_RULES,
    TALK_RULES,
    USE_RULES,
)
from lostdoctor.bootstrap import create_game_service, new_session
from lostdoctor.config import GameSettings
from lostdoctor.domain.events import ItemAcquired, ItemExchanged, NarrativeAdvanced, SessionEnded
from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.script import Animate, Line, Say, WithCamera
from lostdoctor.domain.ports import Key
from lostdoctor.domain.services.rule_engine import RuleTable
from lostdoctor.infrastructure.inmemory.headless_ports import (
    RecordingClock,
    RecordingMessageDisplay,
    RecordingRenderer,
    ScriptedChoiceMenu,
)


def _stand_at(session, x: int, y: int) -> None:
    session.viewport.move_to(x - 4, y - 1)
    session.actor.place(x - session.viewport.origin_x, y - session.viewport.origin_y, session.viewport)


def _scripted_lines(effects) -> list[Line]:
    found: list[Line] = []
    for effect in effects:
        if isinstance(effect, WithCamera):
            found.extend(_scripted_lines(effect.effects))
        elif isinstance(effect, Animate):
            for step in effect.steps:
                found.extend(step.say)
        elif isinstance(effect, Say):
            found.extend(effect.lines)
    return found


class InteractionDispatcherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = new_session()
        self.messages = RecordingMessageDisplay()
        self.menu = ScriptedChoiceMenu()
        self.bus = EventBus()
        self.events: list[object] = []
        for event_type in (ItemAcquired, ItemExchanged, NarrativeAdvanced, SessionEnded):
            self.bus.subscribe(event_type, self.events.append)
        self.service = create_game_service(
            RecordingRenderer(),
            self.messages,
            RecordingClock(),
            self.menu,
            settings=GameSettings(),
            event_bus=self.bus,
            session=self.session,
        )
        self.dispatcher = self.service.dispatcher

    def _use(self, item_label: str) -> list[str]:
        self.menu.push("Use item", item_label)
        return self.service.handle_input(Key.ENTER).messages

    def test_branch_tables_have_unique_names(self) -> None:
        for rules in (TALK_RULES, SEARCH_RULES, USE_RULES):
            self.assertEqual(len(rules), len(RuleTable(rules)))

    def test_cut_scene_dialogue_reaches_the_message_box(self) -> None:
        for scene in ((POLICE_LEAVES_POST,), (GUARD_LEAVES_POST,), ENDING):
            expected = _scripted_lines(scene)
            self.assertTrue(expected)
            for line in expected:
                self.assertIsInstance(line, Line)

            self.messages.shown.clear()
            shown = self.service.runner.run(new_session(), scene)

            self.assertEqual([line.text for line in expected], shown)
            self.assertEqual([(int(line.speaker), line.text) for line in expected], self.messages.shown)

    def test_solvent_on_the_lock_corrodes_it_in_place(self) -> None:
        self.session.narrative.value = 60
        self.session.inventory.add(Cell.CHEMICAL)
        _stand_at(self.session, 29, 27)

        messages = self._use("Bacteria solvent")

        self.assertEqual([CHEMICAL_ON_LOCK], messages)
        self.assertEqual(
            "I brushed the solvent over the lock. The metal is starting to fizz and soften.",
            CHEMICAL_ON_LOCK,
        )
        self.assertEqual(70, self.session.narrative.value)
        self.assertEqual((29, 27), self.session.actor_position())

    def test_phone_breaks_the_corroded_lock_and_ends_the_story(self) -> None:
        self.session.narrative.value = 70
        _stand_at(self.session, 29, 27)

        self.menu.push("Use item", "Mobile phone")
        result = self.service.handle_input(Key.ENTER)

        self.assertTrue(result.game_over)
        self.assertTrue(self.session.ended)
        self.assertEqual(80, self.session.narrative.value)
        self.assertEqual(Cell.BLANK, self.session.grid.get_cell(27, 30))
        self.assertEqual("-The End-", result.messages[-1])
        self.assertIsInstance(self.events[-1], SessionEnded)
        self.assertTrue(self.service.handle_input(Key.UP).game_over)
        self.assertEqual((29, 27), self.session.actor_position())

    def test_solvent_at_the_door_is_refused_while_guarded(self) -> None:
        self.session.narrative.value = 40
        self.session.inventory.add(Cell.CHEMICAL)
        _stand_at(self.session, 29, 27)

        self.assertEqual(["Too dangerous while the guard is watching."], self._use("Bacteria solvent"))
        self.assertEqual(40, self.session.narrative.value)

    def test_cancelled_item_pick_does_nothing(self) -> None:
        before = self.session.grid.rows()
        self.menu.push("Use item")

        result = self.service.handle_input(Key.ENTER)

        self.assertEqual([], result.messages)
        self.assertEqual([], self.messages.shown)
        self.assertEqual(("Items", ("Money", "Mobile phone")), self.menu.prompts[-1])
        self.assertEqual(before, self.session.grid.rows())

    def test_cancelled_action_menu_does_nothing(self) -> None:
        result = self.service.handle_input(Key.ENTER)

        self.assertEqual([], result.messages)
        self.assertEqual(("Action", ("Talk", "Search", "Use item")), self.menu.prompts[0])

    def test_claimed_position_without_outcome_stays_silent(self) -> None:
        self.session.narrative.value = 15
        _stand_at(self.session, 1, 3)

        self.assertEqual([], self.dispatcher.talk(self.session))
        self.assertEqual([], self.messages.shown)

    def test_talk_falls_back_when_nobody_is_around(self) -> None:
        self.assertEqual(["There's no one to talk to here."], self.dispatcher.talk(self.session))

    def test_doctor_warning_advances_the_story(self) -> None:
        _stand_at(self.session, 1, 3)

        messages = self.dispatcher.talk(self.session)

        self.assertEqual(4, len(messages))
        self.assertEqual(10, self.session.narrative.value)
        self.assertEqual(["It's late. Go home and get some sleep."], self.dispatcher.talk(self.session))

    def test_police_questioning_moves_the_officer_to_the_doctor_door(self) -> None:
        self.session.narrative.value = 15
        self.session.grid.set_cell(18, 12, Cell.POLICE)
        _stand_at(self.session, 13, 18)

        messages = self.dispatcher.talk(self.session)

        self.assertEqual(6, len(messages))
        self.assertEqual(20, self.session.narrative.value)
        self.assertEqual(Cell.BLANK, self.session.grid.get_cell(18, 12))
        self.assertEqual(Cell.BLANK, self.session.grid.get_cell(18, 11))
        self.assertEqual(Cell.POLICE, self.session.grid.get_cell(2, 1))

    def test_home_cabinet_yields_the_slingshot_once(self) -> None:
        _stand_at(self.session, 18, 17)

        first = self.dispatcher.search(self.session)
        second = self.dispatcher.search(self.session)

        self.assertEqual("Got the slingshot.", first[-1])
        self.assertEqual(["I didn't find anything."], second)
        self.assertEqual(Cell.CABINET_OPEN, self.session.grid.get_cell(16, 18))
        self.assertTrue(self.session.inventory.contains(Cell.SLINGSHOT))
        self.assertEqual([ItemAcquired(item_id=Cell.SLINGSHOT, name="Slingshot")], self.events)

    def test_full_inventory_leaves_the_cabinet_shut(self) -> None:
        for item_id in range(100, 108):
            self.session.inventory.add(item_id)
        _stand_at(self.session, 19, 21)

        self.assertEqual(["I didn't find anything."], self.dispatcher.search(self.session))
        self.assertEqual(Cell.CABINET, self.session.grid.get_cell(20, 19))

    def test_money_buys_a_ticket_in_the_same_slot(self) -> None:
        _stand_at(self.session, 7, 16)

        self.assertEqual(["Got a train ticket."], self._use("Money"))
        self.assertEqual((Cell.TICKET, Cell.CELLPHONE), tuple(item.id for item in self.session.inventory.list()))
        self.assertIsInstance(self.events[0], ItemExchanged)

    def test_ticket_opens_the_gate_silently(self) -> None:
        self.session.inventory.exchange(Cell.MONEY, Cell.TICKET)
        _stand_at(self.session, 5, 18)

        self.assertEqual([], self._use("Train ticket"))
        self.assertEqual(Cell.DOOR_OPEN, self.session.grid.get_cell(18, 4))
        self.assertEqual(Cell.DOOR_CLOSED, self.session.grid.get_cell(16, 4))

    def test_slingshot_at_the_window_draws_the_police_away(self) -> None:
        self.session.narrative.value = 20
        self.session.grid.set_cell(2, 1, Cell.POLICE)
        self.session.inventory.add(Cell.SLINGSHOT)
        _stand_at(self.session, 8, 2)
        origin = (self.session.viewport.origin_x, self.session.viewport.origin_y)

        messages = self._use("Slingshot")

        self.assertEqual(4, len(messages))
        self.assertEqual(30, self.session.narrative.value)
        self.assertEqual(Cell.DRHOUSE4, self.session.grid.get_cell(2, 1))
        self.assertEqual(origin, (self.session.viewport.origin_x, self.session.viewport.origin_y))
        self.assertTrue(self.session.actor.visible)

    def test_slingshot_elsewhere_is_refused(self) -> None:
        self.session.inventory.add(Cell.SLINGSHOT)

        self.assertEqual(["I don't want to get into trouble."], self._use("Slingshot"))

    def test_repair_slip_is_exchanged_for_the_key_card(self) -> None:
        self.session.inventory.add(Cell.INVOICE)
        _stand_at(self.session, 15, 28)

        messages = self._use("Repair slip")

        self.assertEqual("Got the CC800.", messages[-1])
        self.assertEqual((Cell.MONEY, Cell.CELLPHONE, Cell.CC800), tuple(item.id for item in self.session.inventory.list()))

    def test_key_card_unlocks_the_solvent_and_posts_the_captors(self) -> None:
        self.session.narrative.value = 30
        self.session.inventory.add(Cell.CC800)
        _stand_at(self.session, 1, 21)

        self._use("CC800")

        self.assertTrue(self.session.inventory.contains(Cell.CHEMICAL))
        self.assertEqual(40, self.session.narrative.value)
        self.assertEqual(Cell.CABINET_OPEN, self.session.grid.get_cell(20, 1))
        self.assertEqual(Cell.BADMAN_RIGHT, self.session.grid.get_cell(7, 16))
        self.assertEqual(Cell.BADMAN_LEFT, self.session.grid.get_cell(7, 18))
        self.assertEqual([], self._use("CC800"))

    def test_key_card_on_the_cabinet_stays_silent_once_the_solvent_is_held(self) -> None:
        self.session.inventory.add(Cell.CC800)
        self.session.inventory.add(Cell.CHEMICAL)
        _stand_at(self.session, 1, 21)

        self.assertEqual([], self._use("CC800"))
        self.assertEqual([], self.messages.shown)
        self.assertEqual(Cell.CABINET, self.session.grid.get_cell(20, 1))

    def test_key_card_on_the_cabinet_stays_silent_with_a_full_inventory(self) -> None:
        self.session.inventory.add(Cell.CC800)
        for filler in range(100, 107):
            self.session.inventory.add(filler)
        _stand_at(self.session, 1, 21)

        self.assertEqual([], self._use("CC800"))
        self.assertFalse(self.session.inventory.contains(Cell.CHEMICAL))
        self.assertEqual(0, self.session.narrative.value)

    def test_toilet_paper_floods_the_washroom(self) -> None:
        self.session.narrative.value = 40
        self.session.inventory.add(Cell.TOILET_PAPER)
        _stand_at(self.session, 26, 22)

        self._use("Toilet paper")

        self.assertEqual(Cell.WATER, self.session.grid.get_cell(23, 25))
        self.assertEqual(50, self.session.narrative.value)

    def test_doctor_sends_the_guard_to_the_flood(self) -> None:
        self.session.narrative.value = 50
        _stand_at(self.session, 28, 28)
        origin = (self.session.viewport.origin_x, self.session.viewport.origin_y)

        messages = self.dispatcher.talk(self.session)

        self.assertEqual(3, len(messages))
        self.assertEqual(60, self.session.narrative.value)
        self.assertEqual(Cell.BLANK, self.session.grid.get_cell(27, 24))
        self.assertEqual(Cell.BLANK, self.session.grid.get_cell(25, 23))
        self.assertEqual(Cell.BADMAN_LEFT, self.session.grid.get_cell(22, 26))
        self.assertEqual(origin, (self.session.viewport.origin_x, self.session.viewport.origin_y))
        self.assertEqual(2, len(self.dispatcher.talk(self.session)))

    def test_guard_only_talks_while_at_his_post(self) -> None:
        _stand_at(self.session, 26, 27)
        self.assertEqual(3, len(self.dispatcher.talk(self.session)))

        self.session.grid.set_cell(27, 24, Cell.BLANK)
        self.assertEqual([], self.dispatcher.talk(self.session))

    def test_phone_has_no_signal_away_from_the_door(self) -> None:
        self.assertEqual(["No signal."], self._use("Mobile phone"))

    def test_bribing_the_policeman_is_refused(self) -> None:
        self.session.grid.set_cell(2, 1, Cell.POLICE)
        _stand_at(self.session, 1, 3)

        self.assertEqual(["Are you trying to bribe an officer? Put that away."], self._use("Money"))


if __name__ == "__main__":
    unittest.main()
