"""Talk / Search / Use item: branch tables and the dispatcher that runs them.

Each table is evaluated first-match-wins against the actor's absolute
position. A branch with no effects still claims its position: nothing is
shown and the table's fallback line is skipped.
"""

from __future__ import annotations

import logging
from typing import Optional

from lostdoctor.application.services.script_runner import ScriptRunner
from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.narrative import Milestone
from lostdoctor.domain.models.script import (
    AddItem,
    AdvanceNarrative,
    Animate,
    AnimationStep,
    Anywhere,
    At,
    AtAny,
    CanAcquire,
    CellIs,
    ClearScreen,
    EndSession,
    ExchangeItem,
    ItemIs,
    NarrativeAtLeast,
    NarrativeBelow,
    NarrativeIs,
    Pause,
    Render,
    Rule,
    RuleContext,
    Span,
    Sprite,
    WithCamera,
    cells,
    lines,
    say,
    when,
)
from lostdoctor.domain.models.session import GameSession
from lostdoctor.domain.ports import NO_SELECTION, ChoiceMenu
from lostdoctor.domain.services.rule_engine import RuleTable


logger = logging.getLogger(__name__)

MAN = Cell.MAN
DR = Cell.DR
POLICE = Cell.POLICE
BADMAN = Cell.BADMAN_RIGHT

TALK_FALLBACK = say((MAN, "There's no one to talk to here."))
SEARCH_FALLBACK = say((MAN, "I didn't find anything."))
USE_FALLBACK = say((MAN, "That does nothing here."))

CHEMICAL_ON_LOCK = "I brushed the solvent over the lock. The metal is starting to fizz and soften."

DOCTOR_DOOR = At(1, 3)
HOME_HALLWAY = At(13, 18)
REPAIR_COUNTER = At(15, 28)
LAB_ASSISTANT = AtAny(((7, 21), (8, 22)))
CAPTIVE_DOCTOR = AtAny(((28, 28), (29, 27)))
CELL_DOOR = At(29, 27)
RICH_HOUSE_FRONT = Span((5, 6, 7), (3,))
RICH_HOUSE_WINDOW = At(8, 2)
TICKET_MACHINE = At(7, 16)
LAB_CABINET = At(1, 21)
WASHROOM_CABINET = At(26, 22)


# The policeman at the doctor's door runs off towards the rich house alarm.
POLICE_LEAVES_POST = WithCamera(
    0,
    0,
    (
        Animate(
            steps=(
                AnimationStep(say=lines((POLICE, "The alarm at the rich house is ringing! Stay where you are!")), pause=False),
                AnimationStep(changes=((2, 1, Cell.DRHOUSE4),), overlays=(Sprite(POLICE, 1, 3),)),
                AnimationStep(overlays=(Sprite(POLICE, 2, 3),)),
                AnimationStep(overlays=(Sprite(POLICE, 3, 3),)),
                AnimationStep(overlays=(Sprite(POLICE, 4, 3),)),
                AnimationStep(overlays=(Sprite(POLICE, 5, 3),)),
                AnimationStep(overlays=(Sprite(POLICE, 5, 2),)),
                AnimationStep(),
            )
        ),
    ),
)

# The guard walks off to deal with the flooded washroom.
GUARD_LEAVES_POST = WithCamera(
    21,
    25,
    (
        Animate(
            steps=(
                AnimationStep(
                    changes=((27, 24, Cell.BLANK), (27, 23, Cell.BADMAN_LEFT)),
                    say=lines((BADMAN, "Why is water leaking out of the washroom? Don't you move.")),
                ),
                AnimationStep(changes=((27, 23, Cell.BLANK), (26, 23, Cell.BADMAN_LEFT))),
                AnimationStep(changes=((26, 23, Cell.BLANK), (25, 23, Cell.BADMAN_LEFT))),
                AnimationStep(changes=((25, 23, Cell.BLANK), (22, 26, Cell.BADMAN_LEFT))),
            ),
            hide_actor=False,
        ),
    ),
)


def _chase_frame(pursuer_x: int, runner: int) -> AnimationStep:
    return AnimationStep(
        clear=True,
        render=False,
        overlays=(
            Sprite(BADMAN, pursuer_x, 1),
            Sprite(runner, 6, 1),
            Sprite(DR, 7, 1),
        ),
    )


ENDING = (
    ClearScreen(),
    Animate(
        steps=(
            AnimationStep(
                clear=True,
                render=False,
                overlays=(Sprite(MAN, 6, 1), Sprite(DR, 7, 1)),
                say=lines((MAN, "The phone's flashlight lit the way as we slipped out through the melted door.")),
            ),
            _chase_frame(1, MAN),
            _chase_frame(2, Cell.MAN2),
            _chase_frame(3, MAN),
            AnimationStep(
                clear=True,
                render=False,
                overlays=(Sprite(BADMAN, 4, 1), Sprite(Cell.MAN2, 6, 1), Sprite(DR, 7, 1)),
                say=lines((BADMAN, "Hey! Come back here!")),
            ),
            AnimationStep(
                clear=True,
                render=False,
                overlays=(Sprite(DR, 4, 1), Sprite(MAN, 5, 1)),
                say=lines(
                    (DR, "Thank you, my friend. The formula stays safe with me."),
                    (MAN, "Next time, please just lock your door."),
                ),
            ),
            AnimationStep(
                clear=True,
                render=False,
                overlays=(Sprite(Cell.SMILE, 4, 1),),
                say=lines((Cell.SMILE, "-The End-")),
            ),
        )
    ),
    EndSession(),
)


TALK_RULES = (
    Rule(
        "doctor_warns",
        DOCTOR_DOOR,
        when(NarrativeIs((Milestone.PROLOGUE,))),
        (
            say(
                (MAN, "Evening, doctor. Still working this late?"),
                (DR, "I finished the formula today. Some people would do anything to get their hands on it."),
                (DR, "If anything happens to me, don't try to be a hero."),
                (MAN, "You worry too much. Good night, doctor."),
            ),
            AdvanceNarrative(Milestone.WARNED),
        ),
    ),
    Rule(
        "doctor_says_good_night",
        DOCTOR_DOOR,
        when(NarrativeIs((Milestone.WARNED,))),
        (say((DR, "It's late. Go home and get some sleep.")),),
    ),
    Rule(
        "policeman_at_door",
        DOCTOR_DOOR,
        when(CellIs(2, 1, POLICE)),
        (
            say(
                (POLICE, "This is a crime scene. Nobody goes in."),
                (MAN, "But the doctor is my friend!"),
                (POLICE, "Then you'll want us to do our job. Move along."),
            ),
        ),
    ),
    Rule("doctor_door_silent", DOCTOR_DOOR),
    Rule(
        "questioned_by_police",
        HOME_HALLWAY,
        when(NarrativeIs((Milestone.DOCTOR_MISSING,))),
        (
            say(
                (POLICE, "Police. Your neighbour, the doctor, disappeared last night."),
                (MAN, "Disappeared? I spoke to him only yesterday evening."),
                (POLICE, "Then you were the last to see him. Don't leave town."),
            ),
            AdvanceNarrative(Milestone.QUESTIONED),
            cells((18, 12, Cell.BLANK), (18, 11, POLICE)),
            Render(),
            Pause(),
            cells((18, 11, Cell.BLANK), (2, 1, POLICE)),
            Render(),
            say(
                (MAN, "He warned me that something like this could happen."),
                (MAN, "The police won't let anyone into his house."),
                (MAN, "I need a way to get them away from that door."),
            ),
        ),
    ),
    Rule(
        "hallway_empty",
        HOME_HALLWAY,
        effects=(TALK_FALLBACK,),
    ),
    Rule(
        "repair_clerk",
        REPAIR_COUNTER,
        effects=(
            say(
                (Cell.GIRL, "Welcome to the repair counter. Do you have a slip?"),
                (MAN, "Let me check my pockets."),
            ),
        ),
    ),
    Rule(
        "assistant_gives_clue",
        LAB_ASSISTANT,
        when(NarrativeAtLeast(Milestone.QUESTIONED)),
        (
            say(
                (Cell.ASSISTANT, "The doctor is missing? Then the solvent must stay locked up."),
                (Cell.ASSISTANT, "Only the CC800 key card opens that cabinet, and he sent it off for repair."),
                (Cell.ASSISTANT, "The repair counter is in the tower, past the east station."),
            ),
        ),
    ),
    Rule(
        "assistant_greets",
        LAB_ASSISTANT,
        effects=(say((Cell.ASSISTANT, "Hello. The doctor isn't in the lab today.")),),
    ),
    Rule(
        "doctor_refuses_formula",
        CAPTIVE_DOCTOR,
        when(NarrativeIs((Milestone.SOLVENT_FOUND,))),
        (
            say(
                (DR, "You came for me? They want the formula, but I'll never write it down."),
                (MAN, "They're holding both of us now. We have to get out."),
                (DR, "Then we need the guard away from the door. Find a way to distract him."),
            ),
        ),
    ),
    Rule(
        "doctor_plans_escape",
        CAPTIVE_DOCTOR,
        when(NarrativeIs((Milestone.TOILET_BLOCKED,))),
        (
            say(
                (MAN, "The washroom is flooding. Someone will have to go and look."),
                (DR, "Call out to the guard. Quickly!"),
            ),
            GUARD_LEAVES_POST,
            AdvanceNarrative(Milestone.GUARD_DISTRACTED),
        ),
    ),
    Rule(
        "doctor_urges",
        CAPTIVE_DOCTOR,
        when(NarrativeIs((Milestone.GUARD_DISTRACTED, Milestone.DOOR_CORRODED))),
        (
            say(
                (DR, "It worked! The guard is gone, let's get out of here."),
                (DR, "Hurry, before he comes back."),
            ),
        ),
    ),
    Rule(
        "doctor_silent",
        CAPTIVE_DOCTOR,
        effects=(say((DR, "..."), (MAN, "...")),),
    ),
    Rule(
        "guard_threatens",
        At(26, 27),
        when(CellIs(27, 24, BADMAN)),
        (
            say(
                (BADMAN, "Stay away from the door."),
                (MAN, "What do you want from him?"),
                (BADMAN, "His formula. Tell him to write it down, and you can both go home."),
            ),
        ),
    ),
    Rule("guard_post_silent", At(26, 27)),
)


SEARCH_RULES = (
    Rule(
        "rich_house_front",
        AtAny(((5, 3), (6, 3), (7, 3), (8, 2))),
        effects=(say((MAN, "A rich man's house. The windows are wired to an alarm.")),),
    ),
    Rule(
        "doctor_house_front",
        Span((1, 2, 3), (3,)),
        effects=(say((MAN, "The doctor's house. The lights are off.")),),
    ),
    Rule(
        "home_cabinet",
        At(18, 17),
        when(CanAcquire(Cell.SLINGSHOT)),
        (
            AddItem(Cell.SLINGSHOT),
            cells((16, 18, Cell.CABINET_OPEN)),
            Render(),
            say(
                (MAN, "My old slingshot from when I was a kid. Still works."),
                (Cell.SLINGSHOT, "Got the slingshot."),
            ),
        ),
    ),
    Rule(
        "ticket_machine",
        TICKET_MACHINE,
        effects=(say((Cell.TICKET_MACHINE, "Ticket machine. Insert money for a ticket to the east station.")),),
    ),
    Rule(
        "ticket_gate",
        AtAny(((5, 16), (5, 18))),
        effects=(say((MAN, "The gate is shut. I need a ticket to get through.")),),
    ),
    Rule(
        "doctor_cabinet",
        At(19, 21),
        when(CanAcquire(Cell.INVOICE)),
        (
            AddItem(Cell.INVOICE),
            cells((20, 19, Cell.CABINET_OPEN)),
            Render(),
            say(
                (MAN, "A repair slip from the tower's repair counter. Something of his is being fixed there."),
                (Cell.INVOICE, "Got the repair slip."),
            ),
        ),
    ),
    Rule(
        "lab_cabinet",
        LAB_CABINET,
        effects=(say((MAN, "The cabinet is locked. There's a card reader on the side.")),),
    ),
    Rule(
        "washroom_cabinet",
        WASHROOM_CABINET,
        when(CanAcquire(Cell.TOILET_PAPER)),
        (
            AddItem(Cell.TOILET_PAPER),
            cells((21, 26, Cell.CABINET_OPEN)),
            Render(),
            say((Cell.TOILET_PAPER, "Got a roll of toilet paper.")),
        ),
    ),
    Rule(
        "cell_door",
        CELL_DOOR,
        effects=(say((MAN, "A heavy metal door with a solid lock. It won't budge.")),),
    ),
)


USE_RULES = (
    Rule(
        "slingshot_window",
        RICH_HOUSE_WINDOW,
        when(ItemIs(Cell.SLINGSHOT), NarrativeIs((Milestone.QUESTIONED,))),
        (
            say(
                (MAN, "Sorry about the window."),
                (MAN, "Crash!"),
                (MAN, "That should get the alarm going."),
            ),
            POLICE_LEAVES_POST,
            AdvanceNarrative(Milestone.POLICE_DISTRACTED),
        ),
    ),
    Rule(
        "slingshot_too_visible",
        RICH_HOUSE_FRONT,
        when(ItemIs(Cell.SLINGSHOT), NarrativeIs((Milestone.QUESTIONED,))),
        (say((MAN, "Too conspicuous. Someone would see me from the street.")),),
    ),
    Rule(
        "slingshot_no_trouble",
        Anywhere(),
        when(ItemIs(Cell.SLINGSHOT)),
        (say((MAN, "I don't want to get into trouble.")),),
    ),
    Rule(
        "buy_ticket",
        TICKET_MACHINE,
        when(ItemIs(Cell.MONEY)),
        (
            ExchangeItem(Cell.MONEY, Cell.TICKET),
            say((Cell.TICKET, "Got a train ticket.")),
        ),
    ),
    Rule(
        "open_upper_gate",
        Span((3, 5), (16,)),
        when(ItemIs(Cell.TICKET)),
        (cells((16, 4, Cell.DOOR_OPEN)),),
    ),
    Rule(
        "open_lower_gate",
        Span((3, 5), (18,)),
        when(ItemIs(Cell.TICKET)),
        (cells((18, 4, Cell.DOOR_OPEN)),),
    ),
    Rule(
        "collect_repair",
        REPAIR_COUNTER,
        when(ItemIs(Cell.INVOICE)),
        (
            ExchangeItem(Cell.INVOICE, Cell.CC800),
            say(
                (Cell.GIRL, "Ah, the doctor's CC800. It's been repaired, here you go."),
                (MAN, "Thanks."),
                (Cell.CC800, "Got the CC800."),
            ),
        ),
    ),
    Rule(
        "unlock_lab_cabinet",
        LAB_CABINET,
        when(ItemIs(Cell.CC800), CanAcquire(Cell.CHEMICAL)),
        (
            AddItem(Cell.CHEMICAL),
            cells((20, 1, Cell.CABINET_OPEN)),
            Render(),
            say(
                (MAN, "The card reader beeps and the cabinet swings open."),
                (Cell.CHEMICAL, "Got the bacteria solvent. It eats through metal."),
            ),
            AdvanceNarrative(Milestone.SOLVENT_FOUND),
            cells((7, 16, Cell.BADMAN_RIGHT), (7, 18, Cell.BADMAN_LEFT)),
        ),
    ),
    Rule("lab_cabinet_card_silent", LAB_CABINET, when(ItemIs(Cell.CC800))),
    Rule(
        "block_toilet",
        AtAny(((26, 22), (25, 23))),
        when(ItemIs(Cell.TOILET_PAPER)),
        (
            say((MAN, "I stuffed the whole roll down and flushed. Water is pouring out.")),
            cells((23, 25, Cell.WATER)),
            AdvanceNarrative(Milestone.TOILET_BLOCKED),
        ),
    ),
    Rule(
        "corrode_lock",
        CELL_DOOR,
        when(ItemIs(Cell.CHEMICAL), NarrativeIs((Milestone.GUARD_DISTRACTED,))),
        (
            say((MAN, CHEMICAL_ON_LOCK)),
            AdvanceNarrative(Milestone.DOOR_CORRODED),
        ),
    ),
    Rule(
        "break_lock",
        CELL_DOOR,
        when(ItemIs(Cell.CELLPHONE), NarrativeIs((Milestone.DOOR_CORRODED,))),
        (
            say((MAN, "I smashed the softened lock with the phone. The door swings open.")),
            cells((27, 30, Cell.BLANK)),
            Render(),
            say(
                (DR, "You did it!"),
                (MAN, "Come on, doctor. We're leaving."),
            ),
            AdvanceNarrative(Milestone.ESCAPED),
            *ENDING,
        ),
    ),
    Rule(
        "cell_door_guarded",
        CELL_DOOR,
        when(NarrativeBelow(Milestone.GUARD_DISTRACTED)),
        (say((MAN, "Too dangerous while the guard is watching.")),),
    ),
    Rule("cell_door_silent", CELL_DOOR),
    Rule(
        "phone_no_signal",
        Anywhere(),
        when(ItemIs(Cell.CELLPHONE)),
        (say((Cell.CELLPHONE, "No signal.")),),
    ),
    Rule(
        "bribe_policeman",
        DOCTOR_DOOR,
        when(ItemIs(Cell.MONEY), CellIs(2, 1, POLICE)),
        (say((POLICE, "Are you trying to bribe an officer? Put that away.")),),
    ),
)


class InteractionDispatcher:
    """Runs the Talk, Search and Use item actions for one session."""

    def __init__(
        self,
        runner: ScriptRunner,
        menu: ChoiceMenu,
        talk_rules: RuleTable | None = None,
        search_rules: RuleTable | None = None,
        use_rules: RuleTable | None = None,
    ) -> None:
        self.runner = runner
        self.menu = menu
        self.talk_rules = RuleTable(TALK_RULES) if talk_rules is None else talk_rules
        self.search_rules = RuleTable(SEARCH_RULES) if search_rules is None else search_rules
        self.use_rules = RuleTable(USE_RULES) if use_rules is None else use_rules

    def talk(self, session: GameSession) -> list[str]:
        return self._dispatch("talk", self.talk_rules, RuleContext(session), TALK_FALLBACK)

    def search(self, session: GameSession) -> list[str]:
        return self._dispatch("search", self.search_rules, RuleContext(session), SEARCH_FALLBACK)

    def use(self, session: GameSession) -> list[str]:
        item = self.pick_item(session)
        if item is None:
            return []
        return self._dispatch("use", self.use_rules, RuleContext(session, item=item), USE_FALLBACK)

    def pick_item(self, session: GameSession) -> Optional[int]:
        items = session.inventory.list()
        choice = self.menu.choose(
            "Items",
            [item.name for item in items],
            icons=[item.id for item in items],
        )
        if choice == NO_SELECTION or not 0 <= choice < len(items):
            return None
        return items[choice].id

    def _dispatch(self, action: str, table: RuleTable, ctx: RuleContext, fallback) -> list[str]:
        rule = table.first_match(ctx)
        if rule is None:
            logger.debug("%s at %s matched nothing", action, ctx.position)
            return self.runner.run(ctx.session, (fallback,))
        logger.debug("%s at %s matched %s", action, ctx.position, rule.name)
        return self.runner.run(ctx.session, rule.effects)
