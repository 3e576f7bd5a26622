"""Location-triggered rules checked after every handled input event.

Coordinates are absolute world ``(x, y)``; cell changes are ``(row, col,
cell)``. Rules are listed in precedence order, so a guarded variant must come
before the unguarded rule that shares its coordinate.
"""

from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.narrative import Milestone
from lostdoctor.domain.models.script import (
    AdvanceNarrative,
    Animate,
    AnimationStep,
    At,
    Bump,
    CellIs,
    ClearScreen,
    NarrativeIs,
    Render,
    Reposition,
    Rule,
    Span,
    WithCamera,
    cells,
    say,
    when,
)
from lostdoctor.domain.services.rule_engine import RuleTable


MAN = Cell.MAN
BLANK = Cell.BLANK


def _train_cells(*column: int) -> tuple[tuple[int, int, int], ...]:
    """Cell changes for the train column, starting at row 15."""

    return tuple((15 + offset, 0, int(cell)) for offset, cell in enumerate(column))


# The train pulls out of the west platform, one car at a time.
TRAIN_DEPARTURE = Animate(
    steps=(
        AnimationStep(),
        AnimationStep(changes=_train_cells(Cell.RAPIDCAR1, Cell.RAPIDCAR2, Cell.RAPIDCAR3, Cell.TRACK)),
        AnimationStep(changes=_train_cells(Cell.RAPIDCAR2, Cell.RAPIDCAR3, Cell.TRACK)),
        AnimationStep(changes=_train_cells(Cell.RAPIDCAR3, Cell.TRACK)),
        AnimationStep(changes=_train_cells(Cell.TRACK)),
    )
)

# And rolls back in when the actor returns from the east station.
TRAIN_RETURN = Animate(
    steps=(
        AnimationStep(changes=_train_cells(Cell.TRACK, Cell.TRACK, Cell.TRACK, Cell.TRACK)),
        AnimationStep(changes=_train_cells(Cell.RAPIDCAR3)),
        AnimationStep(changes=_train_cells(Cell.RAPIDCAR2, Cell.RAPIDCAR3)),
        AnimationStep(changes=_train_cells(Cell.RAPIDCAR1, Cell.RAPIDCAR2, Cell.RAPIDCAR3)),
        AnimationStep(changes=_train_cells(Cell.TRACK, Cell.RAPIDCAR1, Cell.RAPIDCAR2, Cell.RAPIDCAR3)),
    ),
    hide_actor=False,
)


TRANSITION_RULES = (
    Rule(
        "enter_west_station",
        At(9, 6),
        effects=(Reposition(0, 15, 8, 1),),
    ),
    Rule(
        "leave_west_station",
        At(9, 16),
        effects=(Reposition(5, 5, 4, 2),),
    ),
    Rule(
        "enter_lab",
        At(17, 6),
        effects=(Reposition(0, 25, 5, 2),),
    ),
    Rule(
        "leave_lab_ambushed",
        At(5, 28),
        when(NarrativeIs((Milestone.SOLVENT_FOUND,))),
        (
            Reposition(13, 5, 4, 2),
            Render(),
            say(
                (MAN, "Who are you two? Get out of my way."),
                (Cell.BADMAN_RIGHT, "You're the doctor's friend. You're coming with us."),
                (MAN, "Let go of me! Help!"),
                (Cell.BADMAN_RIGHT, "Nobody is listening. Walk."),
            ),
            Reposition(21, 25, 5, 2),
            Render(),
            say(
                (Cell.BADMAN_RIGHT, "Your friend refuses to write down his formula. Persuade him, or neither of you leaves."),
                (MAN, "So this is where they have been keeping the doctor."),
            ),
        ),
    ),
    Rule(
        "leave_lab",
        At(5, 28),
        effects=(Reposition(13, 5, 4, 2),),
    ),
    Rule(
        "enter_home",
        At(12, 2),
        effects=(Reposition(11, 16, 1, 2),),
    ),
    Rule(
        "leave_home",
        At(11, 18),
        effects=(Reposition(4, 0, 7, 2),),
    ),
    Rule(
        "enter_doctor_house",
        At(1, 2),
        effects=(Reposition(11, 21, 2, 1),),
    ),
    Rule(
        "enter_tower",
        At(26, 8),
        effects=(Reposition(11, 25, 8, 2),),
    ),
    Rule(
        "leave_tower",
        At(20, 27),
        effects=(Reposition(20, 7, 6, 2),),
    ),
    Rule(
        "ride_train_west",
        At(22, 2),
        effects=(Reposition(0, 15, 1, 2), TRAIN_RETURN),
    ),
    Rule(
        "doctor_back_door",
        At(20, 23),
        when(CellIs(20, 19, Cell.CABINET_OPEN)),
        (
            Reposition(0, 0, 4, 2),
            cells((2, 1, Cell.POLICE)),
        ),
    ),
    Rule(
        "doctor_back_door_unsearched",
        At(20, 23),
        effects=(
            Bump(dx=-1),
            say((MAN, "I haven't found what I came here for yet.")),
        ),
    ),
    Rule(
        "doctor_front_door",
        At(12, 23),
        effects=(
            Bump(dy=-1),
            say((MAN, "The police are standing right outside the front door. Better find another way out.")),
        ),
    ),
    Rule(
        "board_train_east",
        Span((0,), (16, 17, 18)),
        effects=(
            WithCamera(0, 15, (TRAIN_DEPARTURE,)),
            Reposition(20, 1, 2, 2),
            Render(),
            say((MAN, "The train pulls in. I've arrived at the east station.")),
        ),
    ),
    Rule(
        "pass_upper_gate",
        At(4, 16),
        effects=(cells((16, 4, Cell.DOOR_CLOSED)),),
    ),
    Rule(
        "pass_lower_gate",
        At(4, 18),
        effects=(cells((18, 4, Cell.DOOR_CLOSED)),),
    ),
    Rule(
        "leave_flooded_washroom",
        At(27, 23),
        when(NarrativeIs((Milestone.TOILET_BLOCKED,))),
        (cells((23, 27, Cell.DOOR_CLOSED)),),
    ),
    Rule(
        "sleep_through_the_night",
        At(19, 17),
        when(NarrativeIs((Milestone.WARNED,))),
        (
            Render(actor_sprite=Cell.SLEEP),
            say((Cell.SLEEP, "ZZZ...")),
            ClearScreen(),
            say((BLANK, "The next morning...")),
            cells((18, 12, Cell.POLICE)),
            Reposition(11, 16, 7, 1),
            Render(),
            say((MAN, "What is all that noise outside? Someone is at the door.")),
            AdvanceNarrative(Milestone.DOCTOR_MISSING),
        ),
    ),
    Rule(
        "bed_not_sleepy",
        At(19, 17),
        effects=(
            Render(actor_sprite=Cell.SLEEP),
            say((Cell.SLEEP, "I'm not sleepy.")),
            Bump(dx=-1),
        ),
    ),
)


def build_transition_table() -> RuleTable:
    return RuleTable(TRANSITION_RULES)


__all__ = ["TRAIN_DEPARTURE", "TRAIN_RETURN", "TRANSITION_RULES", "build_transition_table"]
