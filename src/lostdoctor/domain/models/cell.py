from __future__ import annotations

from enum import IntEnum


class Cell(IntEnum):
    """Terrain, furniture and actor sprite ids.

    The values double as sprite-catalog indices and must never be renumbered.
    """

    BLANK = 0
    TREE = 1
    BRICK = 2
    GRAY = 3
    MAN = 4
    MAN2 = 5
    GLOBALVIEW1 = 6
    GLOBALVIEW2 = 7
    GLOBALVIEW3 = 8
    GLOBALVIEW4 = 9
    GLOBALVIEW5 = 10
    GLOBALVIEW6 = 11
    GLOBALVIEW7 = 12
    GLOBALVIEW8 = 13
    DR = 14
    DRHOUSE1 = 15
    DRHOUSE2 = 16
    DRHOUSE3 = 17
    DRHOUSE4 = 18
    DRHOUSE5 = 19
    DRHOUSE6 = 20
    SLEEP = 21
    OFFICE1 = 22
    OFFICE2 = 23
    SMILE = 24
    OFFICE3 = 25
    OFFICE4 = 26
    OFFICE5 = 27
    OFFICE6 = 28
    CHEMICAL = 29
    RICHHOUSE1 = 30
    RICHHOUSE2 = 31
    RICHHOUSE3 = 32
    RICHHOUSE4 = 33
    RICHHOUSE5 = 34
    RICHHOUSE6 = 35
    RICHHOUSE7 = 36
    RICHHOUSE8 = 37
    RICHHOUSE9 = 38
    ERROR = 39
    RAPID1 = 40
    RAPID2 = 41
    RAPID3 = 42
    RAPID4 = 43
    RAPID5 = 44
    RAPID6 = 45
    DOOR_CLOSED = 46
    DOOR_OPEN = 47
    STAIR1 = 48
    STAIR2 = 49
    FLOWER = 50
    HOME1 = 51
    HOME2 = 52
    HOME3 = 53
    HOME4 = 54
    TABLE = 55
    CABINET = 56
    GIRL = 57
    BED = 58
    POLICE = 59
    SLINGSHOT = 60
    TICKET_MACHINE = 61
    MONEY = 62
    TICKET = 63
    CELLPHONE = 64
    STREETLAMP = 65
    INVOICE = 66
    COMPUTER = 67
    CC800 = 68
    WATER = 69
    CABINET_OPEN = 70
    BADMAN_LEFT = 71
    BADMAN_RIGHT = 72
    RAPIDCAR1 = 73
    RAPIDCAR2 = 74
    RAPIDCAR3 = 75
    TRACK = 76
    CLOSESTOOL = 77
    TOILET_PAPER = 78
    SAD = 79
    ASSISTANT = 80


# Anything not listed here blocks the actor, so new content is solid until
# it is deliberately opened up.
WALKABLE_CELLS: frozenset[int] = frozenset(
    {
        Cell.BLANK,
        Cell.DOOR_OPEN,
        Cell.RAPID5,
        Cell.GLOBALVIEW7,
        Cell.STAIR1,
        Cell.STAIR2,
        Cell.OFFICE4,
        Cell.HOME3,
        Cell.BED,
        Cell.DRHOUSE4,
        Cell.RAPIDCAR1,
        Cell.RAPIDCAR2,
        Cell.RAPIDCAR3,
    }
)


def is_walkable(cell: int) -> bool:
    return int(cell) in WALKABLE_CELLS
