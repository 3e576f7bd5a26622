"""Compiled-in world map.

Row index is the world y coordinate, column index the world x coordinate.
The grid is copied into every new session, so the tuples here never change.
"""

WORLD_WIDTH = 31
WORLD_HEIGHT = 30

# fmt: off
WORLD_MAP: tuple[tuple[int, ...], ...] = (
    # town: streets, station, lab, tower
    ( 1,  1,  1,  1,  1, 30, 31, 32,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1),
    ( 1, 15, 16, 17,  1, 33, 34, 35,  1,  1,  0,  0, 51, 52,  1,  0,  0,  0,  0,  0,  1, 40, 41, 42,  1,  0,  1,  0,  0,  0,  1),
    ( 1, 14, 19, 20, 65, 36, 37, 38,  0,  1,  0,  0, 53, 54,  1,  0,  0,  0,  0,  0,  1, 43, 44, 45, 65,  0,  1,  1,  1,  0,  1),
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0,  0,  0,  1,  0,  1,  0,  1),
    ( 1,  1, 65,  0,  1,  1,  1,  1, 65,  1,  1,  1,  1,  1,  0,  1,  1, 65,  1,  1,  1,  0,  0,  1,  0,  0,  1,  0,  1,  0,  1),
    ( 1,  1,  0,  0,  0,  1,  1,  1, 40, 41, 42,  1,  0,  0,  0,  1,  1, 22, 23,  1,  1,  0,  0,  1,  0,  1,  0,  0,  0,  0,  1),
    ( 1,  0,  1,  1,  0,  0,  1,  1, 43, 44, 45,  1,  0,  0,  0,  1, 25, 26, 27, 28,  1,  1,  0,  0,  0,  0,  0,  0,  0,  1,  1),
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  1,  0,  0,  6,  7,  8,  9,  0,  0,  1),
    ( 1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  0, 10, 11, 12, 13, 65,  0,  1),
    ( 1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  0,  0,  0,  0,  0,  0,  0,  1),
    # station platform and the player's home
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1,  1),
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    ( 3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    (76,  2,  2,  2,  3,  2,  2, 61,  2,  2,  0,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    (73,  0,  0,  0, 46,  0,  0,  0,  0, 48,  0,  3,  2,  2,  2,  2,  2,  2, 56,  2,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    (74,  0,  0,  0,  3,  0,  0,  0,  0,  3,  0,  3, 50,  0,  0,  0, 55,  0,  0, 58,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    (75,  0,  0,  0, 46,  0,  0,  0, 50,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    (76,  3,  3,  3,  3,  3,  3,  3,  3,  3,  0,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1),
    # doctor's house, lab interior, tower interior, captive room
    ( 3, 56,  2,  2,  2,  2,  2,  2,  2,  3,  0,  3,  2,  2,  2,  2,  2,  3,  2, 56,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3),
    ( 3,  0,  0,  0,  0,  0,  0,  0,  0,  3,  0,  3,  0,  0,  0,  0,  0, 47,  0,  0,  3,  3,  2,  2,  3,  2, 56,  3,  2,  2,  3),
    ( 3,  0,  0,  3,  0,  0,  3, 80,  0,  3,  0,  3,  0,  0,  0,  0,  0,  3,  0,  0,  3,  3,  0,  0,  3, 77,  0,  3,  0,  0,  3),
    ( 3, 55, 67,  3,  0,  0,  3,  0, 67,  3,  0,  3,  0,  3,  0,  0,  0,  3, 58,  0, 47,  3,  0,  0, 46,  0,  0, 47,  0,  0,  3),
    ( 3,  3,  3,  3,  0,  0,  3,  3,  3,  3,  0,  3,  0,  3,  3,  3,  3,  3,  3,  3,  3,  3,  0,  0,  3,  3,  3,  3,  0,  0,  3),
    ( 3,  2,  2,  2,  0,  0,  2,  2,  2,  3,  0,  3, 56,  2,  3,  2,  2,  2,  2,  2,  3,  3,  0,  0,  2,  3,  2,  2,  0,  0,  3),
    ( 3, 50,  0,  0,  0,  0,  0,  0,  0,  3,  0, 49,  0,  0, 46,  0,  0,  0,  0,  0,  3,  3,  0,  0,  0,  3,  0,  0,  0,  0,  3),
    ( 3,  3,  3,  3,  3,  0,  3,  3,  3,  3,  0,  3,  0,  0,  3,  0,  0,  0,  0,  0,  0,  3,  0,  0, 72, 46,  0,  0,  0,  0, 46),
    ( 2,  2,  2,  2,  2,  0,  2,  2,  2,  2,  0,  3,  0, 57, 55,  0,  0,  0,  0,  0,  3,  3,  0,  0,  0,  3,  0,  0,  0, 14,  3),
    ( 1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3,  3),
)
# fmt: on


def initial_rows() -> list[list[int]]:
    return [list(row) for row in WORLD_MAP]
