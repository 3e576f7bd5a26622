import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lostdoctor.domain.models.cell import Cell, is_walkable
from lostdoctor.domain.models.world_grid import Viewport, WorldGrid
from lostdoctor.infrastructure.inmemory.world_map import WORLD_HEIGHT, WORLD_MAP, WORLD_WIDTH, initial_rows


class WorldGridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = WorldGrid(initial_rows())

    def test_compiled_map_is_thirty_rows_of_thirty_one_cells(self) -> None:
        self.assertEqual(WORLD_HEIGHT, self.grid.height)
        self.assertEqual(WORLD_WIDTH, self.grid.width)
        self.assertEqual((30, 31), (self.grid.height, self.grid.width))

    def test_get_cell_is_row_then_column(self) -> None:
        self.assertEqual(Cell.DR, self.grid.get_cell(2, 1))
        self.assertEqual(Cell.TICKET_MACHINE, self.grid.get_cell(15, 7))
        self.assertEqual(Cell.BADMAN_RIGHT, self.grid.get_cell(27, 24))

    def test_set_cell_changes_only_the_session_copy(self) -> None:
        self.grid.set_cell(16, 4, Cell.DOOR_OPEN)

        self.assertEqual(Cell.DOOR_OPEN, self.grid.get_cell(16, 4))
        self.assertEqual(Cell.DOOR_CLOSED, WORLD_MAP[16][4])
        self.assertEqual(Cell.DOOR_CLOSED, WorldGrid(initial_rows()).get_cell(16, 4))

    def test_out_of_range_access_raises_index_error(self) -> None:
        with self.assertRaises(IndexError):
            self.grid.get_cell(30, 0)
        with self.assertRaises(IndexError):
            self.grid.get_cell(0, 31)
        with self.assertRaises(IndexError):
            self.grid.set_cell(-1, 0, Cell.BLANK)

    def test_ragged_rows_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            WorldGrid([[0, 0], [0]])


class ViewportTests(unittest.TestCase):
    def test_origin_is_clamped_to_the_world(self) -> None:
        viewport = Viewport(origin_x=40, origin_y=-3, world_width=31, world_height=30)

        self.assertEqual((21, 0), (viewport.origin_x, viewport.origin_y))
        self.assertEqual((21, 26), (viewport.max_x, viewport.max_y))

    def test_scroll_reports_whether_the_origin_moved(self) -> None:
        viewport = Viewport(origin_x=20, origin_y=25, world_width=31, world_height=30)

        self.assertTrue(viewport.scroll(1, 1))
        self.assertEqual((21, 26), (viewport.origin_x, viewport.origin_y))
        self.assertFalse(viewport.scroll(1, 0))
        self.assertFalse(viewport.scroll(0, 1))
        self.assertEqual((21, 26), (viewport.origin_x, viewport.origin_y))

    def test_contains_covers_the_ten_by_four_window(self) -> None:
        viewport = Viewport(origin_x=4, origin_y=0, world_width=31, world_height=30)

        self.assertTrue(viewport.contains(4, 0))
        self.assertTrue(viewport.contains(13, 3))
        self.assertFalse(viewport.contains(14, 0))
        self.assertFalse(viewport.contains(4, 4))

    def test_visible_cells_yield_tile_coordinates_and_cells(self) -> None:
        grid = WorldGrid(initial_rows())
        viewport = Viewport(origin_x=0, origin_y=15, world_width=grid.width, world_height=grid.height)

        tiles = list(viewport.visible_cells(grid))

        self.assertEqual(40, len(tiles))
        self.assertEqual((0, 0, Cell.TRACK), tiles[0])
        self.assertIn((7, 0, Cell.TICKET_MACHINE), tiles)
        self.assertIn((4, 1, Cell.DOOR_CLOSED), tiles)


class CollisionRuleTests(unittest.TestCase):
    def test_floor_doors_and_train_cars_are_walkable(self) -> None:
        for cell in (
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
        ):
            self.assertTrue(is_walkable(cell), cell.name)

    def test_everything_else_blocks(self) -> None:
        for cell in (Cell.TREE, Cell.GRAY, Cell.DOOR_CLOSED, Cell.POLICE, Cell.WATER, Cell.DR, Cell.TRACK):
            self.assertFalse(is_walkable(cell), cell.name)
        self.assertFalse(is_walkable(999))


if __name__ == "__main__":
    unittest.main()
