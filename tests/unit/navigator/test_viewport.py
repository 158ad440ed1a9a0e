"""Unit tests for cursor/offset arithmetic and sidebar row budgets."""

from __future__ import annotations

import unittest

from reqnav.navigator.layout import available_rows, section_heights
from reqnav.navigator.viewport import (
    adjust_offset,
    clamp_cursor,
    jump_to_bottom,
    jump_to_top,
    move_cursor,
    move_viewport,
)


class ViewportMathTests(unittest.TestCase):
    def test_clamp_cursor_bounds(self) -> None:
        self.assertEqual(clamp_cursor(-3, 5), 0)
        self.assertEqual(clamp_cursor(9, 5), 4)
        self.assertEqual(clamp_cursor(2, 5), 2)
        self.assertEqual(clamp_cursor(7, 0), 0)

    def test_random_walk_stays_in_range(self) -> None:
        cursor = 0
        for delta in (1, 1, 1, -7, 4, 20, -1, 3, -2):
            cursor = move_cursor(cursor, delta, 6)
            self.assertTrue(0 <= cursor <= 5)
        self.assertEqual(move_cursor(3, 1, 0), 0)

    def test_adjust_offset_scrolls_minimally(self) -> None:
        self.assertEqual(adjust_offset(2, 5, 4), 2)
        self.assertEqual(adjust_offset(9, 0, 4), 6)
        self.assertEqual(adjust_offset(5, 3, 4), 3)

    def test_adjust_offset_treats_empty_viewport_as_one_row(self) -> None:
        self.assertEqual(adjust_offset(4, 0, 0), 4)

    def test_move_viewport_keeps_cursor_visible(self) -> None:
        cursor, offset = 0, 0
        for _ in range(5):
            cursor, offset = move_viewport(cursor, offset, 1, 30, 4)
            self.assertLessEqual(offset, cursor)
            self.assertLessEqual(cursor, offset + 3)
        self.assertEqual((cursor, offset), (5, 2))

    def test_jumps(self) -> None:
        self.assertEqual(jump_to_top(), (0, 0))
        self.assertEqual(jump_to_bottom(0, 30, 4), (29, 26))
        self.assertEqual(jump_to_bottom(0, 0, 4), (0, 0))


class SectionHeightTests(unittest.TestCase):
    def test_split_leaves_room_for_chrome(self) -> None:
        self.assertEqual(available_rows(30), 25)
        self.assertEqual(section_heights(30), (7, 18))
        self.assertEqual(section_heights(12), (2, 5))
        self.assertEqual(section_heights(10), (1, 4))

    def test_tiny_heights_still_give_one_row_each(self) -> None:
        self.assertEqual(section_heights(0), (1, 1))
        self.assertEqual(section_heights(3), (1, 1))


if __name__ == "__main__":
    unittest.main()
