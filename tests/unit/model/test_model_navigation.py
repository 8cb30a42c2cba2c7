"""Navigation, paging and window-follow behavior of the two-pane model.

Every sequence of moves must keep the cursor inside the filtered items and
the cursor row inside the visible window.
"""

from __future__ import annotations

import random
import unittest

from panecmder.model import NO_CURSOR, Item, ItemConfig, ItemType, Model, Side


def _items(names: list[str], with_parent: bool = True) -> list[Item]:
    items = []
    if with_parent:
        items.append(Item(name="..", config=ItemConfig(type=ItemType.DIRECTORY, path="/")))
    for name in names:
        items.append(Item(name=name, config=ItemConfig(type=ItemType.FILE, name=name, path=f"/data/{name}")))
    return items


def _model(item_count: int, rows: int) -> Model:
    model = Model(item_max_rows=rows)
    model.set_current_view(Side.LEFT, ItemConfig(type=ItemType.DIRECTORY, path="/data"), "/data")
    model.set_items(Side.LEFT, _items([f"f{idx}" for idx in range(item_count)], with_parent=False))
    return model


class ModelNavigationTests(unittest.TestCase):
    def test_nav_down_eight_times_over_nine_items_scrolls_window(self) -> None:
        model = _model(9, rows=4)

        for _ in range(8):
            model.nav_down()

        pane = model.pane(Side.LEFT)
        self.assertEqual(pane.cursor, 8)
        self.assertEqual(pane.top, 5)

    def test_nav_up_moves_window_top_to_cursor(self) -> None:
        model = _model(9, rows=4)
        model.nav_bottom()
        for _ in range(5):
            model.nav_up()

        pane = model.pane(Side.LEFT)
        self.assertEqual(pane.cursor, 3)
        self.assertEqual(pane.top, 3)

    def test_paging_moves_by_visible_rows_minus_one(self) -> None:
        model = _model(20, rows=5)

        model.nav_pg_down()
        self.assertEqual(model.pane(Side.LEFT).cursor, 4)
        model.nav_pg_down()
        self.assertEqual(model.pane(Side.LEFT).cursor, 8)
        model.nav_pg_up()
        self.assertEqual(model.pane(Side.LEFT).cursor, 4)

    def test_top_and_bottom_clamp_to_item_range(self) -> None:
        model = _model(7, rows=3)

        model.nav_bottom()
        self.assertEqual(model.pane(Side.LEFT).cursor, 6)
        self.assertEqual(model.pane(Side.LEFT).top, 4)
        model.nav_top()
        self.assertEqual(model.pane(Side.LEFT).cursor, 0)
        self.assertEqual(model.pane(Side.LEFT).top, 0)

    def test_empty_pane_uses_cursor_sentinel(self) -> None:
        model = Model(item_max_rows=4)

        model.nav_down()
        model.nav_pg_down()

        self.assertEqual(model.pane(Side.LEFT).cursor, NO_CURSOR)
        self.assertIsNone(model.current_item())
        self.assertEqual(model.get_selected_or_current(), [])

    def test_random_moves_keep_cursor_and_window_invariants(self) -> None:
        rng = random.Random(7)
        model = _model(23, rows=6)
        moves = [
            model.nav_up,
            model.nav_down,
            model.nav_pg_up,
            model.nav_pg_down,
            model.nav_top,
            model.nav_bottom,
        ]

        for _ in range(500):
            rng.choice(moves)()
            pane = model.pane(Side.LEFT)
            self.assertGreaterEqual(pane.cursor, 0)
            self.assertLess(pane.cursor, pane.count)
            self.assertGreaterEqual(pane.cursor, pane.top)
            self.assertLess(pane.cursor, pane.top + model.visible_item_count(Side.LEFT))

    def test_shrinking_item_set_clamps_cursor(self) -> None:
        model = _model(10, rows=4)
        model.nav_bottom()

        model.set_items(Side.LEFT, _items(["a", "b"], with_parent=False))

        pane = model.pane(Side.LEFT)
        self.assertEqual(pane.cursor, 1)
        self.assertEqual(pane.top, 0)

    def test_resize_keeps_cursor_visible(self) -> None:
        model = _model(30, rows=10)
        for _ in range(9):
            model.nav_down()

        model.resize(3, 80)

        pane = model.pane(Side.LEFT)
        self.assertEqual(pane.cursor, 9)
        self.assertEqual(pane.top, 7)

    def test_toggle_side_switches_active_pane(self) -> None:
        model = _model(3, rows=4)

        model.toggle_side()
        self.assertEqual(model.curr_side, Side.RIGHT)
        self.assertEqual(model.other_side, Side.LEFT)
        model.toggle_side()
        self.assertEqual(model.curr_side, Side.LEFT)

    def test_horizontal_scroll_is_floored_at_zero(self) -> None:
        model = _model(3, rows=4)

        model.scroll_right()
        model.scroll_right()
        self.assertEqual(model.current_pane.horiz_scroll, 20)
        model.scroll_left()
        model.scroll_left()
        model.scroll_left()
        self.assertEqual(model.current_pane.horiz_scroll, 0)

    def test_set_current_item_by_config_falls_back_to_top(self) -> None:
        model = _model(6, rows=4)
        model.nav_bottom()

        found = model.set_current_item_by_config(Side.LEFT, ItemConfig(path="/data/f3"))
        self.assertTrue(found)
        self.assertEqual(model.current_item().name, "f3")

        missing = model.set_current_item_by_config(Side.LEFT, ItemConfig(path="/elsewhere"))
        self.assertFalse(missing)
        self.assertEqual(model.pane(Side.LEFT).cursor, 0)


if __name__ == "__main__":
    unittest.main()
