"""Tests for ViewportState - row scrolling."""

import random

import pytest

from gpiolocator.tui.services import ViewportState


class TestViewportState:
    """Scroll clamping and visible window."""

    @pytest.fixture
    def viewport(self) -> ViewportState:
        """32 rows, as for the default 256 lines."""
        return ViewportState(row_count=32)

    @pytest.mark.unit
    def test_rejects_empty_grid(self):
        with pytest.raises(ValueError):
            ViewportState(row_count=0)

    @pytest.mark.unit
    def test_starts_at_top(self, viewport):
        assert viewport.selected_row == 0

    @pytest.mark.unit
    def test_scroll_down_and_up(self, viewport):
        assert viewport.scroll_down() == 1
        assert viewport.scroll_down() == 2
        assert viewport.scroll_up() == 1

    @pytest.mark.unit
    def test_clamped_at_top(self, viewport):
        assert viewport.scroll_up() == 0
        assert viewport.scroll_up() == 0

    @pytest.mark.unit
    def test_clamped_at_bottom(self, viewport):
        for _ in range(50):
            viewport.scroll_down()
        assert viewport.selected_row == 31

    @pytest.mark.unit
    def test_single_row_never_moves(self):
        viewport = ViewportState(row_count=1)
        viewport.scroll_down()
        viewport.scroll_up()
        assert viewport.selected_row == 0

    @pytest.mark.unit
    def test_any_sequence_stays_in_range(self, viewport):
        rng = random.Random(1234)
        for _ in range(500):
            viewport.scroll(rng.choice(["up", "down"]))
            assert 0 <= viewport.selected_row <= 31

    @pytest.mark.unit
    def test_window_follows_selection(self, viewport):
        assert viewport.window(height=10) == range(0, 10)

        for _ in range(12):
            viewport.scroll_down()
        window = viewport.window(height=10)
        assert viewport.selected_row in window
        assert window == range(3, 13)

        for _ in range(12):
            viewport.scroll_up()
        assert viewport.window(height=10) == range(0, 10)

    @pytest.mark.unit
    def test_window_taller_than_grid(self):
        viewport = ViewportState(row_count=3)
        viewport.scroll_down()
        assert viewport.window(height=10) == range(0, 3)
