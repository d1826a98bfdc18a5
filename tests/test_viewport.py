import pytest

from notebox.editor import Viewport, compute_viewport


def test_viewport_starts_at_top_until_cursor_passes_height() -> None:
    assert compute_viewport(2, 20, 5) == Viewport(0, 5)
    assert compute_viewport(4, 20, 5) == Viewport(0, 5)


def test_viewport_keeps_cursor_on_last_visible_row() -> None:
    viewport = compute_viewport(10, 20, 5)

    assert viewport.as_tuple() == (6, 11)
    assert 10 in viewport
    assert 11 not in viewport


def test_viewport_shows_everything_when_it_fits() -> None:
    assert compute_viewport(3, 4, 10) == Viewport(0, 4)
    assert compute_viewport(0, 4, 4) == Viewport(0, 4)


def test_viewport_clamps_height_below_one() -> None:
    assert compute_viewport(3, 10, 0) == Viewport(3, 4)


@pytest.mark.parametrize("total", [1, 7, 30])
@pytest.mark.parametrize("height", [1, 3, 8])
def test_viewport_always_contains_cursor(total: int, height: int) -> None:
    for row in range(total):
        viewport = compute_viewport(row, total, height)
        assert row in viewport
        assert viewport.height == min(height, total)
