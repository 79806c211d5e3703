import pytest

from panemove.config import Config
from panemove.driver import Driver
from panemove.windows import WindowSet


@pytest.fixture
def window_set():
    """An 80x25 screen with a single window showing buffer 'a'."""
    return WindowSet(25, 80, 'a')


@pytest.fixture
def side_by_side(window_set):
    """Windows L and R, L selected."""
    right = window_set.split_window_right()
    return window_set, window_set.selected_window(), right


@pytest.fixture
def left_and_stacked(side_by_side):
    """Window L spanning the full height, and A on top of B on its right."""
    window_set, left, right = side_by_side
    bottom = window_set.split_window_below(right)
    return window_set, left, right, bottom


@pytest.fixture
def make_driver():
    def _make_driver(layout, **kwargs):
        return Driver(layout, Config(**kwargs))
    return _make_driver
