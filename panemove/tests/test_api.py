import pytest

import panemove
from panemove.config import Config


@pytest.fixture
def driver(side_by_side):
    window_set, left, right = side_by_side
    driver = panemove.install_driver(panemove.Driver(window_set, Config()))
    yield driver
    panemove.install_driver(None)


def test_no_driver_installed():
    with pytest.raises(RuntimeError):
        panemove.select_left()


def test_directional_commands(driver):
    left, right = driver.layout.windows()
    assert panemove.select_right() is right
    assert panemove.select_left(1) is left
    assert panemove.select_left.__name__ == 'select_left'


def test_display_commands(driver):
    left, right = driver.layout.windows()
    panemove.display_right()
    assert panemove.display_content('c') is right
    panemove.display_same_window()
    assert panemove.display_content('d') is right


def test_delete_commands(driver):
    left, right = driver.layout.windows()
    panemove.delete_right(kill_content=True)
    assert driver.layout.windows() == [left]


def test_user_errors(driver):
    panemove.call_interactively(panemove.select_up)
    assert driver.last_message == 'No window up from selected window'
    with pytest.raises(panemove.NoNeighborError):
        panemove.select_in_direction(panemove.Direction.UP)
