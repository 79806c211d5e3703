import pytest

from panemove.coordinates import Coordinate, add, clamp_to_range, wrap_to_range


def test_add():
    assert add(Coordinate(1, 2), Coordinate(10, 20)) == Coordinate(11, 22)
    assert add(Coordinate(1, 2), Coordinate(-3, 0)) == (-2, 2)


def test_clamp_to_range():
    assert clamp_to_range(-1, 0, 10) == 0
    assert clamp_to_range(11, 0, 10) == 10
    assert clamp_to_range(5, 0, 10) == 5


def test_wrap_to_range():
    assert wrap_to_range(-1, 0, 10) == 10
    assert wrap_to_range(-100, 0, 10) == 10
    assert wrap_to_range(11, 0, 10) == 0
    assert wrap_to_range(5, 0, 10) == 5


@pytest.mark.parametrize('n', [0, 3, 10])
def test_wrap_and_clamp_agree_inside_range(n):
    assert wrap_to_range(n, 0, 10) == clamp_to_range(n, 0, 10) == n


def test_coordinate_is_immutable():
    c = Coordinate(1, 2)
    with pytest.raises(AttributeError):
        c.x = 3
