import pytest

from zoning.app.grid import GridSnapper
from zoning.core.errors import InvalidToleranceError
from zoning.core.geometry import Point


def test_nearest_corner_rounds_to_cell_multiples() -> None:
    snapper = GridSnapper(cell_size=2.0)
    assert snapper.nearest_corner(2.9, 5.1) == Point(2.0, 6.0)
    assert snapper.nearest_corner(-0.9, 0.4) == Point(0.0, 0.0)


def test_nearest_corner_respects_origin() -> None:
    snapper = GridSnapper(cell_size=1.0, origin_x=0.5, origin_y=0.25)
    assert snapper.nearest_corner(1.4, 1.2) == Point(1.5, 1.25)


def test_half_cell_ties_round_to_even() -> None:
    snapper = GridSnapper(cell_size=1.0)
    assert snapper.nearest_corner(0.5, 1.5) == Point(0.0, 2.0)


def test_cell_size_must_be_positive() -> None:
    with pytest.raises(InvalidToleranceError):
        GridSnapper(cell_size=0.0)
