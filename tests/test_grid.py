from __future__ import annotations

import pytest

from space_shooter.entities import Enemy
from space_shooter.grid import SpatialGrid


@pytest.fixture()
def grid() -> SpatialGrid:
    return SpatialGrid(800, 600, 10, 10)


@pytest.mark.parametrize(
    "x,y,cell",
    [
        (0, 0, (0, 0)),
        (79.9, 59.9, (0, 0)),
        (80, 60, (1, 1)),
        (412, -40, (5, 0)),
        (799, 599, (9, 9)),
        (1000, 900, (9, 9)),
        (-10, 300, (0, 5)),
    ],
)
def test_cell_of_clamps_to_field(grid: SpatialGrid, x: float, y: float, cell: tuple) -> None:
    assert grid.cell_of(x, y) == cell


def test_rebuild_only_indexes_active_enemies(grid: SpatialGrid) -> None:
    live = Enemy(x=100, y=100, active=True)
    dead = Enemy(x=100, y=100, active=False)

    grid.rebuild([live, dead])

    assert grid.bucket((1, 1)) == [live]
    assert len(grid) == 1


def test_rebuild_discards_previous_frame(grid: SpatialGrid) -> None:
    enemy = Enemy(x=100, y=100, active=True)
    grid.rebuild([enemy])

    enemy.y = 400
    grid.rebuild([enemy])

    assert grid.bucket((1, 1)) == []
    assert grid.bucket((1, 6)) == [enemy]


def test_nearby_covers_three_by_three_block(grid: SpatialGrid) -> None:
    inside = [Enemy(x=80 * cx + 1, y=60 * cy + 1, active=True) for cx in (3, 4, 5) for cy in (3, 4, 5)]
    outside = Enemy(x=80 * 6 + 1, y=60 * 4 + 1, active=True)
    grid.rebuild(inside + [outside])

    found = list(grid.nearby(80 * 4 + 10, 60 * 4 + 10))

    assert found == inside


def test_nearby_skips_cells_off_the_field(grid: SpatialGrid) -> None:
    corner = Enemy(x=5, y=5, active=True)
    grid.rebuild([corner])

    assert list(grid.nearby(0, 0)) == [corner]


def test_nearby_keeps_insertion_order_within_a_cell(grid: SpatialGrid) -> None:
    first = Enemy(x=400, y=300, active=True)
    second = Enemy(x=405, y=300, active=True)
    grid.rebuild([first, second])

    assert list(grid.nearby(410, 310)) == [first, second]
