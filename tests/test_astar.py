import pytest

from algocraft.astar import WALL, AStar


def open_grid(rows, cols):
    return [[0] * cols for _ in range(rows)]


def assert_valid_path(grid, path):
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1
    for x, y in path:
        assert grid[x][y] != WALL


def test_path_runs_from_goal_to_start():
    grid = open_grid(6, 6)
    path = AStar(grid).run(0, 0, 5, 3)
    assert path[0] == (5, 3)
    assert path[-1] == (0, 0)
    assert_valid_path(grid, path)


def test_diagonal_path_is_shortest():
    grid = open_grid(5, 5)
    path = AStar(grid).run(0, 0, 4, 4)
    assert len(path) == 5
    assert_valid_path(grid, path)


def test_start_on_wall_gives_none():
    grid = open_grid(4, 4)
    grid[1][1] = WALL
    assert AStar(grid).run(1, 1, 3, 3) is None


def test_enclosed_goal_is_unreachable():
    grid = open_grid(5, 5)
    for x in range(2, 5):
        for y in range(2, 5):
            if (x, y) != (3, 3):
                grid[x][y] = WALL
    assert AStar(grid).run(0, 0, 3, 3) == []


def test_path_goes_through_gap_in_wall():
    grid = open_grid(7, 7)
    for x in range(7):
        if x != 6:
            grid[x][3] = WALL
    path = AStar(grid).run(0, 0, 0, 6)
    assert path[0] == (0, 6)
    assert path[-1] == (0, 0)
    assert (6, 3) in path
    assert_valid_path(grid, path)


def test_start_equals_goal():
    grid = open_grid(3, 3)
    assert AStar(grid).run(1, 2, 1, 2) == [(1, 2)]


def test_non_square_grid():
    grid = open_grid(2, 8)
    path = AStar(grid).run(0, 0, 1, 7)
    assert path[0] == (1, 7)
    assert path[-1] == (0, 0)
    assert_valid_path(grid, path)


def test_out_of_bounds_raises():
    with pytest.raises(IndexError):
        AStar(open_grid(3, 3)).run(0, 0, 3, 3)


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        AStar([[0, 0], [0]])