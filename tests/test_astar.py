import random
from collections import deque
from math import isclose, sqrt

import pytest

from pathsandbox.core.astar import AStarSearch, reconstruct_path, run_search, search
from pathsandbox.core.errors import OutOfBounds
from pathsandbox.core.grid import Grid
from pathsandbox.core.heuristics import euclidean, manhattan, octile
from pathsandbox.core.neighbors import step_cost


def make_grid(rows: int = 5, cols: int = 5, moves: int = 4, walls=()) -> Grid:
    grid = Grid(rows, cols, start=(0, 0), end=(rows - 1, cols - 1), moves=moves)
    for c in walls:
        grid.toggle_wall(c)
    return grid


def assert_connected(grid: Grid, path) -> None:
    prev = grid.start
    for c in path:
        assert c in grid.neighbors(prev)
        prev = c


def bfs_length(grid: Grid, start, goal) -> int:
    seen = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return seen[cur]
        for n in grid.neighbors(cur):
            if n not in seen:
                seen[n] = seen[cur] + 1
                queue.append(n)
    return -1


def test_open_grid_four_moves_manhattan() -> None:
    grid = make_grid(moves=4)

    path = run_search(grid, (0, 0), (4, 4), manhattan)

    assert len(path) == 8
    assert_connected(grid, path)
    for a, b in zip([grid.start] + path, path):
        assert step_cost(a, b) == 1


def test_path_excludes_start_and_includes_goal() -> None:
    grid = make_grid(moves=4)

    path = run_search(grid)

    assert grid.start not in path
    assert path[-1] == grid.end
    assert path.count(grid.end) == 1


def test_wall_row_blocks_every_route() -> None:
    grid = make_grid(moves=8, walls=[(2, c) for c in range(5)])

    assert run_search(grid, heuristic=euclidean) == []
    result = search(grid, heuristic=euclidean)
    assert result.found is False
    assert result.total_cost is None
    assert result.expanded == 10  # both rows above the wall


def test_goal_boxed_in_by_walls() -> None:
    grid = make_grid(moves=8, walls=[(3, 3), (3, 4), (4, 3)])

    assert run_search(grid, heuristic=octile) == []


def test_repeated_searches_are_identical() -> None:
    grid = make_grid(7, 7, moves=8, walls=[(3, c) for c in range(1, 7)])

    first = run_search(grid, heuristic=euclidean)
    for _ in range(5):
        assert run_search(grid, heuristic=euclidean) == first


def test_eight_moves_take_the_diagonal() -> None:
    grid = make_grid(moves=8)

    result = search(grid, heuristic=octile)

    assert result.path == [(1, 1), (2, 2), (3, 3), (4, 4)]
    assert isclose(result.total_cost, 4 * sqrt(2))


@pytest.mark.parametrize("h", [euclidean, octile])
def test_eight_move_cost_is_optimal(h) -> None:
    grid = make_grid(6, 9, moves=8)

    result = search(grid, (0, 0), (5, 8), h)

    assert len(result.path) == 8  # max(dr, dc)
    assert isclose(result.total_cost, octile((0, 0), (5, 8)))
    assert_connected(grid, result.path)


def test_detour_around_a_wall() -> None:
    walls = [(r, 2) for r in range(4)]
    grid = Grid(5, 5, start=(0, 0), end=(0, 4), moves=4)
    for c in walls:
        grid.toggle_wall(c)

    path = run_search(grid)

    assert len(path) == 12
    assert (4, 2) in path
    assert not set(path) & set(walls)


def test_matches_breadth_first_distance_on_a_maze() -> None:
    layout = [
        "S..#......",
        ".#.#.####.",
        ".#...#....",
        ".####.#.#.",
        "......#.#.",
        "#.###.#.#.",
        "..#...#.#.",
        ".##.###.#.",
        "........#G",
    ]
    grid = Grid(len(layout), len(layout[0]), start=(0, 0), end=(8, 9), moves=4)
    for r, row in enumerate(layout):
        for c, ch in enumerate(row):
            if ch == "#":
                grid.toggle_wall((r, c))

    result = search(grid, heuristic=manhattan)

    assert len(result.path) == bfs_length(grid, grid.start, grid.end)
    assert result.total_cost == len(result.path)
    assert_connected(grid, result.path)


def test_explicit_endpoints_override_markers() -> None:
    grid = make_grid(moves=4)

    path = run_search(grid, (0, 4), (4, 0))

    assert len(path) == 8
    assert path[-1] == (4, 0)
    assert (0, 4) not in path


def test_start_equals_goal_gives_empty_path() -> None:
    grid = make_grid()

    result = search(grid, (2, 2), (2, 2))

    assert result.path == []
    assert result.total_cost == 0


def test_out_of_bounds_endpoint_rejected() -> None:
    grid = make_grid()

    with pytest.raises(OutOfBounds):
        run_search(grid, (0, 0), (5, 5))
    with pytest.raises(OutOfBounds):
        run_search(grid, (-1, 0), (4, 4))


def test_stepper_agrees_with_run_search() -> None:
    grid = make_grid(6, 6, moves=8, walls=[(2, 1), (2, 2), (2, 3), (2, 4)])
    algo = AStarSearch(grid, grid.start, grid.end, euclidean)

    first = algo.step()
    assert first.status == "running"
    assert first.closed == [grid.start]
    assert set(first.opened) == set(grid.neighbors(grid.start))

    res = first
    while res.status == "running":
        res = algo.step()

    assert res.status == "done"
    assert res.path == run_search(grid, heuristic=euclidean)
    assert res.metrics["path_len"] == len(res.path)
    assert algo.step().status == "done"


def test_stepper_reports_no_path() -> None:
    grid = make_grid(moves=4, walls=[(r, 2) for r in range(5)])
    algo = AStarSearch(grid, grid.start, grid.end, manhattan)

    res = algo.step()
    while res.status == "running":
        res = algo.step()

    assert res.status == "no_path"
    assert res.path == []
    assert algo.closed_set == {(r, c) for r in range(5) for c in range(2)}


def test_reset_restarts_the_search() -> None:
    grid = make_grid()
    algo = AStarSearch(grid, grid.start, grid.end)
    expected = algo.run().path

    algo.reset()

    assert algo.popped_count == 0
    assert algo.open_set == {grid.start}
    assert algo.run().path == expected


def test_reconstruct_path() -> None:
    parent = {(0, 1): (0, 0), (0, 2): (0, 1), (1, 2): (0, 2)}

    assert reconstruct_path(parent, (1, 2)) == [(0, 1), (0, 2), (1, 2)]
    assert reconstruct_path(parent, (0, 1)) == [(0, 1)]
    assert reconstruct_path(parent, (3, 3)) == []


def test_default_heuristic_is_shortest_on_walled_eight_move_grids() -> None:
    rng = random.Random(7)
    for _ in range(150):
        grid = Grid(8, 8, start=(0, 0), end=(7, 7))
        for r in range(8):
            for c in range(8):
                if (r, c) not in (grid.start, grid.end) and rng.random() < 0.3:
                    grid.toggle_wall((r, c))

        default = search(grid)
        best = search(grid, heuristic=octile)

        if best.total_cost is None:
            assert default.total_cost is None
        else:
            assert isclose(default.total_cost, best.total_cost)


def test_non_integer_endpoint_rejected() -> None:
    grid = make_grid()

    with pytest.raises(OutOfBounds):
        run_search(grid, (0, 0), (1.0, 2))
