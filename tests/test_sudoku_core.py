from sudoku_core import (
    SIZE,
    UNITS,
    copy_grid,
    count_filled,
    empty_grid,
    find_empty,
    generate_full_grid,
    is_complete_solution,
    is_placement_safe,
    solve_in_place,
)
import random


def test_units_cover_rows_cols_blocks():
    assert len(UNITS) == 27
    for unit in UNITS:
        assert len(set(unit)) == SIZE


def test_placement_safe_on_empty_grid():
    grid = empty_grid()
    for d in range(1, 10):
        assert is_placement_safe(grid, 4, 4, d)


def test_placement_conflicts():
    grid = empty_grid()
    grid[0][0] = 5
    assert not is_placement_safe(grid, 0, 8, 5)  # ligne
    assert not is_placement_safe(grid, 8, 0, 5)  # colonne
    assert not is_placement_safe(grid, 2, 2, 5)  # bloc
    assert is_placement_safe(grid, 3, 3, 5)
    assert is_placement_safe(grid, 0, 8, 4)


def test_placement_block_origin():
    grid = empty_grid()
    grid[5][5] = 7
    assert not is_placement_safe(grid, 3, 3, 7)
    assert not is_placement_safe(grid, 4, 4, 7)
    assert is_placement_safe(grid, 6, 6, 7)


def test_generated_grid_is_complete():
    grid = generate_full_grid()
    assert find_empty(grid) is None
    assert count_filled(grid) == 81
    for unit in UNITS:
        assert sorted(grid[r][c] for (r, c) in unit) == list(range(1, 10))
    assert is_complete_solution(grid)


def test_generation_is_deterministic():
    first = generate_full_grid()
    second = generate_full_grid()
    assert first == second
    assert first[0] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert first[1] == [4, 5, 6, 7, 8, 9, 1, 2, 3]


def test_shuffled_generation_still_valid():
    grid = generate_full_grid(shuffle=True, rng=random.Random(7))
    assert is_complete_solution(grid)
    again = generate_full_grid(shuffle=True, rng=random.Random(7))
    assert grid == again


def test_solve_in_place_completes_partial_grid():
    solution = generate_full_grid()
    grid = copy_grid(solution)
    for c in range(SIZE):
        grid[4][c] = 0
    assert solve_in_place(grid)
    assert grid == solution


def test_solve_in_place_reports_failure_without_changes():
    grid = empty_grid()
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    before = copy_grid(grid)
    assert not solve_in_place(grid)
    assert grid == before


def test_is_complete_solution_rejects_bad_grids():
    grid = generate_full_grid()
    broken = copy_grid(grid)
    broken[0][0], broken[0][1] = broken[0][1], broken[0][0]
    assert not is_complete_solution(broken)
    holed = copy_grid(grid)
    holed[8][8] = 0
    assert not is_complete_solution(holed)


def test_copy_grid_is_independent():
    grid = generate_full_grid()
    clone = copy_grid(grid)
    clone[0][0] = 0
    assert grid[0][0] == 1
