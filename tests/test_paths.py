import pytest

from algobook.dp.paths import MOD, grid_paths

EXAMPLE = [
    "....",
    ".*..",
    "...*",
    "*...",
]


def test_example_grid():
    assert grid_paths(EXAMPLE) == 3


def test_single_cell():
    assert grid_paths(["."]) == 1
    assert grid_paths(["*"]) == 0


def test_blocked_end_or_start():
    assert grid_paths(["..", ".*"]) == 0
    assert grid_paths(["*.", ".."]) == 0


def test_walled_off_target():
    assert grid_paths([".*", "*."]) == 0


def test_single_row_and_column_have_one_path():
    assert grid_paths(["....."]) == grid_paths(["."])
    assert grid_paths([".", ".", "."]) == grid_paths(["."])


def test_trap_in_single_row_blocks():
    assert grid_paths(["..*.."]) == 0


def test_transpose_preserves_count():
    transposed = ["".join(column) for column in zip(*EXAMPLE)]
    assert grid_paths(transposed) == grid_paths(EXAMPLE)


def test_adding_trap_never_increases_count():
    open_grid = ["....", "....", "....", "...."]
    assert grid_paths(EXAMPLE) <= grid_paths(open_grid)


def test_large_grid_result_is_reduced():
    assert 0 <= grid_paths(["." * 60] * 60) < MOD


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        grid_paths(["..", "."])


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        grid_paths([])