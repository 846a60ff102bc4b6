"""Cleaning-robot simulation on a grid with per-cell turning rules."""

from __future__ import annotations

from collections.abc import Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _digits(rules: Sequence[Sequence[int | str]]) -> list[list[int]]:
    grid = [[int(cell) for cell in row] for row in rules]
    if any(not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("rules must be single digits")
    return grid


def last_cleaning_turn(
    dirty_rules: Sequence[Sequence[int | str]],
    clean_rules: Sequence[Sequence[int | str]],
    row: int,
    col: int,
    direction: int,
) -> int:
    """Return the turn on which the robot cleans a cell for the last time.

    Every cell starts dirty. On a dirty cell the robot cleans it and turns
    clockwise by that cell's ``dirty_rules`` digit; on a clean cell it turns by
    its ``clean_rules`` digit. Directions are 0 north, 1 east, 2 south, 3 west.
    It then steps forward, stopping when it leaves the grid or repeats a
    cell and direction without cleaning anything in between. Turns count from 1.
    """
    on_dirty = _digits(dirty_rules)
    on_clean = _digits(clean_rules)
    height = len(on_dirty)
    width = len(on_dirty[0]) if height else 0
    if height == 0 or width == 0:
        raise ValueError("grid must not be empty")
    for grid in (on_dirty, on_clean):
        if len(grid) != height or any(len(line) != width for line in grid):
            raise ValueError("rule grids must have the same rectangular shape")
    if not (0 <= row < height and 0 <= col < width):
        raise ValueError("start position outside the grid")
    if direction not in range(4):
        raise ValueError("direction must be 0, 1, 2 or 3")

    cleaned: set[tuple[int, int]] = set()
    passed: dict[tuple[int, int, int], int] = {}
    last_cleaned = -1
    turn = 0
    while True:
        turn += 1
        state = (row, col, direction)
        if passed.get(state) == last_cleaned:
            break
        if (row, col) not in cleaned:
            cleaned.add((row, col))
            last_cleaned = turn
            direction = (direction + on_dirty[row][col]) % 4
        else:
            passed[state] = last_cleaned
            direction = (direction + on_clean[row][col]) % 4
        dr, dc = _STEPS[direction]
        row, col = row + dr, col + dc
        if not (0 <= row < height and 0 <= col < width):
            break
    return last_cleaned