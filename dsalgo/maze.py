"""Path finding through rectangular mazes from the top-left to the bottom-right cell."""

from __future__ import annotations

from collections.abc import Iterator
from math import comb

_MONOTONE = (("R", 0, 1), ("D", 1, 0))
_ALL_DIRECTIONS = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))


def _grid(maze) -> list[list]:
    rows = [list(row) for row in maze]
    if not rows or not rows[0]:
        raise ValueError("maze must have at least one cell")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("maze rows must all have the same length")
    return rows


def _check_dimensions(rows: int, columns: int) -> None:
    if rows < 1 or columns < 1:
        raise ValueError("rows and columns must be at least 1")


def count_ways(rows, columns):
    """Return the number of right/down paths across a ``rows`` x ``columns`` grid."""
    if rows <= 1 or columns <= 1:
        return 1
    return comb(rows + columns - 2, rows - 1)


def _monotone(rows: int, columns: int, diagonal: bool) -> Iterator[str]:
    if rows == 1 and columns == 1:
        yield ""
        return
    if diagonal and rows > 1 and columns > 1:
        yield from ("M" + rest for rest in _monotone(rows - 1, columns - 1, diagonal))
    if columns > 1:
        yield from ("R" + rest for rest in _monotone(rows, columns - 1, diagonal))
    if rows > 1:
        yield from ("D" + rest for rest in _monotone(rows - 1, columns, diagonal))


def paths(rows, columns):
    """Return every path of 'R' and 'D' moves, right moves explored first."""
    _check_dimensions(rows, columns)
    return list(_monotone(rows, columns, diagonal=False))


def diagonal_paths(rows, columns):
    """Return every path of 'M' (diagonal), 'R' and 'D' moves, in that order of preference."""
    _check_dimensions(rows, columns)
    return list(_monotone(rows, columns, diagonal=True))


def _explore(rows: list[list], moves) -> Iterator[tuple[str, list[tuple[int, int]]]]:
    height, width = len(rows), len(rows[0])
    goal = (height - 1, width - 1)
    blocked = [[bool(cell) for cell in row] for row in rows]
    trail: list[tuple[int, int]] = []
    route: list[str] = []

    def visit(r: int, c: int) -> Iterator[tuple[str, list[tuple[int, int]]]]:
        if (r, c) == goal:
            yield "".join(route), [*trail, (r, c)]
            return
        if blocked[r][c]:
            return
        blocked[r][c] = True
        trail.append((r, c))
        for letter, dr, dc in moves:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                route.append(letter)
                yield from visit(nr, nc)
                route.pop()
        trail.pop()
        blocked[r][c] = False

    yield from visit(0, 0)


def restricted_paths(maze):
    """Return right/down paths that avoid truthy (blocked) cells."""
    return [route for route, _ in _explore(_grid(maze), _MONOTONE)]


def all_paths(maze):
    """Return every self-avoiding path using 'D', 'R', 'U', 'L' that avoids blocked cells."""
    return [route for route, _ in _explore(_grid(maze), _ALL_DIRECTIONS)]


def numbered_paths(maze):
    """Return (path, steps) pairs where ``steps`` numbers each visited cell from 1."""
    rows = _grid(maze)
    result = []
    for route, trail in _explore(rows, _ALL_DIRECTIONS):
        steps = [[0] * len(rows[0]) for _ in rows]
        for number, (r, c) in enumerate(trail, start=1):
            steps[r][c] = number
        result.append((route, steps))
    return result


def unique_paths_with_obstacles(grid):
    """Return the number of right/down paths that avoid cells marked 1."""
    rows = _grid(grid)
    counts = [1] + [0] * (len(rows[0]) - 1)
    for row in rows:
        for c, cell in enumerate(row):
            if cell == 1:
                counts[c] = 0
            elif c:
                counts[c] += counts[c - 1]
    return counts[-1]


def unique_paths_iii(grid):
    """Count walks from 1 to 2 that visit every non-obstacle (-1) cell exactly once."""
    rows = _grid(grid)
    starts = [
        (r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == 1
    ]
    if len(starts) != 1:
        raise ValueError("grid must hold exactly one start cell")
    remaining = sum(1 for row in rows for cell in row if cell != -1) - 1
    height, width = len(rows), len(rows[0])
    visited: set[tuple[int, int]] = set()

    def count(r: int, c: int, left: int) -> int:
        if rows[r][c] == 2 and left == 0:
            return 1
        if rows[r][c] == -1 or (r, c) in visited:
            return 0
        visited.add((r, c))
        total = 0
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if 0 <= nr < height and 0 <= nc < width:
                total += count(nr, nc, left - 1)
        visited.discard((r, c))
        return total

    return count(*starts[0], remaining)