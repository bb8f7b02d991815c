"""Count islands of land in a grid where 'W' marks water."""

from __future__ import annotations


def island_count(grid):
    """Return the number of 4-connected groups of cells that are not 'W'."""
    rows = [list(row) for row in grid]
    seen: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "W" or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                y, x = stack.pop()
                for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
                    if (
                        0 <= ny < len(rows)
                        and 0 <= nx < len(rows[ny])
                        and rows[ny][nx] != "W"
                        and (ny, nx) not in seen
                    ):
                        seen.add((ny, nx))
                        stack.append((ny, nx))
    return count