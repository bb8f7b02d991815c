"""Placing non-attacking queens and knights on square boards."""

from __future__ import annotations

from collections.abc import Iterator

_KNIGHT_MOVES = ((-2, -1), (-2, 1), (1, 2), (-1, 2), (2, -1), (2, 1), (1, -2), (-1, -2))


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("board size must not be negative")


def _queen_columns(n: int) -> Iterator[list[int]]:
    columns: list[int] = []
    used: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[list[int]]:
        if row == n:
            yield list(columns)
            return
        for col in range(n):
            if col in used or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.append(col)
            used.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            yield from place(row + 1)
            columns.pop()
            used.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    yield from place(0)


def count_queens(n):
    """Return the number of ways to place ``n`` non-attacking queens on an n x n board."""
    _check_size(n)
    return sum(1 for _ in _queen_columns(n))


def queen_boards(n):
    """Return every n-queens solution as a 0/1 board, filled row by row."""
    _check_size(n)
    return [
        [[1 if c == col else 0 for c in range(n)] for col in columns]
        for columns in _queen_columns(n)
    ]


def solve_queens(n):
    """Return the first solution found filling column by column, or None."""
    _check_size(n)
    # Placing by columns is the row-wise search on the transposed board.
    rows = next(_queen_columns(n), None)
    if rows is None:
        return None
    return [[1 if rows[c] == r else 0 for c in range(n)] for r in range(n)]


def knight_boards(n, knights):
    """Return every placement of ``knights`` mutually safe knights on an n x n board."""
    _check_size(n)
    if knights < 0:
        raise ValueError("number of knights must not be negative")
    board = [[0] * n for _ in range(n)]

    def safe(r: int, c: int) -> bool:
        return not any(
            0 <= r + dr < n and 0 <= c + dc < n and board[r + dr][c + dc]
            for dr, dc in _KNIGHT_MOVES
        )

    def place(cell: int, left: int) -> Iterator[list[list[int]]]:
        if left == 0:
            yield [list(row) for row in board]
            return
        if cell == n * n:
            return
        r, c = divmod(cell, n)
        if safe(r, c):
            board[r][c] = 1
            yield from place(cell + 1, left - 1)
            board[r][c] = 0
        yield from place(cell + 1, left)

    return list(place(0, knights))


def format_board(board, mark):
    """Render ``board`` with ``mark`` on occupied cells and 'x' on empty ones."""
    return "".join(
        "".join(f"{mark if cell else 'x'} " for cell in row) + "\n" for row in board
    )