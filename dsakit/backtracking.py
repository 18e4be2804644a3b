"""Backtracking searches on square boards: the knight's tour and N queens."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

# Knight moves in the order they are tried.
KNIGHT_MOVES = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

UNVISITED = -1


def knight_tour(size: int = 8) -> list[list[int]]:
    """Find a knight's tour starting from the top-left corner.

    Returns a ``size`` x ``size`` board where each square holds the move
    number on which the knight reaches it (the start square holds 0).
    Raises ValueError if the size is not positive or no tour exists.
    """
    if size < 1:
        raise ValueError(f"board size must be positive, got {size}")
    board = [[UNVISITED] * size for _ in range(size)]
    board[0][0] = 0
    total = size * size

    def extend(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[nx][ny] == UNVISITED:
                board[nx][ny] = move
                if extend(nx, ny, move + 1):
                    return True
                board[nx][ny] = UNVISITED
        return False

    if not extend(0, 0, 1):
        raise ValueError(f"no knight's tour exists on a {size}x{size} board")
    return board


def n_queens(size: int = 5) -> list[list[int]]:
    """Place ``size`` non-attacking queens, one per column, left to right.

    Returns a board of 0s and 1s with 1 marking a queen. Raises ValueError
    if the size is negative or no placement exists.
    """
    if size < 0:
        raise ValueError(f"board size must be non-negative, got {size}")
    board = [[0] * size for _ in range(size)]

    def is_safe(row: int, col: int) -> bool:
        if any(board[row][:col]):
            return False
        upper = zip(range(row, -1, -1), range(col, -1, -1))
        lower = zip(range(row, size), range(col, -1, -1))
        return not any(board[r][c] for r, c in (*upper, *lower))

    def solve(col: int) -> bool:
        if col >= size:
            return True
        for row in range(size):
            if is_safe(row, col):
                board[row][col] = 1
                if solve(col + 1):
                    return True
                board[row][col] = 0
        return False

    if not solve(0):
        raise ValueError(f"no placement of {size} queens exists")
    return board


def format_board(board: Iterable[Sequence[int]], width: int = 1) -> str:
    """Render a board one row per line, each cell right-aligned and followed by a space."""
    return "".join(
        "".join(f"{cell:>{width}} " for cell in row) + "\n" for row in board
    )