"""Backtracking puzzles: N queens, the knight's tour and a rat in a maze."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def _queen_is_safe(board: list[list[int]], row: int, col: int) -> bool:
    size = len(board)
    if any(board[row][c] for c in range(col)):
        return False
    if any(board[r][c] for r, c in zip(range(row, -1, -1), range(col, -1, -1))):
        return False
    if any(board[r][c] for r, c in zip(range(row, size), range(col, -1, -1))):
        return False
    return True


def _place_queens(board: list[list[int]], col: int) -> bool:
    size = len(board)
    if col >= size:
        return True
    for row in range(size):
        if _queen_is_safe(board, row, col):
            board[row][col] = 1
            if _place_queens(board, col + 1):
                return True
            board[row][col] = 0
    return False


def solve_n_queens(n: int = 4) -> list[list[int]] | None:
    """Place n non-attacking queens, one per column.

    Returns the board with 1 where a queen stands, or None if none fits.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    board = [[0] * n for _ in range(n)]
    return board if _place_queens(board, 0) else None


def _tour_from(sol: list[list[int]], x: int, y: int, move: int) -> bool:
    size = len(sol)
    if move == size * size:
        return True
    for dx, dy in _KNIGHT_MOVES:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size and sol[nx][ny] == -1:
            sol[nx][ny] = move
            if _tour_from(sol, nx, ny, move + 1):
                return True
            sol[nx][ny] = -1
    return False


def knights_tour(n: int = 8) -> list[list[int]] | None:
    """Find a knight's tour of an n by n board starting in the top-left corner.

    Returns the board numbered with the move on which each square is reached,
    or None if no tour exists.
    """
    if n < 1:
        raise ValueError(f"board size must be positive, got {n}")
    sol = [[-1] * n for _ in range(n)]
    sol[0][0] = 0
    return sol if _tour_from(sol, 0, 0, 1) else None


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of open cells (1) from the top-left to the bottom-right corner.

    Moves go down or right. Returns a grid with 1 on the path, or None.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        raise ValueError("maze must be a non-empty square grid")
    sol = [[0] * size for _ in range(size)]

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < size and 0 <= y < size and grid[x][y] == 1

    def walk(x: int, y: int) -> bool:
        if x == size - 1 and y == size - 1 and grid[x][y] == 1:
            sol[x][y] = 1
            return True
        if not is_open(x, y) or sol[x][y] == 1:
            return False
        sol[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        sol[x][y] = 0
        return False

    return sol if walk(0, 0) else None


def format_board(board: Sequence[Sequence[Any]], width: int = 1) -> str:
    """Render a board one row per line, each cell padded to width and spaced."""
    return "\n".join(
        "".join(f" {str(cell).rjust(width)} " for cell in row) for row in board
    )