import pytest

from algokit.backtracking import format_board, knights_tour, solve_maze, solve_n_queens


def _queens_valid(board):
    size = len(board)
    queens = [(r, c) for r in range(size) for c in range(size) if board[r][c] == 1]
    if len(queens) != size:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    diag = {r - c for r, c in queens}
    anti = {r + c for r, c in queens}
    return len(rows) == len(cols) == len(diag) == len(anti) == size


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8])
def test_n_queens_solutions_are_valid(n):
    board = solve_n_queens(n)
    assert board is not None
    assert _queens_valid(board)
    assert all(cell in (0, 1) for row in board for cell in row)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_impossible_sizes(n):
    assert solve_n_queens(n) is None


def test_n_queens_rejects_negative_size():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_knights_tour_single_square():
    assert knights_tour(1) == [[0]]


@pytest.mark.parametrize("n", [2, 3, 4])
def test_knights_tour_impossible_sizes(n):
    assert knights_tour(n) is None


def test_knights_tour_five_is_a_valid_tour():
    n = 5
    sol = knights_tour(n)
    assert sol is not None
    assert sol[0][0] == 0
    where = {sol[x][y]: (x, y) for x in range(n) for y in range(n)}
    assert sorted(where) == list(range(n * n))
    for move in range(1, n * n):
        (ax, ay), (bx, by) = where[move - 1], where[move]
        assert sorted((abs(ax - bx), abs(ay - by))) == [1, 2]


def test_knights_tour_rejects_nonpositive_size():
    with pytest.raises(ValueError):
        knights_tour(0)


def test_maze_path_is_connected_and_open():
    maze = [[1, 0, 0, 0], [1, 1, 0, 1], [0, 1, 0, 0], [1, 1, 1, 1]]
    sol = solve_maze(maze)
    assert sol is not None
    size = len(maze)
    assert sol[0][0] == 1 and sol[size - 1][size - 1] == 1
    cells = [(x, y) for x in range(size) for y in range(size) if sol[x][y] == 1]
    assert all(maze[x][y] == 1 for x, y in cells)
    assert len(cells) == 2 * size - 1
    x, y = 0, 0
    while (x, y) != (size - 1, size - 1):
        if x + 1 < size and sol[x + 1][y] == 1:
            x += 1
        else:
            assert sol[x][y + 1] == 1
            y += 1


def test_maze_without_path():
    assert solve_maze([[1, 0], [0, 1]]) is None
    assert solve_maze([[0, 1], [1, 1]]) is None


def test_maze_leaves_input_untouched():
    maze = [[1, 1], [0, 1]]
    solve_maze(maze)
    assert maze == [[1, 1], [0, 1]]


def test_maze_must_be_square():
    with pytest.raises(ValueError):
        solve_maze([[1, 1, 1], [1, 1, 1]])
    with pytest.raises(ValueError):
        solve_maze([])


def test_format_board_default_width():
    assert format_board([[1, 0], [0, 1]]) == " 1  0 \n 0  1 "


def test_format_board_pads_to_width():
    assert format_board([[5]], 2) == "  5 "
    lines = format_board([[10, 3], [7, 12]], 2).split("\n")
    assert len(lines) == 2
    assert all(len(line) == 8 for line in lines)