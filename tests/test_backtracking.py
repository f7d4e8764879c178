import random
import re

from algorithms.backtracking.graph_coloring import PALETTE, graph_coloring, random_graph
from algorithms.backtracking.n_queens import QUEEN, empty_board, is_safe, n_queens
from algorithms.backtracking.subset_sum import random_numbers, subset_sum
from algorithms.backtracking.sudoku import N, random_puzzle, sudoku
from engine import PlaybackEngine
from projection.graph import GraphProjection
from projection.grid import count_cells


def _last(producer):
    last = None
    for last in producer:
        pass
    return last


# ---------------------------------------------------------------------------
# N-Queens
# ---------------------------------------------------------------------------
def test_four_queens_solution():
    last = _last(n_queens(empty_board(4)))
    assert last.description == "Solution found!"

    grid = last.data
    queens = [(c.row, c.col) for row in grid for c in row if c.value == QUEEN]
    assert len(queens) == 4
    assert len({r for r, _ in queens}) == 4
    assert len({c for _, c in queens}) == 4
    assert len({r - c for r, c in queens}) == 4
    assert len({r + c for r, c in queens}) == 4


def test_placed_queens_stay_on_board_until_backtracked():
    placed = set()
    backtracks = 0
    for snap in n_queens(empty_board(4)):
        match = re.match(r"(Placed queen at|Backtracking from) \[(\d+), (\d+)\]", snap.description)
        if match:
            cell = (int(match.group(2)), int(match.group(3)))
            if match.group(1) == "Placed queen at":
                placed.add(cell)
            else:
                placed.remove(cell)
                backtracks += 1

        on_board = {(c.row, c.col) for row in snap.data for c in row if c.value == QUEEN}
        assert on_board == placed, snap.description

    assert backtracks > 0
    assert len(placed) == 4


def test_n_queens_through_engine_keeps_board_as_state():
    engine = PlaybackEngine()
    engine.load("n-queens", 4)
    board = engine.logical_state
    engine.jump_to_end()

    # projections never replace the board; the solver mutated it in place
    assert engine.logical_state is board
    assert count_cells(board, lambda c: c.value == QUEEN) == 4
    assert engine.current.description == "Solution found!"


def test_board_size_is_clamped():
    assert len(empty_board(2)) == 4
    assert len(empty_board(50)) == 10
    assert len(empty_board()) == 4


def test_is_safe_detects_row_and_diagonals():
    board = empty_board(4)
    board[1][0].value = QUEEN
    assert not is_safe(board, 1, 2)     # same row
    assert not is_safe(board, 0, 1)
    assert not is_safe(board, 2, 1)
    assert is_safe(board, 3, 1)


# ---------------------------------------------------------------------------
# Sudoku
# ---------------------------------------------------------------------------
def test_sudoku_solves_generated_puzzle():
    random.seed(4)
    grid = random_puzzle()
    givens = {(c.row, c.col): c.value for row in grid for c in row if c.is_wall}

    last = _last(sudoku(grid))
    assert last.description == "Solved!"

    solved = last.data
    for r in range(N):
        assert sorted(c.value for c in solved[r]) == list(range(1, 10))
        assert sorted(solved[i][r].value for i in range(N)) == list(range(1, 10))
    for (r, c), value in givens.items():
        assert solved[r][c].value == value


# ---------------------------------------------------------------------------
# Subset sum
# ---------------------------------------------------------------------------
def test_subset_sum_finds_hand_picked_target():
    arr = [3, 34, 4, 12, 5, 2]
    snapshots = list(subset_sum(arr, 9))
    last = snapshots[-1]
    assert last.description.startswith("SOLUTION FOUND!")
    assert sum(arr[i] for i in last.highlighted_indices) == 9


def test_subset_sum_reports_exhaustion():
    last = _last(subset_sum([2, 4, 6], 5))
    assert last.description == "No solution found (search exhausted)."


def test_subset_sum_random_target_always_solvable():
    random.seed(8)
    last = _last(subset_sum(random_numbers(12)))
    assert last.description.startswith("SOLUTION FOUND!")


# ---------------------------------------------------------------------------
# Graph colouring
# ---------------------------------------------------------------------------
def test_graph_coloring_produces_proper_colouring():
    # wheel: hub 0 joined to a ring of 1..7
    graph = GraphProjection()
    for i in range(8):
        graph.create_node(i * 40, i * 10, value=str(i), node_id=str(i))
    for i in range(1, 8):
        graph.create_edge("0", str(i))
        graph.create_edge(str(i), str(i % 7 + 1))
    last = _last(graph_coloring(graph))
    assert last.description.startswith("Finished!")

    coloured = last.data
    for node in coloured.nodes:
        assert node.color in PALETTE
    for edge in coloured.edges:
        assert coloured.get_node(edge.source).color is not coloured.get_node(edge.target).color


def test_graph_coloring_reports_k5_exhaustion():
    graph = GraphProjection()
    for i in range(5):
        graph.create_node(i * 50, 0, value=str(i), node_id=str(i))
    for i in range(5):
        for j in range(i + 1, 5):
            graph.create_edge(str(i), str(j))

    last = _last(graph_coloring(graph))
    assert last.description == "No valid colouring with 4 colours."


def test_random_graph_has_closing_ring_edge_once():
    random.seed(0)
    graph = random_graph(6)
    ring = [e for e in graph.edges if e.connects("0", "5")]
    assert len(ring) == 1
