import random

import pytest

from algorithms import AlgorithmDefinition, Category, Visualizer, algorithms_by_category, get_algorithm
from algorithms.shuffling import ascending_ramp
from algorithms.sorting import random_values
from algorithms.sorting.bubble import bubble_sort
from engine import EngineState, PlaybackEngine

SORTS = algorithms_by_category(Category.SORTING)
SHUFFLES = algorithms_by_category(Category.SHUFFLING)

# sorts that only ever exchange two elements; the others shift or copy
# values and show a duplicate mid-move
SWAP_BASED = {"bubble-sort", "selection-sort", "quick-sort", "gnome-sort", "cocktail-shaker-sort"}


@pytest.mark.parametrize("algo", SORTS, ids=lambda a: a.key)
def test_sort_orders_small_input(algo):
    arr = [5, 3, 8, 1]
    snapshots = list(algo.run(arr))

    assert arr == [1, 3, 5, 8]
    assert snapshots[-1].data == [1, 3, 5, 8]
    for snap in snapshots:
        assert len(snap.data) == 4
        assert set(snap.data) <= {1, 3, 5, 8}
        assert not snap.is_projection


@pytest.mark.parametrize(
    "algo", [a for a in SORTS if a.key in SWAP_BASED], ids=lambda a: a.key,
)
def test_swap_sorts_show_a_permutation_every_frame(algo):
    for snap in algo.run([5, 3, 8, 1]):
        assert sorted(snap.data) == [1, 3, 5, 8]


def test_shift_sorts_show_mid_move_duplicates():
    frames = [snap.data for snap in get_algorithm("insertion-sort").run([5, 3, 8, 1])]
    assert any(len(set(frame)) < 4 for frame in frames)
    assert frames[-1] == [1, 3, 5, 8]


@pytest.mark.parametrize("algo", SORTS, ids=lambda a: a.key)
def test_sort_through_engine_updates_logical_state(algo):
    defn = AlgorithmDefinition(
        key=f"fixed-{algo.key}", label=algo.label, category=Category.SORTING,
        visualizer=Visualizer.BAR_CHART, generate_input=lambda: [5, 3, 8, 1], run=algo.run,
    )
    engine = PlaybackEngine()
    engine.load(defn)
    engine.jump_to_end()

    assert engine.state is EngineState.FINISHED
    assert engine.logical_state == [1, 3, 5, 8]


@pytest.mark.parametrize("algo", SORTS, ids=lambda a: a.key)
def test_sort_random_input_matches_sorted(algo):
    random.seed(11)
    arr = random_values(30)
    expected = sorted(arr)
    last = None
    for last in algo.run(arr):
        pass
    assert last.data == expected


@pytest.mark.parametrize("algo", SORTS, ids=lambda a: a.key)
def test_sort_handles_tiny_inputs(algo):
    for arr in ([], [7], [2, 1]):
        expected = sorted(arr)
        snapshots = list(algo.run(arr))
        assert snapshots
        assert snapshots[-1].data == expected


def test_bubble_sort_highlights_compared_pair():
    snaps = list(bubble_sort([2, 1]))
    compare = snaps[1]
    assert compare.highlighted_indices == [0, 1]
    assert compare.description.startswith("Comparing")
    assert snaps[-1].description == "Sorting completed!"


def test_bubble_sort_stops_after_clean_pass():
    snaps = list(bubble_sort([1, 2, 3, 4]))
    # start, three comparisons, done
    assert len(snaps) == 5


def test_random_values_are_clamped():
    assert len(random_values()) == 20
    assert len(random_values(1)) == 2
    assert len(random_values(500)) == 100
    assert all(10 <= v <= 89 for v in random_values(50))


@pytest.mark.parametrize("algo", SHUFFLES, ids=lambda a: a.key)
def test_shuffle_preserves_multiset(algo):
    random.seed(3)
    arr = ascending_ramp(16)
    original = sorted(arr)
    snapshots = list(algo.run(arr))
    for snap in snapshots:
        assert sorted(snap.data) == original
    assert sorted(arr) == original


def test_ascending_ramp_is_sorted():
    ramp = ascending_ramp(10)
    assert ramp == sorted(ramp)
    assert ramp[0] == 5
    assert ramp[-1] == 95


def test_sattolo_leaves_no_fixed_point():
    from algorithms.shuffling.sattolo import sattolo_shuffle

    random.seed(5)
    arr = list(range(12))
    for _ in sattolo_shuffle(arr):
        pass
    assert all(arr[i] != i for i in range(12))
