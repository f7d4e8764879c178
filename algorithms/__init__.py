"""
algorithms/__init__.py — Algorithm Registry
===========================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble-sort": AlgorithmDefinition(key, label, category, visualizer, …),
        …
    }

An AlgorithmDefinition is either AUTONOMOUS (one `run(state)` producer
for the whole simulation) or INTERACTIVE (named `methods`, each building
a short producer per user command against the persistent state). The
engine and UI both consume it, so adding an algorithm is: write the
generator, add one entry here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.sorting                      import random_values
from algorithms.sorting.bubble               import bubble_sort
from algorithms.sorting.insertion            import insertion_sort
from algorithms.sorting.selection            import selection_sort
from algorithms.sorting.merge                import merge_sort
from algorithms.sorting.quick                import quick_sort
from algorithms.sorting.shell                import shell_sort
from algorithms.sorting.gnome                import gnome_sort
from algorithms.sorting.cocktail             import cocktail_shaker_sort

from algorithms.shuffling                    import ascending_ramp
from algorithms.shuffling.fisher_yates       import fisher_yates_shuffle
from algorithms.shuffling.naive              import naive_shuffle
from algorithms.shuffling.sattolo            import sattolo_shuffle
from algorithms.shuffling.riffle             import riffle_shuffle

from algorithms.pathfinding                  import random_board
from algorithms.pathfinding.bfs              import bfs
from algorithms.pathfinding.dfs              import dfs
from algorithms.pathfinding.dijkstra         import dijkstra
from algorithms.pathfinding.astar            import astar

from algorithms.backtracking.n_queens        import n_queens,       empty_board
from algorithms.backtracking.sudoku          import sudoku,         random_puzzle
from algorithms.backtracking.subset_sum      import subset_sum,     random_numbers
from algorithms.backtracking.graph_coloring  import graph_coloring, random_graph

from algorithms.greedy.prims                 import prims,          random_network
from algorithms.greedy.convex_hull           import convex_hull,    random_points
from algorithms.greedy.ospf_routing          import ospf_routing,   random_topology

from algorithms.terrain.cellular_caves       import cellular_caves,  random_noise
from algorithms.terrain.diamond_square       import diamond_square,  flat_square
from algorithms.terrain.fault_formation      import fault_formation, flat_ground
from algorithms.terrain.maze_generator       import maze_generator,  solid_block

from algorithms.structures                   import stack as _stack
from algorithms.structures                   import queue as _queue
from algorithms.structures                   import doubly_linked_list as _dll
from algorithms.structures                   import bst as _bst
from algorithms.structures.min_heap          import min_heap,        random_values as random_heap_values


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
class Category(Enum):
    SORTING         = "Sorting"
    PATHFINDING     = "Pathfinding"
    DATA_STRUCTURES = "Data Structures"
    BACKTRACKING    = "Backtracking"
    GREEDY          = "Greedy"
    TERRAIN         = "Terrain"
    SHUFFLING       = "Shuffling"


class Visualizer(Enum):
    BAR_CHART       = "bar-chart"
    GRID_2D         = "grid-2d"
    PRIMITIVE_GRAPH = "primitive-graph"
    TERRAIN_3D      = "terrain-3d"


class ControlKind(Enum):
    NUMERIC_INPUT = "numeric-input"
    BUTTON        = "button"


# ---------------------------------------------------------------------------
# Control — one declarative UI affordance
# ---------------------------------------------------------------------------
VALUE_INPUT_ID = "value"      # buttons read their argument from this input


@dataclass
class Control:
    kind:          ControlKind
    label:         str
    id:            str
    bound_method:  Optional[str] = None     # buttons only: key into `methods`
    default_value: Optional[int] = None     # numeric inputs only
    takes_value:   bool          = True     # buttons only: pass the "value" input?

    def to_dict(self) -> dict:
        return {
            "kind":          self.kind.value,
            "label":         self.label,
            "id":            self.id,
            "bound_method":  self.bound_method,
            "default_value": self.default_value,
            "takes_value":   self.takes_value,
        }


def numeric(label: str, control_id: str, default: int) -> Control:
    return Control(ControlKind.NUMERIC_INPUT, label, control_id, default_value=default)


def button(label: str, control_id: str, method: str, takes_value: bool = True) -> Control:
    return Control(ControlKind.BUTTON, label, control_id, bound_method=method, takes_value=takes_value)


# ---------------------------------------------------------------------------
# AlgorithmDefinition — metadata card + producer factories
# ---------------------------------------------------------------------------
@dataclass
class AlgorithmDefinition:
    key:            str                                 # registry key, e.g. "bubble-sort"
    label:          str                                 # human label, e.g. "Bubble Sort"
    category:       Category
    visualizer:     Visualizer
    generate_input: Callable[..., Any]                  # (size=None) -> fresh logical state
    run:            Optional[Callable[..., Any]] = None          # state -> producer
    methods:        Dict[str, Callable[..., Any]] = field(default_factory=dict)
    controls:       List[Control] = field(default_factory=list)
    description:    str = ""                            # one-liner for the UI card
    complexity:     str = ""                            # e.g. "O(n²)"
    preview:        Optional[Callable[[Any], Any]] = None  # state -> projection shown before any command

    def __post_init__(self):
        if (self.run is None) == (not self.methods):
            raise ValueError(
                f"Algorithm '{self.key}' must define exactly one of `run` or `methods`"
            )

    @property
    def is_interactive(self) -> bool:
        return self.run is None

    def control(self, control_id: str) -> Optional[Control]:
        for c in self.controls:
            if c.id == control_id:
                return c
        return None

    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "label":       self.label,
            "category":    self.category.value,
            "visualizer":  self.visualizer.value,
            "description": self.description,
            "complexity":  self.complexity,
            "interactive": self.is_interactive,
            "methods":     list(self.methods),
            "controls":    [c.to_dict() for c in self.controls],
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
def _sort(key, label, fn, complexity, description) -> AlgorithmDefinition:
    return AlgorithmDefinition(
        key=key, label=label, category=Category.SORTING, visualizer=Visualizer.BAR_CHART,
        generate_input=random_values, run=fn,
        controls=[numeric("Size", "size", 20)],
        complexity=complexity, description=description,
    )


def _shuffle(key, label, fn, description) -> AlgorithmDefinition:
    return AlgorithmDefinition(
        key=key, label=label, category=Category.SHUFFLING, visualizer=Visualizer.BAR_CHART,
        generate_input=ascending_ramp, run=fn,
        controls=[numeric("Size", "size", 20)],
        complexity="O(n)", description=description,
    )


def _search(key, label, fn, complexity, description) -> AlgorithmDefinition:
    return AlgorithmDefinition(
        key=key, label=label, category=Category.PATHFINDING, visualizer=Visualizer.GRID_2D,
        generate_input=random_board, run=fn,
        controls=[numeric("Walls (%)", "size", 20)],
        complexity=complexity, description=description,
    )


def _terrain(key, label, fn, gen, default, description) -> AlgorithmDefinition:
    return AlgorithmDefinition(
        key=key, label=label, category=Category.TERRAIN, visualizer=Visualizer.TERRAIN_3D,
        generate_input=gen, run=fn,
        controls=[numeric("Size", "size", default)],
        description=description,
    )


_ALL: List[AlgorithmDefinition] = [

    # -- sorting --
    _sort("bubble-sort",          "Bubble Sort",          bubble_sort,          "O(n²)",
          "Repeatedly swaps adjacent out-of-order pairs until a pass makes no swap."),
    _sort("insertion-sort",       "Insertion Sort",       insertion_sort,       "O(n²)",
          "Grows a sorted prefix, shifting each new key left into place."),
    _sort("selection-sort",       "Selection Sort",       selection_sort,       "O(n²)",
          "Finds the minimum of the unsorted suffix and swaps it to the front."),
    _sort("merge-sort",           "Merge Sort",           merge_sort,           "O(n log n)",
          "Sorts each half recursively, then merges the two sorted halves."),
    _sort("quick-sort",           "Quick Sort",           quick_sort,           "O(n log n) avg",
          "Partitions around a pivot, then sorts both sides recursively."),
    _sort("shell-sort",           "Shell Sort",           shell_sort,           "O(n^1.5)",
          "Insertion sort over shrinking gaps: far elements move early."),
    _sort("gnome-sort",           "Gnome Sort",           gnome_sort,           "O(n²)",
          "Steps forward while ordered, swaps and steps back when not."),
    _sort("cocktail-shaker-sort", "Cocktail Shaker Sort", cocktail_shaker_sort, "O(n²)",
          "Bubble sort in both directions on alternate passes."),

    # -- shuffling --
    _shuffle("fisher-yates-shuffle", "Fisher-Yates Shuffle",   fisher_yates_shuffle,
             "Unbiased: every permutation is equally likely."),
    _shuffle("naive-shuffle",        "Naive Shuffle (Biased)", naive_shuffle,
             "Swaps with any index of the whole array: n^n outcomes over n! permutations, so biased."),
    _shuffle("sattolo-shuffle",      "Sattolo's Algorithm",    sattolo_shuffle,
             "Fisher-Yates excluding self-swaps: produces one random n-cycle."),
    _shuffle("riffle-shuffle",       "Riffle Shuffle",         riffle_shuffle,
             "Cuts the deck and interleaves the halves, like shuffling cards. Three riffles."),

    # -- pathfinding --
    _search("bfs",      "Breadth-First Search", bfs,      "O(V + E)",
            "Explores layer by layer. Finds a shortest path on an unweighted grid."),
    _search("dfs",      "Depth-First Search",   dfs,      "O(V + E)",
            "Dives deep before backtracking. Does NOT guarantee a shortest path."),
    _search("dijkstra", "Dijkstra's Algorithm", dijkstra, "O((V + E) log V)",
            "Expands the closest unvisited cell first. Guarantees a shortest path."),
    _search("astar",    "A* Search",            astar,    "O((V + E) log V)",
            "Dijkstra guided by the Manhattan distance to the goal."),

    # -- backtracking --
    AlgorithmDefinition(
        key="n-queens", label="N-Queens Solver",
        category=Category.BACKTRACKING, visualizer=Visualizer.GRID_2D,
        generate_input=empty_board, run=n_queens,
        controls=[numeric("Size (N)", "n", 4)],
        description="Place N queens on an N×N board so that no two attack each other.",
    ),
    AlgorithmDefinition(
        key="sudoku-solver", label="Sudoku Solver",
        category=Category.BACKTRACKING, visualizer=Visualizer.GRID_2D,
        generate_input=random_puzzle, run=sudoku,
        description="Solves a randomly generated Sudoku puzzle cell by cell.",
    ),
    AlgorithmDefinition(
        key="subset-sum", label="Subset Sum",
        category=Category.BACKTRACKING, visualizer=Visualizer.BAR_CHART,
        generate_input=random_numbers, run=subset_sum,
        controls=[numeric("Numbers", "size", 10)],
        complexity="O(2^n)",
        description="Finds a subset adding up to a target drawn from the input itself.",
    ),
    AlgorithmDefinition(
        key="m-coloring", label="Graph Coloring",
        category=Category.BACKTRACKING, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=random_graph, run=graph_coloring,
        controls=[numeric("Nodes", "size", 6)],
        complexity="O(m^V)",
        description="Assign one of four colours to each node so no edge joins equal colours.",
    ),

    # -- greedy --
    AlgorithmDefinition(
        key="prims-mst", label="Prim's MST",
        category=Category.GREEDY, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=random_network, run=prims,
        controls=[numeric("Nodes", "count", 8)],
        complexity="O(V · E)",
        description="Grows a minimum spanning tree by always taking the shortest crossing edge.",
    ),
    AlgorithmDefinition(
        key="convex-hull", label="Convex Hull (Jarvis March)",
        category=Category.GREEDY, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=random_points, run=convex_hull,
        controls=[numeric("Points", "n", 10)],
        complexity="O(n · h)",
        description="Wraps a rubber band around the outermost points.",
    ),
    AlgorithmDefinition(
        key="ospf-routing", label="Network Routing (OSPF)",
        category=Category.GREEDY, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=random_topology, run=ospf_routing,
        controls=[numeric("Routers", "count", 6)],
        complexity="O((V + E) log V)",
        description="Router R0 builds its shortest-path tree over weighted links (1 fast, 50 slow).",
    ),

    # -- terrain --
    _terrain("cellular-caves",  "Cellular Automata (Caves)",    cellular_caves,  random_noise, 30,
             "Random noise smoothed by a 4-5 neighbour rule into open caverns."),
    _terrain("diamond-square",  "Diamond-Square Terrain",       diamond_square,  flat_square,  17,
             "Fractal midpoint displacement with halving roughness."),
    _terrain("fault-formation", "Fault Formation (Tectonics)",  fault_formation, flat_ground,  20,
             "Random fault lines lift one side and sink the other."),
    _terrain("maze-generator",  "Maze Generator (Backtracker)", maze_generator,  solid_block,  21,
             "A miner carves a perfect maze, backtracking when stuck."),

    # -- data structures --
    AlgorithmDefinition(
        key="min-heap", label="Binary Min-Heap",
        category=Category.DATA_STRUCTURES, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=random_heap_values, run=min_heap,
        controls=[numeric("Elements", "size", 12)],
        complexity="O(log n) per operation",
        description="Builds a heap by sift-up inserts, then extracts the minimum with sift-down.",
    ),
    AlgorithmDefinition(
        key="stack-interactive", label="Stack",
        category=Category.DATA_STRUCTURES, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=_stack.empty_stack,
        preview=_stack.draw_stack,
        methods={"push": _stack.push, "pop": _stack.pop},
        controls=[
            numeric("Value", VALUE_INPUT_ID, 10),
            button("Push", "push", "push"),
            button("Pop",  "pop",  "pop", takes_value=False),
        ],
        description="LIFO: last in, first out.",
    ),
    AlgorithmDefinition(
        key="queue-interactive", label="Queue",
        category=Category.DATA_STRUCTURES, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=_queue.starter_queue,
        preview=_queue.draw_queue,
        methods={"enqueue": _queue.enqueue, "dequeue": _queue.dequeue},
        controls=[
            numeric("Value", VALUE_INPUT_ID, 5),
            button("Enqueue", "enq", "enqueue"),
            button("Dequeue", "deq", "dequeue", takes_value=False),
        ],
        description="FIFO: first in, first out.",
    ),
    AlgorithmDefinition(
        key="doubly-linked-list", label="Doubly Linked List",
        category=Category.DATA_STRUCTURES, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=_dll.starter_list,
        preview=_dll.draw_list,
        methods={"prepend": _dll.prepend, "append": _dll.append, "delete_head": _dll.delete_head},
        controls=[
            numeric("Value", VALUE_INPUT_ID, 99),
            button("Prepend",     "prepend",  "prepend"),
            button("Append",      "append",   "append"),
            button("Delete Head", "del-head", "delete_head", takes_value=False),
        ],
        description="Nodes point to both their next and previous neighbours.",
    ),
    AlgorithmDefinition(
        key="bst-interactive", label="Binary Search Tree",
        category=Category.DATA_STRUCTURES, visualizer=Visualizer.PRIMITIVE_GRAPH,
        generate_input=_bst.empty_tree,
        preview=_bst.draw_tree,
        methods={"insert": _bst.insert},
        controls=[
            numeric("Value", VALUE_INPUT_ID, 50),
            button("Insert", "btn-insert", "insert"),
        ],
        description="Build a BST by inserting values one at a time.",
    ),
]

REGISTRY: Dict[str, AlgorithmDefinition] = {algo.key: algo for algo in _ALL}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgorithmDefinition]:
    """Return AlgorithmDefinition by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgorithmDefinition]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: Category) -> List[AlgorithmDefinition]:
    return [a for a in REGISTRY.values() if a.category is category]


__all__ = [
    "AlgorithmDefinition",
    "Category",
    "Visualizer",
    "Control",
    "ControlKind",
    "VALUE_INPUT_ID",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
]
