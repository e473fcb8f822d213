"""Sample graph capabilities shared by the search engine tests."""

from typing import Callable, Dict, Hashable, List, Optional, Set, Tuple

import pytest

Cell = Tuple[int, int]


class GridGraph:
    """4-connected grid; removed cells have no incoming or outgoing edges."""

    def __init__(
        self,
        width: int,
        height: int,
        removed: Optional[Set[Cell]] = None,
        cell_weight: Optional[Dict[Cell, int]] = None,
        heuristic: Optional[Callable[[Cell, Cell], int]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.removed = removed or set()
        self.cell_weight = cell_weight or {}
        self._heuristic = heuristic

    def heuristic(self, from_node: Cell, to_node: Cell) -> int:
        if self._heuristic is None:
            return 0
        return self._heuristic(from_node, to_node)

    def weight(self, from_node: Cell, to_node: Cell) -> int:
        # Entering a cell costs that cell's weight
        return self.cell_weight.get(to_node, 1)

    def neighbours(self, node: Cell) -> List[Cell]:
        if node in self.removed:
            return []
        x, y = node
        result = []
        for nx_, ny_ in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx_ < self.width and 0 <= ny_ < self.height:
                if (nx_, ny_) not in self.removed:
                    result.append((nx_, ny_))
        return result


class DictGraph:
    """Adjacency-dict capability: {u: {v: weight}}; records heuristic calls."""

    def __init__(
        self,
        adj: Dict[Hashable, Dict[Hashable, object]],
        heuristic: Optional[Callable[[Hashable, Hashable], object]] = None,
        zero: object = 0,
    ) -> None:
        self.adj = adj
        self._heuristic = heuristic
        self._zero = zero
        self.heuristic_calls: List[Tuple[Hashable, Hashable]] = []

    def heuristic(self, from_node, to_node):
        self.heuristic_calls.append((from_node, to_node))
        if self._heuristic is None:
            return self._zero
        return self._heuristic(from_node, to_node)

    def weight(self, from_node, to_node):
        return self.adj[from_node][to_node]

    def neighbours(self, node):
        return list(self.adj[node])


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@pytest.fixture
def grid3():
    # 3x3 unit grid, zero heuristic
    #
    #  (0,0)-(1,0)-(2,0)
    #    |     |     |
    #  (0,1)-(1,1)-(2,1)
    #    |     |     |
    #  (0,2)-(1,2)-(2,2)
    return GridGraph(3, 3)


@pytest.fixture
def grid3_hole():
    # Same grid with the centre cell removed
    return GridGraph(3, 3, removed={(1, 1)})


@pytest.fixture
def disconnected():
    # Two nodes, no edges
    return DictGraph({"A": {}, "B": {}})


@pytest.fixture
def detour():
    # Metric:
    #       [5]
    #   A────────►B────[10]───►D
    #   │         ▲
    #  [1]       [1]
    #   │         │
    #   └───►C────┘
    #
    # B is first queued at 5, then improved to 2 through C; the stale
    # entry is popped before D (12) and discarded.
    return DictGraph(
        {
            "A": {"B": 5, "C": 1},
            "B": {"D": 10},
            "C": {"B": 1},
            "D": {},
        }
    )


@pytest.fixture
def cyclic():
    # Metric:
    #   A ◄─[1]─► B ◄─[1]─► C ◄─[1]─► D
    #   ▲                             │
    #   └─────────────[7]─────────────┘
    return DictGraph(
        {
            "A": {"B": 1},
            "B": {"A": 1, "C": 1},
            "C": {"B": 1, "D": 1},
            "D": {"C": 1, "A": 7},
        }
    )


@pytest.fixture
def make_grid():
    """Factory for GridGraph instances with custom size, holes and weights."""
    return GridGraph


@pytest.fixture
def make_graph():
    """Factory for DictGraph instances."""
    return DictGraph


@pytest.fixture
def manhattan_heuristic():
    return manhattan
