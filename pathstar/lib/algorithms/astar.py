from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

from pathstar.lib.algorithms.base import NUMERIC_WEIGHTS, GraphCapability, WeightDomain
from pathstar.lib.algorithms.path_utils import reconstruct_path
from pathstar.logging import get_logger

logger = get_logger(__name__)

N = TypeVar("N", bound=Hashable)
W = TypeVar("W")


@dataclass
class SearchStats:
    """Counters collected during a single `find_path` call.

    Attributes:
        expanded: Frontier entries processed (neighbours enumerated).
        relaxed: Edge relaxations that improved a score.
        pushed: Entries inserted into the frontier.
        stale_discarded: Entries popped and dropped as superseded.
    """

    expanded: int = 0
    relaxed: int = 0
    pushed: int = 0
    stale_discarded: int = 0


class _Frontier(Generic[N, W]):
    """
    Min-priority open set with insert-or-improve and lazy deletion.

    `heapq` has no decrease-key, so improving a queued node pushes a second
    entry and records the new priority as authoritative. Popped entries whose
    priority differs from the authoritative one are stale and are skipped.
    A monotonically increasing sequence number breaks ties in insertion order
    and keeps node objects out of heap comparisons.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[W, int, N]] = []
        self._best: Dict[N, W] = {}
        self._seq = count()
        self.stale_discarded = 0
        self.pushed = 0

    def __bool__(self) -> bool:
        return bool(self._best)

    def push_or_improve(self, node: N, priority: W) -> None:
        """Queue `node`, or lower its priority if it is already queued higher."""
        queued = self._best.get(node)
        if queued is not None and not priority < queued:
            return
        self._best[node] = priority
        heappush(self._heap, (priority, next(self._seq), node))
        self.pushed += 1

    def pop_min(self) -> Tuple[N, W]:
        """Remove and return the queued node with the lowest priority."""
        while self._heap:
            priority, _, node = heappop(self._heap)
            if node in self._best and self._best[node] == priority:
                del self._best[node]
                return node, priority
            self.stale_discarded += 1
        raise IndexError("pop from empty frontier")


def find_path(
    graph: GraphCapability,
    start: N,
    goal: N,
    weights: WeightDomain = NUMERIC_WEIGHTS,
    stats: Optional[SearchStats] = None,
) -> Optional[List[N]]:
    """
    Best-first shortest path from `start` to `goal` over a graph capability.

    Scores only ever improve: an edge is relaxed when it strictly lowers the
    neighbour's recorded score, at which point the score ledger and the
    predecessor map are updated together. There is no closed set; stale
    frontier entries are discarded on extraction instead, which makes cyclic
    graphs and re-visits safe.

    The priority of a relaxed neighbour is `score + heuristic(current, v)`.
    This matches the textbook `heuristic(v, goal)` ordering only for a zero
    heuristic or one that is constant in its first argument.

    Args:
        graph: Object providing `heuristic`, `weight` and `neighbours`.
        start: Source node.
        goal: Destination node.
        weights: Zero and unreachable values of the weight type.
        stats: Optional counters, filled in when the search returns.

    Returns:
        Nodes from start to goal inclusive, or None when no path exists.
    """
    if start == goal:
        logger.debug("find_path: start equals goal %r", start)
        return [start]

    scores: Dict[N, W] = {start: weights.zero}
    pred: Dict[N, N] = {}
    frontier: _Frontier = _Frontier()
    frontier.push_or_improve(start, graph.heuristic(start, goal))

    expanded = 0
    relaxed = 0
    path: Optional[List[N]] = None

    while frontier:
        current, _ = frontier.pop_min()
        if current == goal:
            path = reconstruct_path(start, goal, pred)
            break

        expanded += 1
        score = scores[current]

        for neighbour in graph.neighbours(current):
            tentative = score + graph.weight(current, neighbour)
            if tentative < scores.get(neighbour, weights.unreachable):
                pred[neighbour] = current
                scores[neighbour] = tentative
                relaxed += 1
                frontier.push_or_improve(
                    neighbour, tentative + graph.heuristic(current, neighbour)
                )

    if stats is not None:
        stats.expanded = expanded
        stats.relaxed = relaxed
        stats.pushed = frontier.pushed
        stats.stale_discarded = frontier.stale_discarded

    if path is None:
        logger.debug(
            "find_path: no path %r -> %r after expanding %d nodes",
            start,
            goal,
            expanded,
        )
    else:
        logger.debug(
            "find_path: %r -> %r in %d edges, expanded=%d relaxed=%d stale=%d",
            start,
            goal,
            len(path) - 1,
            expanded,
            relaxed,
            frontier.stale_discarded,
        )
    return path
