from __future__ import annotations

from typing import Dict, Hashable, List, Sequence, TypeVar

from pathstar.lib.algorithms.base import NUMERIC_WEIGHTS, GraphCapability, WeightDomain

N = TypeVar("N", bound=Hashable)


def reconstruct_path(start: N, goal: N, pred: Dict[N, N]) -> List[N]:
    """
    Build the start->goal path from a predecessor map.

    Walks `pred` backwards from `goal` until `start` is reached. `start` itself
    is never looked up, so it does not need an entry in `pred`.

    Args:
        start: Source node of the search.
        goal: Destination node of the search.
        pred: Maps each reached node to the node it was reached from.

    Returns:
        Nodes from start to goal inclusive.

    Raises:
        KeyError: If the chain from goal is broken before reaching start.
    """
    path = [goal]
    here = goal
    while here != start:
        here = pred[here]
        path.append(here)
    path.reverse()
    return path


def path_weight(
    graph: GraphCapability,
    path: Sequence[N],
    weights: WeightDomain = NUMERIC_WEIGHTS,
):
    """Sum of edge weights along consecutive pairs of `path`."""
    total = weights.zero
    for u, v in zip(path, path[1:]):
        total = total + graph.weight(u, v)
    return total


def is_valid_path(graph: GraphCapability, path: Sequence[N]) -> bool:
    """Return True if every consecutive pair of `path` is an edge of `graph`."""
    if not path:
        return False
    return all(v in graph.neighbours(u) for u, v in zip(path, path[1:]))
