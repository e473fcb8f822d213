"""pathstar: generic best-first shortest-path search.

The engine searches any object that provides `heuristic`, `weight` and
`neighbours`; two puzzle domains ship with the package.

Primary API:
    find_path() - Shortest path between two nodes, or None
    GraphCapability - Protocol a searchable graph satisfies
    WeightDomain - Zero and unreachable values of a weight type
    from_networkx() - Wrap a NetworkX graph as a capability

Example:
    from pathstar import find_path
    from pathstar.domains import ElevationMap

    hill = ElevationMap.parse(open("input.txt").read())
    path = find_path(hill, hill.start, hill.end)
"""

from __future__ import annotations

from pathstar import logging
from pathstar._version import __version__
from pathstar.errors import PathstarError, PuzzleParseError
from pathstar.lib.algorithms import (
    NUMERIC_WEIGHTS,
    GraphCapability,
    SearchStats,
    WeightDomain,
    find_path,
    is_valid_path,
    path_weight,
    reconstruct_path,
)
from pathstar.lib.nx import NxCapability, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Search
    "find_path",
    "SearchStats",
    "GraphCapability",
    "WeightDomain",
    "NUMERIC_WEIGHTS",
    "reconstruct_path",
    "path_weight",
    "is_valid_path",
    # Errors
    "PathstarError",
    "PuzzleParseError",
    # Library integrations (NetworkX)
    "NxCapability",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
