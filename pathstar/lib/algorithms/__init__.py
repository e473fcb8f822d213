"""Generic shortest-path search over graph capabilities."""

from pathstar.lib.algorithms.astar import SearchStats, find_path
from pathstar.lib.algorithms.base import (
    NUMERIC_WEIGHTS,
    Cost,
    GraphCapability,
    WeightDomain,
)
from pathstar.lib.algorithms.path_utils import (
    is_valid_path,
    path_weight,
    reconstruct_path,
)

__all__ = [
    "find_path",
    "SearchStats",
    "GraphCapability",
    "WeightDomain",
    "NUMERIC_WEIGHTS",
    "Cost",
    "reconstruct_path",
    "path_weight",
    "is_valid_path",
]
