"""Puzzle domains that implement the graph capability."""

from pathstar.domains.elevation import ElevationMap, Point
from pathstar.domains.valves import (
    Label,
    PlannerNode,
    Valve,
    ValveNetwork,
    ValvePlanner,
)

__all__ = [
    "ElevationMap",
    "Point",
    "Label",
    "Valve",
    "ValveNetwork",
    "PlannerNode",
    "ValvePlanner",
]
