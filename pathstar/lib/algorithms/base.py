from __future__ import annotations

import math
from dataclasses import dataclass
from typing import (
    Generic,
    Hashable,
    Protocol,
    Sequence,
    TypeVar,
    Union,
    runtime_checkable,
)

#: Node type of a graph capability. Nodes index dicts, so they must be hashable.
N = TypeVar("N", bound=Hashable)

#: Weight type of a graph capability: totally ordered and additive.
W = TypeVar("W")

#: Numeric weight used by the bundled domains (steps, distances, etc.).
Cost = Union[int, float]


@runtime_checkable
class GraphCapability(Protocol[N, W]):
    """
    The three operations a graph must provide to be searched.

    All three are expected to be pure. The search engine trusts every node
    returned by `neighbours` and never checks that it exists.
    """

    def heuristic(self, from_node: N, to_node: N) -> W:
        """Lower-bound estimate of the cost from `from_node` to `to_node`."""
        ...

    def weight(self, from_node: N, to_node: N) -> W:
        """Cost of the direct edge `from_node -> to_node`."""
        ...

    def neighbours(self, node: N) -> Sequence[N]:
        """Nodes reachable from `node` in one step. May be empty."""
        ...


@dataclass(frozen=True)
class WeightDomain(Generic[W]):
    """
    Identity and sentinel values of a weight type.

    Attributes:
        zero: Additive identity; the score of the start node.
        unreachable: Value greater than any reachable score; the implied score
            of a node absent from the score ledger.
    """

    zero: W
    unreachable: W


#: Weight domain for plain `int` and `float` weights.
NUMERIC_WEIGHTS: WeightDomain[Cost] = WeightDomain(zero=0, unreachable=math.inf)
