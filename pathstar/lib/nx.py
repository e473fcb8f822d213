"""NetworkX graph conversion utilities.

This module adapts NetworkX graphs to the graph capability searched by
`find_path`, and expands any capability back into a NetworkX graph for
inspection or cross-checking.

Example:
    >>> import networkx as nx
    >>> from pathstar.lib.nx import from_networkx
    >>> from pathstar import find_path
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> find_path(from_networkx(G), "A", "C")
    ['A', 'B', 'C']
"""

from __future__ import annotations

from collections import deque
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Hashable,
    Iterable,
    List,
    Optional,
    Union,
)

from pathstar.lib.algorithms.base import Cost, GraphCapability

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.Graph]
else:
    NxGraph = Any

HeuristicFunc = Callable[[Hashable, Hashable], Cost]


class NxCapability:
    """Graph capability backed by a NetworkX graph.

    Undirected graphs expose each edge in both directions. Multigraphs are
    not supported because the capability has a single weight per node pair.

    Attributes:
        graph: The wrapped NetworkX graph.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
    """

    def __init__(
        self,
        graph: NxGraph,
        weight_attr: str = "weight",
        default_weight: Cost = 1,
        heuristic: Optional[HeuristicFunc] = None,
    ) -> None:
        self.graph = graph
        self.weight_attr = weight_attr
        self.default_weight = default_weight
        self._heuristic = heuristic

    def heuristic(self, from_node: Hashable, to_node: Hashable) -> Cost:
        if self._heuristic is None:
            return 0
        return self._heuristic(from_node, to_node)

    def weight(self, from_node: Hashable, to_node: Hashable) -> Cost:
        return self.graph[from_node][to_node].get(self.weight_attr, self.default_weight)

    def neighbours(self, node: Hashable) -> List[Hashable]:
        return list(self.graph.neighbors(node))


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Cost = 1,
    heuristic: Optional[HeuristicFunc] = None,
) -> NxCapability:
    """Wrap a NetworkX graph as a searchable graph capability.

    Args:
        G: NetworkX Graph or DiGraph.
        weight_attr: Edge attribute name for the weight (default: "weight").
        default_weight: Weight when the attribute is missing (default: 1).
        heuristic: Optional `(from, to) -> cost` estimate; zero when omitted.

    Returns:
        NxCapability wrapping `G`.

    Raises:
        TypeError: If G is not a NetworkX Graph/DiGraph, or is a multigraph.
    """
    import networkx as nx

    if isinstance(G, (nx.MultiDiGraph, nx.MultiGraph)):
        raise TypeError("Multigraphs are not supported; collapse parallel edges first")
    if not isinstance(G, (nx.DiGraph, nx.Graph)):
        raise TypeError(f"Expected NetworkX Graph or DiGraph, got {type(G).__name__}")

    return NxCapability(
        G, weight_attr=weight_attr, default_weight=default_weight, heuristic=heuristic
    )


def from_edges(
    edges: Iterable[tuple],
    *,
    directed: bool = True,
    nodes: Optional[Iterable[Hashable]] = None,
) -> NxCapability:
    """Build a capability from `(u, v)` or `(u, v, weight)` tuples.

    Args:
        edges: Edge tuples; a missing weight defaults to 1.
        directed: Build a DiGraph when True, otherwise an undirected Graph.
        nodes: Extra nodes to add, including isolated ones.
    """
    import networkx as nx

    G = nx.DiGraph() if directed else nx.Graph()
    if nodes is not None:
        G.add_nodes_from(nodes)
    for edge in edges:
        if len(edge) == 3:
            u, v, w = edge
            G.add_edge(u, v, weight=w)
        else:
            u, v = edge
            G.add_edge(u, v)
    return from_networkx(G)


def to_networkx(
    graph: GraphCapability,
    roots: Iterable[Hashable],
    *,
    weight_attr: str = "weight",
) -> "nx.DiGraph":
    """Expand the part of a capability reachable from `roots` into a DiGraph.

    Every node reachable from any root is visited once, and each of its
    outgoing edges is added with the capability's weight.

    Args:
        graph: Any graph capability.
        roots: Nodes to start the expansion from.
        weight_attr: Edge attribute name for the weight (default: "weight").

    Returns:
        nx.DiGraph of the reachable subgraph.
    """
    import networkx as nx

    G = nx.DiGraph()
    queue = deque()
    for root in roots:
        if root not in G:
            G.add_node(root)
            queue.append(root)

    while queue:
        u = queue.popleft()
        for v in graph.neighbours(u):
            if v not in G:
                G.add_node(v)
                queue.append(v)
            G.add_edge(u, v, **{weight_attr: graph.weight(u, v)})

    return G
