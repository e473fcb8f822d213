"""Valve network domain.

Valves are named by two-letter labels and joined by tunnels; walking a tunnel
takes one minute and opening a valve takes one more. `ValveNetwork` is a graph
capability used to precompute travel times between the valves worth opening,
and `ValvePlanner` searches the order of openings that releases the most
pressure within a time limit, alone or split between two participants who
move at the same time and never open the same valve.

Example input line::

    Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import combinations, count
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from pathstar.config import VALVE_CONFIG, ValveConfig
from pathstar.errors import PuzzleParseError
from pathstar.lib.algorithms.astar import find_path
from pathstar.logging import get_logger

logger = get_logger(__name__)

_LINE_RE = re.compile(
    r"^Valve (?P<label>[A-Z]{2}) has flow rate=(?P<rate>\d+); "
    r"tunnels? leads? to valves? (?P<connections>[A-Z]{2}(?:, [A-Z]{2})*)$"
)
_LABEL_RE = re.compile(r"^[A-Z]{2}$")


class Label(str):
    """Two-letter valve name."""

    def __new__(cls, value: str) -> "Label":
        if not _LABEL_RE.match(value):
            raise ValueError(f"Invalid valve label: {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Label({str(self)})"


@dataclass
class Valve:
    """Flow rate and tunnel connections of one valve."""

    rate: int
    connections: List[Label] = field(default_factory=list)


class ValveNetwork:
    """Tunnel graph between valves.

    Attributes:
        valves: Valve data by label.
        path_lengths: Minutes needed to walk from the first label to the second
            and open it, for the start label and every valve with positive rate.
        config: Start label and time limit.
    """

    def __init__(
        self,
        valves: Dict[Label, Valve],
        config: Optional[ValveConfig] = None,
    ) -> None:
        self.valves = valves
        self.config = config or VALVE_CONFIG
        self.path_lengths: Dict[Tuple[Label, Label], int] = {}

    @classmethod
    def parse(
        cls, lines: Iterable[str], config: Optional[ValveConfig] = None
    ) -> "ValveNetwork":
        """Build a network from scan lines and precompute path lengths.

        Blank lines are skipped.

        Raises:
            PuzzleParseError: If a line does not describe a valve.
        """
        valves: Dict[Label, Valve] = {}
        for lineno, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line:
                continue
            match = _LINE_RE.match(line)
            if match is None:
                raise PuzzleParseError(f"malformed valve line {line!r}", line=lineno)
            label = Label(match.group("label"))
            if label in valves:
                raise PuzzleParseError(f"duplicate valve {label}", line=lineno)
            connections = [Label(c) for c in match.group("connections").split(", ")]
            valves[label] = Valve(int(match.group("rate")), connections)

        if not valves:
            raise PuzzleParseError("valve network is empty")

        network = cls(valves, config)
        network.compute_path_lengths()
        return network

    # ---- graph capability ----

    def heuristic(self, from_node: Label, to_node: Label) -> int:
        return len(self.valves)

    def weight(self, from_node: Label, to_node: Label) -> int:
        return 1

    def neighbours(self, node: Label) -> List[Label]:
        return list(self.valves[node].connections)

    # ---- derived data ----

    def viable_labels(self) -> List[Label]:
        """Labels of valves with a positive flow rate, sorted."""
        return sorted(label for label, valve in self.valves.items() if valve.rate > 0)

    def compute_path_lengths(self) -> Dict[Tuple[Label, Label], int]:
        """Fill `path_lengths` for start->viable and viable<->viable pairs.

        Each length is the node count of the shortest path, i.e. walking time
        plus the minute spent opening the destination valve. Unreachable pairs
        are left out.
        """
        start = Label(self.config.start_label)
        if start not in self.valves:
            raise KeyError(f"Start valve '{start}' is not in the network.")

        labels = self.viable_labels()
        self.path_lengths = {}

        for label in labels:
            path = find_path(self, start, label)
            if path is None:
                logger.warning("Valve %s is unreachable from %s", label, start)
                continue
            self.path_lengths[(start, label)] = len(path)

        for a, b in combinations(labels, 2):
            path = find_path(self, a, b)
            if path is None:
                logger.debug("No tunnel route between %s and %s", a, b)
                continue
            self.path_lengths[(a, b)] = len(path)
            self.path_lengths[(b, a)] = len(path)

        logger.debug(
            "Computed %d path lengths over %d viable valves",
            len(self.path_lengths),
            len(labels),
        )
        return self.path_lengths


@dataclass(frozen=True)
class PlannerNode:
    """Partial plan: current minute, position and valves opened so far.

    `opened` keeps `(label, minute)` pairs in opening order.
    """

    time: int
    label: Label
    opened: Tuple[Tuple[Label, int], ...] = ()

    def opened_labels(self) -> Set[Label]:
        return {label for label, _ in self.opened}


class ValvePlanner:
    """Best-first search for the valve opening order releasing most pressure."""

    def __init__(self, network: ValveNetwork, time_limit: Optional[int] = None) -> None:
        self.network = network
        self.time_limit = (
            time_limit if time_limit is not None else network.config.time_limit
        )

    @classmethod
    def for_pair(
        cls, network: ValveNetwork, time_limit: Optional[int] = None
    ) -> "ValvePlanner":
        """Planner using the shorter two-participant time limit by default."""
        if time_limit is None:
            time_limit = network.config.pair_time_limit
        return cls(network, time_limit)

    def score(self, node: PlannerNode) -> int:
        """Total pressure released by the valves opened in `node`."""
        valves = self.network.valves
        return sum(
            (self.time_limit - minute) * valves[label].rate
            for label, minute in node.opened
        )

    def neighbours(self, node: PlannerNode) -> List[PlannerNode]:
        """Plans extending `node` by opening one more valve within the limit."""
        opened = node.opened_labels()
        result = []
        for label in self.network.viable_labels():
            if label in opened:
                continue
            distance = self.network.path_lengths.get((node.label, label))
            if distance is None:
                continue
            minute = node.time + distance
            if minute > self.time_limit:
                continue
            result.append(PlannerNode(minute, label, node.opened + ((label, minute),)))
        return result

    def find_plan(self) -> PlannerNode:
        """Expand every feasible plan, highest score first, and return the best."""
        start = PlannerNode(0, Label(self.network.config.start_label))
        seq = count()
        open_set: List[Tuple[int, int, PlannerNode]] = [
            (-self.score(start), next(seq), start)
        ]
        seen = {start}
        best = start
        best_score = self.score(start)
        expanded = 0

        while open_set:
            neg_score, _, current = heappop(open_set)
            expanded += 1
            if -neg_score > best_score:
                best = current
                best_score = -neg_score

            for neighbour in self.neighbours(current):
                if neighbour in seen:
                    continue
                seen.add(neighbour)
                heappush(open_set, (-self.score(neighbour), next(seq), neighbour))

        logger.debug("Planner expanded %d plans, best score %d", expanded, best_score)
        return best

    def routes(self) -> Iterator[PlannerNode]:
        """Yield every feasible plan, depth first, starting with the empty one."""
        stack = [PlannerNode(0, Label(self.network.config.start_label))]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.neighbours(node)))

    def best_by_valve_set(self) -> Dict[FrozenSet[Label], PlannerNode]:
        """Highest scoring plan for each set of opened valves."""
        best: Dict[FrozenSet[Label], PlannerNode] = {}
        best_scores: Dict[FrozenSet[Label], int] = {}
        total = 0
        for node in self.routes():
            total += 1
            key = frozenset(node.opened_labels())
            score = self.score(node)
            if key not in best_scores or score > best_scores[key]:
                best[key] = node
                best_scores[key] = score

        logger.debug("Enumerated %d plans, %d after pruning", total, len(best))
        return best

    def find_pair(self) -> Tuple[PlannerNode, PlannerNode]:
        """Best two plans over disjoint valve sets, run side by side.

        Either plan may be empty when one participant can do all the useful
        work alone.
        """
        candidates = list(self.best_by_valve_set().items())
        best_pair = (candidates[0][1], candidates[0][1])
        best_score = 2 * self.score(candidates[0][1])

        for (valves_a, plan_a), (valves_b, plan_b) in combinations(candidates, 2):
            if not valves_a.isdisjoint(valves_b):
                continue
            score = self.score(plan_a) + self.score(plan_b)
            if score > best_score:
                best_pair = (plan_a, plan_b)
                best_score = score

        logger.debug("Best pair releases %d", best_score)
        return best_pair

    @staticmethod
    def format_plan(node: PlannerNode) -> str:
        """Render opened valves as `BB @ 2 -> CC @ 5`."""
        return " -> ".join(f"{label} @ {minute}" for label, minute in node.opened)
