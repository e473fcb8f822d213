"""Elevation grid domain.

A rectangular map of letter elevations (`a` lowest, `z` highest) with a start
cell `S` (elevation `a`) and an end cell `E` (elevation `z`). A step moves to
an orthogonally adjacent cell and may climb at most `max_climb` levels;
descending any amount is allowed.

Example input::

    Sabqponm
    abcryxxl
    accszExk
    acctuvwj
    abdefghi
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from pathstar.config import ELEVATION_CONFIG, ElevationConfig
from pathstar.errors import PuzzleParseError
from pathstar.lib.algorithms.astar import SearchStats, find_path
from pathstar.logging import get_logger

logger = get_logger(__name__)

# Step direction -> arrow used when rendering a path
_ARROWS = {(1, 0): ">", (-1, 0): "<", (0, -1): "^", (0, 1): "v"}


@dataclass(frozen=True, order=True)
class Point:
    """Grid cell; x grows to the right, y grows downwards."""

    x: int
    y: int

    def manhattan_distance(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


class ElevationMap:
    """Parsed elevation grid that can be searched with `find_path`.

    Attributes:
        elevation: Numeric elevation per cell.
        start: Cell marked with the start marker.
        end: Cell marked with the end marker.
        width: Number of columns.
        height: Number of rows.
        config: Markers, letter range and climb limit.
    """

    def __init__(
        self,
        elevation: Dict[Point, int],
        start: Point,
        end: Point,
        width: int,
        height: int,
        config: Optional[ElevationConfig] = None,
    ) -> None:
        self.elevation = elevation
        self.start = start
        self.end = end
        self.width = width
        self.height = height
        self.config = config or ELEVATION_CONFIG

    @classmethod
    def parse(
        cls, text: str, config: Optional[ElevationConfig] = None
    ) -> "ElevationMap":
        """Build a map from grid text.

        Args:
            text: Rows of elevation letters plus one start and one end marker.
            config: Optional override of the global elevation config.

        Raises:
            PuzzleParseError: On unknown characters, ragged rows, or a missing
                or repeated start/end marker.
        """
        config = config or ELEVATION_CONFIG
        rows = text.splitlines()
        while rows and not rows[-1].strip():
            rows.pop()
        if not rows:
            raise PuzzleParseError("elevation map is empty")

        width = len(rows[0])
        elevation: Dict[Point, int] = {}
        start: Optional[Point] = None
        end: Optional[Point] = None

        for y, row in enumerate(rows):
            if len(row) != width:
                raise PuzzleParseError(
                    f"row has {len(row)} cells, expected {width}", line=y + 1
                )
            for x, ch in enumerate(row):
                point = Point(x, y)
                if ch == config.start_marker:
                    if start is not None:
                        raise PuzzleParseError(
                            "duplicate start marker", line=y + 1, column=x + 1
                        )
                    start = point
                    elevation[point] = config.elevation_of(config.lowest)
                elif ch == config.end_marker:
                    if end is not None:
                        raise PuzzleParseError(
                            "duplicate end marker", line=y + 1, column=x + 1
                        )
                    end = point
                    elevation[point] = config.elevation_of(config.highest)
                elif config.lowest <= ch <= config.highest:
                    elevation[point] = config.elevation_of(ch)
                else:
                    raise PuzzleParseError(
                        f"unexpected character {ch!r}", line=y + 1, column=x + 1
                    )

        if start is None:
            raise PuzzleParseError(f"missing start marker {config.start_marker!r}")
        if end is None:
            raise PuzzleParseError(f"missing end marker {config.end_marker!r}")

        logger.debug(
            "Parsed %dx%d elevation map, start=%r end=%r", width, len(rows), start, end
        )
        return cls(elevation, start, end, width, len(rows), config)

    # ---- graph capability ----

    def heuristic(self, from_node: Point, to_node: Point) -> int:
        return from_node.manhattan_distance(to_node)

    def weight(self, from_node: Point, to_node: Point) -> int:
        return 1

    def neighbours(self, node: Point) -> List[Point]:
        candidates = []
        if node.x > 0:
            candidates.append(Point(node.x - 1, node.y))
        if node.x + 1 < self.width:
            candidates.append(Point(node.x + 1, node.y))
        if node.y > 0:
            candidates.append(Point(node.x, node.y - 1))
        if node.y + 1 < self.height:
            candidates.append(Point(node.x, node.y + 1))

        here = self.elevation[node]
        limit = self.config.max_climb
        return [p for p in candidates if self.elevation[p] - here <= limit]

    # ---- queries ----

    def shortest_path(
        self, stats: Optional[SearchStats] = None
    ) -> Optional[List[Point]]:
        """Shortest start->end path, or None when the end cannot be reached."""
        return find_path(self, self.start, self.end, stats=stats)

    def shortest_steps(self, stats: Optional[SearchStats] = None) -> Optional[int]:
        """Number of steps on the shortest start->end path, or None."""
        path = self.shortest_path(stats=stats)
        if path is None:
            return None
        return len(path) - 1

    def render(self, path: Optional[List[Point]] = None) -> str:
        """Render the grid as text.

        With `path`, every cell on it other than the start and end is drawn as
        an arrow pointing to the next cell of the path.
        """
        arrows: Dict[Point, str] = {}
        if path:
            for here, there in zip(path, path[1:]):
                arrows[here] = _ARROWS[(there.x - here.x, there.y - here.y)]

        lines = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                point = Point(x, y)
                if point == self.start:
                    chars.append(self.config.start_marker)
                elif point == self.end:
                    chars.append(self.config.end_marker)
                elif point in arrows:
                    chars.append(arrows[point])
                else:
                    chars.append(self.config.letter_of(self.elevation[point]))
            lines.append("".join(chars))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"ElevationMap(width={self.width}, height={self.height}, "
            f"start={self.start!r}, end={self.end!r})"
        )
