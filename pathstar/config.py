"""Configuration classes for pathstar puzzle domains."""

from dataclasses import dataclass


@dataclass
class ElevationConfig:
    """Configuration for elevation grid parsing and movement."""

    # Maximum number of levels a single step may climb; descents are unbounded
    max_climb: int = 1

    start_marker: str = "S"
    end_marker: str = "E"

    # Elevation letters, lowest maps to 0
    lowest: str = "a"
    highest: str = "z"

    def elevation_of(self, ch: str) -> int:
        """Return the numeric elevation for a letter in [lowest, highest]."""
        return ord(ch) - ord(self.lowest)

    def letter_of(self, elevation: int) -> str:
        """Return the letter used to render a numeric elevation."""
        return chr(ord(self.lowest) + elevation)


@dataclass
class ValveConfig:
    """Configuration for the valve network and release planner."""

    # Label where every plan starts
    start_label: str = "AA"

    # Minutes available to open valves
    time_limit: int = 30

    # Minutes available when two participants split the valves
    pair_time_limit: int = 26


# Global configuration instances
ELEVATION_CONFIG = ElevationConfig()
VALVE_CONFIG = ValveConfig()
