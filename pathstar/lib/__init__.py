"""Library modules for pathstar.

This package contains the search engine and integration modules for
external libraries.
"""

from pathstar.lib.nx import NxCapability, from_edges, from_networkx, to_networkx

__all__ = [
    "NxCapability",
    "from_edges",
    "from_networkx",
    "to_networkx",
]
