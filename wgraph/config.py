"""Configuration defaults for wgraph searches."""

from dataclasses import dataclass
from typing import Optional

from wgraph.types import NeighborPolicy

#: Tentative distance assigned to vertices not yet reached by Dijkstra.
#: Largest integer exactly representable as a double.
DISTANCE_SENTINEL = 2**53 - 1


@dataclass
class SearchConfig:
    """Defaults applied when a search call does not override them."""

    # Initial tentative distance of every vertex except the source
    distance_sentinel: int = DISTANCE_SENTINEL

    # How find_neighbors reports parallel edges
    neighbor_policy: NeighborPolicy = NeighborPolicy.DEDUPLICATE

    # Upper bound on paths collected by find_all_paths; None means unlimited
    max_paths: Optional[int] = None

    def resolve_policy(self, policy: Optional[NeighborPolicy]) -> NeighborPolicy:
        """Return ``policy`` when given, else the configured default."""
        return self.neighbor_policy if policy is None else NeighborPolicy(policy)


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
