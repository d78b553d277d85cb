"""Single-entry NavGraph memo, keyed by map name."""

from __future__ import annotations

import logging

from .graph import NavGraph
from .pads import pads_for_map

logger = logging.getLogger(__name__)


class NavGraphCache:
    """Holds the graph for the most recently requested map.

    A request for the same map returns the cached graph; any other map
    replaces it. Unknown maps produce an empty graph, which callers treat
    as "routing unavailable".
    """

    def __init__(self) -> None:
        self._map_id: str | None = None
        self._graph: NavGraph | None = None
        self.builds = 0

    @property
    def map_id(self) -> str | None:
        return self._map_id

    def get(self, map_id: str) -> NavGraph:
        """Get cached NavGraph or build it."""
        if self._graph is not None and map_id == self._map_id:
            return self._graph

        pads = pads_for_map(map_id)
        self._graph = NavGraph.build(pads)
        self._map_id = map_id
        self.builds += 1
        if pads:
            logger.info(f"Loaded {len(pads)} boost pads for map {map_id!r}")
        else:
            logger.info(f"No boost pads known for map {map_id!r}; routing unavailable")
        return self._graph

    def clear(self) -> None:
        self._map_id = None
        self._graph = None
