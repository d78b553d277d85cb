from .cache import NavGraphCache
from .graph import NO_NODE, NavGraph, path_cost
from .pads import PadNode, PadType, pads_for_map
from .planner import PathStats, Planner

__all__ = [
    "NO_NODE",
    "NavGraph",
    "NavGraphCache",
    "PadNode",
    "PadType",
    "PathStats",
    "Planner",
    "pads_for_map",
    "path_cost",
]
