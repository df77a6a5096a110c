"""Word ladders: shortest single-edit paths between dictionary words."""

from .errors import InvalidArgument, SourceUnavailable, WordLadderError
from .graph import Graph
from .processor import GraphProcessor
from .shortest_paths import SELF, UNREACHABLE, EngineState, PathTable, ShortestPathEngine
from .words import canonicalize, is_adjacent

__all__ = [
    "Graph",
    "GraphProcessor",
    "ShortestPathEngine",
    "PathTable",
    "EngineState",
    "SELF",
    "UNREACHABLE",
    "canonicalize",
    "is_adjacent",
    "WordLadderError",
    "InvalidArgument",
    "SourceUnavailable",
]
