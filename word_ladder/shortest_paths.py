#! /usr/bin/env python
"""
All-pairs shortest paths over an unweighted graph.

Every edge weighs 1, so a breadth first search from each source visits
vertices in non-decreasing distance. A vertex is given its distance and
predecessor the first time it is discovered and is never updated again, so
when several shortest paths exist the predecessor found first in
adjacency-list order wins.

The table keeps one row of distances and one row of predecessors per source
in two dense numpy matrices. Paths are rebuilt on lookup by following the
predecessor row back to the source.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar, Union

import numpy as np

from .errors import InvalidArgument
from .graph import Graph

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Hashable)

NO_PATH = -1


class Cell(Enum):
    SELF = "self"
    UNREACHABLE = "unreachable"

    def __repr__(self) -> str:
        return self.name


SELF = Cell.SELF
UNREACHABLE = Cell.UNREACHABLE

PathCell = Union[Cell, Tuple]


class EngineState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"
    PRECOMPUTED = "precomputed"


def _index_dtype(n: int):
    return np.int16 if n < np.iinfo(np.int16).max else np.int32


class PathTable(Generic[E]):
    """Read-only result of one precomputation."""

    def __init__(
        self,
        order: List[E],
        distances: np.ndarray,
        predecessors: np.ndarray,
        graph_version: int,
    ) -> None:
        self.order = tuple(order)
        self.index: Dict[E, int] = {v: i for i, v in enumerate(self.order)}
        self.distances = distances
        self.predecessors = predecessors
        self.graph_version = graph_version
        self.distances.setflags(write=False)
        self.predecessors.setflags(write=False)

    def __len__(self) -> int:
        return len(self.order)

    def index_of(self, vertex: E) -> int:
        try:
            return self.index[vertex]
        except KeyError:
            raise InvalidArgument(f"{vertex!r} is not in the vocabulary") from None

    def cell(self, i: int, j: int) -> PathCell:
        if i == j:
            return SELF
        if self.distances[i, j] == NO_PATH:
            return UNREACHABLE
        pred = self.predecessors[i]
        path = [self.order[j]]
        current = j
        while current != i:
            current = int(pred[current])
            path.append(self.order[current])
        path.reverse()
        return tuple(path)

    def lookup(self, source: E, destination: E) -> PathCell:
        return self.cell(self.index_of(source), self.index_of(destination))

    def distance(self, i: int, j: int) -> int:
        """Edge count between two indexed vertices, NO_PATH if unreachable."""
        return int(self.distances[i, j])

    def reachable_count(self) -> int:
        """Number of ordered pairs (i, j), i != j, joined by some path."""
        return int(np.count_nonzero(self.distances > 0))

    def longest_ladder(self) -> PathCell:
        """The path between the most distant connected pair, or UNREACHABLE."""
        if not len(self) or self.distances.max() <= 0:
            return UNREACHABLE
        i, j = np.unravel_index(int(np.argmax(self.distances)), self.distances.shape)
        return self.cell(int(i), int(j))

    def same_as(self, other: "PathTable[E]") -> bool:
        return (
            self.order == other.order
            and np.array_equal(self.distances, other.distances)
            and np.array_equal(self.predecessors, other.predecessors)
        )


class ShortestPathEngine(Generic[E]):
    def __init__(self, graph: Graph[E]) -> None:
        self.graph = graph
        self._table: Optional[PathTable[E]] = None

    @property
    def state(self) -> EngineState:
        if len(self.graph) == 0:
            return EngineState.EMPTY
        if self._table is None or self._table.graph_version != self.graph.version:
            return EngineState.POPULATED
        return EngineState.PRECOMPUTED

    @property
    def table(self) -> PathTable[E]:
        if self.state is not EngineState.PRECOMPUTED:
            raise InvalidArgument(
                f"shortest paths are not available, engine is {self.state.value}"
            )
        return self._table

    def _vertex_order(self, order: Optional[Iterable[E]]) -> List[E]:
        if order is None:
            return list(self.graph.all_vertices())
        seen = set()
        vertices = []
        for vertex in order:
            if vertex in self.graph and vertex not in seen:
                seen.add(vertex)
                vertices.append(vertex)
        for vertex in self.graph.all_vertices():
            if vertex not in seen:
                vertices.append(vertex)
        return vertices

    def precompute(self, order: Optional[Iterable[E]] = None) -> PathTable[E]:
        """
        Run a BFS from every vertex and publish a fresh PathTable.

        `order` fixes the VertexIndex (first occurrence wins); vertices of
        the graph missing from it are appended in graph order.
        """
        if self.state is EngineState.EMPTY:
            raise InvalidArgument("cannot precompute shortest paths of an empty graph")

        vertices = self._vertex_order(order)
        index = {v: i for i, v in enumerate(vertices)}
        adjacency = [[index[n] for n in self.graph.neighbors(v)] for v in vertices]

        n = len(vertices)
        dtype = _index_dtype(n)
        distances = np.full((n, n), NO_PATH, dtype=dtype)
        predecessors = np.full((n, n), NO_PATH, dtype=dtype)

        for source in range(n):
            dist, pred = _bfs(adjacency, source)
            distances[source, :] = dist
            predecessors[source, :] = pred
            logger.debug(f"bfs from {vertices[source]}: {n - dist.count(NO_PATH)} reached")

        table = PathTable(vertices, distances, predecessors, self.graph.version)
        self._table = table
        logger.info(f"Precomputed shortest paths for {n} vertices")
        return table


def _bfs(adjacency: List[List[int]], source: int) -> Tuple[List[int], List[int]]:
    n = len(adjacency)
    dist = [NO_PATH] * n
    pred = [NO_PATH] * n
    dist[source] = 0
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for nbr in adjacency[current]:
            if dist[nbr] == NO_PATH:
                dist[nbr] = dist[current] + 1
                pred[nbr] = current
                queue.append(nbr)
    return dist, pred
