#! /usr/bin/env python
"""
Undirected, unweighted graph.

Vertices live in an arena: every vertex gets a slot number when it is added
and adjacency lists hold slot numbers, so both sides of an edge are always
updated together by `_link`/`_unlink`. A removed vertex leaves an empty slot
behind which is handed back if the same vertex is added again; slots are
never given to a different vertex.
"""

from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

E = TypeVar("E", bound=Hashable)


class NeighborView(Generic[E]):
    """Restartable, read-only sequence over one adjacency list."""

    def __init__(self, graph: "Graph[E]", slot: Optional[int]) -> None:
        self._graph = graph
        self._slot = slot

    def _slots(self) -> List[int]:
        if self._slot is None:
            return []
        return self._graph._adjacency[self._slot]

    def __iter__(self) -> Iterator[E]:
        slots = self._graph._slots
        for nbr in self._slots():
            yield slots[nbr]

    def __len__(self) -> int:
        return len(self._slots())

    def __contains__(self, vertex) -> bool:
        slot = self._graph._index.get(vertex)
        return slot is not None and slot in self._slots()

    def __repr__(self) -> str:
        return f"NeighborView({list(self)!r})"


class VertexView(Generic[E]):
    """Restartable, read-only sequence over every vertex of a graph."""

    def __init__(self, graph: "Graph[E]") -> None:
        self._graph = graph

    def __iter__(self) -> Iterator[E]:
        for vertex in self._graph._slots:
            if vertex is not None:
                yield vertex

    def __len__(self) -> int:
        return len(self._graph._index)

    def __contains__(self, vertex) -> bool:
        return vertex in self._graph._index


class Graph(Generic[E]):
    def __init__(self) -> None:
        self._slots: List[Optional[E]] = []
        self._index: Dict[E, int] = {}
        self._adjacency: List[List[int]] = []
        self._freed: Dict[E, int] = {}
        # bumped whenever vertices or edges actually change
        self.version = 0

    def _link(self, s1: int, s2: int) -> None:
        self._adjacency[s1].append(s2)
        self._adjacency[s2].append(s1)
        self.version += 1

    def _unlink(self, s1: int, s2: int) -> None:
        changed = False
        if s2 in self._adjacency[s1]:
            self._adjacency[s1].remove(s2)
            changed = True
        if s1 in self._adjacency[s2]:
            self._adjacency[s2].remove(s1)
            changed = True
        if changed:
            self.version += 1

    def add_vertex(self, vertex: Optional[E]) -> Optional[E]:
        """Return the vertex if it was added, None if absent or already present."""
        if vertex is None or vertex in self._index:
            return None
        if vertex in self._freed:
            slot = self._freed.pop(vertex)
            self._slots[slot] = vertex
        else:
            slot = len(self._slots)
            self._slots.append(vertex)
            self._adjacency.append([])
        self._index[vertex] = slot
        self.version += 1
        return vertex

    def remove_vertex(self, vertex: Optional[E]) -> Optional[E]:
        """Remove the vertex and every edge touching it."""
        if vertex is None or vertex not in self._index:
            return None
        slot = self._index.pop(vertex)
        for nbr in set(self._adjacency[slot]):
            self._adjacency[nbr] = [s for s in self._adjacency[nbr] if s != slot]
        self._adjacency[slot] = []
        self._slots[slot] = None
        self._freed[vertex] = slot
        self.version += 1
        return vertex

    def add_edge(self, vertex1: Optional[E], vertex2: Optional[E]) -> bool:
        if vertex1 not in self._index or vertex2 not in self._index:
            return False
        if vertex1 == vertex2:
            return False
        self._link(self._index[vertex1], self._index[vertex2])
        return True

    def remove_edge(self, vertex1: Optional[E], vertex2: Optional[E]) -> bool:
        if vertex1 not in self._index or vertex2 not in self._index:
            return False
        if vertex1 == vertex2:
            return False
        self._unlink(self._index[vertex1], self._index[vertex2])
        return True

    def is_adjacent(self, vertex1: Optional[E], vertex2: Optional[E]) -> bool:
        if vertex1 not in self._index or vertex2 not in self._index:
            return False
        if vertex1 == vertex2:
            return False
        return self._index[vertex2] in self._adjacency[self._index[vertex1]]

    def neighbors(self, vertex: Optional[E]) -> NeighborView[E]:
        """Neighbours in edge-insertion order, empty for unknown vertices."""
        return NeighborView(self, self._index.get(vertex))

    def all_vertices(self) -> VertexView[E]:
        return VertexView(self)

    def edge_count(self) -> int:
        return sum(len(adj) for adj in self._adjacency) // 2

    def __contains__(self, vertex) -> bool:
        return vertex in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[E]:
        return iter(self.all_vertices())

    def __repr__(self) -> str:
        return f"G with {len(self)} vertices and {self.edge_count()} edges"
