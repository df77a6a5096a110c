#! /usr/bin/env python
"""
Word ladders over a dictionary.

    processor = GraphProcessor()
    processor.populate_graph("words.txt")
    processor.get_shortest_path("cat", "hater")   # ['CAT', 'HAT', 'HATE', 'HATER']
    processor.get_shortest_distance("cat", "hater")   # 3

Every call to populate adds to the existing graph and, unless told
otherwise, recomputes the shortest path table straight away.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .dictionary import load_words, normalize_words
from .errors import SourceUnavailable
from .graph import Graph
from .shortest_paths import UNREACHABLE, EngineState, PathTable, ShortestPathEngine
from .words import _is_adjacent_canonical, canonicalize

logger = logging.getLogger(__name__)


class GraphProcessor:
    def __init__(self) -> None:
        self.graph: Graph[str] = Graph()
        # insertion order of the words, used as the VertexIndex order
        self.word_index: List[str] = []
        self.engine: ShortestPathEngine[str] = ShortestPathEngine(self.graph)

    @property
    def state(self) -> EngineState:
        return self.engine.state

    def populate_graph(self, filepath: Union[str, Path, None], precompute: bool = True) -> int:
        """Load a dictionary file into the graph; -1 if it cannot be read."""
        try:
            words = load_words(filepath)
        except SourceUnavailable as err:
            logger.error(f"Population failed: {err}")
            return -1
        return self._populate(words, precompute)

    def populate(self, words: Optional[Iterable[str]], precompute: bool = True) -> int:
        """Add words to the graph; returns how many were new, -1 on failure."""
        if words is None:
            logger.error("Population failed: no word source")
            return -1
        try:
            cleaned = normalize_words(words)
        except (SourceUnavailable, OSError, UnicodeDecodeError) as err:
            logger.error(f"Population failed: {err}")
            return -1
        return self._populate(cleaned, precompute)

    def _populate(self, words: List[str], precompute: bool) -> int:
        start = len(self.word_index)
        for word in words:
            if self.graph.add_vertex(word) is not None:
                self.word_index.append(word)
        added = len(self.word_index) - start

        edges = 0
        n = len(self.word_index)
        # same (i, j) visiting order as a full scan, limited to pairs with a new word
        for i in range(n - 1):
            for j in range(max(i + 1, start), n):
                word1, word2 = self.word_index[i], self.word_index[j]
                if _is_adjacent_canonical(word1, word2) and self.graph.add_edge(word1, word2):
                    logger.debug(f"Edge {word1} <-> {word2}")
                    edges += 1

        logger.info(f"Added {added} words and {edges} edges, graph now {self.graph}")
        if precompute and self.state is EngineState.POPULATED:
            self.precompute()
        return added

    def remove_word(self, word: str) -> bool:
        word = canonicalize(word)
        if self.graph.remove_vertex(word) is None:
            return False
        self.word_index.remove(word)
        return True

    def precompute(self) -> PathTable[str]:
        return self.engine.precompute(self.word_index)

    def get_shortest_path(self, word1: str, word2: str) -> Optional[List[str]]:
        """
        Words from word1 to word2, both included.

        Returns an empty list when the words are equal and None when no
        path joins them. Raises InvalidArgument for unknown words or when
        the table has not been computed.
        """
        word1 = canonicalize(word1)
        word2 = canonicalize(word2)
        table = self.engine.table
        i, j = table.index_of(word1), table.index_of(word2)
        if i == j:
            return []
        cell = table.cell(i, j)
        if cell is UNREACHABLE:
            return None
        return list(cell)

    def get_shortest_distance(self, word1: str, word2: str) -> int:
        """Number of edges between the words, -1 if equal or unconnected."""
        path = self.get_shortest_path(word1, word2)
        if not path:
            return -1
        return len(path) - 1

    def get_longest_ladder(self) -> Optional[List[str]]:
        cell = self.engine.table.longest_ladder()
        if cell is UNREACHABLE:
            return None
        return list(cell)
