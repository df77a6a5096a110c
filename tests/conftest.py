import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from word_ladder import GraphProcessor  # noqa: E402

LADDER_WORDS = ["cat", "hat", "hate", "hater", "hit", "car"]


@pytest.fixture
def write_dictionary(tmp_path):
    """Write the given lines to a dictionary file, one per line."""

    def _write(lines, name="words.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ladder_processor(write_dictionary):
    processor = GraphProcessor()
    assert processor.populate_graph(write_dictionary(LADDER_WORDS)) == len(LADDER_WORDS)
    return processor
