import logging
import os

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
DICTIONARY_ENCODING = "utf-8"
DEFAULT_DICTIONARY = os.environ.get("WORD_LADDER_DICTIONARY")


def parse_level(name: str, default: int = logging.ERROR) -> int:
    """Turn a level name such as "debug" into its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return default


LOG_LEVEL = parse_level(os.environ.get("WORD_LADDER_LOG_LEVEL", "ERROR"))


def setup_logging(level: int = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("word_ladder").setLevel(level)
