"""Exceptions raised by the word ladder package."""


class WordLadderError(Exception):
    pass


class InvalidArgument(WordLadderError, ValueError):
    """A word was absent, empty, unknown to the graph, or queried too early."""


class SourceUnavailable(WordLadderError):
    """The dictionary could not be read."""
