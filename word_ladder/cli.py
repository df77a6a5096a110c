#! /usr/bin/env python
"""Command line front end for word ladders."""

from typing import List, Optional

from rich.console import Console
from rich.table import Table

from . import config
from .errors import InvalidArgument
from .processor import GraphProcessor

EXIT_OK = 0
EXIT_SOURCE_UNAVAILABLE = 1
EXIT_USAGE = 2


def show_ladder(console: Console, path: Optional[List[str]], word1: str, word2: str) -> None:
    if path is None:
        console.print(f"[red]No ladder joins {word1.upper()} and {word2.upper()}[/red]")
    elif not path:
        console.print(f"{word1.upper()} is already {word2.upper()}")
    else:
        console.print(" -> ".join(path))
        console.print(f"Distance: {len(path) - 1}")


def show_stats(console: Console, processor: GraphProcessor) -> None:
    table = Table(title="Dictionary graph")
    table.add_column("Measure")
    table.add_column("Value", justify="right")
    table.add_row("Words", str(len(processor.graph)))
    table.add_row("Edges", str(processor.graph.edge_count()))
    table.add_row("Connected ordered pairs", str(processor.engine.table.reachable_count()))
    console.print(table)


def main(argv=None, console: Optional[Console] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="word-ladder",
        description="Find the shortest chain of single-letter edits between two dictionary words.",
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        default=config.DEFAULT_DICTIONARY,
        help="Text file with one word per line (default: $WORD_LADDER_DICTIONARY).",
    )
    parser.add_argument("words", nargs="*", help="Two words to join with a ladder.")
    parser.add_argument(
        "--distance",
        action="store_true",
        help="Only print the number of edits between the two words.",
    )
    parser.add_argument(
        "--longest",
        action="store_true",
        help="Print the longest shortest ladder found in the dictionary.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print vertex and edge counts of the dictionary graph.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $WORD_LADDER_LOG_LEVEL or ERROR).",
    )

    args = parser.parse_args(argv)
    console = console or Console()

    level = config.LOG_LEVEL
    if args.log_level:
        level = config.parse_level(args.log_level, default=level)
    config.setup_logging(level)

    if args.dictionary is None:
        parser.print_help()
        return EXIT_USAGE
    if args.words and len(args.words) != 2:
        console.print("[red]Give exactly two words[/red]")
        return EXIT_USAGE

    processor = GraphProcessor()
    if processor.populate_graph(args.dictionary) < 0:
        console.print(f"[red]Cannot read dictionary {args.dictionary}[/red]")
        return EXIT_SOURCE_UNAVAILABLE

    if args.stats and len(processor.graph):
        show_stats(console, processor)

    if args.longest and len(processor.graph):
        ladder = processor.get_longest_ladder()
        if ladder is None:
            console.print("No two words are connected")
        else:
            console.print(" -> ".join(ladder))
            console.print(f"Distance: {len(ladder) - 1}")

    if args.words:
        word1, word2 = args.words
        try:
            if args.distance:
                console.print(processor.get_shortest_distance(word1, word2))
            else:
                show_ladder(console, processor.get_shortest_path(word1, word2), word1, word2)
        except InvalidArgument as err:
            console.print(f"[red]{err}[/red]")
            return EXIT_USAGE

    return EXIT_OK


if __name__ == "__main__":
    import sys

    sys.exit(main())
