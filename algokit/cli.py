"""Command line front end: each command reads its input from stdin and prints the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from algokit.graphs import bfs, dfs, dijkstra, kruskal, prim
from algokit.greedy import Job, fractional_knapsack, schedule_jobs
from algokit.hanoi import hanoi_moves
from algokit.searching import binary_search, kmp_search, rabin_karp
from algokit.sorting import merge_sort, quick_sort


class InputError(Exception):
    """Raised when the input on stdin does not have the expected shape."""


class _Tokens:
    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise InputError(f"expected an integer, got {word!r}") from None

    def number(self) -> float:
        word = self.word()
        try:
            return float(word)
        except ValueError:
            raise InputError(f"expected a number, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def numbers(self, count: int) -> list[float]:
        return [self.number() for _ in range(count)]


def _joined(values) -> str:
    return " ".join(str(value) for value in values)


def _edge_pairs(tokens: _Tokens, count: int) -> list[tuple[int, int]]:
    return [(tokens.integer(), tokens.integer()) for _ in range(count)]


def _matrix(tokens: _Tokens, size: int) -> list[list[int]]:
    return [tokens.integers(size) for _ in range(size)]


def _traversal(name: str, traverse) -> Callable[[_Tokens], list[str]]:
    def run(tokens: _Tokens) -> list[str]:
        nodes = tokens.integer()
        edges = _edge_pairs(tokens, tokens.integer())
        start = tokens.integer()
        return [f"{name} Traversal: {_joined(traverse(nodes, edges, start))}"]

    return run


def _run_dijkstra(tokens: _Tokens) -> list[str]:
    matrix = _matrix(tokens, tokens.integer())
    distances = dijkstra(matrix, tokens.integer())
    lines = ["", "Vertex\tDistance from Source"]
    lines.extend(f"{chr(65 + index)}\t\t{dist}" for index, dist in enumerate(distances))
    return lines


def _tree_lines(tree) -> list[str]:
    return ["Edge\tWeight"] + [f"{e.u} - {e.v}\t{e.weight}" for e in tree]


def _run_prim(tokens: _Tokens) -> list[str]:
    return _tree_lines(prim(_matrix(tokens, tokens.integer())))


def _run_kruskal(tokens: _Tokens) -> list[str]:
    vertices = tokens.integer()
    count = tokens.integer()
    edges = [tuple(tokens.integers(3)) for _ in range(count)]
    return _tree_lines(kruskal(vertices, edges))


def _run_merge_sort(tokens: _Tokens) -> list[str]:
    values = tokens.integers(tokens.integer())
    return ["Sorted list is:", _joined(merge_sort(values))]


def _run_quick_sort(tokens: _Tokens) -> list[str]:
    values = tokens.integers(tokens.integer())
    return [
        f"Original array: {_joined(values)}",
        f"Sorted array: {_joined(quick_sort(values))}",
    ]


def _run_binary_search(tokens: _Tokens) -> list[str]:
    values = tokens.integers(tokens.integer())
    index = binary_search(values, tokens.integer())
    if index is None:
        return ["element not found"]
    return [f"element found at {index}"]


def _run_rabin_karp(tokens: _Tokens) -> list[str]:
    text = tokens.word()
    pattern = tokens.word()
    matches = rabin_karp(text, pattern)
    lines = [f"Pattern found at position: {start + 1}" for start in matches]
    if matches:
        lines.append(f"Total matches found: {len(matches)}")
    else:
        lines.append("Pattern not found!")
    return lines


def _run_kmp(tokens: _Tokens) -> list[str]:
    text = tokens.word()
    pattern = tokens.word()
    return [_joined(kmp_search(text, pattern))]


def _run_knapsack(tokens: _Tokens) -> list[str]:
    count = tokens.integer()
    capacity = tokens.number()
    weights = tokens.numbers(count)
    values = tokens.numbers(count)
    total = fractional_knapsack(capacity, weights, values)
    return [f"Maximum value in knapsack = {total:g}"]


def _run_jobs(tokens: _Tokens) -> list[str]:
    count = tokens.integer()
    jobs = [Job(*tokens.integers(3)) for _ in range(count)]
    schedule = schedule_jobs(jobs)
    return [
        f"Scheduled Job IDs in slot order: {_joined(schedule.job_ids)}",
        f"Total Profit: {schedule.total_profit}",
    ]


def _run_hanoi(tokens: _Tokens) -> list[str]:
    return [str(move) for move in hanoi_moves(tokens.integer())]


_COMMANDS: dict[str, tuple[str, Callable[[_Tokens], list[str]]]] = {
    "bfs": ("breadth-first traversal: n, m, m edges 'u v', start", _traversal("BFS", bfs)),
    "dfs": ("depth-first traversal: n, m, m edges 'u v', start", _traversal("DFS", dfs)),
    "dijkstra": ("shortest distances: n, n*n matrix, source", _run_dijkstra),
    "prim": ("minimum spanning tree: n, n*n matrix", _run_prim),
    "kruskal": ("minimum spanning tree: n, m, m edges 'u v w'", _run_kruskal),
    "mergesort": ("merge sort: n, n integers", _run_merge_sort),
    "quicksort": ("quicksort: n, n integers", _run_quick_sort),
    "binsearch": ("binary search: n, n sorted integers, key", _run_binary_search),
    "rabinkarp": ("Rabin-Karp matching: text, pattern", _run_rabin_karp),
    "kmp": ("KMP matching: text, pattern", _run_kmp),
    "knapsack": ("fractional knapsack: n, capacity, n weights, n values", _run_knapsack),
    "jobs": ("job sequencing: n, n jobs 'id deadline profit'", _run_jobs),
    "hanoi": ("Tower of Hanoi: number of discs", _run_hanoi),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit",
        description="Run a classic algorithm on whitespace-separated input from stdin.",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for name, (summary, _) in _COMMANDS.items():
        commands.add_parser(name, help=summary, description=summary)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv`` on stdin; return the exit status."""
    args = _parser().parse_args(argv)
    _, run = _COMMANDS[args.command]
    try:
        lines = run(_Tokens(sys.stdin.read()))
    except InputError as error:
        print(f"algokit: invalid input: {error}", file=sys.stderr)
        return 2
    except ValueError as error:
        print(f"algokit: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())