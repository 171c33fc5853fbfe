"""Classic graph, sorting, searching, string-matching, greedy and Tower of Hanoi algorithms, with a command line front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]