"""String, memory, list, formatting and line-reading helpers with a push_swap solver."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "lists",
    "output",
    "printf",
    "lines",
    "stacks",
    "push_swap",
]