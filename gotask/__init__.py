"""Command-line todo manager that keeps tasks in named groups on disk."""

__version__ = "0.1.0"