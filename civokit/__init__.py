"""Coloured messages, confirmations, structured output and Kubernetes config helpers for cloud command-line tools."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "colors",
    "confirmation",
    "formatting",
    "kubernetes",
    "names",
    "output_writer",
]