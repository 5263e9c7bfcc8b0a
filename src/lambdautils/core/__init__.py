"""Core data structures shared by the collection utilities."""

from lambdautils.core.option import Option

__all__ = [
    "Option",
]
