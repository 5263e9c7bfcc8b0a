"""Reusable type definitions for the lambdautils package.

This module provides the type variables and callable aliases shared by the
collection utilities, together with the argument guard every public
operation runs before touching its inputs.

Type Aliases:
    Transform: A unary function mapping an element to an element of the same type.
    Predicate: A function deciding whether an element passes a test.
    KeyFunction: A function computing a grouping key for an element.
    Supplier: A zero-argument function producing a fresh value on each call.
"""

import typing as tp

__all__ = [
    "T",
    "K",
    "V",
    "R",
    "Transform",
    "Predicate",
    "KeyFunction",
    "Supplier",
    "require_argument",
    "require_callable",
]

T = tp.TypeVar("T")
K = tp.TypeVar("K")
V = tp.TypeVar("V")
R = tp.TypeVar("R")

Transform = tp.Callable[[T], T]
Predicate = tp.Callable[[T], bool]
KeyFunction = tp.Callable[[T], R]
Supplier = tp.Callable[[], V]


def require_argument(value: tp.Any, name: str) -> None:
    """Reject a missing collection argument.

    Args:
        value: The argument to check.
        name: Parameter name, used in the error message.

    Raises:
        TypeError: If ``value`` is None.
    """
    if value is None:
        raise TypeError(f"Argument '{name}' must not be None.")


def require_callable(fn: tp.Any, name: str) -> None:
    """Reject a missing or non-callable callback argument.

    Raises:
        TypeError: If ``fn`` is None or not callable.
    """
    require_argument(fn, name)
    if not callable(fn):
        raise TypeError(
            f"Argument '{name}' must be callable, got {type(fn).__name__}."
        )
