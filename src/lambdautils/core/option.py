"""Explicit present/absent container.

``Option`` holds either a present value or nothing at all. Absence is its own
state and is never spelled as ``None``: ``Option.of(None)`` is a present
option whose value happens to be ``None``.

The model is an immutable pydantic model, so instances can be compared,
hashed (when the wrapped value is hashable) and safely shared between callers.

Example:
    >>> Option.of(2).filter(lambda x: x % 2 == 0)
    Present(2)
    >>> Option.of(3).filter(lambda x: x % 2 == 0)
    Absent
"""

import typing as tp

from pydantic import BaseModel, ConfigDict, Field

from .types import Predicate, Supplier, require_callable

__all__ = [
    "Option",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")


class Option(BaseModel, tp.Generic[T]):
    """A value that is either present or absent.

    Build instances with :meth:`of` and :meth:`empty` rather than the
    constructor; the constructor does not enforce that absent options
    carry no value.

    Attributes:
        present: Whether a value is held.
        value: The held value. Meaningless when ``present`` is False.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    present: bool = Field(False, description="Whether a value is held.")
    value: tp.Any = Field(None, description="The held value, if present.")

    @classmethod
    def of(cls, value: T) -> "Option[T]":
        """Wrap ``value`` in a present option."""
        return cls(present=True, value=value)

    @classmethod
    def empty(cls) -> "Option[T]":
        """Return the absent option."""
        return cls(present=False)

    def is_present(self) -> bool:
        return self.present

    def is_empty(self) -> bool:
        return not self.present

    def get(self) -> T:
        """Return the held value.

        Raises:
            ValueError: If the option is absent.
        """
        if not self.present:
            raise ValueError("No value present.")
        return self.value

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """Return the held value, or ``supplier()`` when absent.

        The supplier is only invoked for absent options.
        """
        require_callable(supplier, "supplier")
        if self.present:
            return self.value
        return supplier()

    def filter(self, predicate: Predicate[T]) -> "Option[T]":
        """Keep the value only if it satisfies ``predicate``.

        Absent options stay absent without calling the predicate.
        """
        require_callable(predicate, "predicate")
        if not self.present:
            return self
        return self if predicate(self.value) else Option.empty()

    def map(self, fn: tp.Callable[[T], U]) -> "Option[U]":
        """Apply ``fn`` to the held value, if any."""
        require_callable(fn, "fn")
        if not self.present:
            return self
        return Option.of(fn(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if not self.present or not other.present:
            return self.present == other.present
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.present, self.value if self.present else None))

    def __repr__(self) -> str:
        return f"Present({self.value!r})" if self.present else "Absent"

    __str__ = __repr__
