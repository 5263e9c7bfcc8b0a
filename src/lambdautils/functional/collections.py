"""Utility functions over lists and maps.

Each function takes a collection plus a behaviour passed as a plain callable,
and returns a freshly built result. Inputs are never mutated, and a failing
callback propagates its exception unchanged without exposing a partially
built result.

Functions:
    - :func:`dup`: interleave every element with its transformed copy.
    - :func:`opt_filter`: wrap every element in an :class:`Option`, kept only
      when it satisfies a predicate.
    - :func:`group`: bucket elements into sets by a computed key.
    - :func:`fill`: unwrap a map of options, supplying defaults for absent
      entries.

Example:
    >>> dup([1, 2, 3], lambda x: x * 10)
    [1, 10, 2, 20, 3, 30]
    >>> group([1, 2, 3, 4, 5], lambda x: "even" if x % 2 == 0 else "odd")
    {'odd': {1, 3, 5}, 'even': {2, 4}}
"""

import typing as tp

from lambdautils.core.option import Option
from lambdautils.core.types import (
    K,
    R,
    T,
    V,
    KeyFunction,
    Predicate,
    Supplier,
    Transform,
    require_argument,
    require_callable,
)
from lambdautils.logger.logger import logger

__all__ = [
    "dup",
    "opt_filter",
    "group",
    "fill",
]


def dup(sequence: tp.Sequence[T], transform: Transform[T]) -> tp.List[T]:
    """Duplicate every element, following it with its transformed value.

    Args:
        sequence: Input elements.
        transform: Function applied to each element.

    Returns:
        A new list of length ``2 * len(sequence)`` where position ``2i`` holds
        ``sequence[i]`` and position ``2i + 1`` holds ``transform(sequence[i])``.

    Raises:
        TypeError: If ``sequence`` is None or ``transform`` is not callable.
    """
    require_argument(sequence, "sequence")
    require_callable(transform, "transform")

    result: tp.List[T] = []
    for element in sequence:
        result.append(element)
        result.append(transform(element))
    return result


def opt_filter(
    sequence: tp.Sequence[T], predicate: Predicate[T]
) -> tp.List[Option[T]]:
    """Map every element to an option that is present only if it passes.

    Args:
        sequence: Input elements.
        predicate: Test applied once to each element.

    Returns:
        A new list of the same length, holding ``Option.of(e)`` for elements
        satisfying ``predicate`` and ``Option.empty()`` for the rest.

    Raises:
        TypeError: If ``sequence`` is None or ``predicate`` is not callable.
    """
    require_argument(sequence, "sequence")
    require_callable(predicate, "predicate")

    return [Option.of(element).filter(predicate) for element in sequence]


def group(
    sequence: tp.Sequence[T], key: KeyFunction[T, R]
) -> tp.Dict[R, tp.Set[T]]:
    """Group elements into sets keyed by ``key(element)``.

    Equal elements collapse into a single set member. Neither the order of the
    returned keys nor the iteration order inside each set is significant.

    Args:
        sequence: Input elements. Elements and keys must be hashable.
        key: Function computing the bucket of each element.

    Returns:
        A new dict mapping each computed key to the set of elements sharing it.

    Raises:
        TypeError: If ``sequence`` is None, ``key`` is not callable, or an
            element or key is unhashable.
    """
    require_argument(sequence, "sequence")
    require_callable(key, "key")

    groups: tp.Dict[R, tp.Set[T]] = {}
    for element in sequence:
        bucket = key(element)
        members = groups.get(bucket)
        if members is None:
            members = set()
            groups[bucket] = members
        members.add(element)
    return groups


def fill(mapping: tp.Mapping[K, Option[V]], supplier: Supplier[V]) -> tp.Dict[K, V]:
    """Unwrap a map of options, filling absent entries from ``supplier``.

    The supplier is called once for every absent entry, in the mapping's
    iteration order, and never for present ones. Every value is type-checked
    before the supplier is first called, so a bad value raises without any
    supplier side effects.

    Args:
        mapping: Keys associated with present or absent values.
        supplier: Zero-argument function producing a default value.

    Returns:
        A new dict with the same keys, holding unwrapped values.

    Raises:
        TypeError: If ``mapping`` is None, ``supplier`` is not callable, or a
            value of ``mapping`` is not an :class:`Option`.
    """
    require_argument(mapping, "mapping")
    require_callable(supplier, "supplier")

    for k, value in mapping.items():
        if not isinstance(value, Option):
            raise TypeError(
                f"Value for key {k!r} must be an Option, got {type(value).__name__}."
            )

    result: tp.Dict[K, V] = {}
    filled = 0
    for k, value in mapping.items():
        if value.is_present():
            result[k] = value.get()
        else:
            result[k] = supplier()
            filled += 1

    logger.debug("Filled %d of %d entries from supplier.", filled, len(result))
    return result
