"""Combinators over optional values.

``None`` is the "missing" value throughout scoring. These helpers apply a
function only when every operand is present, so missing inputs propagate to
missing outputs without per-call null checks.
"""

from collections.abc import Callable, Iterable


def fmap[T, U](value: T | None, fn: Callable[[T], U]) -> U | None:
    """Apply ``fn`` to ``value``, or return None if it is missing."""
    if value is None:
        return None
    return fn(value)


def map2[T, U, V](a: T | None, b: U | None, fn: Callable[[T, U], V]) -> V | None:
    """Apply ``fn`` to both operands, or return None if either is missing."""
    if a is None or b is None:
        return None
    return fn(a, b)


def fold[T, A](values: Iterable[T | None], fn: Callable[[A, T], A], initial: A) -> A | None:
    """Strict left fold: None if any element is missing."""
    acc = initial
    for value in values:
        if value is None:
            return None
        acc = fn(acc, value)
    return acc


def present[T](values: Iterable[T | None]) -> list[T]:
    """The non-missing elements of ``values``, in order."""
    return [v for v in values if v is not None]
