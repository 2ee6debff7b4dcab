"""Composable business predicates.

A Specification wraps a plain predicate function. Combinators build new
specifications from existing ones without mutating them:

    premium = is_active() & has_minimum_orders(3)
    premium.is_satisfied_by(member)

``&``, ``|`` and ``~`` are aliases for ``and_``, ``or_`` and ``not_``.
Evaluation short-circuits exactly like Python's ``and`` / ``or``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Specification(Generic[T]):
    """A named predicate over candidates of type ``T``."""

    predicate: Callable[[T], bool]
    name: str = "specification"

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.predicate(candidate))

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def and_(self, other: Specification[T]) -> Specification[T]:
        return all_of(self, other)

    def or_(self, other: Specification[T]) -> Specification[T]:
        return any_of(self, other)

    def not_(self) -> Specification[T]:
        return negate(self)

    __and__ = and_
    __or__ = or_
    __invert__ = not_

    def filter(self, candidates: Iterable[T]) -> list[T]:
        """Return the candidates that satisfy this specification, in order."""
        return [c for c in candidates if self.is_satisfied_by(c)]

    def __str__(self) -> str:
        return self.name


def specification(name: str) -> Callable[[Callable[[T], bool]], Specification[T]]:
    """Decorator turning a predicate function into a named Specification."""

    def wrap(predicate: Callable[[T], bool]) -> Specification[T]:
        return Specification(predicate, name)

    return wrap


def all_of(*specs: Specification[T]) -> Specification[T]:
    """Conjunction; an empty conjunction is always satisfied."""
    parts = tuple(specs)
    return Specification(
        lambda candidate: all(s.is_satisfied_by(candidate) for s in parts),
        "(" + " AND ".join(s.name for s in parts) + ")" if parts else "TRUE",
    )


def any_of(*specs: Specification[T]) -> Specification[T]:
    """Disjunction; an empty disjunction is never satisfied."""
    parts = tuple(specs)
    return Specification(
        lambda candidate: any(s.is_satisfied_by(candidate) for s in parts),
        "(" + " OR ".join(s.name for s in parts) + ")" if parts else "FALSE",
    )


def negate(spec: Specification[T]) -> Specification[T]:
    return Specification(lambda candidate: not spec.is_satisfied_by(candidate), f"NOT {spec.name}")
