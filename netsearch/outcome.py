"""Explicit success/failure values passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

FailureKind = Literal["weather", "cascade"]


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a stage that may fail without raising.

    Exactly one of ``value`` or ``error`` is meaningful: ``ok`` tells which.
    """

    value: T | None = None
    kind: FailureKind | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: FailureKind, error: str) -> "Outcome[T]":
        return cls(kind=kind, error=error)
