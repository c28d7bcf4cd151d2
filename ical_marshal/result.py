"""The outcome of marshalling or unmarshalling a property."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

__all__ = ["Result"]

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """A marshalled or unmarshalled value with any non-fatal warnings."""

    value: T
    """The produced value (e.g. the property value string when writing)."""

    warnings: tuple[str, ...] = field(default_factory=tuple)
    """Note-worthy but non-critical issues found while producing the value."""

    def __post_init__(self) -> None:
        warnings: Iterable[str] = self.warnings
        object.__setattr__(self, "warnings", tuple(warnings))
