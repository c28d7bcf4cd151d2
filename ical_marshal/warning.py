"""Non-fatal problems found when validating a property."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ValidationWarning"]


@dataclass(frozen=True)
class ValidationWarning:
    """A deviation from the iCalendar format that does not block marshalling.

    A property with warnings can still be written, but consuming applications
    may not be able to interpret it.
    """

    message: str
    """Human readable description of the problem."""

    code: int | None = None
    """Optional numeric code identifying the kind of problem."""

    origin: str | None = None
    """Name of the property or parameter the warning is tied to, if any."""

    def __str__(self) -> str:
        result = self.message
        if self.code is not None:
            result = f"({self.code}) {result}"
        if self.origin:
            result = f"{self.origin}: {result}"
        return result


# Warning codes reported by the parameter container
INVALID_PARAMETER_NAME = 1
INVALID_PARAMETER_VALUE = 2
UNSUPPORTED_PARAMETER = 3
UNKNOWN_PARAMETER_VALUE = 4

# Warning codes reported by property values
VALUE_NOT_SET = 10
VALUE_OUT_OF_RANGE = 11
UNKNOWN_VALUE = 12
UNSUPPORTED_VALUE = 13
