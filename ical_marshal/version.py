"""Versions of the iCalendar data format."""

from __future__ import annotations

import enum

__all__ = [
    "ICalVersion",
    "ALL_VERSIONS",
]


class ICalVersion(str, enum.Enum):
    """A version of the iCalendar format."""

    V1_0 = "1.0"
    """The vCalendar 1.0 format."""

    V2_0_DEPRECATED = "2.0-deprecated"
    """The original iCalendar 2.0 format, rfc2445."""

    V2_0 = "2.0"
    """The current iCalendar 2.0 format, rfc5545."""

    @property
    def version_number(self) -> str:
        """Return the number written in the VERSION property."""
        if self is ICalVersion.V1_0:
            return "1.0"
        return "2.0"

    @property
    def is_v2(self) -> bool:
        """Return true if this is either flavor of iCalendar 2.0."""
        return self is not ICalVersion.V1_0

    @classmethod
    def from_version_number(cls, value: str) -> ICalVersion | None:
        """Return the version for a VERSION property value, if known."""
        value = value.strip()
        if value == "1.0":
            return cls.V1_0
        if value == "2.0":
            return cls.V2_0
        return None


ALL_VERSIONS: frozenset[ICalVersion] = frozenset(ICalVersion)
V2_VERSIONS: frozenset[ICalVersion] = frozenset(
    {ICalVersion.V2_0_DEPRECATED, ICalVersion.V2_0}
)
