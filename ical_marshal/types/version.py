"""Implementation of the VERSION property.

The value is either the maximum version number required to interpret the
calendar (e.g. "2.0") or a minimum and maximum pair (e.g. "1.0;2.0").
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import ICalVersion
from ..warning import UNKNOWN_VALUE, UNSUPPORTED_VALUE, VALUE_NOT_SET, ValidationWarning

__all__ = ["Version"]


class Version(ICalProperty):
    """The version of the iCalendar format used by the calendar."""

    min_version: str | None = None
    max_version: str | None = None

    @classmethod
    def from_ical_version(cls, version: ICalVersion) -> Version:
        """Create a VERSION property for the specified version."""
        return cls(max_version=version.version_number)

    @property
    def ical_version(self) -> ICalVersion | None:
        """Return the version this property describes, if known."""
        if self.max_version is None:
            return None
        return ICalVersion.from_version_number(self.max_version)

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        if self.max_version is None:
            warnings.append(
                ValidationWarning("Maximum version is not set", code=VALUE_NOT_SET)
            )
        elif self.ical_version is None:
            warnings.append(
                ValidationWarning(
                    f"Unknown version number '{self.max_version}'", code=UNKNOWN_VALUE
                )
            )
        if self.min_version is not None and version is ICalVersion.V1_0:
            warnings.append(
                ValidationWarning(
                    "A minimum version is not supported by version 1.0",
                    code=UNSUPPORTED_VALUE,
                )
            )


@MARSHALLERS.register
class VersionMarshaller(PropertyMarshaller[Version]):
    """Marshals the VERSION property."""

    def __init__(self) -> None:
        super().__init__(Version, "VERSION")

    def _write_text(self, prop: Version, warnings: list[str]) -> str:
        max_version = prop.max_version or ""
        if prop.min_version is None:
            return max_version
        return self.write_component([prop.min_version, max_version])

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> Version:
        parts = self.split_by(value, ";", remove_empties=False, unescape_each=True)
        if len(parts) > 2:
            warnings.append(f"Ignoring extra version fields: {parts[2:]}")
        if len(parts) == 1:
            return Version(max_version=parts[0] or None)
        return Version(min_version=parts[0] or None, max_version=parts[1] or None)
