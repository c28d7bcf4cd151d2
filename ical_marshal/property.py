"""Base class for all iCalendar properties.

A property is an individual attribute of a calendar component, such as the
SUMMARY of an event. Every property has a value, whose shape depends on the
property type, and a set of `Parameters`.

Property objects are pydantic models. Subclasses declare their value fields
and may override `_validate` to report problems with the value. Parameter
problems are reported by the `Parameters` container itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .parameters import Parameters
from .version import ALL_VERSIONS, ICalVersion
from .warning import ValidationWarning

__all__ = ["ICalProperty"]

_LOGGER = logging.getLogger(__name__)


class ICalProperty(BaseModel):
    """Base class for all iCalendar properties."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )

    parameters: Parameters = Field(default_factory=Parameters)
    """The property parameters, replaced as a whole when a property is parsed."""

    @classmethod
    def supported_versions(cls) -> frozenset[ICalVersion]:
        """Return the iCalendar versions that support this property."""
        return ALL_VERSIONS

    @classmethod
    def is_supported_by(cls, version: ICalVersion) -> bool:
        """Return true if the property may appear in the specified version."""
        return version in cls.supported_versions()

    def get_parameter(self, name: str) -> str | None:
        """Return the first value of a parameter (case insensitive)."""
        return self.parameters.first(name)

    def get_parameters(self, name: str) -> list[str]:
        """Return all values of a parameter (case insensitive)."""
        return self.parameters.get(name)

    def add_parameter(self, name: str, value: str) -> None:
        """Add a value to a parameter."""
        self.parameters.put(name, value)

    def set_parameter(self, name: str, values: str | Iterable[str]) -> None:
        """Replace all existing values of a parameter."""
        self.parameters.replace(name, values)

    def remove_parameter(self, name: str) -> None:
        """Remove all values of a parameter."""
        self.parameters.remove_all(name)

    # Typed helpers for well known parameters. Subclasses expose the ones that
    # apply to them as public properties.

    def _get_alt_representation(self) -> str | None:
        return self.parameters.alt_representation

    def _set_alt_representation(self, uri: str | None) -> None:
        self.parameters.alt_representation = uri

    def _get_format_type(self) -> str | None:
        return self.parameters.format_type

    def _set_format_type(self, format_type: str | None) -> None:
        self.parameters.format_type = format_type

    def _get_language(self) -> str | None:
        return self.parameters.language

    def _set_language(self, language: str | None) -> None:
        self.parameters.language = language

    def _get_sent_by(self) -> str | None:
        return self.parameters.sent_by

    def _set_sent_by(self, uri: str | None) -> None:
        self.parameters.sent_by = uri

    def _get_common_name(self) -> str | None:
        return self.parameters.common_name

    def _set_common_name(self, common_name: str | None) -> None:
        self.parameters.common_name = common_name

    def _get_directory_entry(self) -> str | None:
        return self.parameters.directory_entry

    def _set_directory_entry(self, uri: str | None) -> None:
        self.parameters.directory_entry = uri

    def validate(  # type: ignore[override]
        self, components: Sequence[Any], version: ICalVersion
    ) -> list[ValidationWarning]:
        """Check the property for deviations from the iCalendar format.

        These problems do not prevent the property from being written, but
        may prevent it from being parsed correctly by the consuming
        application. The components are the hierarchy of components the
        property belongs to. Value warnings are returned first, followed by
        warnings about the parameters.
        """
        warnings: list[ValidationWarning] = []
        self._validate(components, version, warnings)
        warnings.extend(self.parameters.validate(version))
        _LOGGER.debug(
            "Validated %s for version %s: %s", type(self).__name__, version, warnings
        )
        return warnings

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        """Add warnings about the property value, overridden by subclasses."""
