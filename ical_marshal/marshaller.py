"""Base class for property marshallers.

A marshaller converts one property type between its object form and the
value text of an iCalendar content line. There is one marshaller per property
type, bound to the property's wire name (e.g. "SUMMARY").

Subclasses only implement `_write_text` and `_parse_text` and optionally
`_prepare_parameters`. The public methods wrap each call with a fresh list
of warnings and, when parsing, attach the parsed parameters to the new
property. For example, a marshaller for a simple text property:

  class SummaryMarshaller(PropertyMarshaller[Summary]):

      def __init__(self) -> None:
          super().__init__(Summary, "SUMMARY")

      def _write_text(self, prop: Summary, warnings: list[str]) -> str:
          return self.escape(prop.value)

      def _parse_text(
          self, value: str, parameters: Parameters, warnings: list[str]
      ) -> Summary:
          return Summary(value=self.unescape(value))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from . import text
from .exceptions import MarshallerError
from .parameters import Parameters
from .property import ICalProperty
from .result import Result

__all__ = ["PropertyMarshaller"]

_LOGGER = logging.getLogger(__name__)

T_PROPERTY = TypeVar("T_PROPERTY", bound=ICalProperty)


class PropertyMarshaller(ABC, Generic[T_PROPERTY]):
    """Base class for iCalendar property marshallers."""

    escape = staticmethod(text.escape)
    unescape = staticmethod(text.unescape)
    split_by = staticmethod(text.split_by)
    parse_list = staticmethod(text.parse_list)
    parse_component = staticmethod(text.parse_component)
    write_list = staticmethod(text.write_list)
    write_component = staticmethod(text.write_component)

    def __init__(self, property_class: type[T_PROPERTY], property_name: str) -> None:
        """Initialize PropertyMarshaller."""
        self._property_class = property_class
        self._property_name = property_name.upper()

    @property
    def property_class(self) -> type[T_PROPERTY]:
        """Return the property class handled by this marshaller."""
        return self._property_class

    @property
    def property_name(self) -> str:
        """Return the upper case property name (e.g. "VERSION")."""
        return self._property_name

    @final
    def prepare_parameters(self, prop: T_PROPERTY) -> Parameters:
        """Return sanitized parameters for writing the property.

        The parameters are a copy so the property itself is never modified
        when it is marshalled.
        """
        copy = prop.parameters.copy()
        self._prepare_parameters(prop, copy)
        return copy

    @final
    def write_text(self, prop: T_PROPERTY) -> Result[str]:
        """Marshal the property value to a string."""
        warnings: list[str] = []
        value = self._write_text(prop, warnings)
        _LOGGER.debug("Wrote %s value '%s'", self._property_name, value)
        return Result(value, tuple(warnings))

    @final
    def parse_text(self, value: str, parameters: Parameters) -> Result[T_PROPERTY]:
        """Unmarshal the property value, attaching the parsed parameters."""
        _LOGGER.debug("Parsing %s value '%s'", self._property_name, value)
        warnings: list[str] = []
        prop = self._parse_text(value, parameters, warnings)
        if not isinstance(prop, self._property_class):
            raise MarshallerError(
                f"Marshaller for {self._property_name} returned "
                f"{type(prop).__name__}, expected {self._property_class.__name__}"
            )
        prop.parameters = parameters
        return Result(prop, tuple(warnings))

    def _prepare_parameters(self, prop: T_PROPERTY, copy: Parameters) -> None:
        """Sanitize the copy of the property's parameters before writing."""

    @abstractmethod
    def _write_text(self, prop: T_PROPERTY, warnings: list[str]) -> str:
        """Marshal the property value, adding any non-fatal issues to warnings."""

    @abstractmethod
    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> T_PROPERTY:
        """Unmarshal the property value, adding any non-fatal issues to warnings.

        Raises CalendarParseError when no property can be made from the value.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._property_name})"
