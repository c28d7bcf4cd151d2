"""Registry of property marshallers.

A document reader looks up the marshaller for each property name it
encounters, and a writer looks up the marshaller for each property object it
needs to write. Marshallers are registered with a class decorator:

  @MARSHALLERS.register
  class SummaryMarshaller(PropertyMarshaller[Summary]):
      ...

Properties with a name that has no registered marshaller are parsed as a
`RawProperty` so that unknown and experimental properties are preserved.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .exceptions import MarshallerError
from .marshaller import PropertyMarshaller
from .parameters import Parameters
from .property import ICalProperty
from .result import Result
from .raw import RawProperty, RawPropertyMarshaller

__all__ = [
    "MarshallerRegistry",
    "MARSHALLERS",
]

_LOGGER = logging.getLogger(__name__)

T_MARSHALLER = TypeVar("T_MARSHALLER", bound=Callable[[], PropertyMarshaller[Any]])


class MarshallerRegistry:
    """Registry of marshallers by property name and property class."""

    def __init__(self) -> None:
        """Initialize MarshallerRegistry."""
        self._by_name: dict[str, PropertyMarshaller[Any]] = {}
        self._by_class: dict[type[ICalProperty], PropertyMarshaller[Any]] = {}

    def register(self, marshaller_cls: T_MARSHALLER) -> T_MARSHALLER:
        """Decorator that registers a single instance of a marshaller class."""
        self.add(marshaller_cls())
        return marshaller_cls

    def add(self, marshaller: PropertyMarshaller[Any]) -> None:
        """Register a marshaller instance."""
        name = marshaller.property_name
        if name in self._by_name:
            _LOGGER.debug("Replacing marshaller for %s with %s", name, marshaller)
        self._by_name[name] = marshaller
        self._by_class[marshaller.property_class] = marshaller

    def by_name(self, name: str) -> PropertyMarshaller[Any] | None:
        """Return the marshaller for a property name (case insensitive)."""
        return self._by_name.get(name.upper())

    def by_class(
        self, property_class: type[ICalProperty]
    ) -> PropertyMarshaller[Any] | None:
        """Return the marshaller for a property class."""
        return self._by_class.get(property_class)

    def parse(
        self, name: str, value: str, parameters: Parameters
    ) -> Result[ICalProperty]:
        """Unmarshal a property value read from a content line."""
        if (marshaller := self.by_name(name)) is None:
            _LOGGER.debug("No marshaller for %s, parsing as a raw property", name)
            marshaller = RawPropertyMarshaller(name)
        return marshaller.parse_text(value, parameters)

    def write(self, prop: ICalProperty) -> tuple[Parameters, Result[str]]:
        """Marshal a property, returning sanitized parameters and the value."""
        marshaller: PropertyMarshaller[Any] | None = self.by_class(type(prop))
        if marshaller is None and isinstance(prop, RawProperty):
            marshaller = RawPropertyMarshaller(prop.name)
        if marshaller is None:
            raise MarshallerError(
                f"No marshaller registered for property {type(prop).__name__}"
            )
        return marshaller.prepare_parameters(prop), marshaller.write_text(prop)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


MARSHALLERS: MarshallerRegistry = MarshallerRegistry()
