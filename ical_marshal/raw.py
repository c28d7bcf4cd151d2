"""Properties without a registered marshaller.

Unknown and experimental (X-) properties are kept as raw properties so
that they are preserved when a calendar is read and written again. The
value is kept exactly as it appears in the content line.
"""

from __future__ import annotations

from .marshaller import PropertyMarshaller
from .parameters import Parameters
from .property import ICalProperty

__all__ = [
    "RawProperty",
    "RawPropertyMarshaller",
]


class RawProperty(ICalProperty):
    """A property whose value is not interpreted."""

    name: str
    """The property name (e.g. "X-WR-CALNAME")."""

    value: str | None = None
    """The value as it appears in the content line, still escaped."""


class RawPropertyMarshaller(PropertyMarshaller[RawProperty]):
    """Marshaller bound to a single raw property name."""

    def __init__(self, property_name: str) -> None:
        super().__init__(RawProperty, property_name)

    def _write_text(self, prop: RawProperty, warnings: list[str]) -> str:
        return prop.value or ""

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> RawProperty:
        return RawProperty(name=self.property_name, value=value)
