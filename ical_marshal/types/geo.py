"""Implementation of the GEO property."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from ..exceptions import CalendarParseError
from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import ICalVersion
from ..warning import VALUE_NOT_SET, VALUE_OUT_OF_RANGE, ValidationWarning

__all__ = ["Geo"]


class Geo(ICalProperty):
    """Information related to the global position for an activity."""

    latitude: float | None = None
    longitude: float | None = None

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        if self.latitude is None:
            warnings.append(
                ValidationWarning("Latitude is not set", code=VALUE_NOT_SET)
            )
        elif not -90.0 <= self.latitude <= 90.0:
            warnings.append(
                ValidationWarning(
                    f"Latitude {self.latitude} is not between -90 and 90",
                    code=VALUE_OUT_OF_RANGE,
                )
            )
        if self.longitude is None:
            warnings.append(
                ValidationWarning("Longitude is not set", code=VALUE_NOT_SET)
            )
        elif not -180.0 <= self.longitude <= 180.0:
            warnings.append(
                ValidationWarning(
                    f"Longitude {self.longitude} is not between -180 and 180",
                    code=VALUE_OUT_OF_RANGE,
                )
            )


def _format(value: float | None) -> str:
    """Write a coordinate as a FLOAT, which has no exponent."""
    if value is None:
        return ""
    return format(Decimal(repr(value)), "f")


@MARSHALLERS.register
class GeoMarshaller(PropertyMarshaller[Geo]):
    """Marshals a GEO value as "latitude;longitude"."""

    def __init__(self) -> None:
        super().__init__(Geo, "GEO")

    def _write_text(self, prop: Geo, warnings: list[str]) -> str:
        return f"{_format(prop.latitude)};{_format(prop.longitude)}"

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> Geo:
        delimiter = ";"
        if delimiter not in value and "," in value:
            # vCalendar 1.0 separates the coordinates with a comma
            warnings.append("Coordinates are separated by a comma, expected ';'")
            delimiter = ","
        parts = self.split_by(value, delimiter)
        if len(parts) != 2:
            raise CalendarParseError(
                "Value was not valid geo latitude;longitude", detailed_error=value
            )
        try:
            latitude = float(parts[0]) if parts[0] else None
            longitude = float(parts[1]) if parts[1] else None
        except ValueError as err:
            raise CalendarParseError(
                "Geo coordinates are not numbers", detailed_error=value
            ) from err
        return Geo(latitude=latitude, longitude=longitude)
