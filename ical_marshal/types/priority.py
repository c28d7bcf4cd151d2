"""Implementation of the PRIORITY property."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..exceptions import CalendarParseError
from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import ICalVersion
from ..warning import VALUE_NOT_SET, VALUE_OUT_OF_RANGE, ValidationWarning

__all__ = ["Priority"]


class Priority(ICalProperty):
    """Defines relative priority for a calendar component.

    In iCalendar 2.0 the value is between 0 and 9, where 0 is undefined and
    1 is the highest priority.
    """

    value: int | None = None

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        if self.value is None:
            warnings.append(ValidationWarning("Value is not set", code=VALUE_NOT_SET))
        elif version.is_v2 and not 0 <= self.value <= 9:
            warnings.append(
                ValidationWarning(
                    f"Priority {self.value} is not between 0 and 9",
                    code=VALUE_OUT_OF_RANGE,
                )
            )


@MARSHALLERS.register
class PriorityMarshaller(PropertyMarshaller[Priority]):
    """Marshals the PRIORITY integer value."""

    def __init__(self) -> None:
        super().__init__(Priority, "PRIORITY")

    def _write_text(self, prop: Priority, warnings: list[str]) -> str:
        if prop.value is None:
            return ""
        return str(prop.value)

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> Priority:
        if not (value := value.strip()):
            return Priority()
        try:
            return Priority(value=int(value))
        except ValueError as err:
            raise CalendarParseError(
                "Priority is not an integer", detailed_error=value
            ) from err
