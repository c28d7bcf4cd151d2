"""Implementation of the REQUEST-STATUS property.

The value is a structured value of a status code, a description, and
optional exception data, for example:

  3.1;Invalid property value;DTSTART:96-Apr-01
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import V2_VERSIONS, ICalVersion
from ..warning import VALUE_NOT_SET, ValidationWarning

__all__ = ["RequestStatus"]


class RequestStatus(ICalProperty):
    """Status code returned for a scheduling request."""

    status_code: str | None = None
    """Hierarchical status code (e.g. "2.0")."""

    description: str | None = None
    exception_text: str | None = None
    """Data that caused the status, such as the offending property."""

    language = property(ICalProperty._get_language, ICalProperty._set_language)

    @classmethod
    def supported_versions(cls) -> frozenset[ICalVersion]:
        return V2_VERSIONS

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        if self.status_code is None:
            warnings.append(
                ValidationWarning("Status code is not set", code=VALUE_NOT_SET)
            )


def _field(fields: list[str], index: int) -> str | None:
    if index >= len(fields) or not fields[index]:
        return None
    return fields[index]


@MARSHALLERS.register
class RequestStatusMarshaller(PropertyMarshaller[RequestStatus]):
    """Marshals the REQUEST-STATUS structured value."""

    def __init__(self) -> None:
        super().__init__(RequestStatus, "REQUEST-STATUS")

    def _write_text(self, prop: RequestStatus, warnings: list[str]) -> str:
        fields = [prop.status_code, prop.description]
        if prop.exception_text is not None:
            fields.append(prop.exception_text)
        return self.write_component(fields)

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> RequestStatus:
        # Each field is a single TEXT value, commas included
        fields = self.split_by(value, ";", unescape_each=True)
        if len(fields) > 3:
            warnings.append(f"Ignoring extra request status fields: {fields[3:]}")
        return RequestStatus(
            status_code=_field(fields, 0),
            description=_field(fields, 1),
            exception_text=_field(fields, 2),
        )
