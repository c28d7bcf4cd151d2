"""Implementation of the ORGANIZER property."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..const import PARAM_CN
from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import V2_VERSIONS, ICalVersion
from ..warning import VALUE_NOT_SET, ValidationWarning

__all__ = ["Organizer"]


class Organizer(ICalProperty):
    """The organizer of a calendar component."""

    uri: str | None = None
    """The calendar user address (e.g. "mailto:jsmith@example.com")."""

    common_name = property(
        ICalProperty._get_common_name, ICalProperty._set_common_name
    )
    sent_by = property(ICalProperty._get_sent_by, ICalProperty._set_sent_by)
    directory_entry = property(
        ICalProperty._get_directory_entry, ICalProperty._set_directory_entry
    )
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
        if self.uri is None:
            warnings.append(
                ValidationWarning("Calendar user address is not set", code=VALUE_NOT_SET)
            )


@MARSHALLERS.register
class OrganizerMarshaller(PropertyMarshaller[Organizer]):
    """Marshals the ORGANIZER calendar user address."""

    def __init__(self) -> None:
        super().__init__(Organizer, "ORGANIZER")

    def _prepare_parameters(self, prop: Organizer, copy: Parameters) -> None:
        if copy.common_name == "":
            copy.remove_all(PARAM_CN)

    def _write_text(self, prop: Organizer, warnings: list[str]) -> str:
        return prop.uri or ""

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> Organizer:
        return Organizer(uri=value.strip() or None)
