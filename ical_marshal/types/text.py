"""Properties with a TEXT value, such as SUMMARY and DESCRIPTION."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import ICalVersion
from ..warning import VALUE_NOT_SET, ValidationWarning

__all__ = [
    "TextProperty",
    "Summary",
    "Description",
    "Comment",
    "Location",
]


class TextProperty(ICalProperty):
    """Base class for properties whose value is free-form text."""

    value: str | None = None

    language = property(ICalProperty._get_language, ICalProperty._set_language)
    """The language of the text (e.g. "en")."""

    alt_representation = property(
        ICalProperty._get_alt_representation, ICalProperty._set_alt_representation
    )
    """A URI pointing to an alternate representation of the text."""

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        if self.value is None:
            warnings.append(ValidationWarning("Value is not set", code=VALUE_NOT_SET))


class Summary(TextProperty):
    """A short summary or subject for a calendar component."""


class Description(TextProperty):
    """A more complete description of a calendar component."""


class Comment(TextProperty):
    """A non-processing comment for the calendar user."""


class Location(TextProperty):
    """The venue for an activity."""


T_TEXT = TypeVar("T_TEXT", bound=TextProperty)


class TextPropertyMarshaller(PropertyMarshaller[T_TEXT]):
    """Marshaller for text properties."""

    def _write_text(self, prop: T_TEXT, warnings: list[str]) -> str:
        return self.escape(prop.value or "")

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> T_TEXT:
        return self.property_class(value=self.unescape(value))


@MARSHALLERS.register
class SummaryMarshaller(TextPropertyMarshaller[Summary]):
    def __init__(self) -> None:
        super().__init__(Summary, "SUMMARY")


@MARSHALLERS.register
class DescriptionMarshaller(TextPropertyMarshaller[Description]):
    def __init__(self) -> None:
        super().__init__(Description, "DESCRIPTION")


@MARSHALLERS.register
class CommentMarshaller(TextPropertyMarshaller[Comment]):
    def __init__(self) -> None:
        super().__init__(Comment, "COMMENT")


@MARSHALLERS.register
class LocationMarshaller(TextPropertyMarshaller[Location]):
    def __init__(self) -> None:
        super().__init__(Location, "LOCATION")
