"""Implementation of the CATEGORIES property."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import Field

from ..marshaller import PropertyMarshaller
from ..parameters import Parameters
from ..property import ICalProperty
from ..registry import MARSHALLERS
from ..version import ICalVersion
from ..warning import VALUE_NOT_SET, ValidationWarning

__all__ = ["Categories"]


class Categories(ICalProperty):
    """Categories or subtypes of a calendar component."""

    values: list[str] = Field(default_factory=list)

    language = property(ICalProperty._get_language, ICalProperty._set_language)

    def _validate(
        self,
        components: Sequence[Any],
        version: ICalVersion,
        warnings: list[ValidationWarning],
    ) -> None:
        if not self.values:
            warnings.append(
                ValidationWarning("No categories are set", code=VALUE_NOT_SET)
            )


@MARSHALLERS.register
class CategoriesMarshaller(PropertyMarshaller[Categories]):
    """Marshals categories as a comma separated list."""

    def __init__(self) -> None:
        super().__init__(Categories, "CATEGORIES")

    def _write_text(self, prop: Categories, warnings: list[str]) -> str:
        return self.write_list(prop.values)

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> Categories:
        return Categories(values=self.parse_list(value))
