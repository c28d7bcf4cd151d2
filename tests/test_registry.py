"""Tests for looking up property marshallers."""

import pytest

from ical_marshal import (
    MARSHALLERS,
    ICalProperty,
    MarshallerRegistry,
    Parameters,
    PropertyMarshaller,
    RawProperty,
)
from ical_marshal.exceptions import MarshallerError
from ical_marshal.types import Categories, Geo, Summary


class FakeProperty(ICalProperty):
    """Property under test."""

    value: str | None = None


class FakeMarshaller(PropertyMarshaller[FakeProperty]):
    """Marshaller under test."""

    def __init__(self) -> None:
        super().__init__(FakeProperty, "X-FAKE")

    def _write_text(self, prop: FakeProperty, warnings: list[str]) -> str:
        return prop.value or ""

    def _parse_text(
        self, value: str, parameters: Parameters, warnings: list[str]
    ) -> FakeProperty:
        return FakeProperty(value=value)


@pytest.mark.parametrize(
    ("name", "property_class"),
    [
        ("SUMMARY", Summary),
        ("summary", Summary),
        ("Geo", Geo),
        ("CATEGORIES", Categories),
    ],
)
def test_by_name(name: str, property_class: type[ICalProperty]) -> None:
    """Test looking up the built-in marshallers."""
    assert name in MARSHALLERS
    marshaller = MARSHALLERS.by_name(name)
    assert marshaller is not None
    assert marshaller.property_class is property_class
    assert MARSHALLERS.by_class(property_class) is marshaller


def test_not_found() -> None:
    """Test looking up an unknown property."""
    assert MARSHALLERS.by_name("X-UNKNOWN") is None
    assert MARSHALLERS.by_class(FakeProperty) is None
    assert "X-UNKNOWN" not in MARSHALLERS


def test_register() -> None:
    """Test registering a marshaller class."""
    registry = MarshallerRegistry()
    assert len(registry) == 0
    assert registry.register(FakeMarshaller) is FakeMarshaller
    assert len(registry) == 1

    marshaller = registry.by_name("x-fake")
    assert isinstance(marshaller, FakeMarshaller)
    assert registry.by_class(FakeProperty) is marshaller

    registry.register(FakeMarshaller)
    assert len(registry) == 1
    assert registry.by_name("X-FAKE") is not marshaller


def test_parse(parameters: Parameters) -> None:
    """Test parsing a property by name."""
    result = MARSHALLERS.parse("summary", "Team\\, lunch", parameters)
    assert isinstance(result.value, Summary)
    assert result.value.value == "Team, lunch"
    assert result.value.parameters == parameters
    assert result.warnings == ()


def test_parse_raw(parameters: Parameters) -> None:
    """Test unknown properties are preserved as raw properties."""
    result = MARSHALLERS.parse("x-wr-calname", "My\\, Calendar", parameters)
    prop = result.value
    assert isinstance(prop, RawProperty)
    assert prop.name == "X-WR-CALNAME"
    assert prop.value == "My\\, Calendar"
    assert prop.parameters == parameters

    params, written = MARSHALLERS.write(prop)
    assert params == parameters
    assert params is not parameters
    assert written.value == "My\\, Calendar"


def test_write() -> None:
    """Test writing a property with its registered marshaller."""
    summary = Summary(value="a;b")
    summary.language = "en"
    params, result = MARSHALLERS.write(summary)
    assert params == Parameters({"LANGUAGE": "en"})
    assert result.value == "a\\;b"
    assert result.warnings == ()


def test_write_unregistered() -> None:
    """Test writing a property class with no marshaller."""
    with pytest.raises(MarshallerError):
        MARSHALLERS.write(FakeProperty(value="value"))
