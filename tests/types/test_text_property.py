"""Tests for TEXT properties."""

import pytest

from ical_marshal import MARSHALLERS, ICalVersion, Parameters
from ical_marshal.types import Comment, Description, Location, Summary, TextProperty
from ical_marshal.types.text import DescriptionMarshaller, SummaryMarshaller
from ical_marshal.warning import VALUE_NOT_SET


def test_parse() -> None:
    """Test parsing an escaped text value."""
    result = DescriptionMarshaller().parse_text(
        "Project XYZ Final Review\\nConference Room - 3B\\nCome Prepared.",
        Parameters(),
    )
    assert result.value == Description(
        value="\n".join(
            ["Project XYZ Final Review", "Conference Room - 3B", "Come Prepared."]
        )
    )
    assert result.warnings == ()


def test_write() -> None:
    """Test writing text escapes special characters but not newlines."""
    marshaller = SummaryMarshaller()
    assert marshaller.write_text(Summary(value="a, b; c\\d")).value == (
        "a\\, b\\; c\\\\d"
    )
    assert marshaller.write_text(Summary(value="line1\nline2")).value == (
        "line1\nline2"
    )
    assert marshaller.write_text(Summary()).value == ""


@pytest.mark.parametrize(
    ("name", "property_class"),
    [
        ("SUMMARY", Summary),
        ("DESCRIPTION", Description),
        ("COMMENT", Comment),
        ("LOCATION", Location),
    ],
)
def test_registered(name: str, property_class: type[TextProperty]) -> None:
    """Test each text property has a marshaller."""
    result = MARSHALLERS.parse(name, "Conference Room\\, 3B", Parameters())
    assert isinstance(result.value, property_class)
    assert result.value.value == "Conference Room, 3B"


def test_language() -> None:
    """Test the language and alternate representation accessors."""
    summary = Summary(value="Bonjour")
    summary.language = "fr"
    summary.alt_representation = "http://example.com/bonjour.html"
    assert summary.get_parameter("LANGUAGE") == "fr"
    assert summary.get_parameter("ALTREP") == "http://example.com/bonjour.html"
    assert summary.language == "fr"

    summary.language = None
    assert summary.get_parameter("LANGUAGE") is None


def test_validate() -> None:
    """Test validating text properties."""
    assert Summary(value="value").validate([], ICalVersion.V2_0) == []

    warnings = Summary().validate([], ICalVersion.V2_0)
    assert [warning.code for warning in warnings] == [VALUE_NOT_SET]

    summary = Summary(value="value")
    summary.alt_representation = "http://example.com/"
    assert len(summary.validate([], ICalVersion.V1_0)) == 1
