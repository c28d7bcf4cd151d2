"""Tests for the CATEGORIES property."""

from ical_marshal import ICalVersion, Parameters
from ical_marshal.types import Categories
from ical_marshal.types.categories import CategoriesMarshaller
from ical_marshal.warning import VALUE_NOT_SET


def test_parse() -> None:
    """Test parsing a list of categories."""
    marshaller = CategoriesMarshaller()
    result = marshaller.parse_text("APPOINTMENT,EDUCATION", Parameters())
    assert result.value.values == ["APPOINTMENT", "EDUCATION"]

    result = marshaller.parse_text("A\\,B, C,,", Parameters())
    assert result.value.values == ["A,B", "C"]

    result = marshaller.parse_text("", Parameters())
    assert result.value.values == []


def test_write() -> None:
    """Test writing a list of categories."""
    marshaller = CategoriesMarshaller()
    prop = Categories(values=["A,B", "C"])
    assert marshaller.write_text(prop).value == "A\\,B,C"
    assert marshaller.write_text(Categories()).value == ""


def test_validate() -> None:
    """Test validating categories."""
    assert Categories(values=["MEETING"]).validate([], ICalVersion.V2_0) == []
    warnings = Categories().validate([], ICalVersion.V2_0)
    assert [warning.code for warning in warnings] == [VALUE_NOT_SET]
