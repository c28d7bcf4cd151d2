"""Tests for the ORGANIZER property."""

from ical_marshal import ICalVersion, Parameters
from ical_marshal.types import Organizer
from ical_marshal.types.organizer import OrganizerMarshaller
from ical_marshal.warning import UNSUPPORTED_PARAMETER, VALUE_NOT_SET


def test_parse() -> None:
    """Test parsing an organizer with parameters."""
    params = Parameters(
        {"CN": "John Smith", "SENT-BY": "mailto:jane_doe@example.com"}
    )
    result = OrganizerMarshaller().parse_text("mailto:jsmith@example.com", params)
    organizer = result.value
    assert organizer.uri == "mailto:jsmith@example.com"
    assert organizer.common_name == "John Smith"
    assert organizer.sent_by == "mailto:jane_doe@example.com"
    assert organizer.directory_entry is None


def test_write() -> None:
    """Test the address is written without escaping."""
    organizer = Organizer(uri="mailto:a,b@example.com")
    assert OrganizerMarshaller().write_text(organizer).value == (
        "mailto:a,b@example.com"
    )


def test_prepare_parameters() -> None:
    """Test an empty common name is not written."""
    organizer = Organizer(uri="mailto:jsmith@example.com")
    organizer.common_name = ""
    organizer.directory_entry = "ldap://example.com/jsmith"

    params = OrganizerMarshaller().prepare_parameters(organizer)
    assert "CN" not in params
    assert params.first("DIR") == "ldap://example.com/jsmith"
    assert organizer.common_name == ""


def test_validate() -> None:
    """Test validating an organizer."""
    organizer = Organizer(uri="mailto:jsmith@example.com")
    organizer.common_name = "John Smith"
    assert organizer.validate([], ICalVersion.V2_0) == []

    warnings = organizer.validate([], ICalVersion.V1_0)
    assert [warning.code for warning in warnings] == [UNSUPPORTED_PARAMETER]

    warnings = Organizer().validate([], ICalVersion.V2_0)
    assert [warning.code for warning in warnings] == [VALUE_NOT_SET]


def test_supported_versions() -> None:
    """Test the organizer is only part of iCalendar 2.0."""
    assert Organizer.is_supported_by(ICalVersion.V2_0)
    assert not Organizer.is_supported_by(ICalVersion.V1_0)
