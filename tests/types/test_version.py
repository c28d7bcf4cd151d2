"""Tests for the VERSION property."""

import pytest

from ical_marshal import ICalVersion, Parameters
from ical_marshal.types import Version
from ical_marshal.types.version import VersionMarshaller
from ical_marshal.warning import UNKNOWN_VALUE, UNSUPPORTED_VALUE, VALUE_NOT_SET


@pytest.mark.parametrize(
    ("value", "min_version", "max_version"),
    [
        ("2.0", None, "2.0"),
        ("1.0;2.0", "1.0", "2.0"),
        (" 1.0 ; 2.0 ", "1.0", "2.0"),
        ("", None, None),
    ],
)
def test_parse(value: str, min_version: str | None, max_version: str | None) -> None:
    """Test parsing a version value."""
    result = VersionMarshaller().parse_text(value, Parameters())
    assert result.value.min_version == min_version
    assert result.value.max_version == max_version
    assert result.warnings == ()


def test_parse_extra_fields() -> None:
    """Test extra fields are ignored with a warning."""
    result = VersionMarshaller().parse_text("1.0;2.0;3.0", Parameters())
    assert result.value.max_version == "2.0"
    assert len(result.warnings) == 1


def test_write() -> None:
    """Test writing a version value."""
    marshaller = VersionMarshaller()
    assert marshaller.write_text(Version(max_version="2.0")).value == "2.0"
    assert (
        marshaller.write_text(Version(min_version="1.0", max_version="2.0")).value
        == "1.0;2.0"
    )


def test_ical_version() -> None:
    """Test converting to and from the version enum."""
    version = Version.from_ical_version(ICalVersion.V2_0_DEPRECATED)
    assert version.max_version == "2.0"
    assert version.ical_version is ICalVersion.V2_0
    assert Version(max_version="1.0").ical_version is ICalVersion.V1_0
    assert Version(max_version="3.0").ical_version is None
    assert Version().ical_version is None


@pytest.mark.parametrize(
    ("prop", "version", "codes"),
    [
        (Version(max_version="2.0"), ICalVersion.V2_0, []),
        (Version(), ICalVersion.V2_0, [VALUE_NOT_SET]),
        (Version(max_version="3.0"), ICalVersion.V2_0, [UNKNOWN_VALUE]),
        (
            Version(min_version="1.0", max_version="2.0"),
            ICalVersion.V1_0,
            [UNSUPPORTED_VALUE],
        ),
        (Version(min_version="1.0", max_version="2.0"), ICalVersion.V2_0, []),
    ],
)
def test_validate(prop: Version, version: ICalVersion, codes: list[int]) -> None:
    """Test validating the version value."""
    assert [warning.code for warning in prop.validate([], version)] == codes
