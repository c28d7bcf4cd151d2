"""Parameters or meta information associated with a property.

Property parameters are additional modifiers on a property to specify extra
information about the value for the property (e.g. language, value type, a
display attribute, etc).

Parameters are stored in a `Parameters` container: a case-insensitive mapping
from parameter name to an ordered list of values. A parameter may have more
than one value (e.g. DELEGATED-TO) and names keep the order in which they
were first added.
"""

from __future__ import annotations

import logging
import re
from abc import ABC
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from .const import (
    EXPERIMENTAL_PREFIX,
    PARAM_ALTREP,
    PARAM_CHARSET,
    PARAM_CN,
    PARAM_CUTYPE,
    PARAM_DELEGATED_FROM,
    PARAM_DELEGATED_TO,
    PARAM_DIR,
    PARAM_ENCODING,
    PARAM_EXPECT,
    PARAM_FBTYPE,
    PARAM_FMTTYPE,
    PARAM_LANGUAGE,
    PARAM_MEMBER,
    PARAM_PARTSTAT,
    PARAM_RANGE,
    PARAM_RELATED,
    PARAM_RELTYPE,
    PARAM_ROLE,
    PARAM_RSVP,
    PARAM_SENT_BY,
    PARAM_STATUS,
    PARAM_TYPE,
    PARAM_TZID,
    PARAM_VALUE,
)
from .version import ALL_VERSIONS, V2_VERSIONS, ICalVersion
from .warning import (
    INVALID_PARAMETER_NAME,
    INVALID_PARAMETER_VALUE,
    UNKNOWN_PARAMETER_VALUE,
    UNSUPPORTED_PARAMETER,
    ValidationWarning,
)

__all__ = [
    "Parameters",
    "ParameterType",
    "PARAMETER_TYPES",
]

_LOGGER = logging.getLogger(__name__)

_RE_NAME = re.compile("[A-Za-z0-9-]+")
_RE_CONTROL_CHARS = re.compile("[\x00-\x08\x0a-\x1f\x7f]")
_QUOTE = '"'

V1_VERSIONS = frozenset({ICalVersion.V1_0})

ParameterValues = Union[str, Iterable[str], None]


class ParameterType(ABC):
    """A property parameter known to this library."""

    ics_name: str
    versions: frozenset[ICalVersion] = ALL_VERSIONS
    allowed_values: frozenset[str] | None = None
    """Values accepted for an enumerated parameter, or None if free-form."""

    @classmethod
    def allowed(cls, version: ICalVersion) -> frozenset[str] | None:
        """Return the values accepted in the specified version."""
        return cls.allowed_values


class AlternateRepresentation(ParameterType):
    """A URI pointing to an alternate representation of the property value."""

    ics_name = PARAM_ALTREP
    versions = V2_VERSIONS


class Charset(ParameterType):
    """The character set of the property value."""

    ics_name = PARAM_CHARSET
    versions = V1_VERSIONS


class CommonName(ParameterType):
    """The common name associated with the user specified by the property."""

    ics_name = PARAM_CN
    versions = V2_VERSIONS


class CalendarUserType(ParameterType):
    """Identifies the type of calendar user specified by the property."""

    ics_name = PARAM_CUTYPE
    versions = V2_VERSIONS
    allowed_values = frozenset({"INDIVIDUAL", "GROUP", "RESOURCE", "ROOM", "UNKNOWN"})


class DelegatedFrom(ParameterType):
    """The users that delegated their participation."""

    ics_name = PARAM_DELEGATED_FROM
    versions = V2_VERSIONS


class DelegatedTo(ParameterType):
    """The users to whom participation was delegated."""

    ics_name = PARAM_DELEGATED_TO
    versions = V2_VERSIONS


class DirectoryEntry(ParameterType):
    """Reference to a directory entry associated with the calendar user."""

    ics_name = PARAM_DIR
    versions = V2_VERSIONS


class Encoding(ParameterType):
    """The inline encoding of the property value."""

    ics_name = PARAM_ENCODING

    @classmethod
    def allowed(cls, version: ICalVersion) -> frozenset[str] | None:
        if version is ICalVersion.V1_0:
            return frozenset({"7BIT", "8BIT", "QUOTED-PRINTABLE", "BASE64"})
        return frozenset({"8BIT", "BASE64"})


class Expect(ParameterType):
    """The expectation of the attendee's participation."""

    ics_name = PARAM_EXPECT
    versions = V1_VERSIONS
    allowed_values = frozenset({"FYI", "REQUIRE", "REQUEST", "IMMEDIATE"})


class FreeBusyType(ParameterType):
    """The free or busy time type."""

    ics_name = PARAM_FBTYPE
    versions = V2_VERSIONS
    allowed_values = frozenset({"FREE", "BUSY", "BUSY-UNAVAILABLE", "BUSY-TENTATIVE"})


class FormatType(ParameterType):
    """The content type of the property value (e.g. "image/png")."""

    ics_name = PARAM_FMTTYPE
    versions = V2_VERSIONS


class Language(ParameterType):
    """The language the property value is written in."""

    ics_name = PARAM_LANGUAGE


class Member(ParameterType):
    """The group or list membership of the calendar user."""

    ics_name = PARAM_MEMBER
    versions = V2_VERSIONS


class ParticipationStatus(ParameterType):
    """Participation status for a calendar user."""

    ics_name = PARAM_PARTSTAT
    versions = V2_VERSIONS
    allowed_values = frozenset(
        {
            "NEEDS-ACTION",
            "ACCEPTED",
            "DECLINED",
            "TENTATIVE",
            "DELEGATED",
            "COMPLETED",
            "IN-PROCESS",
        }
    )


class Range(ParameterType):
    """The range of recurrence instances a recurrence identifier applies to."""

    ics_name = PARAM_RANGE
    versions = V2_VERSIONS

    @classmethod
    def allowed(cls, version: ICalVersion) -> frozenset[str] | None:
        if version is ICalVersion.V2_0_DEPRECATED:
            return frozenset({"THISANDFUTURE", "THISANDPRIOR"})
        return frozenset({"THISANDFUTURE"})


class Related(ParameterType):
    """The relationship of an alarm trigger to the start or end."""

    ics_name = PARAM_RELATED
    versions = V2_VERSIONS
    allowed_values = frozenset({"START", "END"})


class RelationshipType(ParameterType):
    """The type of hierarchical relationship to another component."""

    ics_name = PARAM_RELTYPE
    versions = V2_VERSIONS
    allowed_values = frozenset({"PARENT", "CHILD", "SIBLING"})


class Role(ParameterType):
    """The participation role for the calendar user."""

    ics_name = PARAM_ROLE

    @classmethod
    def allowed(cls, version: ICalVersion) -> frozenset[str] | None:
        if version is ICalVersion.V1_0:
            return frozenset({"ATTENDEE", "ORGANIZER", "OWNER", "DELEGATE"})
        return frozenset(
            {"CHAIR", "REQ-PARTICIPANT", "OPT-PARTICIPANT", "NON-PARTICIPANT"}
        )


class Rsvp(ParameterType):
    """Whether a reply is expected from the calendar user."""

    ics_name = PARAM_RSVP

    @classmethod
    def allowed(cls, version: ICalVersion) -> frozenset[str] | None:
        if version is ICalVersion.V1_0:
            return frozenset({"YES", "NO", "TRUE", "FALSE"})
        return frozenset({"TRUE", "FALSE"})


class SentBy(ParameterType):
    """The calendar user acting on behalf of the one specified by the property."""

    ics_name = PARAM_SENT_BY
    versions = V2_VERSIONS


class Status(ParameterType):
    """Participation status for a vCalendar attendee."""

    ics_name = PARAM_STATUS
    versions = V1_VERSIONS
    allowed_values = frozenset(
        {
            "ACCEPTED",
            "NEEDS ACTION",
            "SENT",
            "TENTATIVE",
            "CONFIRMED",
            "DECLINED",
            "COMPLETED",
            "DELEGATED",
        }
    )


class Type(ParameterType):
    """The type of a vCalendar attachment or address."""

    ics_name = PARAM_TYPE
    versions = V1_VERSIONS


class TimezoneId(ParameterType):
    """The timezone of a date-time value."""

    ics_name = PARAM_TZID
    versions = V2_VERSIONS


class ValueType(ParameterType):
    """Explicitly specifies the data type of the property value."""

    ics_name = PARAM_VALUE

    @classmethod
    def allowed(cls, version: ICalVersion) -> frozenset[str] | None:
        if version is ICalVersion.V1_0:
            return frozenset({"INLINE", "URL", "CONTENT-ID", "CID"})
        return frozenset(
            {
                "BINARY",
                "BOOLEAN",
                "CAL-ADDRESS",
                "DATE",
                "DATE-TIME",
                "DURATION",
                "FLOAT",
                "INTEGER",
                "PERIOD",
                "RECUR",
                "TEXT",
                "TIME",
                "URI",
                "UTC-OFFSET",
            }
        )


PARAMETER_TYPES: list[type[ParameterType]] = [
    AlternateRepresentation,
    Charset,
    CommonName,
    CalendarUserType,
    DelegatedFrom,
    DelegatedTo,
    DirectoryEntry,
    Encoding,
    Expect,
    FreeBusyType,
    FormatType,
    Language,
    Member,
    ParticipationStatus,
    Range,
    Related,
    RelationshipType,
    Role,
    Rsvp,
    SentBy,
    Status,
    Type,
    TimezoneId,
    ValueType,
]
PARAMETERS_BY_ICS_MAP = {param.ics_name: param for param in PARAMETER_TYPES}


def _as_list(values: ParameterValues) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    return list(values)


def _single_value(param_type: type[ParameterType]) -> property:
    """Return a property that reads and writes the first value of a parameter."""

    def getter(self: Parameters) -> str | None:
        return self.first(param_type.ics_name)

    def setter(self: Parameters, value: str | None) -> None:
        self.replace(param_type.ics_name, value)

    return property(getter, setter, doc=param_type.__doc__)


class Parameters:
    """A case-insensitive, multi-valued, ordered set of property parameters."""

    def __init__(
        self, initial: Parameters | Mapping[str, ParameterValues] | None = None
    ) -> None:
        """Initialize Parameters, copying any initial values."""
        self._data: dict[str, list[str]] = {}
        if initial is None:
            return
        for name, values in initial.items():
            if vals := _as_list(values):
                self._data.setdefault(name.upper(), []).extend(vals)

    def first(self, name: str) -> str | None:
        """Return the first value of the parameter or None if not set."""
        if values := self._data.get(name.upper()):
            return values[0]
        return None

    def get(self, name: str) -> list[str]:
        """Return all values of the parameter."""
        return list(self._data.get(name.upper(), ()))

    def put(self, name: str, value: str) -> None:
        """Add a value to the parameter."""
        self._data.setdefault(name.upper(), []).append(value)

    def replace(self, name: str, values: ParameterValues) -> list[str]:
        """Replace all values of the parameter, returning the previous values.

        Passing None or an empty list removes the parameter.
        """
        key = name.upper()
        previous = self._data.get(key, [])
        if new_values := _as_list(values):
            self._data[key] = new_values
        else:
            self._data.pop(key, None)
        return previous

    def remove_all(self, name: str) -> list[str]:
        """Remove the parameter, returning its previous values."""
        return self._data.pop(name.upper(), [])

    def copy(self) -> Parameters:
        """Return a copy that can be changed without affecting this object."""
        return Parameters(self)

    def items(self) -> Iterator[tuple[str, list[str]]]:
        """Return each parameter name with a copy of its values."""
        for name, values in self._data.items():
            yield name, list(values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Parameters):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Parameters({self._data!r})"

    alt_representation = _single_value(AlternateRepresentation)
    common_name = _single_value(CommonName)
    directory_entry = _single_value(DirectoryEntry)
    encoding = _single_value(Encoding)
    format_type = _single_value(FormatType)
    language = _single_value(Language)
    sent_by = _single_value(SentBy)
    value_type = _single_value(ValueType)

    def validate(self, version: ICalVersion) -> list[ValidationWarning]:
        """Check the parameters for problems with the specified version."""
        warnings: list[ValidationWarning] = []
        for name, values in self._data.items():
            if not _RE_NAME.fullmatch(name):
                warnings.append(
                    ValidationWarning(
                        f"Parameter name contains invalid characters: '{name}'",
                        code=INVALID_PARAMETER_NAME,
                        origin=name,
                    )
                )
            for value in values:
                if _RE_CONTROL_CHARS.search(value) or (
                    version.is_v2 and _QUOTE in value
                ):
                    warnings.append(
                        ValidationWarning(
                            f"Parameter value contains invalid characters: '{value}'",
                            code=INVALID_PARAMETER_VALUE,
                            origin=name,
                        )
                    )
            if not (param_type := PARAMETERS_BY_ICS_MAP.get(name)):
                continue
            if version not in param_type.versions:
                warnings.append(
                    ValidationWarning(
                        f"Parameter is not supported by version {version.version_number}",
                        code=UNSUPPORTED_PARAMETER,
                        origin=name,
                    )
                )
                continue
            if (allowed := param_type.allowed(version)) is None:
                continue
            for value in values:
                if value.upper() in allowed or value.upper().startswith(
                    EXPERIMENTAL_PREFIX
                ):
                    continue
                warnings.append(
                    ValidationWarning(
                        f"Unknown value '{value}', expected one of {sorted(allowed)}",
                        code=UNKNOWN_PARAMETER_VALUE,
                        origin=name,
                    )
                )
        _LOGGER.debug("Validated parameters %s: %d warnings", self, len(warnings))
        return warnings
