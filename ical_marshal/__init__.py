"""Marshalling and validation of iCalendar property values.

Each property type has a `PropertyMarshaller` that converts between the
property object and the value text of a content line. Marshallers for the
built-in property types are registered in `MARSHALLERS`.
"""

from .marshaller import PropertyMarshaller
from .parameters import Parameters
from .property import ICalProperty
from .raw import RawProperty
from .registry import MARSHALLERS, MarshallerRegistry
from .result import Result
from .version import ICalVersion
from .warning import ValidationWarning
from . import types  # noqa: F401

__all__ = [
    "ICalProperty",
    "ICalVersion",
    "MARSHALLERS",
    "MarshallerRegistry",
    "Parameters",
    "PropertyMarshaller",
    "RawProperty",
    "Result",
    "ValidationWarning",
    "exceptions",
    "text",
    "types",
]
