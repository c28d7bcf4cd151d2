"""Exceptions for ical_marshal library."""


class CalendarError(Exception):
    """Base exception for all ical_marshal errors."""


class CalendarParseError(CalendarError):
    """Exception raised when a property value can't be unmarshalled.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the raw value that failed to parse,
    useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class MarshallerError(CalendarError):
    """Exception raised when a marshaller is used incorrectly.

    This covers programming errors rather than bad input, such as writing a
    property class that has no registered marshaller or a parse hook that
    returns an object of the wrong type.
    """
