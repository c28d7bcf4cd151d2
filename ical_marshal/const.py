"""Constants for the ical_marshal library."""

# Characters escaped with a backslash inside a property value. The order
# matters: backslash must be escaped before the others.
ESCAPED_CHARS = "\\,;"
ESCAPE = "\\"

# Newline emitted when decoding an escaped "\n" or "\N".
NEWLINE = "\n"

LIST_DELIMITER = ","
COMPONENT_DELIMITER = ";"

# Property parameter names
PARAM_ALTREP = "ALTREP"
PARAM_CHARSET = "CHARSET"
PARAM_CN = "CN"
PARAM_CUTYPE = "CUTYPE"
PARAM_DELEGATED_FROM = "DELEGATED-FROM"
PARAM_DELEGATED_TO = "DELEGATED-TO"
PARAM_DIR = "DIR"
PARAM_ENCODING = "ENCODING"
PARAM_EXPECT = "EXPECT"
PARAM_FBTYPE = "FBTYPE"
PARAM_FMTTYPE = "FMTTYPE"
PARAM_LANGUAGE = "LANGUAGE"
PARAM_MEMBER = "MEMBER"
PARAM_PARTSTAT = "PARTSTAT"
PARAM_RANGE = "RANGE"
PARAM_RELATED = "RELATED"
PARAM_RELTYPE = "RELTYPE"
PARAM_ROLE = "ROLE"
PARAM_RSVP = "RSVP"
PARAM_SENT_BY = "SENT-BY"
PARAM_STATUS = "STATUS"
PARAM_TYPE = "TYPE"
PARAM_TZID = "TZID"
PARAM_VALUE = "VALUE"

EXPERIMENTAL_PREFIX = "X-"
