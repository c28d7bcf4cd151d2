"""Property types and their marshallers.

Importing this package registers each marshaller with `MARSHALLERS`.
"""

from .categories import Categories
from .geo import Geo
from .organizer import Organizer
from .priority import Priority
from .request_status import RequestStatus
from .text import Comment, Description, Location, Summary, TextProperty
from .version import Version

__all__ = [
    "Categories",
    "Comment",
    "Description",
    "Geo",
    "Location",
    "Organizer",
    "Priority",
    "RequestStatus",
    "Summary",
    "TextProperty",
    "Version",
]
