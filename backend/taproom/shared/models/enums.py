"""
Enums used across the application.
"""

from enum import Enum


class Role(str, Enum):
    """
    Role carried by a principal.

    Stored on the user row as a comma-separated string, e.g. "MANUFACTURER".
    ANONYMOUS is never stored; it marks a caller without a token.
    """

    ADMIN = "ADMIN"
    MANUFACTURER = "MANUFACTURER"
    ANONYMOUS = "ANONYMOUS"


class SortDirection(str, Enum):
    """Sort direction token of the "<column>[,asc|desc]" wire format."""

    ASC = "asc"
    DESC = "desc"
