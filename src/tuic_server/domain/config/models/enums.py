"""
Domain enums for the configuration system.
"""

from enum import Enum


class IntErrorKind(Enum):
    """Reasons a port string can fail to parse."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"
