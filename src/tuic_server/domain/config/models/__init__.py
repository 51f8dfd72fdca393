"""
Configuration domain models package.
"""

from .config import PORT_MAX, TOKEN_MAX, Config
from .enums import IntErrorKind
from .parse_outcome import ParseOutcome

__all__ = [
    "Config",
    "IntErrorKind",
    "PORT_MAX",
    "ParseOutcome",
    "TOKEN_MAX",
]
