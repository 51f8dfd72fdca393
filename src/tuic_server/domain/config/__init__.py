"""
Configuration domain package.

This package contains the domain layer for startup configuration: the
Config model, the option schema and the error taxonomy.
"""

from .errors import (
    ConfigError,
    HelpRequest,
    ParseError,
    ParsePortError,
    UnexpectedArgumentError,
    VersionRequest,
)
from .models import Config, IntErrorKind, ParseOutcome
from .option_schema import OPTION_SPECS, OptionMatchError, OptionSchema, OptionSpec
from .port import PortValueError, parse_port
from .token_hash import hash_token, seahash

__all__ = [
    "Config",
    "ConfigError",
    "HelpRequest",
    "IntErrorKind",
    "OPTION_SPECS",
    "OptionMatchError",
    "OptionSchema",
    "OptionSpec",
    "ParseError",
    "ParseOutcome",
    "ParsePortError",
    "PortValueError",
    "UnexpectedArgumentError",
    "VersionRequest",
    "hash_token",
    "parse_port",
    "seahash",
]
