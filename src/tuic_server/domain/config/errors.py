"""
Errors raised while building a Config from the command line.

Every variant carries the usage text it was raised with (except
VersionRequest), so the caller can print a complete diagnostic without
going back to the option schema.
"""

from typing import Iterable, Optional

EXIT_OK = 0
EXIT_USAGE = 2


class ConfigError(Exception):
    """Base for all configuration errors."""

    exit_code = EXIT_USAGE

    def __init__(self, message: str, usage: Optional[str] = None):
        super().__init__(message)
        self.usage = usage


class ParseError(ConfigError):
    """Raised when the arguments do not structurally match the option schema."""

    def __init__(self, cause: Exception, usage: str):
        super().__init__(f"{cause}\n\n{usage}", usage)
        self.cause = cause


class UnexpectedArgumentError(ConfigError):
    """Raised when free tokens are left over after matching."""

    def __init__(self, arguments: Iterable[str], usage: str):
        self.arguments = tuple(arguments)
        super().__init__(
            f"Unexpected argument: {', '.join(self.arguments)}\n\n{usage}", usage
        )


class ParsePortError(ConfigError):
    """Raised when the port value is not a 16-bit unsigned integer."""

    def __init__(self, cause: ValueError, usage: str):
        super().__init__(f"Failed to parse the port: {cause}\n\n{usage}", usage)
        self.cause = cause


class VersionRequest(ConfigError):
    """Control signal: print the version and exit."""

    exit_code = EXIT_OK

    def __init__(self, version: str):
        super().__init__(version)
        self.version = version


class HelpRequest(ConfigError):
    """Control signal: print the usage text and exit."""

    exit_code = EXIT_OK

    def __init__(self, usage: str):
        super().__init__(usage, usage)
