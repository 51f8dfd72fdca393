"""
Config builder - from raw process arguments to a validated Config.

Single entry point of the startup configuration. Each parse call is
independent: the usage text is rendered once per call and attached to
whichever error is raised.
"""

import logging
from typing import Optional, Sequence

from tuic_server import __version__
from tuic_server.domain.config import (
    Config,
    HelpRequest,
    OptionMatchError,
    OptionSchema,
    ParseError,
    ParsePortError,
    PortValueError,
    UnexpectedArgumentError,
    VersionRequest,
    hash_token,
    parse_port,
)
from tuic_server.domain.config.option_schema import DEFAULT_PROGRAM

logger = logging.getLogger(__name__)


class ConfigBuilder:
    """Builds a Config from the command line, or raises a ConfigError."""

    def __init__(self, schema: Optional[OptionSchema] = None):
        self.schema = schema or OptionSchema()

    def get_usage(self, program: str = DEFAULT_PROGRAM) -> str:
        """Usage text for ``program``; valid before or after any parse."""
        return self.schema.usage(program)

    def parse(self, args: Sequence[str]) -> Config:
        """
        Parse process arguments into a Config.

        Checks run in a fixed order: flag matching, leftover free tokens,
        version, help, required flags, port value.

        Args:
            args: Full argument list; ``args[0]`` is the program name

        Returns:
            Validated Config

        Raises:
            ParseError: Unknown, malformed, repeated or missing flags
            UnexpectedArgumentError: Free tokens on the command line
            VersionRequest: ``-v``/``--version`` was given
            HelpRequest: ``-h``/``--help`` was given
            ParsePortError: Port is not a 16-bit unsigned integer
            ValueError: ``args`` is empty
        """
        if not args:
            raise ValueError("argument list must start with the program name")

        program, arguments = args[0], list(args[1:])
        usage = self.get_usage(program)
        logger.debug("Parsing %d argument(s) for %s", len(arguments), program)

        try:
            outcome = self.schema.match(arguments)
        except OptionMatchError as e:
            logger.debug("Argument matching failed: %s", e)
            raise ParseError(e, usage) from e

        if outcome.free:
            logger.debug("Rejecting free arguments: %s", outcome.free)
            raise UnexpectedArgumentError(outcome.free, usage)

        if outcome.opt_present("version"):
            raise VersionRequest(__version__)

        if outcome.opt_present("help"):
            raise HelpRequest(usage)

        try:
            self.schema.check_required(outcome)
        except OptionMatchError as e:
            logger.debug("Required option missing: %s", e)
            raise ParseError(e, usage) from e

        try:
            port = parse_port(outcome.opt_str("port"))
        except PortValueError as e:
            logger.debug("Invalid port %r: %s", e.value, e)
            raise ParsePortError(e, usage) from e

        token = hash_token(outcome.opt_str("token"))

        logger.debug("Configuration built for port %d", port)
        return Config(port=port, token=token)
