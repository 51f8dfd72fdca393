"""
tuic-server CLI entry point.

Builds the startup configuration from the command line and reports the
outcome. Version and help requests go to stdout, failures to stderr.
"""

import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

from tuic_server.application.config_builder import ConfigBuilder
from tuic_server.domain.config import ConfigError, HelpRequest, VersionRequest
from tuic_server.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Usage text is printed verbatim
console = Console(markup=False, highlight=False, emoji=False)
error_console = Console(stderr=True, markup=False, highlight=False, emoji=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the tuic-server CLI."""
    args = list(sys.argv if argv is None else argv)

    try:
        config = ConfigBuilder().parse(args)
    except (VersionRequest, HelpRequest) as request:
        console.print(str(request), soft_wrap=True)
        return request.exit_code
    except ConfigError as e:
        error_console.print(str(e), soft_wrap=True)
        return e.exit_code

    setup_logging()
    logger.info("Configuration loaded, listening port %d", config.port)
    return 0
