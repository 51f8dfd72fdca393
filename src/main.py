"""
tuic-server - startup configuration for the TUIC relay server.

Development entry point: turns the command line into a validated
configuration or prints a diagnostic.
"""

import sys
from tuic_server.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
