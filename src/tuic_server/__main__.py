import sys

from tuic_server.interface.cli import main

sys.exit(main())
