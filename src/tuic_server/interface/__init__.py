"""
Interface layer package.

Contains the command-line interface.
"""

from tuic_server.interface.cli import main

__all__ = ["main"]
