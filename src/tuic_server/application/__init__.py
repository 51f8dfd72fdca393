"""
Application layer package.

Contains the service that turns process arguments into a Config.
"""

from tuic_server.application.config_builder import ConfigBuilder

__all__ = ["ConfigBuilder"]
