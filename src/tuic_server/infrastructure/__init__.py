"""
Infrastructure layer package.

Contains process-level integrations (logging setup).
"""

from tuic_server.infrastructure.logging_config import setup_logging

__all__ = ["setup_logging"]
