"""
tuic-server - startup configuration for the TUIC relay server.

Turns the process argument list into a validated Config (listening port
plus hashed authentication token) or a typed, printable diagnostic.

Usage:
    # CLI
    tuic-server --port 443 --token mysecret

    # Programmatic
    from tuic_server.application.config_builder import ConfigBuilder

    config = ConfigBuilder().parse(["tuic-server", "-p", "443", "-t", "mysecret"])
"""

__version__ = "0.1.0"
__author__ = "tuic-server Team"

__all__ = ["__version__"]
