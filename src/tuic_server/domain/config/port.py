"""
Port value parsing.

Accepts an optional leading ``+`` followed by ASCII digits and rejects
anything outside the 16-bit unsigned range.
"""

from .models import PORT_MAX, IntErrorKind

_DIGITS = frozenset("0123456789")


class PortValueError(ValueError):
    """Raised when a port string is not a valid 16-bit unsigned integer."""

    def __init__(self, kind: IntErrorKind, value: str):
        super().__init__(kind.value)
        self.kind = kind
        self.value = value


def parse_port(value: str) -> int:
    """
    Parse a port number from its command-line string form.

    Args:
        value: Raw string supplied to ``--port``

    Returns:
        Port in the range 0-65535

    Raises:
        PortValueError: On empty, non-numeric or out-of-range input
    """
    digits = value[1:] if value.startswith("+") else value
    if not value:
        raise PortValueError(IntErrorKind.EMPTY, value)
    if not digits or not set(digits) <= _DIGITS:
        raise PortValueError(IntErrorKind.INVALID_DIGIT, value)

    port = int(digits)
    if port > PORT_MAX:
        raise PortValueError(IntErrorKind.POS_OVERFLOW, value)
    return port
