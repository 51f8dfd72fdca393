"""
Parse outcome domain model.

Intermediate result of matching raw arguments against the option schema,
before any semantic validation.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class ParseOutcome:
    """Flags seen on the command line, their raw values and leftover tokens."""

    present: FrozenSet[str] = frozenset()
    values: Dict[str, str] = field(default_factory=dict)
    free: Tuple[str, ...] = ()

    def opt_present(self, name: str) -> bool:
        """Check whether the flag identified by ``name`` was supplied."""
        return name in self.present

    def opt_str(self, name: str) -> Optional[str]:
        """Return the raw value of a value-taking flag, if supplied."""
        return self.values.get(name)
