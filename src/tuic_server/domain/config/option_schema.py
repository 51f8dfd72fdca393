"""
Option schema for the tuic-server command line.

Declares the recognized flags as a flat table of descriptors, renders usage
text from that table, and matches raw arguments against it. Tokenizing is
delegated to argparse with a raising error hook, so structural failures
surface as OptionMatchError instead of terminating the process.
"""

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .models import ParseOutcome

DEFAULT_PROGRAM = "tuic-server"

# Column where flag descriptions start in the usage block
DESCRIPTION_COLUMN = 24


class OptionMatchError(Exception):
    """Raised when arguments cannot be matched against the option schema."""


@dataclass(frozen=True)
class OptionSpec:
    """Declarative description of a single flag."""

    name: str
    short: str
    long: str
    description: str
    metavar: Optional[str] = None
    required: bool = False

    @property
    def takes_value(self) -> bool:
        return self.metavar is not None

    @property
    def option_strings(self) -> Tuple[str, str]:
        return (f"-{self.short}", f"--{self.long}")

    @property
    def display_name(self) -> str:
        return "/".join(self.option_strings)


OPTION_SPECS: Tuple[OptionSpec, ...] = (
    OptionSpec(
        name="port",
        short="p",
        long="port",
        description="Set the listening port(Required)",
        metavar="SERVER_PORT",
        required=True,
    ),
    OptionSpec(
        name="token",
        short="t",
        long="token",
        description="Set the TUIC token for the authentication(Required)",
        metavar="TOKEN",
        required=True,
    ),
    OptionSpec(name="version", short="v", long="version", description="Print the version"),
    OptionSpec(name="help", short="h", long="help", description="Print this help menu"),
)


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises on errors rather than exiting."""

    def error(self, message):
        raise OptionMatchError(message)


class _StoreOnce(argparse.Action):
    """Store a flag's value, rejecting a second occurrence."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(self, "given more than once")
        setattr(namespace, self.dest, True if self.nargs == 0 else values)


class _FlagOnce(_StoreOnce):
    """Boolean variant of _StoreOnce; takes no value."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)


def _split_extras(extras: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate unknown option-like tokens from free tokens."""
    unrecognized: List[str] = []
    free: List[str] = []
    for token in extras:
        if token.startswith("-") and token != "-":
            unrecognized.append(token)
        else:
            free.append(token)
    return unrecognized, free


class OptionSchema:
    """
    The recognized command-line surface.

    Built once and read-only afterward; safe to reuse across sequential
    parse calls.
    """

    def __init__(self, specs: Sequence[OptionSpec] = OPTION_SPECS):
        self.specs: Tuple[OptionSpec, ...] = tuple(specs)
        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _RaisingArgumentParser(
            prog=DEFAULT_PROGRAM,
            add_help=False,
            allow_abbrev=False,
        )
        for spec in self.specs:
            parser.add_argument(
                *spec.option_strings,
                dest=spec.name,
                action=_StoreOnce if spec.takes_value else _FlagOnce,
                metavar=spec.metavar,
                default=None,
                help=spec.description,
            )
        return parser

    def usage(self, program_name: str = DEFAULT_PROGRAM) -> str:
        """
        Render the usage text.

        Args:
            program_name: Name shown on the invocation line

        Returns:
            ``Usage: <program> [options]`` followed by one entry per flag
        """
        lines = [f"Usage: {program_name} [options]", "", "Options:"]
        for spec in self.specs:
            row = f"    -{spec.short}, --{spec.long}"
            if spec.takes_value:
                row += f" {spec.metavar}"
            if len(row) < DESCRIPTION_COLUMN:
                lines.append(row.ljust(DESCRIPTION_COLUMN) + spec.description)
            else:
                lines.append(row)
                lines.append(" " * DESCRIPTION_COLUMN + spec.description)
        return "\n".join(lines) + "\n"

    def _attach_values(self, arguments: Sequence[str]) -> List[str]:
        """
        Rewrite value-taking flags into the ``--long=value`` form.

        A value flag always consumes the next argument, even one that looks
        like a flag, and a short flag's attached text (``-pVALUE``) is the
        value verbatim, ``=`` included.
        """
        by_short = {f"-{spec.short}": spec for spec in self.specs if spec.takes_value}
        by_long = {f"--{spec.long}": spec for spec in self.specs if spec.takes_value}

        rewritten: List[str] = []
        remaining = list(arguments)
        while remaining:
            token = remaining.pop(0)
            if token == "--":
                rewritten.append(token)
                rewritten.extend(remaining)
                break

            spec = by_short.get(token) or by_long.get(token)
            if spec is not None and remaining:
                rewritten.append(f"--{spec.long}={remaining.pop(0)}")
            elif spec is None and token[:2] in by_short and len(token) > 2:
                rewritten.append(f"--{by_short[token[:2]].long}={token[2:]}")
            else:
                rewritten.append(token)
        return rewritten

    def match(self, arguments: Sequence[str]) -> ParseOutcome:
        """
        Match raw arguments (program name excluded) against the schema.

        Required-flag presence is not checked here; see check_required.

        Raises:
            OptionMatchError: On unknown, malformed, repeated or
                value-less flags
        """
        tokens = self._attach_values(arguments)
        trailing: List[str] = []
        if "--" in tokens:
            split = tokens.index("--")
            tokens, trailing = tokens[:split], tokens[split + 1:]

        namespace, extras = self._parser.parse_known_args(tokens)

        unrecognized, free = _split_extras(extras)
        if unrecognized:
            raise OptionMatchError(f"unrecognized arguments: {' '.join(unrecognized)}")
        free.extend(trailing)

        present = frozenset(
            spec.name for spec in self.specs if getattr(namespace, spec.name) is not None
        )
        values = {
            spec.name: getattr(namespace, spec.name)
            for spec in self.specs
            if spec.takes_value and spec.name in present
        }
        return ParseOutcome(present=present, values=values, free=tuple(free))

    def check_required(self, outcome: ParseOutcome) -> None:
        """
        Ensure every required flag was supplied.

        Raises:
            OptionMatchError: Naming all missing required flags
        """
        missing = [
            spec.display_name
            for spec in self.specs
            if spec.required and not outcome.opt_present(spec.name)
        ]
        if missing:
            raise OptionMatchError(
                f"the following arguments are required: {', '.join(missing)}"
            )
