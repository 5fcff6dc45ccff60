"""Parsing of the step filter arguments.

The parser never exits the process.  It returns a :class:`ParseOutcome` and
leaves it to the caller to print usage or stop.
"""

from dataclasses import dataclass
from typing import List, Sequence, Union

from laraboot.installer.steps import FilterState

SKIP_FLAGS = ("--without", "--skip")
ONLY_FLAGS = ("--only",)
HELP_FLAGS = ("-h", "--help")


@dataclass(frozen=True)
class Proceed:
    """Arguments were valid; run with these filters."""

    filters: FilterState


@dataclass(frozen=True)
class ShowHelp:
    """Help was requested."""


@dataclass(frozen=True)
class UnknownArgument:
    """An argument was not recognised."""

    argument: str


ParseOutcome = Union[Proceed, ShowHelp, UnknownArgument]


def _split(value: str) -> List[str]:
    return value.split(",")


def parse_arguments(argv: Sequence[str]) -> ParseOutcome:
    """Turn the raw argument vector (program name excluded) into an outcome.

    ``--skip``/``--without`` and ``--only`` take the following token as a comma
    separated list and replace any earlier list of the same kind.  When one of
    them is the last token it is ignored.
    """
    skip: List[str] = []
    only: List[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]

        if arg in SKIP_FLAGS or arg in ONLY_FLAGS:
            if i + 1 < len(argv):
                values = _split(argv[i + 1])
                if arg in SKIP_FLAGS:
                    skip = values
                else:
                    only = values
                i += 1
        elif arg in HELP_FLAGS:
            return ShowHelp()
        else:
            return UnknownArgument(arg)

        i += 1

    return Proceed(FilterState(skip=frozenset(skip), only=frozenset(only)))
