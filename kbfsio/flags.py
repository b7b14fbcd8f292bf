"""
Module implementing the scanner that picks kssh's own flags out of its arguments.

kssh passes everything it does not recognize on to ssh, so argparse is not an option
here: it would reject or reorder the flags meant for ssh. Instead this does a single
pass over the arguments, pulling out exact matches of the known flags and leaving
every other argument untouched and in its original position.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


class MissingValueError(ValueError):
    """A flag that takes a value was the last argument."""


@dataclass(frozen=True)
class CLIArgument:
    """A flag recognized by the scanner."""

    # e.g. "--set-default-team"
    name: str

    # True if a value follows the flag (e.g. "--set-default-team foo"), False if it's a
    # boolean flag (e.g. "--help")
    has_argument: bool = False


@dataclass(frozen=True)
class ParsedCLIArgument:
    """A flag found in the arguments, along with its value if it takes one."""

    argument: CLIArgument
    value: str = ""


def parse_args(
    args: Sequence[str], cli_arguments: Sequence[CLIArgument]
) -> Tuple[List[str], List[ParsedCLIArgument]]:
    """
    Split the arguments into unrecognized arguments and recognized flags.

    Returns the remaining arguments and the parsed flags, both in the order in which
    they appeared. If the same name is declared twice, the first declaration wins.
    """
    remaining: List[str] = []
    found: List[ParsedCLIArgument] = []

    i = 0
    while i < len(args):
        arg = args[i]
        cli_arg = next((c for c in cli_arguments if c.name == arg), None)

        if cli_arg is None:
            remaining.append(arg)
        elif cli_arg.has_argument:
            if i + 1 == len(args):
                raise MissingValueError(f"argument {cli_arg.name} requires a value")

            found.append(ParsedCLIArgument(cli_arg, args[i + 1]))
            i += 1
        else:
            found.append(ParsedCLIArgument(cli_arg))

        i += 1

    return remaining, found
