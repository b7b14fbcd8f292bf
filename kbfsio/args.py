"""Module defining the command-line arguments and providing a parser for them."""

from __future__ import annotations

import argparse
from typing import List, Optional

from kbfsio.constants import CONFIG_PATH, VERSION


class Arguments(argparse.Namespace):
    """Parsed command-line arguments."""

    command: str
    path: str

    append: bool

    config: str
    keybase: Optional[str]
    mount_root: Optional[str]

    debug: bool

    COMMANDS = ["exists", "read", "write", "rm", "ls"]

    @classmethod
    def parse(cls, args: Optional[List[str]] = None) -> Arguments:
        """
        Parse command-line arguments from the given list of strings.

        Defaults to sys.argv if none are specified.
        """
        return cls._get_parser().parse_args(args, namespace=cls())

    @classmethod
    def _get_parser(cls) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="Access files in KBFS through its mount or the keybase binary.",
            usage="kbfsio [option...] command path",
        )

        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {VERSION}",
            help="show the program version",
        )

        # Primary arguments
        parser.add_argument(
            "command", type=str, choices=cls.COMMANDS, help="operation to perform"
        )
        parser.add_argument("path", type=str, help="KBFS path to operate on")

        # Append to the file rather than overwriting it
        parser.add_argument(
            "--append",
            action="store_true",
            help="append to the file instead of overwriting it (write only)",
        )

        # Path to (optional) config file
        parser.add_argument(
            "--config",
            type=str,
            help=f"path to config file (default is {CONFIG_PATH})",
            default=CONFIG_PATH,
        )

        # Overrides for the config file
        parser.add_argument("--keybase", type=str, help="path to the keybase binary")
        parser.add_argument("--mount-root", type=str, help="path where KBFS is mounted")

        # Enable debug output for development
        parser.add_argument(
            "--debug", action="store_true", help="enable debug information"
        )

        return parser
