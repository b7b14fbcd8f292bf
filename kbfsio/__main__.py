"""
Module implementing the command-line interface of kbfsio.

kbfsio exposes the KBFS file operations used by the CA bot and kssh as a standalone
tool, which is mostly useful for inspecting and seeding the shared config files by hand:

    kbfsio ls /keybase/team/acme.ssh
    echo "..." | kbfsio write --append /keybase/team/acme.ssh/audit.log
"""

import logging
import os
import signal
import sys
from typing import List, NoReturn, Optional

import kbfsio.constants as constants
from kbfsio.config import Config
from kbfsio.filesystem import KBFSError, Operation
from kbfsio.logger import log, summarize
from .args import Arguments


def main(arguments: Optional[List[str]] = None) -> NoReturn:
    """
    Run a single KBFS operation with the given arguments.

    Defaults to parsing command-line arguments from sys.argv if none are specified.
    """
    # Parse command-line arguments.
    args = Arguments.parse(arguments)

    # Configure debug logging.
    if args.debug:
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(logging.ERROR)

    config = Config.load(args.config)

    op = Operation(
        keybase_binary_path=args.keybase or config.keybase.binary,
        mount_root=args.mount_root or config.keybase.mount_root,
    )
    log.debug(f"using {op}")

    try:
        exit_code = run(op, args)
    except KeyboardInterrupt:
        exit_code = 128 + signal.SIGINT
    except (KBFSError, OSError) as e:
        log.error(f"failed to {args.command} {args.path}: {e}")
        exit_code = constants.KBFSIO_ERROR_CODE

    sys.exit(exit_code)


def run(op: Operation, args: Arguments) -> int:
    """Perform the requested operation and return the exit code."""
    if args.command == "exists":
        exists = op.exists(args.path)
        log.debug(f"{args.path} exists: {exists}")

        return 0 if exists else 1
    elif args.command == "read":
        contents = op.read(args.path)
        log.debug(f"read {args.path}: {summarize(contents)}")

        sys.stdout.buffer.write(contents)
        sys.stdout.buffer.flush()
    elif args.command == "write":
        contents = sys.stdin.buffer.read()
        log.debug(f"writing {args.path} (append={args.append}): {summarize(contents)}")

        op.write(args.path, contents, args.append)
    elif args.command == "rm":
        op.delete(args.path)
    elif args.command == "ls":
        for name in op.list(args.path):
            sys.stdout.buffer.write(os.fsencode(name) + b"\n")

        sys.stdout.buffer.flush()

    return 0
