"""Module that reaches KBFS by running `keybase fs` subcommands."""

import os
import subprocess
from typing import List, Optional

from .backend import Backend
from .common import BackendInvocationError

# Text that `keybase fs stat` prints when the target is absent
MISSING_FILE_ERROR = "file does not exist"


def is_missing_file_error(output: str) -> bool:
    """Check if the output of a failed keybase command reports a missing file."""
    return MISSING_FILE_ERROR in output


class BridgeBackend(Backend):
    """
    Backend that shells out to the keybase binary for every operation.

    This works on every system where keybase is installed, whether or not KBFS is
    mounted, so it implements the complete set of operations. Each call runs exactly
    one process and blocks until it exits.
    """

    def __init__(self, binary_path: str):
        """Instantiate with the path to the keybase binary."""
        self._binary_path = binary_path

    def exists(self, path: str) -> bool:
        try:
            self._run("stat", path, "stat", path)
        except BackendInvocationError as e:
            if is_missing_file_error(e.output):
                return False

            raise

        return True

    def read(self, path: str) -> bytes:
        return self._run("read", path, "read", path)

    def write(self, path: str, contents: bytes, append: bool = False) -> None:
        """
        Write contents to a file, either replacing or appending to it.

        Note that `keybase fs write --append` fails if the file doesn't exist yet.
        """
        if append:
            self._run("write to", path, "write", "--append", path, stdin=contents)
        else:
            self._run("write to", path, "write", path, stdin=contents)

    def delete(self, path: str) -> None:
        self._run("delete the file at", path, "rm", path)

    def list(self, path: str) -> List[str]:
        """List the names in a directory in the order that keybase returns them."""
        output = self._run("list files in", path, "ls", "-1", "--nocolor", path)

        # Names that aren't valid UTF-8 are kept as surrogates so they work as paths
        return [name for name in os.fsdecode(output).split("\n") if name != ""]

    def _run(
        self, action: str, path: str, *args: str, stdin: Optional[bytes] = None
    ) -> bytes:
        """Run a `keybase fs` subcommand and return its combined stdout and stderr."""
        command = [self._binary_path, "fs", *args]

        try:
            proc = subprocess.run(
                command,
                input=stdin,
                # Don't let the child inherit our stdin if there's nothing to send
                stdin=subprocess.DEVNULL if stdin is None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise BackendInvocationError(action, path, e.output or b"", e) from e
        except OSError as e:
            # The binary is missing or not executable
            raise BackendInvocationError(action, path, b"", e) from e

        return proc.stdout
