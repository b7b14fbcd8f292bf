"""Module containing the facade through which all KBFS file access happens."""

from dataclasses import dataclass
from typing import List, Union

from kbfsio.constants import KBFS_ROOT, KEYBASE_BINARY
from .backend import Backend
from .bridge import BridgeBackend
from .common import KBFSError, PrerequisiteError
from .detector import supports_fuse
from .mounted import MountedBackend


@dataclass(frozen=True)
class Operation:
    """
    Handle for accessing KBFS files through whichever backend the host supports.

    Running `keybase fs` commands is guaranteed to work on every system with keybase
    installed, but it is slow. Reads that happen often (like looking for client config
    files on every invocation of kssh) are an order of magnitude faster through the FUSE
    mount, so exists() and read() use the mount whenever it is available. Writes,
    deletes and listings always go through the keybase binary.
    """

    keybase_binary_path: str = KEYBASE_BINARY
    mount_root: str = KBFS_ROOT

    @property
    def bridge(self) -> BridgeBackend:
        """Backend that runs the keybase binary."""
        return BridgeBackend(self.keybase_binary_path)

    def backend(self) -> Backend:
        """Select the backend for read-only operations based on the mount state."""
        if supports_fuse(self.mount_root):
            return MountedBackend()
        else:
            return self.bridge

    def exists(self, path: str) -> bool:
        """Check if the given KBFS file exists."""
        return self.backend().exists(path)

    def read(self, path: str) -> bytes:
        """Read the given KBFS file into memory."""
        return self.backend().read(path)

    def delete(self, path: str) -> None:
        """Delete the given KBFS file."""
        self.bridge.delete(path)

    def write(
        self, path: str, contents: Union[bytes, str], append: bool = False
    ) -> None:
        """
        Write contents to the given KBFS file.

        If append is set, the contents are added to the end of the file, which is
        created first if it doesn't exist yet. Otherwise the file is overwritten and
        truncated.
        """
        if isinstance(contents, str):
            contents = contents.encode()

        if append and not self._exists_for_append(path):
            try:
                self.bridge.write(path, b"")
            except KBFSError as e:
                raise PrerequisiteError(path, e) from e

        self.bridge.write(path, contents, append)

    def list(self, path: str) -> List[str]:
        """List the names of the files in the given KBFS directory."""
        return self.bridge.list(path)

    def _exists_for_append(self, path: str) -> bool:
        # A failed check is treated like a missing file, creating it will surface the
        # actual problem if there is one.
        try:
            return self.exists(path)
        except (KBFSError, OSError):
            return False
