"""
Modules that give uniform access to files stored in KBFS.

KBFS is the team-shared file system of Keybase and is how the CA bot and its kssh
clients exchange configuration and trust material. It can be reached in two ways:

* Through the FUSE mount at /keybase, if the KBFS service is running and mounted. This
is fast but not available everywhere (e.g. inside docker containers).
* By running `keybase fs` subcommands. This works wherever keybase is installed, but
every call spawns a process.

The Operation facade in this package picks between the two on every call and makes both
look the same to callers, including the errors they raise.
"""

from .bridge import BridgeBackend, is_missing_file_error
from .common import BackendInvocationError, KBFSError, PrerequisiteError
from .detector import supports_fuse
from .mounted import MountedBackend
from .operation import Operation

__all__ = [
    "BackendInvocationError",
    "BridgeBackend",
    "is_missing_file_error",
    "KBFSError",
    "MountedBackend",
    "Operation",
    "PrerequisiteError",
    "supports_fuse",
]
