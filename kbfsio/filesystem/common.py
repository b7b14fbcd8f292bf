"""Errors shared by the KBFS backends and the operation facade."""


class KBFSError(Exception):
    """Base class for failures to access KBFS."""


class BackendInvocationError(KBFSError):
    """
    The keybase binary could not be started or exited with a non-zero status.

    The trimmed combined output of the process and the underlying error are kept so
    that callers can tell which subcommand failed and why.
    """

    def __init__(self, action: str, path: str, output: bytes, cause: Exception):
        """Instantiate with the failed action, its target and the process output."""
        self.action = action
        self.path = path
        self.output = output.decode(errors="replace").strip()
        self.cause = cause

        super().__init__(f"failed to {action} {path}: {self.output} ({cause})")


class PrerequisiteError(KBFSError):
    """A file that was about to be appended to could not be created first."""

    def __init__(self, path: str, cause: Exception):
        """Instantiate with the path that could not be created and the reason."""
        self.path = path
        self.cause = cause

        super().__init__(f"failed to create {path} before appending: {cause}")
