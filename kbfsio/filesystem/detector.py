"""Module that detects whether KBFS is reachable through a local FUSE mount."""

import os
import os.path

from kbfsio.constants import KBFS_ROOT, KBFS_SCOPES


def supports_fuse(root: str = KBFS_ROOT) -> bool:
    """
    Check if KBFS is mounted at the given root with all of its scopes present.

    The mount is only considered usable if the root and its team, private and public
    directories can all be stat'ed. This only looks at local metadata and never runs
    the keybase binary, which may not even be installed.

    The result must not be cached: the KBFS service may come up (or go away) while the
    process is running.
    """
    probes = [root] + [os.path.join(root, scope) for scope in KBFS_SCOPES]

    return all(os.path.exists(probe) for probe in probes)
