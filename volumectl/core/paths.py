"""
Confinement of caller-supplied paths to a volume's mountpoint.
"""

import os
import posixpath
from typing import Optional

from .exceptions import PathEscapesVolume


def _is_within(root: str, path: str) -> bool:
    """Check if ``path`` equals ``root`` or is a descendant of it."""
    if root == '/':
        return path.startswith('/')
    return path == root or path.startswith(root + '/')


def sandboxed_path(mountpoint: str, relative_path: Optional[str] = None,
                   follow_symlinks: bool = True) -> str:
    """
    Join a relative path onto a mountpoint, keeping it inside the mountpoint.

    Leading slashes in ``relative_path`` are dropped, so ``/logs`` and
    ``logs`` both address the ``logs`` entry at the volume root. Symlinks
    in the joined path are resolved before the containment check. With
    ``follow_symlinks`` False the last component is left unresolved, so a
    link itself can be targeted (e.g. removed) wherever it points.

    Args:
        mountpoint: Absolute storage root of the volume
        relative_path: Optional path inside the volume
        follow_symlinks: Resolve the last component as well

    Returns:
        The normalized absolute path, with symlinks left in place

    Raises:
        PathEscapesVolume: If the result lies outside the mountpoint
    """
    root = posixpath.normpath(mountpoint)
    if not relative_path:
        return root

    if '\x00' in relative_path:
        raise PathEscapesVolume(relative_path, root)

    joined = posixpath.normpath(posixpath.join(root, relative_path.lstrip('/')))
    if not _is_within(root, joined):
        raise PathEscapesVolume(relative_path, root)
    if joined == root:
        return root

    real_root = os.path.realpath(root)
    if follow_symlinks:
        resolved = os.path.realpath(joined)
    else:
        resolved = posixpath.join(
            os.path.realpath(posixpath.dirname(joined)), posixpath.basename(joined)
        )
    if not _is_within(real_root, resolved):
        raise PathEscapesVolume(relative_path, root)
    return joined


def is_volume_root(mountpoint: str, path: str) -> bool:
    return posixpath.normpath(mountpoint) == posixpath.normpath(path)
