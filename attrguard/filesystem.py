"""Read-only access to file attributes on the local filesystem."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Protocol

from attrguard.models import Permissions, permissions_from_mode

_LOG = logging.getLogger(__name__)

POSIX_VIEWS: frozenset[str] = frozenset({"basic", "owner", "posix", "unix"})
BASIC_VIEWS: frozenset[str] = frozenset({"basic"})
WINDOWS_VIEWS: frozenset[str] = frozenset({"basic", "dos"})

# Mounted filesystems that carry no POSIX mode bits or ownership of their own.
_BASIC_ONLY_FILESYSTEM_TYPES = frozenset(
    {
        "vfat",
        "msdos",
        "exfat",
        "ntfs",
        "ntfs3",
        "fuseblk",
    }
)
_MOUNT_ESCAPE_RE = re.compile(r"\\([0-7]{3})")
_PROC_MOUNTS = Path("/proc/mounts")


class FileSystem(Protocol):
    """Attribute reads the guard needs from a filesystem.

    Reads raise `NotImplementedError` when the platform has no such attribute
    and `OSError` when the read itself fails.
    """

    def exists(self, path: Path) -> bool: ...

    def attribute_views(self, path: Path) -> frozenset[str] | None: ...

    def read_permissions(self, path: Path) -> Permissions: ...

    def read_owner(self, path: Path) -> str: ...

    def read_group(self, path: Path) -> str: ...


class LocalFileSystem:
    """`FileSystem` backed by `os.stat` and pathlib owner/group lookups."""

    def __init__(self, mounts_path: Path = _PROC_MOUNTS) -> None:
        self._mounts_path = mounts_path

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            return False

    def attribute_views(self, path: Path) -> frozenset[str] | None:
        if os.name == "nt":
            return WINDOWS_VIEWS

        mounts = load_mount_table(self._mounts_path)
        if not mounts:
            return None

        fs_type = mount_fs_type_for_path(path, mounts)
        _LOG.debug("filesystem type for %s: %s", path, fs_type)
        if fs_type in _BASIC_ONLY_FILESYSTEM_TYPES:
            return BASIC_VIEWS
        return POSIX_VIEWS

    def read_permissions(self, path: Path) -> Permissions:
        if os.name != "posix":
            raise NotImplementedError("POSIX permissions are unsupported on this system")
        return permissions_from_mode(path.stat().st_mode)

    def read_owner(self, path: Path) -> str:
        try:
            return path.owner()
        except KeyError:
            return str(path.stat().st_uid)

    def read_group(self, path: Path) -> str:
        try:
            return path.group()
        except KeyError:
            return str(path.stat().st_gid)


def _decode_mount_token(token: str) -> str:
    return _MOUNT_ESCAPE_RE.sub(lambda match: chr(int(match.group(1), 8)), token)


def load_mount_table(mounts_path: Path = _PROC_MOUNTS) -> tuple[tuple[Path, str], ...]:
    """Return `(mount point, fs type)` pairs, longest mount point first."""
    mounts: list[tuple[Path, str]] = []
    try:
        lines = mounts_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return ()

    for line in lines:
        parts = line.split()
        if len(parts) < 3:
            continue
        mount_point = Path(_decode_mount_token(parts[1]))
        fs_type = parts[2].lower()
        mounts.append((mount_point, fs_type))

    mounts.sort(key=lambda item: len(item[0].as_posix()), reverse=True)
    return tuple(mounts)


def mount_fs_type_for_path(path: Path, mounts: tuple[tuple[Path, str], ...]) -> str | None:
    """Return the filesystem type of the mount that contains `path`."""
    # Symlink loops resolve to their literal path instead of raising.
    candidate = Path(os.path.realpath(path.expanduser())).as_posix()
    for mount_point, fs_type in mounts:
        mount_prefix = mount_point.as_posix().rstrip("/") or "/"
        if mount_prefix == "/" or candidate == mount_prefix:
            return fs_type
        if candidate.startswith(f"{mount_prefix}/"):
            return fs_type
    return None
