"""Point-in-time capture of permission, owner, and group attributes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from attrguard.filesystem import FileSystem
from attrguard.models import AttributeCategory, Capabilities, PathSnapshot


def capture_snapshot(fs: FileSystem, path: Path, capabilities: Capabilities) -> PathSnapshot:
    """Capture the supported attributes of one path.

    A missing path yields an empty snapshot. A failed read leaves only that
    category uncaptured; the failure is not reported.
    """
    if not _exists(fs, path):
        return PathSnapshot(path=path)

    readers = {
        AttributeCategory.PERMISSIONS: fs.read_permissions,
        AttributeCategory.OWNER: fs.read_owner,
        AttributeCategory.GROUP: fs.read_group,
    }
    values: dict[str, object] = {}
    for category, reader in readers.items():
        if not capabilities.supports(category):
            continue
        try:
            values[category.value] = reader(path)
        except OSError:
            continue

    return PathSnapshot(path=path, **values)


def take_snapshots(
    fs: FileSystem, paths: Iterable[Path], capabilities: Capabilities
) -> Mapping[Path, PathSnapshot]:
    """Capture every existing path, keeping path-set order."""
    snapshots: dict[Path, PathSnapshot] = {}
    for path in paths:
        if path in snapshots or not _exists(fs, path):
            continue
        snapshots[path] = capture_snapshot(fs, path, capabilities)
    return snapshots


def _exists(fs: FileSystem, path: Path) -> bool:
    try:
        return fs.exists(path)
    except OSError:
        return False
