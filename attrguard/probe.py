"""Filesystem capability detection for guarded attribute categories."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from attrguard.filesystem import FileSystem
from attrguard.models import NO_CAPABILITIES, Capabilities

_LOG = logging.getLogger(__name__)


def probe_capabilities(fs: FileSystem, path: Path) -> Capabilities:
    """Report which categories can be read on the filesystem holding `path`."""
    views = fs.attribute_views(path)
    if views is not None:
        capabilities = capabilities_from_views(views)
        _LOG.debug("declared attribute views %s -> %s", sorted(views), capabilities)
        return capabilities

    anchor = _nearest_existing(fs, path)
    if anchor is None:
        _LOG.debug("no existing ancestor of %s to query; assuming no capabilities", path)
        return NO_CAPABILITIES

    capabilities = Capabilities(
        permissions=_can_read(fs.read_permissions, anchor),
        owner=_can_read(fs.read_owner, anchor),
        group=_can_read(fs.read_group, anchor),
    )
    _LOG.debug("queried capabilities on %s -> %s", anchor, capabilities)
    return capabilities


def capabilities_from_views(views: frozenset[str]) -> Capabilities:
    posix = "posix" in views
    return Capabilities(
        permissions=posix,
        owner=posix or "owner" in views,
        group=posix,
    )


def _can_read(reader: Callable[[Path], object], path: Path) -> bool:
    try:
        reader(path)
    except (NotImplementedError, OSError):
        return False
    return True


def _nearest_existing(fs: FileSystem, path: Path) -> Path | None:
    for candidate in (path, *path.parents):
        try:
            if fs.exists(candidate):
                return candidate
        except OSError:
            continue
    return None
