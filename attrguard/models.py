"""Value types shared by the probe, snapshot, and comparison stages."""

from __future__ import annotations

import stat
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class AttributeCategory(StrEnum):
    """Guarded attribute category."""

    PERMISSIONS = "permissions"
    OWNER = "owner"
    GROUP = "group"


CATEGORY_ORDER: tuple[AttributeCategory, ...] = (
    AttributeCategory.PERMISSIONS,
    AttributeCategory.OWNER,
    AttributeCategory.GROUP,
)


class PermissionFlag(StrEnum):
    """One POSIX permission bit."""

    OWNER_READ = "owner_read"
    OWNER_WRITE = "owner_write"
    OWNER_EXECUTE = "owner_execute"
    GROUP_READ = "group_read"
    GROUP_WRITE = "group_write"
    GROUP_EXECUTE = "group_execute"
    OTHERS_READ = "others_read"
    OTHERS_WRITE = "others_write"
    OTHERS_EXECUTE = "others_execute"


# Symbolic rendering order, matching `ls -l`.
_FLAG_BITS: tuple[tuple[PermissionFlag, int, str], ...] = (
    (PermissionFlag.OWNER_READ, stat.S_IRUSR, "r"),
    (PermissionFlag.OWNER_WRITE, stat.S_IWUSR, "w"),
    (PermissionFlag.OWNER_EXECUTE, stat.S_IXUSR, "x"),
    (PermissionFlag.GROUP_READ, stat.S_IRGRP, "r"),
    (PermissionFlag.GROUP_WRITE, stat.S_IWGRP, "w"),
    (PermissionFlag.GROUP_EXECUTE, stat.S_IXGRP, "x"),
    (PermissionFlag.OTHERS_READ, stat.S_IROTH, "r"),
    (PermissionFlag.OTHERS_WRITE, stat.S_IWOTH, "w"),
    (PermissionFlag.OTHERS_EXECUTE, stat.S_IXOTH, "x"),
)

Permissions = frozenset[PermissionFlag]


def permissions_from_mode(mode: int) -> Permissions:
    """Split an `st_mode` value into its permission flags."""
    return frozenset(flag for flag, bit, _symbol in _FLAG_BITS if mode & bit)


def format_permissions(flags: Iterable[PermissionFlag]) -> str:
    """Render flags in symbolic `rwxr-x---` form."""
    present = set(flags)
    return "".join(
        symbol if flag in present else "-" for flag, _bit, symbol in _FLAG_BITS
    )


@dataclass(frozen=True, slots=True)
class Capabilities:
    """Attribute categories a filesystem lets us query."""

    permissions: bool
    owner: bool
    group: bool

    def supports(self, category: AttributeCategory) -> bool:
        return bool(getattr(self, category.value))


NO_CAPABILITIES = Capabilities(permissions=False, owner=False, group=False)
POSIX_CAPABILITIES = Capabilities(permissions=True, owner=True, group=True)


@dataclass(frozen=True, slots=True)
class PathSnapshot:
    """Captured attributes of one path; `None` means not captured."""

    path: Path
    permissions: Permissions | None = None
    owner: str | None = None
    group: str | None = None

    def value(self, category: AttributeCategory) -> Permissions | str | None:
        return getattr(self, category.value)


@dataclass(frozen=True, slots=True)
class AttributeChange:
    """One category of one path that differs between two snapshots."""

    path: Path
    category: AttributeCategory
    previous: Permissions | str
    current: Permissions | str
