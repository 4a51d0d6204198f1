from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from attrguard.filesystem import BASIC_VIEWS, POSIX_VIEWS
from attrguard.models import Permissions, permissions_from_mode


@dataclass
class _Entry:
    content: bytes
    permissions: Permissions
    owner: str
    group: str


@dataclass
class MemoryFileSystem:
    """In-memory filesystem with a configurable set of attribute views."""

    views: frozenset[str] | None = POSIX_VIEWS
    entries: dict[Path, _Entry] = field(default_factory=dict)
    unreadable: set[Path] = field(default_factory=set)
    unsearchable: set[Path] = field(default_factory=set)
    reads: list[tuple[str, Path]] = field(default_factory=list)

    def exists(self, path: Path) -> bool:
        if path in self.unsearchable:
            raise PermissionError(f"permission denied: {path}")
        return path in self.entries or path == Path(".")

    def attribute_views(self, path: Path) -> frozenset[str] | None:
        return self.views

    def read_permissions(self, path: Path) -> Permissions:
        return self._read("posix", path).permissions

    def read_owner(self, path: Path) -> str:
        return self._read("owner", path).owner

    def read_group(self, path: Path) -> str:
        return self._read("posix", path).group

    def write(self, path: Path, content: str = "anything") -> Path:
        entry = self.entries.get(path)
        if entry is None:
            self.entries[path] = _Entry(
                content=content.encode("utf-8"),
                permissions=permissions_from_mode(0o644),
                owner="root",
                group="root",
            )
        else:
            entry.content = content.encode("utf-8")
        return path

    def delete(self, path: Path) -> None:
        del self.entries[path]

    def set_permissions(self, path: Path, permissions: Permissions) -> None:
        self.entries[path].permissions = permissions

    def set_owner(self, path: Path, owner: str) -> None:
        self.entries[path].owner = owner

    def set_group(self, path: Path, group: str) -> None:
        self.entries[path].group = group

    def _read(self, view: str, path: Path) -> _Entry:
        self.reads.append((view, path))
        if self.views is not None and view not in self.views and "posix" not in self.views:
            raise NotImplementedError(f"{view} attributes are unsupported")
        if path in self.unreadable:
            raise PermissionError(f"permission denied: {path}")
        if path == Path("."):
            return _Entry(b"", permissions_from_mode(0o755), "root", "root")
        try:
            return self.entries[path]
        except KeyError:
            raise FileNotFoundError(path) from None


@pytest.fixture
def posix_fs() -> MemoryFileSystem:
    return MemoryFileSystem(views=POSIX_VIEWS)


@pytest.fixture
def basic_fs() -> MemoryFileSystem:
    return MemoryFileSystem(views=BASIC_VIEWS)


@pytest.fixture(params=["posix", "basic"])
def any_fs(request: pytest.FixtureRequest) -> MemoryFileSystem:
    return MemoryFileSystem(views=POSIX_VIEWS if request.param == "posix" else BASIC_VIEWS)


@pytest.fixture
def undeclared_fs() -> MemoryFileSystem:
    return MemoryFileSystem(views=None)
