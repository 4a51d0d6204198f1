"""Rich and JSON rendering for probe and snapshot commands."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.table import Table

from attrguard.models import CATEGORY_ORDER, Capabilities, PathSnapshot, format_permissions


def render_capabilities(console: Console, path: Path, capabilities: Capabilities) -> None:
    """Render the supported categories for one filesystem."""
    table = Table(title=f"Attribute Support: {path}")
    table.add_column("Category")
    table.add_column("Supported", justify="center")
    for category in CATEGORY_ORDER:
        table.add_row(category.value, "yes" if capabilities.supports(category) else "no")
    console.print(table)


def render_snapshot_table(console: Console, snapshots: Iterable[PathSnapshot]) -> None:
    table = Table(title="File Attributes")
    table.add_column("Path")
    table.add_column("Permissions")
    table.add_column("Owner")
    table.add_column("Group")
    for snapshot in snapshots:
        table.add_row(
            str(snapshot.path),
            format_permissions(snapshot.permissions) if snapshot.permissions is not None else "-",
            snapshot.owner or "-",
            snapshot.group or "-",
        )
    console.print(table)


def render_snapshot_json(snapshots: Iterable[PathSnapshot]) -> str:
    """Render deterministic JSON for captured snapshots."""
    payload = [
        {
            "path": str(snapshot.path),
            "permissions": (
                sorted(flag.value for flag in snapshot.permissions)
                if snapshot.permissions is not None
                else None
            ),
            "owner": snapshot.owner,
            "group": snapshot.group,
        }
        for snapshot in snapshots
    ]
    return json.dumps(payload, indent=2, sort_keys=True)
