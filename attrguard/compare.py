"""Before/after snapshot comparison."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from attrguard.models import CATEGORY_ORDER, AttributeChange, PathSnapshot


def diff_snapshots(
    before: Mapping[Path, PathSnapshot], after: Mapping[Path, PathSnapshot]
) -> list[AttributeChange]:
    """List attribute changes for paths present in both snapshot sets.

    Paths missing from `after` were deleted and paths only in `after` were
    created; neither is compared. Categories uncaptured on either side are
    skipped.
    """
    changes: list[AttributeChange] = []
    for path, previous in before.items():
        current = after.get(path)
        if current is None:
            continue
        for category in CATEGORY_ORDER:
            old_value = previous.value(category)
            new_value = current.value(category)
            if old_value is None or new_value is None or old_value == new_value:
                continue
            changes.append(
                AttributeChange(
                    path=path,
                    category=category,
                    previous=old_value,
                    current=new_value,
                )
            )
    return changes
