"""Human-readable phrasing for detected attribute changes."""

from __future__ import annotations

from attrguard.models import AttributeCategory, AttributeChange, Permissions, format_permissions

DEFAULT_SERVICE_NAME = "this service"


def describe_change(change: AttributeChange, *, service_name: str = DEFAULT_SERVICE_NAME) -> str:
    """Render one change as a single warning line."""
    if change.category is AttributeCategory.PERMISSIONS:
        return (
            f"The file permissions of [{change.path}] have changed "
            f"from [{_render(change.previous)}] to [{_render(change.current)}]. "
            f"Please ensure that the user account running {service_name} "
            "has read access to this file!"
        )

    label = "Owner" if change.category is AttributeCategory.OWNER else "Group"
    return (
        f"{label} of file [{change.path}] used to be [{change.previous}], "
        f"but now is [{change.current}]"
    )


def _render(value: Permissions | str) -> str:
    if isinstance(value, str):
        return value
    return format_permissions(value)
