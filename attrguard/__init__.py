"""Permission, owner, and group drift guard for file-mutating operations."""

from attrguard.command import CheckFileCommand
from attrguard.compare import diff_snapshots
from attrguard.config import GuardSettings, load_settings
from attrguard.models import AttributeCategory, AttributeChange, Capabilities, PathSnapshot
from attrguard.probe import probe_capabilities
from attrguard.sinks import CaptureSink, ConsoleSink
from attrguard.snapshot import capture_snapshot, take_snapshots

__all__ = [
    "AttributeCategory",
    "AttributeChange",
    "Capabilities",
    "CaptureSink",
    "CheckFileCommand",
    "ConsoleSink",
    "GuardSettings",
    "PathSnapshot",
    "capture_snapshot",
    "diff_snapshots",
    "load_settings",
    "probe_capabilities",
    "take_snapshots",
]
