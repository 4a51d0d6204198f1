"""Guarded execution of file-mutating operations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from attrguard.compare import diff_snapshots
from attrguard.config import GuardSettings
from attrguard.filesystem import FileSystem, LocalFileSystem
from attrguard.messages import describe_change
from attrguard.probe import probe_capabilities
from attrguard.sinks import OutputSink
from attrguard.snapshot import take_snapshots

_LOG = logging.getLogger(__name__)

PathsProvider = Callable[[GuardSettings], Sequence[Path]]
Operation = Callable[[], int]


class CheckFileCommand:
    """Warn about permission, owner, or group drift caused by an operation.

    The guard only observes. The operation's exit status and exceptions pass
    through untouched, and nothing is written unless an attribute changed.
    """

    def __init__(
        self,
        *,
        filesystem: FileSystem | None = None,
        settings: GuardSettings | None = None,
    ) -> None:
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.settings = settings if settings is not None else GuardSettings()

    def run(self, paths_provider: PathsProvider, operation: Operation, sink: OutputSink) -> int:
        paths = list(paths_provider(self.settings))
        if not paths:
            return operation()

        capabilities = probe_capabilities(self.filesystem, paths[0])
        before = take_snapshots(self.filesystem, paths, capabilities)
        _LOG.debug("captured %d of %d paths before operation", len(before), len(paths))

        status = operation()

        after = take_snapshots(self.filesystem, paths, capabilities)
        changes = diff_snapshots(before, after)
        _LOG.debug("operation exited with %s; %d attribute changes", status, len(changes))
        for change in changes:
            sink.write_line(describe_change(change, service_name=self.settings.service_name))
        return status
