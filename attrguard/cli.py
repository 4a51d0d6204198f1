"""CLI entrypoint for attrguard."""

import logging
import subprocess
from pathlib import Path

import typer
from rich.console import Console

from attrguard.command import CheckFileCommand
from attrguard.config import GuardSettings, resolve_settings
from attrguard.filesystem import LocalFileSystem
from attrguard.probe import probe_capabilities
from attrguard.report import render_capabilities, render_snapshot_json, render_snapshot_table
from attrguard.sinks import ConsoleSink
from attrguard.snapshot import capture_snapshot

EXIT_OK = 0
EXIT_OPERATIONAL_ERROR = 1

app = typer.Typer(help="attrguard: warn when a command changes file permissions or ownership.")
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Permission, owner, and group drift guard."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("run", context_settings={"allow_interspersed_args": False})
def run(
    command: list[str] = typer.Argument(..., help="Command to run, after `--`."),
    watch: list[Path] | None = typer.Option(
        None, "--watch", "-w", help="Guard this path; repeatable."
    ),
    config: Path | None = typer.Option(
        None, "--config", help="YAML settings file (default: XDG config path if present)."
    ),
    service_name: str | None = typer.Option(
        None, "--service-name", help="Account name mentioned in permission warnings."
    ),
) -> None:
    """Run a command and warn about attribute changes on guarded paths."""
    try:
        settings = resolve_settings(config)
    except (OSError, ValueError) as exc:
        console.print(f"Operational error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=EXIT_OPERATIONAL_ERROR) from exc

    if service_name is not None:
        settings = settings.model_copy(update={"service_name": service_name})

    def guarded_paths(current: GuardSettings) -> list[Path]:
        return [*(watch or []), *current.watch]

    def run_command() -> int:
        return subprocess.run(command, check=False).returncode

    guard = CheckFileCommand(filesystem=LocalFileSystem(), settings=settings)
    try:
        status = guard.run(guarded_paths, run_command, ConsoleSink(err_console))
    except OSError as exc:
        console.print(
            f"Operational error: unable to run {command[0]}: {exc}",
            style="red",
            markup=False,
            highlight=False,
        )
        raise typer.Exit(code=EXIT_OPERATIONAL_ERROR) from exc

    raise typer.Exit(code=_exit_code(status))


@app.command("probe")
def probe(
    path: Path = typer.Argument(Path("."), help="Path on the filesystem to probe."),
) -> None:
    """Show which attribute categories the filesystem exposes."""
    capabilities = probe_capabilities(LocalFileSystem(), path)
    render_capabilities(console, path, capabilities)
    raise typer.Exit(code=EXIT_OK)


@app.command("snapshot")
def snapshot(
    paths: list[Path] = typer.Argument(..., help="Paths to inspect."),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON to stdout."),
) -> None:
    """Show the current permissions, owner, and group of paths."""
    filesystem = LocalFileSystem()
    capabilities = probe_capabilities(filesystem, paths[0])
    snapshots = [capture_snapshot(filesystem, path, capabilities) for path in paths]

    if json_output:
        typer.echo(render_snapshot_json(snapshots))
    else:
        render_snapshot_table(console, snapshots)
    raise typer.Exit(code=EXIT_OK)


def _exit_code(status: int) -> int:
    # Commands killed by a signal report a negative status.
    if status < 0:
        return 128 - status
    return status
