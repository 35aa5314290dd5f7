"""CLI interface for fsreport."""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path

import click

from fsreport.core.capacity import IncompleteCapacityError, capacity_block, query_capacity
from fsreport.core.generator import FileSystemReportGenerator
from fsreport.core.roots import resolve_roots
from fsreport.settings import Settings
from fsreport.utils import format_elapsed

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _roots_or_default(roots: tuple[Path, ...]) -> list[Path]:
    if roots:
        return [p.absolute() for p in roots]
    return resolve_roots()


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """fsreport: storage diagnostics for bug reports."""
    _setup_logging(verbose)


# ── generate ─────────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the attachment into",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the report instead of writing a file")
@click.option(
    "--root", "-r", "roots",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Scan this directory instead of the configured roots (repeatable)",
)
@click.option("--decimal", is_flag=True, help="Use 1000-based size units")
def generate(output_dir: Path, to_stdout: bool, roots: tuple[Path, ...], decimal: bool) -> None:
    """Generate the file system report attachment."""
    root_list = _roots_or_default(roots)
    generator = FileSystemReportGenerator(
        roots_provider=lambda: root_list,
        unit_base=1000 if decimal else None,
    )

    started = time.monotonic()
    try:
        attachment = generator.generate_attachment()
    except IncompleteCapacityError as exc:
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {exc}", err=True)
        sys.exit(1)
    log.info("Generated report in %s", format_elapsed(time.monotonic() - started))

    if to_stdout:
        click.echo(attachment.text, nl=False)
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / attachment.file_name
    target.write_bytes(attachment.data)
    click.echo(
        f"{click.style('✓', fg='green')} Wrote {target} "
        f"({len(attachment.data):,} bytes, {attachment.mime_type})"
    )


# ── roots ────────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def roots(as_json: bool) -> None:
    """List the root directories that would be scanned."""
    root_list = resolve_roots()

    if as_json:
        data = [{"path": str(p), "exists": p.is_dir()} for p in root_list]
        click.echo(json.dumps(data, indent=2))
        return

    if not root_list:
        click.echo("No root directories configured.")
        return

    for path in root_list:
        if path.is_dir():
            click.echo(f"  {click.style('✓', fg='green')} {path}")
        else:
            click.echo(f"  {click.style('✗', fg='bright_black')} {path} {click.style('(missing)', fg='bright_black')}")


# ── capacity ─────────────────────────────────────────────────────────────

@main.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--decimal", is_flag=True, help="Use 1000-based size units")
def capacity(path: Path | None, decimal: bool) -> None:
    """Show the capacity of the volume hosting PATH (default: first root)."""
    root_list = [path.absolute()] if path else resolve_roots()
    snapshot = query_capacity(root_list)
    if snapshot is None:
        click.echo("No volume available.", err=True)
        sys.exit(1)
    try:
        click.echo(capacity_block(snapshot, base=1000 if decimal else 1024))
    except IncompleteCapacityError as exc:
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {exc}", err=True)
        sys.exit(1)


# ── configure ────────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--root", "-r", "roots",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Root directory to scan by default (repeatable)",
)
@click.option("--reset-roots", is_flag=True, help="Go back to the platform default roots")
@click.option("--unit-base", type=click.Choice(["1000", "1024"]), default=None, help="Size unit base")
def configure(roots: tuple[Path, ...], reset_roots: bool, unit_base: str | None) -> None:
    """Change the persistent report settings."""
    settings = Settings.instance()

    if roots and reset_roots:
        raise click.UsageError("--root and --reset-roots are mutually exclusive")
    if roots:
        settings.roots = [str(p.expanduser().absolute()) for p in roots]
    elif reset_roots:
        settings.roots = None
    if unit_base is not None:
        settings.unit_base = int(unit_base)

    click.echo(f"\n  {click.style('Settings:', bold=True)}  {settings.path}")
    configured = settings.roots
    if configured is None:
        click.echo(f"  {click.style('Roots:', bold=True)}     (platform default)")
    else:
        click.echo(f"  {click.style('Roots:', bold=True)}     {', '.join(configured) or '(none)'}")
    click.echo(f"  {click.style('Unit base:', bold=True)} {settings.unit_base or 1024}\n")
