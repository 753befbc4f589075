"""Keep sub-component manifests on the versions the root manifest depends on.

The root ``package.json`` pins each component package in ``dependencies``.
Every component directory carries its own ``package.json`` whose ``version``
should match that pin; this module rewrites the ones that drifted.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from . import __version__
from .cli_shared import (
    MANIFEST_FILENAME,
    UsageError,
    _load_manifest,
    _run_cli,
    _say,
    _write_manifest,
)

PROG_NAME = "specgen-sync-versions"

# component directory -> npm package name pinned in the root manifest
COMPONENTS: dict[str, str] = {
    "server": "@gv-sh/specgen-server",
    "admin": "@gv-sh/specgen-admin",
    "user": "@gv-sh/specgen-user",
}

STATUS_UPDATED = "updated"
STATUS_SYNCED = "synced"
STATUS_MISSING = "missing"


@dataclass(frozen=True)
class SyncOutcome:
    component: str
    status: str
    current: str | None = None
    expected: str | None = None

    def describe(self) -> str:
        if self.status == STATUS_MISSING:
            return f"❌ {self.component}: {MANIFEST_FILENAME} not found"
        if self.status == STATUS_SYNCED:
            return f"✅ {self.component}: {self.current} (already synced)"
        if self.expected is None:
            return f"📦 {self.component}: {self.current} → (no pin, version removed)"
        current = "(no version)" if self.current is None else self.current
        return f"📦 {self.component}: {current} → {self.expected}"


def _dependencies(root_doc: dict[str, Any]) -> dict[str, Any]:
    deps = root_doc.get("dependencies")
    return deps if isinstance(deps, dict) else {}


def sync_component(
    *, component: str, expected: str | None, root: Path, dry_run: bool = False
) -> SyncOutcome:
    path = root / component / MANIFEST_FILENAME
    if not path.is_file():
        return SyncOutcome(component=component, status=STATUS_MISSING, expected=expected)

    doc = _load_manifest(path)
    current = doc.get("version")
    if current == expected:
        return SyncOutcome(
            component=component, status=STATUS_SYNCED, current=current, expected=expected
        )

    if expected is None:
        # No pin in the root manifest: the field is dropped, not written as null.
        doc.pop("version", None)
    else:
        doc["version"] = expected
    if not dry_run:
        _write_manifest(path, doc)
    return SyncOutcome(
        component=component, status=STATUS_UPDATED, current=current, expected=expected
    )


def iter_sync(root: Path, *, dry_run: bool = False) -> Iterator[SyncOutcome]:
    """Sync components one at a time, in registry order."""
    root_doc = _load_manifest(root / MANIFEST_FILENAME)
    deps = _dependencies(root_doc)
    for component, package_name in COMPONENTS.items():
        yield sync_component(
            component=component,
            expected=deps.get(package_name),
            root=root,
            dry_run=dry_run,
        )


def sync_versions(root: Path, *, dry_run: bool = False) -> list[SyncOutcome]:
    return list(iter_sync(root, dry_run=dry_run))


app = typer.Typer(
    name=PROG_NAME,
    help="Copy component versions from the root package.json into each component.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit(code=0)


@app.command()
def run(
    root: Path = typer.Option(
        Path("."),
        "--root",
        help="Directory holding the root package.json (default: current directory)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report changes without writing"),
    quiet: bool = typer.Option(False, "--quiet", help="Only report errors"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> int:
    """Sync server, admin and user package versions."""
    del version
    if not root.is_dir():
        raise UsageError(f"--root is not a directory: {root}")
    if not quiet:
        _say(f"🔄 Syncing versions from main {MANIFEST_FILENAME}...")
    for outcome in iter_sync(root, dry_run=dry_run):
        if not quiet:
            _say(outcome.describe())
    if not quiet:
        suffix = " (dry run)" if dry_run else ""
        _say(f"✨ Version sync complete!{suffix}")
    return 0


def main(argv: list[str] | None = None) -> int:
    return _run_cli(root_app=app, prog_name=PROG_NAME, argv=argv)


if __name__ == "__main__":
    raise SystemExit(main())
