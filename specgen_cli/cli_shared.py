from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
import typer
from rich.console import Console
from rich.markup import escape


class SpecgenOpsError(Exception):
    pass


class UsageError(SpecgenOpsError):
    pass


class OpError(SpecgenOpsError):
    pass


class RootNotFound(OpError):
    pass


class ScriptFailure(OpError):
    pass


class ManifestNotFound(OpError):
    pass


class ManifestParseError(OpError):
    pass


MANIFEST_FILENAME = "package.json"

_CONSOLE = Console(soft_wrap=True)
_ERROR_CONSOLE = Console(stderr=True, soft_wrap=True)


def _say(msg: str, *, style: str | None = None) -> None:
    _CONSOLE.print(escape(msg), style=style, highlight=False)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", highlight=False)


def _load_manifest(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ManifestNotFound(f"manifest not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise OpError(f"failed to read {path}: {e}") from e
    try:
        val = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"invalid JSON in {path}: {e}") from e
    if not isinstance(val, dict):
        raise ManifestParseError(f"invalid manifest {path}: expected JSON object")
    return val


def _write_manifest(path: Path, obj: dict[str, Any]) -> None:
    # Key order is preserved as read; npm tooling expects 2-space JSON + newline.
    text = json.dumps(obj, indent=2, ensure_ascii=False) + "\n"
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OpError(f"failed to write {path}: {e}") from e


def _print_json(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, indent=2) + "\n")


def _run_cli(*, root_app: typer.Typer, prog_name: str, argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        result = root_app(args=argv, prog_name=prog_name, standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except click.ClickException as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except OpError as e:
        _rich_error(str(e))
        return 1
