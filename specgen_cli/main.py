from __future__ import annotations

import typer

from . import __version__
from .cli_shared import OpError, RootNotFound, _rich_error, _run_cli
from .commands import resolve_command, usage_text
from .dispatch import delegate, find_package_root
from .package_info import package_version

PROG_NAME = "specgen-app"

app = typer.Typer(
    name=PROG_NAME,
    help="Run SpecGen package scripts (setup, dev, deploy, ...).",
    add_completion=False,
)


def _resolved_version() -> str:
    try:
        return package_version(find_package_root()) or __version__
    except RootNotFound:
        return __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {_resolved_version()}")
        raise typer.Exit(code=0)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    command: str | None = typer.Argument(None, help="Command to run; omit to list commands"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> int:
    """Delegate COMMAND to its npm script in the package root."""
    del version
    spec = resolve_command(command)
    if spec is None:
        typer.echo(usage_text(PROG_NAME))
        return 0
    try:
        delegate(spec.script)
    except OpError as e:
        _rich_error(f"Error during {spec.script}: {e}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    return _run_cli(root_app=app, prog_name=PROG_NAME, argv=argv)


if __name__ == "__main__":
    raise SystemExit(main())
