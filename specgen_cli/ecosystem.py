"""pm2 process-manager declaration for the SpecGen server.

pm2 accepts JSON ecosystem files, so the declaration lives here as data and
``specgen-ecosystem`` renders it; nothing in this module starts processes.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import typer

from . import __version__
from .cli_shared import OpError, UsageError, _print_json, _run_cli, _say

PROG_NAME = "specgen-ecosystem"

APP_NAME = "specgen"
DEFAULT_CWD = "/home/ubuntu/specgen-app"
# Placeholder only; set OPENAI_API_KEY for real deploys.
PLACEHOLDER_OPENAI_API_KEY = "sk-test1234"


def ecosystem_config(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    return {
        "apps": [
            {
                "name": APP_NAME,
                "script": "./server/index.js",
                "cwd": env.get("PWD") or DEFAULT_CWD,
                "env": {
                    "NODE_ENV": "production",
                    "PORT": 80,
                    "HOST": "0.0.0.0",
                    "OPENAI_API_KEY": env.get("OPENAI_API_KEY") or PLACEHOLDER_OPENAI_API_KEY,
                },
                "instances": 1,
                "exec_mode": "fork",
                "max_memory_restart": "500M",
                "time": True,
                "watch": False,
                "error_file": "./logs/err.log",
                "out_file": "./logs/out.log",
                "log_file": "./logs/combined.log",
            }
        ]
    }


app = typer.Typer(
    name=PROG_NAME,
    help="Render the pm2 ecosystem config for the SpecGen server.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit(code=0)


@app.command()
def render(
    output: Path | None = typer.Option(
        None,
        "--output",
        help="Write the config to this file instead of stdout (e.g. ecosystem.json)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> int:
    """Print or write the pm2 ecosystem JSON."""
    del version
    config = ecosystem_config()
    if output is None:
        _print_json(config)
        return 0
    if output.is_dir():
        raise UsageError(f"--output is a directory: {output}")
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise OpError(f"failed to write {output}: {e}") from e
    _say(f"Wrote {output}")
    return 0


def main(argv: list[str] | None = None) -> int:
    return _run_cli(root_app=app, prog_name=PROG_NAME, argv=argv)


if __name__ == "__main__":
    raise SystemExit(main())
