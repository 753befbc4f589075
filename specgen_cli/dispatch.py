from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from .cli_shared import MANIFEST_FILENAME, RootNotFound, ScriptFailure, _say

NPM = "npm"


def _install_dir() -> Path:
    return Path(__file__).resolve().parent


def find_package_root(start: Path | None = None) -> Path:
    """Return the directory holding the package's ``package.json``.

    The manifest sits one level above the installed ``specgen_cli`` package,
    both when installed as a dependency and when run from a checkout. A plain
    site-packages install has no manifest there and raises ``RootNotFound``.
    """
    base = start if start is not None else _install_dir()
    manifest = base.parent / MANIFEST_FILENAME
    if manifest.is_file():
        return manifest.parent
    raise RootNotFound(f"could not locate package root directory (no {manifest})")


def _npm_executable() -> str:
    return shutil.which(NPM) or NPM


def run_script(script_name: str, *, root: Path) -> None:
    cmd = [_npm_executable(), "run", script_name]
    try:
        subprocess.run(cmd, cwd=str(root), check=True)
    except subprocess.CalledProcessError as e:
        raise ScriptFailure(f"npm run {script_name} exited with status {e.returncode}") from e
    except OSError as e:
        raise ScriptFailure(f"failed to start npm: {e}") from e


def delegate(script_name: str, *, start: Path | None = None) -> None:
    """Resolve the package root and run ``npm run <script_name>`` inside it."""
    root = find_package_root(start)
    _say(f"📦 Running {script_name} script...")
    run_script(script_name, root=root)
    _say(f"✅ {script_name} completed successfully", style="green")
