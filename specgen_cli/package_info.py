from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .cli_shared import MANIFEST_FILENAME, OpError, _load_manifest
from .dispatch import find_package_root

SCRIPT_NAMES = ("setup", "dev", "production")

DESCRIPTION = "SpecGen Application Package"


@dataclass(frozen=True)
class PackageExports:
    version: str
    description: str
    scripts: dict[str, Path]


def package_version(root: Path) -> str:
    doc = _load_manifest(root / MANIFEST_FILENAME)
    return str(doc.get("version") or "").strip()


def package_exports(root: Path | None = None) -> PackageExports:
    """Describe the package: manifest version plus its main shell scripts."""
    root = root if root is not None else find_package_root()
    scripts: dict[str, Path] = {}
    for name in SCRIPT_NAMES:
        path = root / "scripts" / f"{name}.sh"
        if not path.is_file():
            raise OpError(f"missing script: {path}")
        scripts[name] = path
    return PackageExports(
        version=package_version(root),
        description=DESCRIPTION,
        scripts=scripts,
    )
