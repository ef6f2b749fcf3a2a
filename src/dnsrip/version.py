from __future__ import annotations

import tomllib
from importlib import metadata
from pathlib import Path

_DIST_NAME = "dnsrip"


def get_version() -> str:
    """
    Return the package version.

    A source checkout's `pyproject.toml` wins over installed metadata so an editable
    install reports the version currently on disk.
    """
    checkout = _checkout_version(Path(__file__).resolve().parents[2] / "pyproject.toml")
    if checkout:
        return checkout

    try:
        return metadata.version(_DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _checkout_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return None
    project = data.get("project")
    if not isinstance(project, dict) or project.get("name") != _DIST_NAME:
        return None
    version = project.get("version")
    return version.strip() if isinstance(version, str) else None
