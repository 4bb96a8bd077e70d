"""Zoning app-data paths."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def resolve_app_data_root() -> Path:
    """Resolve app-data root; ``ZONING_APP_DATA_DIR`` overrides ``<project>/appdata``.

    A relative override is taken from the project root, not the working directory.
    """
    configured = os.getenv("ZONING_APP_DATA_DIR", "").strip()
    if not configured:
        return PROJECT_ROOT / "appdata"
    return PROJECT_ROOT / configured


def resolve_logs_dir() -> Path:
    return resolve_app_data_root() / "logs"


def resolve_config_dir() -> Path:
    """Directory holding the ``.env.zoning`` files."""
    return resolve_app_data_root() / "config"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    paths = {
        "root": resolve_app_data_root(),
        "logs": resolve_logs_dir(),
        "config": resolve_config_dir(),
    }
    for path in paths.values():
        path.mkdir(parents=True, exist_ok=True)
    return paths
