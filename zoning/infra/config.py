"""Zoning configuration and env loading."""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from zoning.infra.app_data import resolve_config_dir

logger = logging.getLogger(__name__)

ENV_FILE_NAMES: tuple[str, ...] = (".env.zoning", ".env.zoning.local")


@dataclass(frozen=True, slots=True)
class ZoningConfig:
    """Immutable zoning configuration."""

    cell_size: float = 1.0
    grid_origin_x: float = 0.0
    grid_origin_y: float = 0.0
    coord_precision: int | None = None
    palette_seed: int = 0
    mesh_elevation: float = 0.5


def load_zoning_config() -> ZoningConfig:
    """Load zoning configuration from env vars."""
    defaults = ZoningConfig()
    cell_size = _float("ZONING_CELL_SIZE", defaults.cell_size)
    if not (cell_size > 0 and math.isfinite(cell_size)):
        logger.warning("config_invalid name=ZONING_CELL_SIZE value=%s fallback=%s", cell_size, defaults.cell_size)
        cell_size = defaults.cell_size
    precision = _optional_int("ZONING_COORD_PRECISION")
    if precision is not None and precision < 0:
        logger.warning("config_invalid name=ZONING_COORD_PRECISION value=%s fallback=None", precision)
        precision = None
    return ZoningConfig(
        cell_size=cell_size,
        grid_origin_x=_float("ZONING_GRID_ORIGIN_X", defaults.grid_origin_x),
        grid_origin_y=_float("ZONING_GRID_ORIGIN_Y", defaults.grid_origin_y),
        coord_precision=precision,
        palette_seed=_int("ZONING_PALETTE_SEED", defaults.palette_seed),
        mesh_elevation=_float("ZONING_MESH_ELEVATION", defaults.mesh_elevation),
    )


def env_file_paths() -> tuple[Path, ...]:
    """Default env files, base before local, under the app-data config dir."""
    config_dir = resolve_config_dir()
    return tuple(config_dir / name for name in ENV_FILE_NAMES)


def read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines. Blank, comment and malformed lines are skipped."""
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = _unquote(value.strip())
    return values


def load_env_file(path: str | Path, *, override_existing: bool = True) -> dict[str, str]:
    """Apply one env file to the process environment and return what was set.

    A missing file is skipped.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}
    applied: dict[str, str] = {}
    for key, value in read_env_file(env_path).items():
        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied[key] = value
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str | Path] | None = None
) -> None:
    """Load env files left-to-right; later files overwrite earlier values."""
    for path in env_file_paths() if paths is None else paths:
        load_env_file(path, override_existing=override_existing)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%r fallback=%s", name, raw, default)
        return default


def _int(name: str, default: int) -> int:
    value = _optional_int(name)
    return default if value is None else value


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_invalid name=%s value=%r fallback=default", name, raw)
        return None
