from __future__ import annotations

from pathlib import Path

from zoning.infra.app_data import ensure_app_data_dirs, resolve_app_data_root, resolve_logs_dir


def test_resolve_app_data_root_prefers_configured_dir(monkeypatch, tmp_path) -> None:
    custom = tmp_path / "custom_root"
    monkeypatch.setenv("ZONING_APP_DATA_DIR", str(custom))
    assert resolve_app_data_root() == custom
    assert resolve_logs_dir() == custom / "logs"


def test_resolve_app_data_root_defaults_to_project_appdata(monkeypatch) -> None:
    monkeypatch.delenv("ZONING_APP_DATA_DIR", raising=False)
    root = resolve_app_data_root()
    assert root.name == "appdata"
    assert (root.parent / "zoning").is_dir()


def test_ensure_app_data_dirs_creates_logs(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ZONING_APP_DATA_DIR", str(tmp_path / "zoning_data"))

    paths = ensure_app_data_dirs()

    assert Path(paths["root"]).exists()
    assert Path(paths["logs"]).exists()
    assert Path(paths["logs"]).name == "logs"
    assert Path(paths["config"]).name == "config"
    assert Path(paths["config"]).is_dir()
