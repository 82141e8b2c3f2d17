from __future__ import annotations

from pathlib import Path

import pytest

from nextest_summary.config.ini_config import IniConfig


def _ini(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "nextest_summary.ini"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults_when_optional_file_missing(tmp_path: Path):
    settings = IniConfig(tmp_path / "absent.ini", required=False).load_settings()

    assert settings.log_level == "WARNING"
    assert settings.reports_base == Path("reports").resolve()
    assert settings.flask_host == "127.0.0.1"
    assert settings.flask_port == 5000
    assert settings.flask_debug is False


def test_required_file_missing_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        IniConfig(tmp_path / "absent.ini")


def test_values_are_read(tmp_path: Path):
    path = _ini(
        tmp_path,
        f"[logging]\nlevel = debug\n\n"
        f"[paths]\nreports_base = {tmp_path / 'r'}\n\n"
        f"[flask]\nhost = 0.0.0.0\nport = 8080\ndebug = yes\n",
    )

    settings = IniConfig(path).load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.reports_base == (tmp_path / "r").resolve()
    assert settings.flask_host == "0.0.0.0"
    assert settings.flask_port == 8080
    assert settings.flask_debug is True


def test_unknown_log_level(tmp_path: Path):
    path = _ini(tmp_path, "[logging]\nlevel = chatty\n")
    with pytest.raises(ValueError):
        IniConfig(path).load_settings()


def test_app_ini_env_var(tmp_path: Path, monkeypatch):
    path = _ini(tmp_path, "[flask]\nport = 6001\n")
    monkeypatch.setenv("APP_INI", str(path))

    cfg = IniConfig.from_env_or_default()

    assert cfg.ini_path == path
    assert cfg.load_settings().flask_port == 6001


def test_explicit_path_beats_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("APP_INI", str(tmp_path / "absent.ini"))
    path = _ini(tmp_path, "[flask]\nport = 6002\n")

    assert IniConfig.from_env_or_default(str(path)).load_settings().flask_port == 6002


def test_env_pointing_to_missing_file_raises(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("APP_INI", str(tmp_path / "absent.ini"))
    with pytest.raises(FileNotFoundError):
        IniConfig.from_env_or_default()
