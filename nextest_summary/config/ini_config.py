########## ini_config.py

import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "nextest_summary.ini"


@dataclass(frozen=True)
class AppSettings:
    log_level: str

    # Only the HTTP surface reads reports from here; the CLI takes explicit paths.
    reports_base: Path

    flask_host: str
    flask_port: int
    flask_debug: bool


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the service code.
    """

    def __init__(self, ini_path: Path, required: bool = True):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok and required:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default(explicit: Optional[str] = None) -> "IniConfig":
        ini_raw = (explicit or os.getenv("APP_INI") or "").strip()
        if ini_raw:
            return IniConfig(Path(ini_raw))
        # No INI named anywhere: the repo-root file is optional
        return IniConfig(Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME, required=False)

    def _cfg_path(self, section: str, key: str, default: str) -> Path:
        raw = (self._cfg.get(section, key, fallback="") or "").strip() or default
        raw = os.path.expandvars(os.path.expanduser(raw))
        return Path(raw).resolve()

    def load_settings(self) -> AppSettings:
        log_level = (self._cfg.get("logging", "level", fallback="WARNING") or "").strip().upper() or "WARNING"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown logging level in INI: {log_level}")

        reports_base = self._cfg_path("paths", "reports_base", "reports")

        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        return AppSettings(
            log_level=log_level,
            reports_base=reports_base,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
        )
