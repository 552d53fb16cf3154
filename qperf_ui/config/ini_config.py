########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

INI_DEFAULT_NAME = "qperf_ui.ini"
INI_ENV_VAR = "QPERF_INI"


@dataclass(frozen=True)
class AppSettings:
    engine_path: Path
    timeout_seconds: int

    flask_host: str
    flask_port: int
    flask_debug: bool

    open_browser: bool
    help_url: str

    log_level: str
    log_file: str


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the services.
    """

    def __init__(self, ini_path: Path):
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv(INI_ENV_VAR) or "").strip()
        # Without QPERF_INI, look next to the package (repo root)
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _cfg_path(self, section: str, key: str) -> Path:
        """
        Reads a filesystem path from INI and resolves it.
        Tries [paths] and [path] interchangeably.
        """
        sections_to_try = [section]
        if section == "paths":
            sections_to_try.append("path")
        if section == "path":
            sections_to_try.append("paths")

        for sec in sections_to_try:
            if not self._cfg.has_section(sec):
                continue
            raw = (self._cfg.get(sec, key, fallback="") or "").strip()
            if raw:
                raw = os.path.expandvars(os.path.expanduser(raw))
                return Path(raw).resolve()

        raise FileNotFoundError(f"Missing INI value for {key} in sections: {sections_to_try}")

    def _cfg_str(self, section: str, key: str, default: str) -> str:
        return (self._cfg.get(section, key, fallback=default) or "").strip() or default

    def load_settings(self) -> AppSettings:
        engine_path = self._cfg_path("paths", "engine_path")

        timeout_seconds = self._cfg.getint("execution", "timeout_seconds", fallback=1800)

        flask_host = self._cfg_str("flask", "host", "127.0.0.1")
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        open_browser = self._cfg.getboolean("ui", "open_browser", fallback=True)
        help_url = (self._cfg.get("ui", "help_url", fallback="") or "").strip()

        log_level = self._cfg_str("logging", "level", "INFO").upper()
        log_file = (self._cfg.get("logging", "file", fallback="") or "").strip()
        if log_file:
            log_file = os.path.expandvars(os.path.expanduser(log_file))

        if not engine_path.exists():
            raise FileNotFoundError(f"qperf engine not found: {engine_path}")
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")

        return AppSettings(
            engine_path=engine_path,
            timeout_seconds=timeout_seconds,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            open_browser=open_browser,
            help_url=help_url,
            log_level=log_level,
            log_file=log_file,
        )
