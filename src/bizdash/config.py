from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json
import os
import sys
from typing import Optional

from bizdash.domain.errors import ConfigError


@dataclass(frozen=True)
class AppPaths:
    base_dir: Path
    settings_path: Path
    logs_dir: Path


@dataclass(frozen=True)
class Settings:
    endpoint: str
    currency_symbol: str = "₹"
    request_timeout: Optional[float] = None


def _windows_appdata() -> Path:
    return Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))


def _mac_app_support() -> Path:
    return Path.home() / "Library" / "Application Support"


def get_app_paths(app_name: str = "BizDash") -> AppPaths:
    if sys.platform.startswith("win"):
        base = _windows_appdata() / app_name
    elif sys.platform == "darwin":
        base = _mac_app_support() / app_name
    else:
        base = Path.home() / f".{app_name.lower()}"

    logs = base / "logs"

    base.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)

    return AppPaths(base_dir=base, settings_path=base / "settings.json", logs_dir=logs)


def _parse_timeout(raw: object) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"request_timeout must be a number of seconds. Received: {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"request_timeout must be > 0. Received: {timeout}")
    return timeout


def load_settings(settings_path: Path | str | None, environ: dict | None = None) -> Settings:
    """
    settings.json keys: endpoint | currency_symbol | request_timeout
    Environment overrides: BIZDASH_ENDPOINT, BIZDASH_CURRENCY, BIZDASH_TIMEOUT
    """
    env = os.environ if environ is None else environ

    data: dict = {}
    if settings_path is not None:
        path = Path(settings_path)
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid settings file {path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Settings file {path} must contain a JSON object.")

    endpoint = str(env.get("BIZDASH_ENDPOINT") or data.get("endpoint") or "").strip()
    if not endpoint:
        raise ConfigError("Backend endpoint is not configured (settings.json 'endpoint' or BIZDASH_ENDPOINT).")
    if not endpoint.startswith(("http://", "https://")):
        raise ConfigError(f"Endpoint must be an http(s) URL. Received: {endpoint}")

    symbol = env.get("BIZDASH_CURRENCY") or data.get("currency_symbol") or "₹"
    timeout_raw = env.get("BIZDASH_TIMEOUT", data.get("request_timeout"))

    return Settings(
        endpoint=endpoint,
        currency_symbol=str(symbol),
        request_timeout=_parse_timeout(timeout_raw),
    )
