from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import requests

from bizdash.api.client import ApiClient
from bizdash.config import Settings, load_settings
from bizdash.services.auth_service import AuthService, SessionStore


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    api: ApiClient
    sessions: SessionStore
    auth: AuthService


def build_container(settings_path: Path | str | None = None, settings: Settings | None = None,
                    http: requests.Session | None = None) -> AppContainer:
    settings = settings or load_settings(settings_path)

    api = ApiClient(settings.endpoint, session=http, timeout=settings.request_timeout)
    sessions = SessionStore()
    auth = AuthService(api, sessions)

    return AppContainer(
        settings=settings,
        api=api,
        sessions=sessions,
        auth=auth,
    )
