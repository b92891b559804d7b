from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Optional

from bizdash.domain.errors import AuthenticationError
from bizdash.domain.models import Session

log = logging.getLogger(__name__)


class SessionStore:
    """Holds the authenticated session for this process. Never persisted to disk."""

    def __init__(self):
        self._lock = threading.Lock()
        self._session: Optional[Session] = None

    @property
    def current(self) -> Optional[Session]:
        with self._lock:
            return self._session

    def start(self, session: Session) -> None:
        with self._lock:
            self._session = session

    def clear(self) -> None:
        with self._lock:
            self._session = None


class AuthService:
    def __init__(self, api, store: SessionStore | None = None):
        self.api = api
        self.store = store or SessionStore()

    def login(self, username: str, password: str) -> Session:
        username_clean = username.strip()
        result = self.api.login(username_clean, password)
        if not result.ok:
            log.info("login_rejected user=%s", username_clean)
            raise AuthenticationError(result.message or "Invalid username or password.")

        session = Session(username=username_clean, started_at=datetime.now().replace(microsecond=0))
        self.store.start(session)
        log.info("login_ok user=%s", username_clean)
        return session

    def logout(self) -> None:
        current = self.store.current
        self.store.clear()
        if current is not None:
            log.info("logout user=%s", current.username)

    @property
    def session(self) -> Optional[Session]:
        return self.store.current
