from __future__ import annotations

import json
import logging
from typing import MutableMapping, Optional

from ..core.constants import SESSION_KEY
from ..core.exceptions import AuthenticationError
from .model import SessionUser
from .service import AuthService

logger = logging.getLogger(__name__)


class SessionContext:
    """Current-user holder over a browser-scoped key/value store.

    The store is read once on construction; afterwards only ``login`` and
    ``logout`` change the user. In the web app the store is the Flask session,
    in tests any dict works.
    """

    def __init__(self, store: MutableMapping, auth: AuthService, *, key: str = SESSION_KEY):
        self._store = store
        self._auth = auth
        self._key = key
        self._user: Optional[SessionUser] = self._read()

    def _read(self) -> Optional[SessionUser]:
        raw = self._store.get(self._key)
        if raw is None:
            return None

        try:
            data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
            return SessionUser.from_dict(data)
        except (TypeError, ValueError, KeyError) as e:
            logger.warning("discarding unreadable session entry %r: %s", self._key, e)
            self._store.pop(self._key, None)
            return None

    def current_user(self) -> Optional[SessionUser]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def login(self, email: str, password: str) -> bool:
        try:
            user = self._auth.authenticate(email, password)
        except AuthenticationError:
            logger.info("failed login for %r", email)
            return False

        self._user = user
        self._store[self._key] = json.dumps(user.to_dict())
        logger.info("user %s logged in", user.email)
        return True

    def logout(self) -> None:
        if self._user is not None:
            logger.info("user %s logged out", self._user.email)
        self._user = None
        self._store.pop(self._key, None)
