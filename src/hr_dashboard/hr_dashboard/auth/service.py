from __future__ import annotations

from typing import Sequence

from ..core.exceptions import AuthenticationError
from .credentials import MOCK_USERS
from .model import Credential, SessionUser


class AuthService:
    """Use case: authenticate user (login) against the fixed credential list."""

    def __init__(self, credentials: Sequence[Credential] = MOCK_USERS):
        self._credentials = tuple(credentials)

    def authenticate(self, email: str, password: str) -> SessionUser:
        for cred in self._credentials:
            if cred.email == email and cred.password == password:
                return SessionUser(email=cred.email, name=cred.name, role=cred.role)

        # Same message for unknown email and wrong password.
        raise AuthenticationError("Invalid email or password")
