from __future__ import annotations

from .model import Credential

MOCK_USERS = (
    Credential(email="admin@moderntech.com", password="admin123", name="Admin User", role="Administrator"),
    Credential(email="hr@moderntech.com", password="hr123", name="HR Manager", role="HR Staff"),
)
