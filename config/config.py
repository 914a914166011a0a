import os


class Config:
    """Shared defaults; the per-environment modules override what they need."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "moderntech-dev-secret"

    # "Remember me" keeps the session cookie for this many days
    SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "7"))

    # How many leave requests the dashboard lists as "recent"
    RECENT_LEAVES = int(os.environ.get("RECENT_LEAVES", "5"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
