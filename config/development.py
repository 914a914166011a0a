import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

SESSION_DAYS = Config.SESSION_DAYS
RECENT_LEAVES = Config.RECENT_LEAVES
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
