import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SESSION_DAYS = Config.SESSION_DAYS
RECENT_LEAVES = Config.RECENT_LEAVES
LOG_LEVEL = Config.LOG_LEVEL
