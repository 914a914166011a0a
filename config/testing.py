SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SESSION_DAYS = 7
RECENT_LEAVES = 5
LOG_LEVEL = "WARNING"
