"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_RECENT_LEAVES = 5

SESSION_KEY = "hrms_user"
CURRENCY_PREFIX = "R"

DEPARTMENTS = (
    "Development",
    "HR",
    "QA",
    "Sales",
    "Marketing",
    "Design",
    "IT",
    "Finance",
    "Support",
)
