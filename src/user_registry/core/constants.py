"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PASSWORD_MIN_LENGTH = 8
PASSWORD_PLACEHOLDER = "***"

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 1000

HAL_JSON = "application/hal+json"

USER_COLLECTION = "users"
USER_RELATION = "user"
USER_SORTABLE_FIELDS = ("id", "firstname", "lastname", "email")
