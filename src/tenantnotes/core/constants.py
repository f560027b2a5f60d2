"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_TENANT_ID_LENGTH = 63
MAX_TITLE_LENGTH = 255
MAX_ROLE_LENGTH = 16
MAX_PLAN_LENGTH = 16

# Largest id a signed 64-bit INTEGER column can hold
MAX_NOTE_ID = 2**63 - 1

# Password hashing
BCRYPT_ROUNDS = 12

# Token settings (24 hours)
ACCESS_TOKEN_EXPIRE_MINUTES = 24 * 60

# Plans
DEFAULT_FREE_PLAN_NOTE_LIMIT = 3

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
