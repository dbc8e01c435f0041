"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

OTP_LENGTH = 6
OTP_TTL_MINUTES = 5
OTP_SWEEP_SECONDS = 60
FIXED_OTP_CODE = "123456"

ACCESS_TOKEN_HOURS = 24
REFRESH_TOKEN_DAYS = 7
JWT_ALGORITHM = "HS256"

PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 15
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
LABOUR_PHONE_MAX_LENGTH = 20
NOTES_MAX_LENGTH = 500

DATE_FORMAT = "%Y-%m-%d"

# Money columns are DECIMAL(12, 2).
MONEY_SCALE = 2
MONEY_MAX_EXCLUSIVE = 10 ** 10
