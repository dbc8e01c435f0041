import os

from .base import *  # noqa: F401,F403
from .base import db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
JWT_SECRET = os.getenv("JWT_SECRET", "your-super-secret-key-change-in-production")

DB_CONFIG = db_config_from_env(default_password="postgres")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Every passcode is 123456 so the mobile client can log in without SMS.
OTP_FIXED_CODE = bool(int(os.getenv("OTP_FIXED_CODE", "1")))
