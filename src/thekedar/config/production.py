import os

from .base import *  # noqa: F401,F403
from .base import db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")

DB_CONFIG = db_config_from_env()

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

OTP_FIXED_CODE = bool(int(os.getenv("OTP_FIXED_CODE", "0")))
