from .base import *  # noqa: F401,F403
from .base import db_config_from_env

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret"

DB_CONFIG = db_config_from_env(default_password="12345")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

OTP_PROVIDER = "mock"
OTP_FIXED_CODE = True
