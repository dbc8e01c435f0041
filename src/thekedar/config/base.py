"""Settings shared by every environment, read from the process environment."""

import os


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "labour_thekedar"),
        "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
    }


OTP_PROVIDER = os.getenv("OTP_PROVIDER", "mock").lower()
OTP_SWEEP_SECONDS = int(os.getenv("OTP_SWEEP_SECONDS", "60"))

SMS_GATEWAY_URL = os.getenv("SMS_GATEWAY_URL", "")
SMS_GATEWAY_TOKEN = os.getenv("SMS_GATEWAY_TOKEN", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
