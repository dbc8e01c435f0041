import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "thekedar.config.production"

    if env in {"test", "testing"}:
        return "thekedar.config.testing"

    return "thekedar.config.development"
