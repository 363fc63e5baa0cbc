import os

SETTINGS_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for the current environment.

    PORTAL_ENV wins over the generic APP_ENV so the portal can run next to
    other apps sharing one environment; anything unrecognised is development.
    """
    env = (os.getenv("PORTAL_ENV") or os.getenv("APP_ENV") or "development").strip().lower()
    return SETTINGS_BY_ENV.get(env, "config.development")
