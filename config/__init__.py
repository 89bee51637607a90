import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "ci": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for this process.

    APP_SETTINGS names a module directly (e.g. a deployment's own settings file);
    otherwise APP_ENV picks one of the bundled modules, development by default.
    """
    explicit = os.getenv("APP_SETTINGS", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
