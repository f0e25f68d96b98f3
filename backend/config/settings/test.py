from .base import *

SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PACKTAGS = {
    "MANIFEST_PATH": BASE_DIR / "packtags" / "tests" / "fixtures" / "manifest.json",
    "CACHE_MANIFEST": True,
    "USE_TOPOLOGICAL_ORDER": False,
}

LOGGING["root"]["level"] = "WARNING"  # type: ignore
LOGGING["loggers"]["packtags"]["level"] = "WARNING"  # type: ignore
