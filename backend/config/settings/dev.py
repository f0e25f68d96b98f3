from .base import *

# Development defaults keep fast feedback loops and transparent errors.
DEBUG = True

SECRET_KEY = get_env("SECRET_KEY", "local-dev-secret-key")

INSTALLED_APPS += ["django_extensions"] if "django_extensions" not in INSTALLED_APPS else []  # type: ignore

# The bundler rewrites the manifest on every rebuild.
PACKTAGS["CACHE_MANIFEST"] = False  # type: ignore

LOGGING["loggers"]["packtags"]["level"] = "DEBUG"  # type: ignore
