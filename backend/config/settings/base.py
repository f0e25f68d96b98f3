import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent.parent

_UNSET = object()


def get_env(name, default=_UNSET, cast=None, required=False):
    """
    Read a setting from the environment.
    Booleans accept 1/true/yes/on; `cast` converts any other type.
    """
    raw = os.environ.get(name)
    if raw is None or raw == "":
        if required:
            raise ImproperlyConfigured(f"Set the {name} environment variable.")
        return None if default is _UNSET else default
    if cast is bool:
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    if cast is not None:
        try:
            return cast(raw)
        except (TypeError, ValueError) as exc:
            raise ImproperlyConfigured(f"{name} has an invalid value: {raw!r}") from exc
    return raw


DEBUG = get_env("DEBUG", False, cast=bool)

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "packtags",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Bundler output. Every key is optional; see packtags.conf for defaults.
PACKTAGS = {
    "MANIFEST_PATH": get_env("PACKTAGS_MANIFEST_PATH", BASE_DIR / "public" / "packs" / "manifest.json"),
    "USE_TOPOLOGICAL_ORDER": get_env("PACKTAGS_USE_TOPOLOGICAL_ORDER", False, cast=bool),
    "INLINE_CSS": get_env("PACKTAGS_INLINE_CSS", False, cast=bool),
    "ASSET_HOST": get_env("PACKTAGS_ASSET_HOST", None),
}

LOG_LEVEL = get_env("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[{levelname}] {name}: {message}", "style": "{"},
        "verbose": {"format": "{asctime} [{levelname}] {name} {module}:{lineno} {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "django.request": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "packtags": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
