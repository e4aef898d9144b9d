"""
Timeline - Django Settings (Infrastructure Only)
================================================
Django serves as the HTTP container for the timeline engine.
The engine is the authority - Django does not dictate structure.

The engine keeps events in memory; no database app is installed.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "TIMELINE_SECRET_KEY", "timeline-dev-key-replace-before-deployment"
)

DEBUG = os.environ.get("TIMELINE_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# Events live for the process lifetime only.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "timeline": {
            "handlers": ["console"],
            "level": os.environ.get("TIMELINE_LOG_LEVEL", "INFO"),
        },
    },
}

# ── Timeline ──────────────────────────────────────────────────
# Calendar switches, see timeline.config.settings.TimelineSettings.
TIMELINE = {
    "editable": True,
    "event_resource_editable": True,
    "selectable": True,
    "allow_overlap": True,
    "default_event_title": "A new event to be drawn",
}

# None -> dev resources/events from adapters.django_api.wiring.
TIMELINE_RESOURCES = None
TIMELINE_INITIAL_EVENTS = None
