from .base import *  # noqa

DEBUG = True

# SQLite keeps local runs independent of a database server.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

OPENPAY_REDIRECT_URL = OPENPAY_REDIRECT_URL or "http://localhost:8000/payments/openpay/return/"

LOGGING["loggers"]["apps"]["level"] = "DEBUG"
