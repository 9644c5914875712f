from .base import *  # noqa

DEBUG = True

# Use SQLite for testing to avoid needing a running PostgreSQL instance.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test_db.sqlite3",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

OPENPAY_MERCHANT_ID = "mtest0000000000000000"
OPENPAY_PRIVATE_KEY = "sk_test_0000000000000000"
OPENPAY_IS_PRODUCTION = False
OPENPAY_DEVICE_SESSION_ID = "test-device-session"
OPENPAY_REDIRECT_URL = "https://shop.example.com/payments/return"

CELERY_TASK_ALWAYS_EAGER = True

# Let pytest's caplog see application records.
LOGGING["loggers"]["apps"]["handlers"] = []
LOGGING["loggers"]["apps"]["propagate"] = True
