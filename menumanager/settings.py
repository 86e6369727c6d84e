# isort:skip_file
import json
import os
from pathlib import Path
import sys


# resolve is important for removing symlinks, which can affect behaviour
basepath = Path(os.path.abspath(__file__)).resolve().parent.parent
parentpath = basepath.parent

SECRETS_FILE = basepath / "config" / "secrets.json"
if SECRETS_FILE.exists():
    SECRETS = json.load(open(SECRETS_FILE))
else:
    SECRETS = {}

# We use `check --deploy` only from local development machine,
# to check deployment settings, so need to switch on that.
CHECK_DEPLOY = "manage.py check --deploy" in " ".join(sys.argv)
if CHECK_DEPLOY:
    LIVEBOX = True
    DEVBOX = False
else:
    LIVEBOX = os.environ.get("MENUMANAGER_LIVEBOX", "") == "TRUE"
    DEVBOX = not LIVEBOX


LOG_PATH = Path(os.environ.get("MENUMANAGER_LOG_PATH", basepath / "logs"))

if not LOG_PATH.exists():
    LOG_PATH.mkdir(parents=True)


if LIVEBOX:
    SECRET_KEY = SECRETS["PRODUCTION_SECRET_KEY"]
else:
    SECRET_KEY = SECRETS.get("DEV_SECRET_KEY", "development-only-secret-key-do-not-use-in-production")


# == MISC ==

DEBUG = DEVBOX

LANGUAGE_CODE = "en-gb"

ROOT_URLCONF = "menumanager.urls"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

TIME_ZONE = "Europe/London"

USE_I18N = False
USE_TZ = True

LOGIN_URL = "/admin/login/"

ALLOWED_HOSTS = SECRETS.get("ALLOWED_HOSTS", [])

if DEVBOX:
    ALLOWED_HOSTS.extend(["localhost", "127.0.0.1"])

FIRST_PARTY_APPS = [
    "menumanager.accounts",
    "menumanager.sitecontent",
    "menumanager.menus",
]

INSTALLED_APPS = (
    [
        # 3rd party
        "django.contrib.auth",
        "django.contrib.admin",
        "django.contrib.contenttypes",
        "django.contrib.sessions",
        "django.contrib.staticfiles",
        "django.forms",
        # Ours
    ]
    + FIRST_PARTY_APPS
    + [
        # 3rd party
        "django.contrib.messages",
    ]
)

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# == AUTH ==

AUTH_USER_MODEL = "accounts.User"

AUTHENTICATION_BACKENDS = [
    "menumanager.auth.RoleAuthBackend",
]

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {
            "min_length": 8,
        },
    },
]

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
]

if LIVEBOX:
    CSRF_COOKIE_SECURE = True
    SESSION_COOKIE_SECURE = True
    SECURE_SSL_REDIRECT = True
    SECURE_HSTS_SECONDS = 3600
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# == LOGGING ==

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "require_debug_false": {
            "()": "django.utils.log.RequireDebugFalse",
        },
        "require_debug_true": {
            "()": "django.utils.log.RequireDebugTrue",
        },
    },
    "formatters": {
        "django.server": {
            "()": "django.utils.log.ServerFormatter",
            "format": "[%(server_time)s] %(message)s",
        },
        "verbose": {"format": "%(levelname)s %(asctime)s %(name)s " "%(process)d %(thread)d %(message)s"},
    },
    "handlers": {
        "django.server": {
            "level": "INFO",
            "class": "logging.StreamHandler",
            "formatter": "django.server",
        },
        "console": {
            "level": "DEBUG",
            "formatter": "verbose",
            "class": "logging.StreamHandler",
        },
        "file": {
            "level": "INFO",
            "class": "concurrent_log_handler.ConcurrentRotatingFileHandler",
            "formatter": "verbose",
            "filename": LOG_PATH / "info_menumanager_django.log",
            "maxBytes": 1000000,
            "backupCount": 5,
        },
        "menus_file": {
            "level": "DEBUG",
            "class": "concurrent_log_handler.ConcurrentRotatingFileHandler",
            "formatter": "verbose",
            "filename": LOG_PATH / "menus_menumanager_django.log",
            "maxBytes": 1000000,
            "backupCount": 5,
        },
    },
    "loggers": {
        "django.db.backends": {
            "level": "ERROR",
            "handlers": ["console"],
            "propagate": False,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "django.server": {
            "handlers": ["django.server"],
            "level": "INFO",
            "propagate": False,
        },
        "menumanager.menus": {
            "level": "INFO",
            "handlers": ["menus_file"],
        },
    },
    "root": {
        "handlers": ["file"],
        "level": "INFO",
    },
}

if DEVBOX:
    LOGGING["loggers"]["menumanager"] = {
        "level": "INFO",
        "handlers": ["console"],
        "propagate": False,
    }
    LOGGING["root"]["handlers"] = ["console"]

# == DATABASE ==

if LIVEBOX and not CHECK_DEPLOY:
    DB_NAME = SECRETS["PRODUCTION_DB_NAME"]
    DB_USER = SECRETS["PRODUCTION_DB_USER"]
    DB_PASSWORD = SECRETS["PRODUCTION_DB_PASSWORD"]
    DB_PORT = SECRETS["PRODUCTION_DB_PORT"]
else:
    DB_NAME = "menumanager_dev"
    DB_USER = "menumanager_dev"
    DB_PASSWORD = "menumanager_dev"
    DB_PORT = "5432"


DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": DB_NAME,
        "USER": DB_USER,
        "PASSWORD": DB_PASSWORD,
        "PORT": DB_PORT,
        "HOST": "localhost",
        "CONN_MAX_AGE": 30,
    }
}

# == TEMPLATES ==

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.template.context_processors.static",
                "django.template.context_processors.tz",
                "django.contrib.messages.context_processors.messages",
            ]
            + ([] if not DEBUG else ["django.template.context_processors.debug"]),
            "debug": DEBUG,
        },
    },
]

# == MIDDLEWARE ==

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# == MESSAGES ==

MESSAGE_STORAGE = "django.contrib.messages.storage.fallback.FallbackStorage"

# == STATIC ==

STATIC_ROOT = parentpath / "static"
STATIC_URL = "/static/"

####################

# MENUMANAGER SPECIFIC SETTINGS AND CONSTANTS

ROLES_CONFIG_FILE = basepath / "config" / "static_roles.yaml"
