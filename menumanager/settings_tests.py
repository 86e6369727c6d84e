# Settings file for running the test suite
import faulthandler
import signal

from menumanager.settings import *  # NOQA
from menumanager.settings import LOGGING

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEBUG = False
DEBUG_PROPAGATE_EXCEPTIONS = True

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

ALLOWED_HOSTS = [
    "localhost",
]

# Log to the console only while testing
for _handler in ["file", "menus_file"]:
    LOGGING["handlers"].pop(_handler)
LOGGING["root"]["handlers"] = ["console"]
LOGGING["loggers"]["menumanager.menus"]["handlers"] = ["console"]


# Hack to disable migrations for tests, for speed
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

# If the process receives signal SIGUSR1, dump a traceback
faulthandler.enable()
faulthandler.register(signal.SIGUSR1)
