#!/usr/bin/env python
import os
import warnings

warnings.simplefilter("once", PendingDeprecationWarning)
warnings.simplefilter("once", DeprecationWarning)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "menumanager.settings")

from django.core import management  # noqa isort:skip

if __name__ == "__main__":
    management.execute_from_command_line()
