"""WSGI entry point for the product catalog API.

The datastore is probed once at import time; the process exits when it is
unreachable (disable with ``DB_STARTUP_CHECK=False``).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from django.conf import settings  # noqa: E402

from modules.core.database import ensure_database_or_exit  # noqa: E402

if settings.DB_STARTUP_CHECK:
    ensure_database_or_exit()
