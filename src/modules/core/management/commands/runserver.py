"""``runserver`` that behaves like the production entry point.

- Listens on ``settings.PORT`` unless an address is given.
- Probes the datastore before serving and exits if it is unreachable.
"""

from __future__ import annotations

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

from modules.core.database import ensure_database_or_exit


class Command(RunserverCommand):
    default_port = str(settings.PORT)

    def inner_run(self, *args, **options):
        if settings.DB_STARTUP_CHECK:
            ensure_database_or_exit()
        base = f"http://{self.addr}:{self.port}"
        self.stdout.write(
            "Try the API endpoints:\n"
            f"- GET {base}/products\n"
            f"- GET {base}/products/1\n"
            f"- GET {base}/products/search/shirt\n"
        )
        super().inner_run(*args, **options)
