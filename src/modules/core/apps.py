from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        # Registers the ``like`` lookup on text fields
        from modules.core import lookups  # noqa: F401
