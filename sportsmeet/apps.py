from django.apps import AppConfig, apps
from django.conf import settings


class SportsMeetConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sportsmeet"
    verbose_name = "Sports Meet"

    def ready(self):
        from .storage import CacheKeyValueStore
        from .store import MeetStore

        alias = getattr(settings, "SPORTSMEET_CACHE_ALIAS", "default")
        self.store = MeetStore(CacheKeyValueStore(alias))


def get_store():
    """Return the meet store created when the app registry was populated."""

    return apps.get_app_config("sportsmeet").store
