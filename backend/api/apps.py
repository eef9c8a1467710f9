import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class ApiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "api"
    verbose_name = "PassForge"

    cipher = None

    def ready(self):
        from .cipher import Cipher

        # MissingKey (ImproperlyConfigured) stoppe le démarrage
        self.cipher = Cipher(getattr(settings, "PASSFORGE_ENCRYPTION_KEY", None))
        logger.info("Credential cipher initialised")
