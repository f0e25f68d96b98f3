import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class PacktagsConfig(AppConfig):
    name = "packtags"
    verbose_name = "Bundler packs"

    def ready(self):
        # Registers the system checks and the settings reset hook.
        from packtags import checks, manifest  # noqa: F401

        logger.debug("packtags ready.")
