from django.core.checks import Error, Tags, Warning, register
from django.core.exceptions import ImproperlyConfigured

from packtags.conf import current_config
from packtags.errors import ManifestError
from packtags.manifest import Manifest


@register(Tags.templates)
def manifest_check(app_configs, **kwargs):
    try:
        config = current_config()
    except ImproperlyConfigured as exc:
        return [Error(str(exc), hint='Use PACKTAGS = {"MANIFEST_PATH": ...}.', id="packtags.E002")]

    if not config.manifest_path.exists():
        return [
            Warning(
                f"Pack manifest not found at {config.manifest_path}.",
                hint="Build the front-end bundles or point PACKTAGS['MANIFEST_PATH'] at the manifest.",
                id="packtags.W001",
            )
        ]
    try:
        Manifest(config.manifest_path, cache=False).load()
    except ManifestError as exc:
        return [
            Error(
                str(exc),
                hint="Rebuild the bundles; the manifest can't be read or parsed.",
                id="packtags.E001",
            )
        ]
    return []
