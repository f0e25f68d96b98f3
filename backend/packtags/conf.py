"""Runtime configuration read from ``settings.PACKTAGS``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_IMAGE_PREFIX = "static/"


def _default_manifest_path() -> Path:
    return Path(settings.BASE_DIR) / "public" / "packs" / "manifest.json"


def raw_settings() -> dict:
    raw = getattr(settings, "PACKTAGS", None) or {}
    if not isinstance(raw, dict):
        raise ImproperlyConfigured("PACKTAGS must be a dict.")
    return raw


@dataclass(frozen=True)
class PacksConfig:
    manifest_path: Path
    cache_manifest: bool
    use_topological_order: bool
    inline_css: bool
    asset_host: Optional[str]
    image_prefix: str

    @classmethod
    def from_settings(cls) -> "PacksConfig":
        raw = raw_settings()
        asset_host = raw.get("ASSET_HOST") or None
        return cls(
            manifest_path=Path(raw.get("MANIFEST_PATH") or _default_manifest_path()),
            cache_manifest=bool(raw.get("CACHE_MANIFEST", not settings.DEBUG)),
            use_topological_order=bool(raw.get("USE_TOPOLOGICAL_ORDER", False)),
            inline_css=bool(raw.get("INLINE_CSS", False)),
            asset_host=asset_host.rstrip("/") if asset_host else None,
            image_prefix=raw.get("IMAGE_PREFIX", DEFAULT_IMAGE_PREFIX),
        )


def current_config() -> PacksConfig:
    return PacksConfig.from_settings()
