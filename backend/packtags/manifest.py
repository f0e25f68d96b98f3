"""
Lookups against the bundler's ``manifest.json``.

The manifest maps file names to public, content-hashed paths, and lists the
chunks of every entrypoint under ``entrypoints``::

    {
      "application.js": "/packs/js/application-k344a6d59eef8632c9d1.js",
      "entrypoints": {
        "application": {
          "assets": {"js": ["/packs/js/vendor-16838bab.chunk.js", "/packs/js/application-1016838b.chunk.js"]}
        }
      }
    }
"""

from __future__ import annotations

import json
import logging
import posixpath
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from django.core.signals import setting_changed
from django.dispatch import receiver

from packtags.conf import PacksConfig, current_config
from packtags.errors import ManifestError, UnknownPackError

logger = logging.getLogger(__name__)


class AssetType(str, Enum):
    JAVASCRIPT = "javascript"
    STYLESHEET = "stylesheet"
    IMAGE = "image"
    OTHER = "other"

    @property
    def extension(self) -> Optional[str]:
        return {"javascript": "js", "stylesheet": "css"}.get(self.value)


def _source(entry) -> Optional[str]:
    # Newer bundler plugins write {"src": ..., "integrity": ...} objects.
    if isinstance(entry, dict):
        entry = entry.get("src")
    return entry or None


class Manifest:
    def __init__(self, path, cache: bool = True):
        self.path = Path(path)
        self.cache = cache
        self._data: Optional[dict] = None

    def __repr__(self) -> str:
        return f"<Manifest {self.path} cache={self.cache}>"

    @property
    def data(self) -> dict:
        if not self.cache:
            return self.load()
        if self._data is None:
            self._data = self.load()
        return self._data

    def refresh(self) -> dict:
        self._data = self.load()
        return self._data

    def load(self) -> dict:
        if not self.path.exists():
            logger.warning("Pack manifest not found at %s; every lookup will miss.", self.path)
            return {}
        try:
            with self.path.open(encoding="utf-8") as manifest_file:
                data = json.load(manifest_file)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ManifestError(f"Invalid JSON in pack manifest {self.path}: {exc}") from exc
        except OSError as exc:
            raise ManifestError(f"Can't read pack manifest {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestError(f"Pack manifest {self.path} must contain a JSON object.")
        logger.debug("Loaded pack manifest %s (%d entries).", self.path, len(data))
        return data

    def lookup(self, name: str, asset_type: Optional[AssetType] = None) -> Optional[str]:
        """Return the public path for ``name``, or None when it is not in the manifest."""
        return _source(self.data.get(self.full_pack_name(name, asset_type)))

    def lookup_strict(self, name: str, asset_type: Optional[AssetType] = None) -> str:
        path = self.lookup(name, asset_type)
        if path is None:
            raise self._missing_entry(name, asset_type)
        return path

    def lookup_pack_with_chunks(self, name: str, asset_type: AssetType) -> Optional[List[str]]:
        """
        Return the ordered chunks of entrypoint ``name`` for ``asset_type``.
        Returns None when the entrypoint or its chunk list is unknown.
        """
        extension = AssetType(asset_type).extension
        entrypoints = self.data.get("entrypoints")
        if not extension or not isinstance(entrypoints, dict):
            return None
        entry = entrypoints.get(self.manifest_name(name, extension))
        if not isinstance(entry, dict):
            return None
        chunks = (entry.get("assets") or {}).get(extension)
        if chunks is None:
            return None
        return [_source(chunk) for chunk in chunks]

    def lookup_pack_with_chunks_strict(self, name: str, asset_type: AssetType) -> List[str]:
        chunks = self.lookup_pack_with_chunks(name, asset_type)
        if chunks is None:
            raise self._missing_entry(name, asset_type)
        return chunks

    @staticmethod
    def manifest_name(name: str, extension: str) -> str:
        suffix = f".{extension}"
        return name[: -len(suffix)] if name.endswith(suffix) else name

    @staticmethod
    def full_pack_name(name: str, asset_type: Optional[AssetType] = None) -> str:
        extension = AssetType(asset_type).extension if asset_type else None
        if posixpath.splitext(name)[1] or not extension:
            return name
        return f"{name}.{extension}"

    def _missing_entry(self, name: str, asset_type: Optional[AssetType]) -> UnknownPackError:
        key = self.full_pack_name(name, asset_type)
        return UnknownPackError(
            name,
            f"packtags can't find {key} in {self.path}. Possible causes:\n"
            "1. The bundles have not been built yet.\n"
            "2. The bundler is still compiling.\n"
            "3. The manifest was written by a different build than the one being served.\n"
            f"Your manifest contains:\n{json.dumps(self.data, indent=2)}",
        )


@lru_cache(maxsize=None)
def _manifest_for(path: Path, cache: bool) -> Manifest:
    return Manifest(path, cache=cache)


def get_manifest(config: Optional[PacksConfig] = None) -> Manifest:
    """Process-wide manifest for the configured path."""
    config = config or current_config()
    return _manifest_for(config.manifest_path, config.cache_manifest)


@receiver(setting_changed)
def _reset_manifest(*, setting, **kwargs):
    if setting in {"PACKTAGS", "DEBUG"}:
        _manifest_for.cache_clear()
