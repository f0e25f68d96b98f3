"""HTML tags for resolved chunk paths."""

from __future__ import annotations

import mimetypes
import posixpath
from typing import Iterable, Optional
from urllib.parse import urlsplit

from django.forms.utils import flatatt
from django.templatetags.static import static
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

from packtags.conf import PacksConfig

FONT_TYPES = {
    ".woff2": "font/woff2",
    ".woff": "font/woff",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
}

PRELOAD_AS = {".js": "script", ".mjs": "script", ".css": "style", ".vtt": "track"}


def html_attrs(options: dict) -> dict:
    """``data_turbo_track`` becomes ``data-turbo-track``; None values are dropped."""
    return {key.replace("_", "-"): value for key, value in options.items() if value is not None}


def _extension(path: str) -> str:
    return posixpath.splitext(urlsplit(path).path)[1].lower()


def mime_type(path: str) -> Optional[str]:
    extension = _extension(path)
    if extension in FONT_TYPES:
        return FONT_TYPES[extension]
    guessed, _ = mimetypes.guess_type(urlsplit(path).path)
    return guessed


def preload_as(path: str, content_type: Optional[str]) -> Optional[str]:
    extension = _extension(path)
    if extension in PRELOAD_AS:
        return PRELOAD_AS[extension]
    kind = (content_type or "").split("/")[0]
    return kind if kind in {"audio", "video", "font", "image"} else None


class TagRenderer:
    def __init__(self, config: PacksConfig, request=None):
        self.config = config
        self.request = request

    def asset_path(self, source: str) -> str:
        parts = urlsplit(source)
        if parts.scheme or parts.netloc:
            return source
        if source.startswith("/"):
            return f"{self.config.asset_host or ''}{source}"
        return static(source)

    def asset_url(self, source: str) -> str:
        path = self.asset_path(source)
        if urlsplit(path).netloc or self.request is None:
            return path
        return self.request.build_absolute_uri(path)

    def javascript_include_tag(self, sources: Iterable[str], **options) -> SafeString:
        attrs = flatatt(html_attrs(options))
        return format_html_join(
            "\n",
            '<script src="{}"{}></script>',
            ((self.asset_path(source), attrs) for source in sources),
        )

    def stylesheet_link_tag(self, sources: Iterable[str], **options) -> SafeString:
        options.setdefault("media", "screen")
        attrs = flatatt(html_attrs(options))
        return format_html_join(
            "\n",
            '<link rel="stylesheet" href="{}"{}>',
            ((self.asset_path(source), attrs) for source in sources),
        )

    def image_tag(self, path: str, **options) -> SafeString:
        size = options.pop("size", None)
        if size:
            width, _, height = str(size).partition("x")
            options.setdefault("width", width)
            options.setdefault("height", height or width)
        return format_html('<img src="{}"{}>', path, flatatt(html_attrs(options)))

    def favicon_link_tag(self, path: str, **options) -> SafeString:
        options.setdefault("rel", "icon")
        options.setdefault("type", "image/x-icon")
        return format_html('<link href="{}"{}>', path, flatatt(html_attrs(options)))

    def preload_link_tag(self, path: str, **options) -> SafeString:
        content_type = options.pop("type", None) or mime_type(path)
        as_type = options.pop("as_", None) or options.pop("as", None) or preload_as(path, content_type)
        crossorigin = options.pop("crossorigin", None)
        if crossorigin is True or (crossorigin is None and as_type == "font"):
            crossorigin = "anonymous"
        attrs = {"as": as_type, "type": content_type, "crossorigin": crossorigin}
        attrs.update(options)
        return format_html('<link rel="preload" href="{}"{}>', path, flatatt(html_attrs(attrs)))
