"""
Pack helper used by the template tags.

A ``PackHelper`` is built per page render from its collaborators: the manifest,
the configuration, a tag renderer and the page's ``PageAssets``. Nothing on it
is shared between requests except the read-only manifest.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from django.utils.safestring import SafeString, mark_safe

from packtags.conf import PacksConfig, current_config
from packtags.errors import UnknownPackError
from packtags.manifest import AssetType, Manifest, get_manifest
from packtags.queues import PageAssets
from packtags.renderers import TagRenderer
from packtags.sources import SourceListAssembler, first_seen_order

logger = logging.getLogger(__name__)

PAGE_ASSETS_ATTR = "_packtags_page_assets"


def page_assets_for(holder) -> PageAssets:
    """Return the PageAssets attached to ``holder``, creating them on first use."""
    assets = getattr(holder, PAGE_ASSETS_ATTR, None)
    if assets is None:
        assets = PageAssets()
        setattr(holder, PAGE_ASSETS_ATTR, assets)
    return assets


class PackHelper:
    def __init__(
        self,
        manifest: Manifest,
        config: PacksConfig,
        renderer: TagRenderer,
        assets: Optional[PageAssets] = None,
    ):
        self.manifest = manifest
        self.config = config
        self.renderer = renderer
        self.assets = assets or PageAssets()
        self.assembler = SourceListAssembler.from_config(manifest, config)

    @classmethod
    def for_request(cls, request=None, config: Optional[PacksConfig] = None) -> "PackHelper":
        config = config or current_config()
        assets = page_assets_for(request) if request is not None else None
        return cls(get_manifest(config), config, TagRenderer(config, request), assets)

    @classmethod
    def for_context(cls, context) -> "PackHelper":
        """
        Helper bound to the page being rendered.
        Queues live on the request when there is one, otherwise on the template
        context, which is shared by ``{% include %}`` and ``{% extends %}``.
        """
        request = getattr(context, "request", None) or context.get("request")
        config = current_config()
        assets = page_assets_for(request if request is not None else context)
        return cls(get_manifest(config), config, TagRenderer(config, request), assets)

    # Single assets

    def asset_pack_path(self, name: str) -> str:
        return self.renderer.asset_path(self.manifest.lookup_strict(name))

    def asset_pack_url(self, name: str) -> str:
        return self.renderer.asset_url(self.manifest.lookup_strict(name))

    def image_pack_path(self, name: str) -> str:
        return self.renderer.asset_path(self.resolve_image(name))

    def image_pack_url(self, name: str) -> str:
        return self.renderer.asset_url(self.resolve_image(name))

    def image_pack_tag(self, name: str, srcset: Union[str, Mapping[str, str], None] = None, **options) -> SafeString:
        if srcset and not isinstance(srcset, str):
            srcset = ", ".join(f"{self.image_pack_path(src)} {size}" for src, size in srcset.items())
        return self.renderer.image_tag(self.image_pack_path(name), srcset=srcset or None, **options)

    def favicon_pack_tag(self, name: str, **options) -> SafeString:
        return self.renderer.favicon_link_tag(self.image_pack_path(name), **options)

    def preload_pack_asset(self, name: str, **options) -> SafeString:
        return self.renderer.preload_link_tag(self.asset_pack_path(name), **options)

    def resolve_image(self, name: str) -> str:
        """Look up ``static/<name>`` first, then ``name`` as given."""
        prefix = self.config.image_prefix
        candidates = [name] if not prefix or name.startswith(prefix) else [f"{prefix}{name}", name]
        for candidate in candidates:
            path = self.manifest.lookup(candidate)
            if path is not None:
                return path
        raise UnknownPackError(
            name,
            f"packtags can't find image {name} in {self.manifest.path} (tried {', '.join(candidates)}).",
        )

    # Entrypoints

    def append_javascript_pack_tag(self, *names: str, defer: bool = True) -> str:
        self.assets.javascript.append(*names, defer=defer)
        return ""

    def append_stylesheet_pack_tag(self, *names: str) -> str:
        self.assets.stylesheet.append(*names)
        return ""

    def javascript_pack_tag(self, *names: str, defer: bool = True, **options) -> SafeString:
        """
        Script tags for ``names`` plus every pack appended earlier on the page.
        Sources needed by a non-deferred pack are only emitted without ``defer``.
        """
        queue = self.assets.javascript
        non_deferred_requests, deferred_requests = queue.requests(names, defer=defer)
        non_deferred = self.assembler.resolve(non_deferred_requests, AssetType.JAVASCRIPT)
        emitted = set(non_deferred)
        deferred = [
            source
            for source in self.assembler.resolve(deferred_requests, AssetType.JAVASCRIPT)
            if source not in emitted
        ]
        queue.mark_rendered()
        logger.debug("Rendering %d deferred and %d non-deferred scripts.", len(deferred), len(non_deferred))

        parts = []
        if deferred:
            parts.append(self.renderer.javascript_include_tag(deferred, **{**options, "defer": True}))
        if non_deferred:
            parts.append(self.renderer.javascript_include_tag(non_deferred, **{**options, "defer": False}))
        return mark_safe("\n".join(parts))

    def stylesheet_pack_tag(self, *names: str, **options) -> SafeString:
        if self.config.inline_css:
            return mark_safe("")
        queue = self.assets.stylesheet
        requests = queue.requests(names)
        # Requested sources precede appended ones in either ordering mode.
        requested = self.assembler.resolve([r for r in requests if r.strict], AssetType.STYLESHEET)
        appended = self.assembler.resolve([r for r in requests if not r.strict], AssetType.STYLESHEET)
        sources = first_seen_order([requested, appended])
        queue.mark_rendered()
        return self.renderer.stylesheet_link_tag(sources, **options)
