from django import template

from packtags.helper import PackHelper

register = template.Library()


@register.simple_tag(takes_context=True)
def javascript_pack_tag(context, *names, defer=True, **attrs):
    """
    Script tags for every chunk of the named packs, shared chunks included.
    Call once per page; queue extra packs with append_javascript_pack_tag.

        {% javascript_pack_tag "calendar" "map" data_turbo_track="reload" %}
    """
    return PackHelper.for_context(context).javascript_pack_tag(*names, defer=defer, **attrs)


@register.simple_tag(takes_context=True)
def stylesheet_pack_tag(context, *names, **attrs):
    """Stylesheet links for the named packs plus any appended ones. Call once per page."""
    return PackHelper.for_context(context).stylesheet_pack_tag(*names, **attrs)


@register.simple_tag(takes_context=True)
def append_javascript_pack_tag(context, *names, defer=True):
    return PackHelper.for_context(context).append_javascript_pack_tag(*names, defer=defer)


@register.simple_tag(takes_context=True)
def append_stylesheet_pack_tag(context, *names):
    return PackHelper.for_context(context).append_stylesheet_pack_tag(*names)


@register.simple_tag(takes_context=True)
def asset_pack_path(context, name):
    return PackHelper.for_context(context).asset_pack_path(name)


@register.simple_tag(takes_context=True)
def asset_pack_url(context, name):
    return PackHelper.for_context(context).asset_pack_url(name)


@register.simple_tag(takes_context=True)
def image_pack_path(context, name):
    return PackHelper.for_context(context).image_pack_path(name)


@register.simple_tag(takes_context=True)
def image_pack_url(context, name):
    return PackHelper.for_context(context).image_pack_url(name)


@register.simple_tag(takes_context=True)
def image_pack_tag(context, name, **attrs):
    """
    Image tag for a bundled image.
    ``srcset`` accepts a string or a dict of ``{image name: descriptor}``.
    """
    return PackHelper.for_context(context).image_pack_tag(name, **attrs)


@register.simple_tag(takes_context=True)
def favicon_pack_tag(context, name, **attrs):
    return PackHelper.for_context(context).favicon_pack_tag(name, **attrs)


@register.simple_tag(takes_context=True)
def preload_pack_asset(context, name, **attrs):
    """
    Preload link for a bundled asset, e.g. a font:

        {% preload_pack_asset "fonts/fa-regular-400.woff2" %}
    """
    return PackHelper.for_context(context).preload_pack_asset(name, **attrs)
