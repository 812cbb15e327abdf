from typing import Iterable, Tuple

from lxml import etree

from sitemap_builder.sitemap.core.entry import UrlEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

_URL_FIELDS = ("loc", "lastmod", "changefreq", "priority")


def _qualified(tag: str) -> str:
    return f"{{{SITEMAP_NAMESPACE}}}{tag}"


def _root(tag: str) -> etree._Element:
    return etree.Element(_qualified(tag), nsmap={None: SITEMAP_NAMESPACE})


def _add_text(parent: etree._Element, tag: str, text: str) -> None:
    child = etree.SubElement(parent, _qualified(tag))
    child.text = text


def _to_string(root: etree._Element) -> str:
    raw = etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)
    return raw.decode("utf-8")


def serialize_urlset(entries: Iterable[UrlEntry]) -> str:
    root = _root("urlset")
    for entry in entries:
        url = etree.SubElement(root, _qualified("url"))
        values = entry.to_dict()
        for tag in _URL_FIELDS:
            if tag in values:
                _add_text(url, tag, values[tag])
    return _to_string(root)


def serialize_sitemap_index(sitemaps: Iterable[Tuple[str, str]]) -> str:
    """Render ``(location, lastmod)`` pairs as a ``<sitemapindex>`` document."""
    root = _root("sitemapindex")
    for location, lastmod in sitemaps:
        sitemap = etree.SubElement(root, _qualified("sitemap"))
        _add_text(sitemap, "loc", location)
        _add_text(sitemap, "lastmod", lastmod)
    return _to_string(root)
