from typing import Dict, List, Optional, Union

from sitemap_builder.logging.logger import setup_logger
from sitemap_builder.sitemap.core.entry import ChangeFrequency, Timestamp, UrlEntry, make_entry
from sitemap_builder.sitemap.core.serializer import serialize_urlset
from sitemap_builder.sitemap.core.url_resolver import UrlLike, resolve_base_url, resolve_url


class SitemapDocument:
    def __init__(self, name: str, base_url: str):
        self._base_url = resolve_base_url(base_url)
        self._name = name
        self._entries: Dict[str, UrlEntry] = {}
        self._xml: Optional[str] = None
        self.logger = setup_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def base_url(self) -> str:
        return self._base_url

    def add_url(
            self,
            url: UrlLike,
            last_modified: Optional[Timestamp] = None,
            change_frequency: Optional[Union[str, ChangeFrequency]] = None,
            priority: Optional[float] = None,
    ) -> UrlEntry:
        location = resolve_url(self._base_url, url)
        entry = make_entry(location, last_modified, change_frequency, priority)

        if location in self._entries:
            self.logger.debug(f"{self._name}: replacing entry {location}")
        else:
            self.logger.debug(f"{self._name}: adding entry {location}")

        self._entries[location] = entry
        self._xml = None
        return entry

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, location: str) -> bool:
        return location in self._entries

    def to_list(self) -> List[UrlEntry]:
        return list(self._entries.values())

    def serialize(self) -> str:
        if self._xml is None:
            self._xml = serialize_urlset(self._entries.values())
        return self._xml

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"SitemapDocument(name={self._name!r}, base_url={self._base_url!r}, entries={len(self._entries)})"
