from datetime import datetime, timezone
from typing import List, Optional, Union
from urllib.parse import urljoin

from sitemap_builder.exceptions import InvalidArgument
from sitemap_builder.logging.logger import setup_logger
from sitemap_builder.sitemap.core.entry import ChangeFrequency, Timestamp, UrlEntry, make_entry
from sitemap_builder.sitemap.core.serializer import serialize_sitemap_index
from sitemap_builder.sitemap.core.url_resolver import UrlLike, resolve_base_url, resolve_url
from sitemap_builder.sitemap.sitemap_document import SitemapDocument

MAX_ENTRIES_PER_DOCUMENT = 50000


class SitemapIndexDocument:
    def __init__(self, base_url: str, max_entries_per_document: int = MAX_ENTRIES_PER_DOCUMENT):
        self._base_url = resolve_base_url(base_url)
        self._max_entries = self._validate_max_entries(max_entries_per_document)
        self._documents: List[SitemapDocument] = []
        self._current: Optional[SitemapDocument] = None
        self._last_modified: Optional[datetime] = None
        self.logger = setup_logger(__name__)

    @staticmethod
    def _validate_max_entries(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= MAX_ENTRIES_PER_DOCUMENT:
            raise InvalidArgument(
                f"The max number of url entries per sitemap must be between 1 and {MAX_ENTRIES_PER_DOCUMENT}. "
                f"Received \"{value}\""
            )
        return value

    @property
    def max_entries_per_document(self) -> int:
        return self._max_entries

    @property
    def last_modified(self) -> Optional[datetime]:
        return self._last_modified

    def get_base_url(self) -> str:
        return self._base_url

    def get_documents(self) -> List[SitemapDocument]:
        return list(self._documents)

    def count(self) -> int:
        return sum(document.count() for document in self._documents)

    def _document_name(self, index: int) -> str:
        return f"sitemap-{index}.xml"

    def _current_document(self) -> SitemapDocument:
        if self._current is not None and self._current.count() >= self._max_entries:
            self._current = None

        if self._current is None:
            name = self._document_name(len(self._documents))
            self._current = SitemapDocument(name, self._base_url)
            self._documents.append(self._current)
            self.logger.info(f"Started sitemap document {name} (limit {self._max_entries} entries)")

        return self._current

    def _track_last_modified(self, last_modified: Optional[datetime]) -> None:
        if last_modified is None:
            return
        if self._last_modified is None or last_modified > self._last_modified:
            self._last_modified = last_modified

    def add_url(
            self,
            url: UrlLike,
            last_modified: Optional[Timestamp] = None,
            change_frequency: Optional[Union[str, ChangeFrequency]] = None,
            priority: Optional[float] = None,
    ) -> UrlEntry:
        # Everything is validated before a document can be created.
        location = resolve_url(self._base_url, url)
        checked = make_entry(location, last_modified, change_frequency, priority)

        document = self._current_document()
        entry = document.add_url(location, checked.last_modified, checked.change_frequency, checked.priority)
        self._track_last_modified(entry.last_modified)
        self.logger.debug(f"Added {location} to {document.name}")
        return entry

    def serialize(self) -> str:
        last_modified = self._last_modified or datetime.now(timezone.utc)
        lastmod = last_modified.strftime("%Y-%m-%d")
        return serialize_sitemap_index(
            (urljoin(self._base_url, document.name), lastmod) for document in self._documents
        )

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (f"SitemapIndexDocument(base_url={self._base_url!r}, "
                f"documents={len(self._documents)}, max_entries={self._max_entries})")
