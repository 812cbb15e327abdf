import os
from pathlib import Path
from typing import Optional, Union

from sitemap_builder.exceptions import InvalidArgument
from sitemap_builder.logging.logger import setup_logger
from sitemap_builder.sitemap.sitemap_document import SitemapDocument
from sitemap_builder.sitemap.sitemap_index import SitemapIndexDocument

DEFAULT_INDEX_FILENAME = "sitemap-index.xml"


class FileWriter:
    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.logger = setup_logger(__name__)
        self._assert_writable_directory(self.directory)

    @staticmethod
    def _assert_writable_directory(path: Path) -> None:
        if not path.is_dir() or not os.access(path, os.W_OK | os.X_OK):
            raise InvalidArgument(f"The given path `{path}` is not a writable directory")

    def _target(self, filename: str) -> Path:
        # Only the base name is kept so nothing escapes the output directory.
        name = os.path.basename(str(filename).replace("\\", "/"))
        if name in ("", ".", ".."):
            raise InvalidArgument(f"Invalid sitemap filename \"{filename}\"")
        return self.directory / name

    def _write(self, filename: str, xml: str) -> Path:
        path = self._target(filename)
        data = xml.encode("utf-8")
        path.write_bytes(data)
        self.logger.info(f"Wrote {len(data)} bytes to {path}")
        return path

    def write_index(self, index: SitemapIndexDocument, filename: str = DEFAULT_INDEX_FILENAME) -> Path:
        path = self._write(filename, index.serialize())
        for document in index.get_documents():
            self.write_sitemap(document)
        return path

    def write_sitemap(self, document: SitemapDocument, filename: Optional[str] = None) -> Path:
        return self._write(filename or document.name, document.serialize())
