from pathlib import Path
from typing import Iterable, Optional, Union

from sitemap_builder.config.loaders.env_loader import env_settings
from sitemap_builder.config.models.app_config_model import AppConfig
from sitemap_builder.logging.logger import setup_logger
from sitemap_builder.sitemap.sitemap_index import SitemapIndexDocument
from sitemap_builder.sitemap.writer.file_writer import FileWriter


class SitemapBuildOrchestrator:
    def __init__(self, config: AppConfig):
        self.config = config
        self.logger = setup_logger(__name__)

    def build(self, extra_urls: Iterable[str] = ()) -> SitemapIndexDocument:
        cfg = self.config.sitemap
        index = SitemapIndexDocument(cfg.base_url, cfg.max_entries_per_document)
        self.logger.info(f"Building sitemap index for {index.get_base_url()} "
                         f"({cfg.max_entries_per_document} entries per document)")

        for item in self.config.urls:
            index.add_url(item.loc, item.lastmod, item.changefreq, item.priority)
        for url in extra_urls:
            index.add_url(url)

        self.logger.info(f"Index holds {index.count()} URLs across {len(index.get_documents())} documents")
        return index

    def _output_directory(self, directory: Optional[Union[str, Path]]) -> Path:
        if directory is not None:
            return Path(directory)
        override = env_settings.get_output_dir_override()
        if override is not None:
            return override
        return Path(self.config.output.directory)

    def write(self, index: SitemapIndexDocument, directory: Optional[Union[str, Path]] = None) -> Path:
        writer = FileWriter(self._output_directory(directory))
        path = writer.write_index(index, self.config.output.index_filename)
        self.logger.info(f"Sitemap index written to {path}")
        return path

    def run(self, extra_urls: Iterable[str] = (), directory: Optional[Union[str, Path]] = None) -> Path:
        index = self.build(extra_urls)
        return self.write(index, directory)
