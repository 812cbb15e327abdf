from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class SitemapConfig(BaseModel):
    base_url: str
    max_entries_per_document: int = Field(default=50000, ge=1, le=50000)


class OutputConfig(BaseModel):
    directory: str = "."
    index_filename: str = "sitemap-index.xml"


class UrlEntryConfig(BaseModel):
    loc: str
    lastmod: Optional[Union[datetime, date]] = None
    changefreq: Optional[str] = None
    priority: Optional[float] = None


class AppConfig(BaseModel):
    sitemap: SitemapConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    urls: List[UrlEntryConfig] = Field(default_factory=list)
