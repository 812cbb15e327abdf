from pathlib import Path
from typing import Optional

from sitemap_builder.config.loaders.env_loader import env_settings
from sitemap_builder.config.loaders.helpers.yaml_loading_helper import load_yaml
from sitemap_builder.config.models.app_config_model import AppConfig, OutputConfig, SitemapConfig


def get_app_config(path: Optional[Path] = None) -> AppConfig:
    data = load_yaml(path or env_settings.get_config_path())
    return AppConfig(**data)


def get_sitemap_config(path: Optional[Path] = None) -> SitemapConfig:
    return get_app_config(path).sitemap


def get_output_config(path: Optional[Path] = None) -> OutputConfig:
    return get_app_config(path).output
