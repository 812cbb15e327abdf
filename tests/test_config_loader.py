from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from sitemap_builder.config.loaders.env_loader import env_settings
from sitemap_builder.config.loaders.helpers.yaml_loading_helper import clear_yaml_cache, load_yaml
from sitemap_builder.config.loaders.sitemap_config_loader import (
    get_app_config,
    get_output_config,
    get_sitemap_config,
)

CONFIG = """
include:
  - urls.yaml
sitemap:
  base_url: https://example.com
  max_entries_per_document: 2
output:
  directory: public
"""

URLS = """
urls:
  - loc: /
    changefreq: daily
    priority: 1.0
  - loc: /about
    lastmod: 2018-01-01
  - loc: /post
    lastmod: 2018-01-02T12:00:00+00:00
"""


@pytest.fixture
def config_path(tmp_path):
    clear_yaml_cache()
    (tmp_path / "urls.yaml").write_text(URLS, encoding="utf-8")
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG, encoding="utf-8")
    yield path
    clear_yaml_cache()


def test_includes_are_merged(config_path):
    data = load_yaml(config_path)
    assert "include" not in data
    assert data["sitemap"]["base_url"] == "https://example.com"
    assert len(data["urls"]) == 3


def test_app_config_from_path(config_path):
    config = get_app_config(config_path)
    assert config.sitemap.max_entries_per_document == 2
    assert config.output.directory == "public"
    assert config.output.index_filename == "sitemap-index.xml"
    assert [u.loc for u in config.urls] == ["/", "/about", "/post"]
    assert config.urls[0].changefreq == "daily"
    assert config.urls[1].lastmod == date(2018, 1, 1)
    assert config.urls[2].lastmod == datetime(2018, 1, 2, 12, tzinfo=timezone.utc)


def test_config_path_from_environment(config_path, monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", str(config_path))
    assert env_settings.get_config_path() == config_path.resolve()
    assert get_sitemap_config().base_url == "https://example.com"
    assert get_output_config().directory == "public"


def test_missing_config_path_variable(monkeypatch):
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    with pytest.raises(EnvironmentError):
        env_settings.get_config_path()


def test_output_dir_override(monkeypatch, tmp_path):
    monkeypatch.delenv("SITEMAP_OUTPUT_DIR", raising=False)
    assert env_settings.get_output_dir_override() is None
    monkeypatch.setenv("SITEMAP_OUTPUT_DIR", str(tmp_path))
    assert env_settings.get_output_dir_override() == tmp_path


def test_missing_yaml_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("sitemap: [unclosed", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to parse YAML"):
        load_yaml(path)


def test_out_of_range_max_entries_fails_validation(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("sitemap:\n  base_url: https://example.com\n  max_entries_per_document: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        get_app_config(path)
