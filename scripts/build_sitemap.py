import argparse
from pathlib import Path

from sitemap_builder.config.loaders.sitemap_config_loader import get_app_config
from sitemap_builder.logging.logger import setup_logger
from sitemap_builder.sitemap.orchestrator import SitemapBuildOrchestrator


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build XML sitemaps and a sitemap index")
    parser.add_argument(
        "urls",
        nargs="*",
        help="Extra URLs (absolute or relative to the base URL) added after the configured ones",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config file (defaults to CONFIG_PATH from the environment)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory to write the sitemap files to (overrides config)",
    )
    parser.add_argument(
        "--index-filename",
        help="Filename of the sitemap index (overrides config)",
    )
    parser.add_argument(
        "--max-entries",
        type=int,
        help="Maximum URLs per sitemap document (overrides config)",
    )
    args = parser.parse_args(argv)

    logger = setup_logger(__name__)

    config = get_app_config(args.config)
    logger.info(f"Using base_url from config: {config.sitemap.base_url}")
    if args.index_filename:
        config.output.index_filename = args.index_filename
    if args.max_entries is not None:
        config.sitemap.max_entries_per_document = args.max_entries

    orchestrator = SitemapBuildOrchestrator(config)
    try:
        path = orchestrator.run(args.urls, args.output_dir)
    except ValueError as e:
        logger.error(f"Sitemap build failed: {e}")
        raise

    logger.info(f"DONE index={path}")
    return path


if __name__ == "__main__":
    main()
