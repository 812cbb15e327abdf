import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class EnvSettings:
    @staticmethod
    def get_config_path() -> Path:
        config_path = os.getenv("CONFIG_PATH")
        if not config_path:
            raise EnvironmentError("CONFIG_PATH not set in .env or environment")

        return Path(config_path).expanduser().resolve()  # relative to cwd

    @staticmethod
    def get_output_dir_override() -> Optional[Path]:
        output_dir = os.getenv("SITEMAP_OUTPUT_DIR")
        if not output_dir:
            return None
        return Path(output_dir).expanduser()


env_settings = EnvSettings()
