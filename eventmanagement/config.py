from __future__ import annotations
import yaml
from pathlib import Path
from typing import Optional

DEFAULT_DATABASE_URL = "sqlite:///data/events.db"
DEFAULT_LOGGING_DIR = "logs"
DEFAULT_NEWEST_LIMIT = 10


class Config:
    def __init__(self, path: Optional[str] = None):
        # Load config.yaml from project root by default
        if path is not None:
            config_path = Path(path)
        else:
            config_path = Path(__file__).parent.parent / "config.yaml"
        data = {}
        if config_path.exists():
            data = yaml.safe_load(config_path.read_text()) or {}

        database = data.get("database") or {}
        self.database_url: str = database.get("url", DEFAULT_DATABASE_URL)

        logging_section = data.get("logging") or {}
        self.logging_dir: str = logging_section.get("directory", DEFAULT_LOGGING_DIR)

        events = data.get("events") or {}
        self.newest_limit: int = int(events.get("newest_limit", DEFAULT_NEWEST_LIMIT))


def default_config(path: Optional[str] = None) -> Config:
    return Config(path)
