"""Configuration management for Daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / "daybook"))
CONFIG_FILE = DAYBOOK_HOME / "config" / "daybook.conf"
JOURNALS_DIR = DAYBOOK_HOME / "journals"


@dataclass
class Config:
    """Daybook configuration."""

    journals_dir: str = ""
    default_journal: str = ""
    opener: str = ""
    page_size: int = 20
    extension: str = ".txt"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from daybook.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "journals_dir":
                config.journals_dir = value
            case "default_journal":
                config.default_journal = value
            case "opener":
                config.opener = value
            case "page_size":
                try:
                    page_size = int(value)
                    if page_size < 1:
                        raise ValueError("must be at least 1")
                    config.page_size = page_size
                except ValueError as e:
                    logger.warning(f"Ignoring invalid PAGE_SIZE '{value}': {e}")
            case "extension":
                config.extension = value if value.startswith(".") else f".{value}"
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config
