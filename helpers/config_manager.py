import json
import logging
from configparser import ConfigParser
from functools import lru_cache
from helpers.project_paths import (
    RUN_INI_PATH,
    TEST_DATA_BITTREX_PATH,
)
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


# ----- Lazy Loading Functions -----
@lru_cache()
def get_config(path: Union[str, Path], encoding="utf-8") -> Optional[ConfigParser]:
    """Loads an INI configuration file lazily; None when the file does not exist."""
    config = ConfigParser()
    read_ok = config.read(path, encoding=encoding)
    if not read_ok:
        logger.warning("Configuration file not found: %s", path)
        return None
    return config


@lru_cache()
def get_json(path: Union[str, Path], encoding: str = "utf-8") -> Union[dict, list]:
    """Lazily load a JSON file, return {} if not found or parse error."""
    try:
        with open(path, "r", encoding=encoding) as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        logger.warning("JSON file not found or invalid: %s", path)
        return {}


# ----- Centralized Configuration Management (Lazy Loading) -----
CONFIGS = {
    "RUN_INI": lambda: get_config(RUN_INI_PATH),
}

JSON_DATA = {
    "TEST_DATA_BITTREX": get_json(TEST_DATA_BITTREX_PATH),
}
