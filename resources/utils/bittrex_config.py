import logging
from configparser import ConfigParser
from dataclasses import dataclass, field
from typing import Optional
from helpers.config_manager import CONFIGS
from helpers.project_paths import RUN_INI_PATH

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "v1.1"
BASE_URL_TEMPLATE = "https://bittrex.com/api/{version}"


@dataclass(frozen=True)
class BittrexConfig:
    """
    Credentials and endpoint settings for one Bittrex client.
    base_url is derived from version when not given; the secret never shows up in repr().
    """

    api_key: str
    api_secret: str = field(repr=False)
    base_url: Optional[str] = None
    version: str = DEFAULT_VERSION
    json_mode: bool = True

    def __post_init__(self):
        base = self.base_url or BASE_URL_TEMPLATE.format(version=self.version)
        # frozen dataclass: bypass __setattr__ to normalise the derived field
        object.__setattr__(self, "base_url", base.rstrip("/"))

    @classmethod
    def from_ini(cls, section: str = "BITTREX", run_ini_path: str = RUN_INI_PATH, **overrides) -> "BittrexConfig":
        """
        Read [BITTREX] from run.ini. Keyword overrides that are not None win over the file,
        e.g. credentials passed on the pytest command line.
        """
        cfg: Optional[ConfigParser] = CONFIGS["RUN_INI"]()
        if cfg is None or not cfg.has_section(section):
            raise RuntimeError(f"[{section}] section not found in {run_ini_path}")

        values = {
            "api_key": cfg.get(section, "api_key", fallback="").strip(),
            "api_secret": cfg.get(section, "api_secret", fallback="").strip(),
            "base_url": cfg.get(section, "base_url", fallback="").strip() or None,
            "version": cfg.get(section, "version", fallback=DEFAULT_VERSION).strip() or DEFAULT_VERSION,
            "json_mode": cfg.getboolean(section, "json", fallback=True),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values["api_key"]:
            logger.warning("[%s] api_key is empty; authenticated endpoints will be rejected", section)
        return cls(**values)


def get_client_options(section: str = "BITTREX") -> dict:
    """Transport options (max_workers, timeout) from run.ini, with defaults when absent."""
    cfg: Optional[ConfigParser] = CONFIGS["RUN_INI"]()
    if cfg is None or not cfg.has_section(section):
        return {"max_workers": 4, "timeout": 30.0}
    return {
        "max_workers": cfg.getint(section, "max_workers", fallback=4),
        "timeout": cfg.getfloat(section, "timeout", fallback=30.0),
    }
