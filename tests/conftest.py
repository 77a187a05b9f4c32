import json
import logging

import pytest

from resources.services.bittrex_api import BittrexAPI
from resources.utils.bittrex_config import BittrexConfig, get_client_options
from resources.functions.request_utils import CREDENTIALS, TD

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    parser.addoption("--api-key", action="store", default=None, help="Bittrex API key (live runs)")
    parser.addoption("--api-secret", action="store", default=None, help="Bittrex API secret (live runs)")
    parser.addoption("--base-url", action="store", default=None, help="Override base URL, e.g. https://bittrex.com/api/v1.1")
    parser.addoption("--live", action="store_true", help="Run tests marked 'live' against the real exchange")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="live exchange tests need --live")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def cli_overrides(pytestconfig) -> dict:
    """Command line values for BittrexConfig.from_ini; None means "keep the run.ini value"."""
    base_url = pytestconfig.getoption("--base-url")
    return {
        "api_key": pytestconfig.getoption("--api-key"),
        "api_secret": pytestconfig.getoption("--api-secret"),
        "base_url": base_url.strip() if base_url else None,
    }


@pytest.fixture(scope="session")
def live_config(cli_overrides) -> BittrexConfig:
    # run.ini first, then let the command line override
    config = BittrexConfig.from_ini(**cli_overrides)
    logger.info("[CFG] base_url=%s version=%s json=%s", config.base_url, config.version, config.json_mode)
    return config


# ---------- offline client: Session.request is patched, nothing leaves the process ----------

@pytest.fixture
def make_response(mocker):
    def _make(body=None, status_code=200, text=None):
        resp = mocker.MagicMock()
        resp.status_code = status_code
        resp.json.return_value = body
        resp.text = text if text is not None else json.dumps(body)
        return resp
    return _make


@pytest.fixture
def test_config():
    return BittrexConfig(
        api_key=CREDENTIALS["api_key"],
        api_secret=CREDENTIALS["api_secret"],
        base_url=TD["base_url"],
    )


@pytest.fixture
def bittrex_api(test_config):
    with BittrexAPI(test_config, max_workers=2) as api:
        yield api


@pytest.fixture
def session_request(mocker, bittrex_api, make_response):
    """Patched Session.request answering 200 with the sample ticker body by default."""
    return mocker.patch.object(
        bittrex_api.session,
        "request",
        return_value=make_response(TD["sample_responses"]["ticker"]),
    )


# ---------- live client ----------

@pytest.fixture(scope="session")
def live_api(live_config):
    api = BittrexAPI(live_config, **get_client_options())
    yield api
    api.close()


@pytest.fixture(scope="session")
def market() -> str:
    return TD.get("market") or "BTC-LTC"
