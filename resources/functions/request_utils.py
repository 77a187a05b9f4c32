from typing import List, Tuple
from urllib.parse import parse_qsl, urlsplit
from helpers.config_manager import JSON_DATA
from resources.utils.signing_utils import SIGNATURE_HEADER, sign_uri

TD = JSON_DATA["TEST_DATA_BITTREX"]
CREDENTIALS = TD.get("credentials", {})


def endpoint_path(url: str) -> str:
    """https://bittrex.com/api/v1.1/public/getticker?... -> public/getticker"""
    parts = urlsplit(url).path.rstrip("/").split("/")
    return "/".join(parts[-2:])


def query_pairs(url: str) -> List[Tuple[str, str]]:
    """Query parameters in the order they appear on the wire."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def query_names(url: str) -> List[str]:
    return [name for name, _ in query_pairs(url)]


def sent_request(session_request_mock) -> Tuple[str, dict]:
    """(url, headers) of the last call made through the patched Session.request."""
    kwargs = session_request_mock.call_args.kwargs
    return kwargs["url"], dict(kwargs.get("headers") or {})


def assert_signed(url: str, headers: dict, secret: str) -> None:
    names = query_names(url)
    assert names[:2] == ["nonce", "apiKey"], f"nonce/apiKey must lead the query: {names}"
    assert int(dict(query_pairs(url))["nonce"]) > 0
    assert headers.get(SIGNATURE_HEADER) == sign_uri(url, secret), f"signature does not cover {url}"


def assert_unsigned(url: str, headers: dict) -> None:
    assert SIGNATURE_HEADER not in {k.lower() for k in headers}, f"public request carries a signature: {headers}"
    assert "nonce" not in query_names(url)
    assert "apiKey" not in query_names(url)


# --- test data prepared as list[tuple] for parametrize ---
ORDER_BOOK_DEPTH_CASES = [tuple(x) for x in TD["order_book_depth_cases"]]
