import hashlib
import hmac

import pytest
import requests

from resources.utils import signing_utils
from resources.utils.signing_utils import SIGNATURE_HEADER, auth_headers, build_uri, encode_query, get_nonce, sign_uri

SECRET = "test-api-secret"
URI = "https://bittrex.com/api/v1.1/account/getbalances?nonce=1500000000&apiKey=test-api-key"


def test_sign_matches_expected_hmac():
    expected = hmac.new(SECRET.encode("utf-8"), URI.encode("utf-8"), hashlib.sha512).hexdigest()
    assert sign_uri(URI, SECRET) == expected
    assert len(sign_uri(URI, SECRET)) == 128


def test_sign_is_deterministic():
    assert sign_uri(URI, SECRET) == sign_uri(URI, SECRET)


@pytest.mark.parametrize(
    "changed",
    [
        URI.replace("1500000000", "1500000001"),
        URI.replace("test-api-key", "test-api-kez"),
        # same parameters, different order
        "https://bittrex.com/api/v1.1/account/getbalances?apiKey=test-api-key&nonce=1500000000",
        URI + "&",
    ],
)
def test_any_change_to_uri_changes_signature(changed):
    assert sign_uri(changed, SECRET) != sign_uri(URI, SECRET)


def test_secret_changes_signature():
    assert sign_uri(URI, SECRET + "x") != sign_uri(URI, SECRET)


def test_auth_headers_use_single_lowercase_name():
    headers = auth_headers(URI, SECRET)
    assert list(headers) == [SIGNATURE_HEADER] == ["apisign"]
    assert headers["apisign"] == sign_uri(URI, SECRET)


def test_nonce_is_whole_unix_seconds(monkeypatch):
    monkeypatch.setattr(signing_utils.time, "time", lambda: 1500000000.987)
    nonce = get_nonce()
    assert nonce == 1500000000
    assert isinstance(nonce, int)


def test_build_uri_keeps_parameter_order():
    uri = build_uri("https://bittrex.com/api/v1.1/", "/public/getorderbook", [("market", "BTC-LTC"), ("type", "both"), ("depth", 20)])
    assert uri == "https://bittrex.com/api/v1.1/public/getorderbook?market=BTC-LTC&type=both&depth=20"


def test_build_uri_without_params_has_no_question_mark():
    assert build_uri("https://bittrex.com/api/v1.1", "public/getmarkets") == "https://bittrex.com/api/v1.1/public/getmarkets"
    assert build_uri("https://bittrex.com/api/v1.1", "public/getmarkets", [("market", None)]) == (
        "https://bittrex.com/api/v1.1/public/getmarkets"
    )


def test_encode_query_drops_none_and_escapes_values():
    assert encode_query([("a", None), ("market", "BTC-LTC"), ("memo", "x y&z")]) == "market=BTC-LTC&memo=x+y%26z"
    assert encode_query(None) == ""


@pytest.mark.parametrize(
    "params",
    [
        [("nonce", 1500000000), ("apiKey", "test-api-key"), ("market", "BTC-LTC")],
        [("currency", "XRP"), ("address", "r Addr/with?odd&chars"), ("paymentid", "memo #42=%")],
        [("quantity", "1.5e-8"), ("rate", "0.0125"), ("note", "ünïcode ~*'()")],
    ],
)
def test_prepared_url_is_the_signed_string(params):
    uri = build_uri("https://bittrex.com/api/v1.1", "account/withdraw", params)
    prepared = requests.Request("GET", uri, headers=auth_headers(uri, SECRET)).prepare()
    assert prepared.url == uri
    assert prepared.headers[SIGNATURE_HEADER] == sign_uri(prepared.url, SECRET)
