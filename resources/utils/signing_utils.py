import hashlib
import hmac
import time
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple
from urllib.parse import urlencode

# Header the exchange reads the request signature from
SIGNATURE_HEADER = "apisign"

QueryParams = Sequence[Tuple[str, Any]]


def get_nonce() -> int:
    """Whole seconds since the Unix epoch."""
    return int(time.time())


def sign_uri(uri: str, secret: str) -> str:
    """
    HMAC-SHA512 of the complete request URI keyed with the API secret, hex encoded.
    The URI must be exactly the string that goes on the wire: reordering or
    re-encoding the query after signing invalidates the signature.
    """
    h = hmac.new(key=secret.encode("utf-8"), digestmod=hashlib.sha512)
    h.update(uri.encode("utf-8"))
    return h.hexdigest()


def auth_headers(uri: str, secret: str) -> Dict[str, str]:
    return {SIGNATURE_HEADER: sign_uri(uri, secret)}


def encode_query(params: Optional[Iterable[Tuple[str, Any]]]) -> str:
    """Form-encode ordered (name, value) pairs, dropping pairs whose value is None."""
    if not params:
        return ""
    return urlencode([(name, value) for name, value in params if value is not None])


def build_uri(base_url: str, path: str, params: Optional[QueryParams] = None) -> str:
    """
    {base_url}/{path}?{query}
    The '?' is only added when at least one parameter survives encoding.
    """
    uri = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    query = encode_query(params)
    return f"{uri}?{query}" if query else uri
