import logging
from concurrent.futures import Future, ThreadPoolExecutor
from time import perf_counter
from typing import Any, Mapping, MutableMapping, Optional, Tuple, Union

import requests
from urllib.parse import urljoin, urlsplit
from urllib3.exceptions import InsecureRequestWarning
import urllib3
import certifi  # ← default CA bundle

logger = logging.getLogger(__name__)


class APIError(requests.HTTPError):
    """Raised for unexpected HTTP responses from the API."""
    pass


class APIClient:
    def __init__(
        self,
        server: str,
        *,
        default_status: int = 200,
        timeout: Union[float, Tuple[float, float]] = (5, 30),  # (connect, read)
        max_workers: int = 4,
        # --- TLS options ---
        insecure: bool = False,              # if True -> do not verify TLS (debug only)
        cafile: Optional[str] = None,        # custom CA bundle path (PEM)
        # -------------------
        default_headers: Optional[Mapping[str, str]] = None,
        user_agent: str = "BittrexClient/1.0 (+requests)",
        proxies: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.server = server if server.endswith("/") else server + "/"
        self.default_status = default_status
        self.timeout = timeout

        # Resolve verification behaviour for requests: bool | str (path)
        if insecure:
            self._verify: Union[bool, str] = False
        elif cafile:
            self._verify = cafile
        else:
            # use certifi bundle by default to avoid system CA inconsistencies
            self._verify = certifi.where()

        # requests does not promise Session thread safety; workers share it only for GETs with per-call headers
        self.session = requests.Session()
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=self.__class__.__name__)

        # Base headers
        self.session.headers.update({"User-Agent": user_agent})
        if default_headers:
            self.session.headers.update(default_headers)
        else:
            self.session.headers.update({"Accept": "application/json"})

        if proxies:
            self.session.proxies.update(proxies)

    # ------------- Non-blocking dispatch -------------

    def submit(self, method: str, path: str = "/", **kwargs) -> Future:
        """Run request() on the worker pool; failures are raised from Future.result()."""
        return self.executor.submit(self.request, method, path, **kwargs)

    # ------------- Core request ------------------

    def request(
        self,
        method: str,
        path: str = "/",
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        cookies: Optional[MutableMapping[str, str]] = None,
        check_status: bool = True,
        expected_status: Optional[int] = None,
        return_json: bool = False,
        return_text: bool = False,
        timeout: Optional[Union[float, Tuple[float, float]]] = None,
    ):
        # absolute URLs pass through urljoin untouched
        url = urljoin(self.server, path.lstrip("/"))
        expected = expected_status if expected_status is not None else self.default_status
        timeout = timeout if timeout is not None else self.timeout
        # the query string may carry credentials; log the path only
        log_path = urlsplit(url).path

        # Silence only when verification is explicitly disabled
        if self._verify is False:
            urllib3.disable_warnings(InsecureRequestWarning)

        start = perf_counter()
        try:
            resp = self.session.request(
                method=method.upper(),
                url=url,
                params=params,
                headers=headers,
                cookies=cookies,
                timeout=timeout,
                verify=self._verify,  # bool or path string
            )
        except requests.RequestException as e:
            elapsed_ms = int((perf_counter() - start) * 1000)
            logger.error("HTTP %s %s failed in %dms: %s", method.upper(), log_path, elapsed_ms, e)
            raise

        elapsed_ms = int((perf_counter() - start) * 1000)
        logger.debug(
            "HTTP %s %s -> %s in %dms",
            method.upper(),
            log_path,
            resp.status_code,
            elapsed_ms,
        )

        if check_status and resp.status_code != expected:
            # Attach response text for easier debugging
            msg = (
                f"Unexpected status {resp.status_code} (expected {expected}) "
                f"for {method.upper()} {log_path}: {resp.text[:1000]}"
            )
            err = APIError(msg, response=resp)
            logger.warning(msg)
            raise err

        if return_json:
            return resp.json()  # may raise ValueError if not JSON
        if return_text:
            return resp.text
        return resp

    # ------------- Context mgmt ------------------

    def close(self) -> None:
        self.executor.shutdown(wait=True)
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
