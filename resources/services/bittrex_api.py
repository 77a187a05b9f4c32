from concurrent.futures import Future
from typing import Optional

from resources.services.api_client import APIClient
from resources.utils.bittrex_config import BittrexConfig
from resources.utils.signing_utils import QueryParams, auth_headers, build_uri, get_nonce

MAX_ORDER_BOOK_DEPTH = 50


class BittrexAPI(APIClient):
    """
    Bittrex REST API (v1.1 by default). Every endpoint method returns a Future that
    resolves to the parsed JSON body, or to the raw text when config.json_mode is off.
    """

    def __init__(self, config: BittrexConfig, **client_options):
        super().__init__(server=config.base_url, **client_options)
        self.config = config

    # ------------- request builders -------------

    def _public(self, path: str, params: Optional[QueryParams] = None) -> Future:
        uri = build_uri(self.config.base_url, path, params)
        return self._dispatch(uri)

    def _signed(self, path: str, params: Optional[QueryParams] = None) -> Future:
        query = [("nonce", get_nonce()), ("apiKey", self.config.api_key)]
        query.extend(params or [])
        uri = build_uri(self.config.base_url, path, query)
        return self._dispatch(uri, headers=auth_headers(uri, self.config.api_secret))

    def _dispatch(self, uri: str, headers: Optional[dict] = None) -> Future:
        return self.submit(
            "GET",
            uri,
            headers=headers,
            return_json=self.config.json_mode,
            return_text=not self.config.json_mode,
        )

    # ------------- Public API -------------

    def get_ticker(self, market: str) -> Future:
        return self._public("public/getticker", [("market", market)])

    def get_markets(self) -> Future:
        return self._public("public/getmarkets")

    def get_currencies(self) -> Future:
        return self._public("public/getcurrencies")

    def get_market_summaries(self) -> Future:
        return self._public("public/getmarketsummaries")

    def get_market_summary(self, market: str) -> Future:
        return self._public("public/getmarketsummary", [("market", market)])

    def get_order_book(self, market: str, type: str, depth: int = 20) -> Future:
        """type is buy, sell or both; depth (int or numeric string) above 50 is clamped to 50."""
        depth = min(int(depth), MAX_ORDER_BOOK_DEPTH)
        return self._public("public/getorderbook", [("market", market), ("type", type), ("depth", depth)])

    def get_market_history(self, market: str) -> Future:
        return self._public("public/getmarkethistory", [("market", market)])

    # ------------- Market API -------------

    def get_open_orders(self, market: Optional[str] = None) -> Future:
        # an empty filter is dropped like None
        return self._signed("market/getopenorders", [("market", market or None)])

    def cancel_open_order(self, uuid: str) -> Future:
        return self._signed("market/cancel", [("uuid", uuid)])

    def market_buy_limit(self, market: str, quantity, rate) -> Future:
        return self._signed("market/buylimit", [("market", market), ("quantity", quantity), ("rate", rate)])

    def market_sell_limit(self, market: str, quantity, rate) -> Future:
        return self._signed("market/selllimit", [("market", market), ("quantity", quantity), ("rate", rate)])

    # ------------- Account API -------------

    def get_balances(self) -> Future:
        return self._signed("account/getbalances")

    def get_balance(self, currency: str) -> Future:
        return self._signed("account/getbalance", [("currency", currency)])

    def get_deposit_address(self, currency: str) -> Future:
        return self._signed("account/getdepositaddress", [("currency", currency)])

    def withdraw(self, currency: str, quantity, address: str, paymentid: Optional[str] = None) -> Future:
        """paymentid is the memo/tag some currencies need; left out of the query when None."""
        return self._signed(
            "account/withdraw",
            [("currency", currency), ("quantity", quantity), ("address", address), ("paymentid", paymentid)],
        )

    def get_order(self, uuid: str) -> Future:
        return self._signed("account/getorder", [("uuid", uuid)])

    def get_order_history(self, market: Optional[str] = None, count: int = 100) -> Future:
        return self._signed("account/getorderhistory", [("count", count), ("market", market)])

    def get_withdrawal_history(self, currency: str) -> Future:
        return self._signed("account/getwithdrawalhistory", [("currency", currency)])

    def get_deposit_history(self, currency: str) -> Future:
        return self._signed("account/getdeposithistory", [("currency", currency)])
