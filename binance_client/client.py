"""
Binance.US REST client

One BinanceClient is one client context: settings, credentials, cached
per-tier connections and the executor. Pass it around explicitly; nothing in
this package keeps global or thread-local state.

Usage:
    with BinanceClient(api_key="...", secret_key="...") as client:
        client.price_for("BTCUSD")
        result = client.spot_account.create_order(symbol="BTCUSD", side="BUY", type="MARKET", quantity=0.01)
        if not result.ok:
            ...
"""

import logging
from datetime import datetime, timezone
from functools import partial
from typing import Any, Dict, List, Mapping, Optional

import httpx

from binance_client.api import market_data_api, spot_account_api, wallet_api
from binance_client.config import Settings
from binance_client.connection import ConnectionProvider
from binance_client.constants import DEFAULT_QUOTE
from binance_client.credentials import Credentials
from binance_client.executor import RequestExecutor
from binance_client.market_data import CoinMarket
from binance_client import market_data, wallet
from binance_client.request import TrustTier
from binance_client.response import Result
from binance_client.wallet import Coin

logger = logging.getLogger(__name__)


class EndpointGroup:
    """The endpoint functions listed in an API module's __all__, bound to one request function."""

    def __init__(self, module, request_func):
        self.name = module.__name__.rsplit(".", 1)[-1]
        for endpoint in module.__all__:
            setattr(self, endpoint, partial(getattr(module, endpoint), request_func))

    def __repr__(self) -> str:
        return f"<EndpointGroup {self.name}>"


class BinanceClient:
    """
    Binance.US REST API client

    Endpoint groups return Result objects (payload or typed error). The
    convenience accessors (price_for, wallet_coins, server_time, ...) unwrap
    them and raise the typed error instead.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        log_level: Optional[str] = None,
        http_logger: Optional[logging.Logger] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Explicit arguments win over `settings`; with neither, defaults apply
        (no credentials, random known host, 5s timeout, info-level logging).

        Args:
            api_key: API key sent in the X-MBX-APIKEY header
            secret_key: HMAC secret for signed endpoints
            base_url: Fixed API host
            timeout: Connect/read timeout in seconds
            log_level: Level HTTP traffic is logged at ("debug" adds headers/bodies)
            http_logger: Sink for HTTP traffic logging
            settings: Settings object (e.g. Settings() read from the environment)
            transport: httpx transport override
        """
        overrides = {
            "api_key": api_key,
            "secret_key": secret_key,
            "base_url": base_url,
            "timeout": timeout,
            "log_level": log_level,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}
        base = settings.model_dump() if settings is not None else {}
        # model_validate skips environment loading; use from_env() for that
        self.settings = Settings.model_validate({**base, **overrides})

        self.credentials = Credentials(api_key=self.settings.api_key, secret_key=self.settings.secret_key)
        self.connections = ConnectionProvider(
            self.credentials,
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            log_level=self.settings.log_level_value,
            http_logger=http_logger,
            transport=transport,
        )
        self.executor = RequestExecutor(self.connections)

        self.wallet = EndpointGroup(wallet_api, self.request)
        self.market_data = EndpointGroup(market_data_api, self.request)
        self.spot_account = EndpointGroup(spot_account_api, self.request)

        logger.info(f"BinanceClient initialized (base_url={self.base_url}, credentials={self.credentials!r})")

    @classmethod
    def from_env(cls, **kwargs) -> "BinanceClient":
        """Build a client from BINANCE_* environment variables / .env"""
        return cls(settings=Settings(), **kwargs)

    # ===== Request pipeline =====

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        tier: TrustTier = TrustTier.PUBLIC,
    ) -> Result:
        return self.executor.request(method, path, params, tier)

    @property
    def base_url(self) -> str:
        return self.connections.base_url

    def reload(self, tier: Optional[TrustTier] = None):
        """Rebuild connections on next use (host failover, rotated credentials)"""
        self.connections.reload(tier)

    def close(self):
        self.connections.close()

    def __enter__(self) -> "BinanceClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self) -> str:
        return f"BinanceClient(base_url={self.settings.base_url!r}, credentials={self.credentials!r})"

    # ===== Exchange status =====

    def status(self) -> Dict[str, Any]:
        """Exchange information payload"""
        return market_data_api.exchange_info(self.request).unwrap()

    def timezone(self) -> str:
        return self.status()["timezone"]

    def server_time(self) -> datetime:
        server_time_ms = self.status()["serverTime"]
        return datetime.fromtimestamp(server_time_ms / 1000, tz=timezone.utc)

    # ===== Accessors =====

    def price_for(self, symbol: str) -> float:
        return market_data.price_for(self.request, symbol)

    def avg_price(self, symbol: str) -> float:
        return market_data.avg_price(self.request, symbol)

    def avg_price_24h(self, symbol: str) -> float:
        return market_data.avg_price_24h(self.request, symbol)

    def book_ticker(self, symbol: str) -> Dict[str, Any]:
        return market_data.book_ticker(self.request, symbol)

    def wallet_coins(self, recv_window: Optional[int] = None) -> List[Coin]:
        return wallet.coins(self.request, recv_window=recv_window)

    def coin(self, coin: str, quote: str = DEFAULT_QUOTE) -> CoinMarket:
        """Market accessors for a listed coin, e.g. client.coin("btc").price()"""
        return CoinMarket(self.request, coin, quote)

