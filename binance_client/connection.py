"""
Connection provider

Builds and caches one configured httpx.Client per trust tier:
- PUBLIC: no credentials
- SECURE: X-MBX-APIKEY header
- SIGNED: X-MBX-APIKEY header + SignatureAuth

Handles are created lazily on first use, never mutated afterwards, and
replaced wholesale on reload. Creation is guarded by a lock so concurrent
first use of a tier builds exactly one handle.
"""

import logging
import random
import threading
from typing import Callable, Dict, List, Optional

import httpx

from binance_client.auth import SignatureAuth
from binance_client.constants import API_KEY_HEADER, BASE_URLS, DEFAULT_TIMEOUT, HTTP_LOGGER_NAME
from binance_client.credentials import Credentials
from binance_client.exceptions import MissingCredentialsError
from binance_client.request import TrustTier

logger = logging.getLogger(__name__)


class HttpLogger:
    """
    httpx event hooks logging each exchange at a fixed level.

    Headers and bodies are only written when the level is DEBUG, which keeps
    the API key header out of normal logs.
    """

    def __init__(self, sink: logging.Logger, level: int):
        self.sink = sink
        self.level = level

    @property
    def verbose(self) -> bool:
        return self.level <= logging.DEBUG

    def log_request(self, request: httpx.Request) -> None:
        self.sink.log(self.level, "request: %s %s", request.method, request.url)
        if self.verbose:
            self.sink.log(self.level, "request headers: %s", dict(request.headers))
            if request.content:
                self.sink.log(self.level, "request body: %s", request.content.decode("utf-8", "replace"))

    def log_response(self, response: httpx.Response) -> None:
        request = response.request
        self.sink.log(self.level, "response: %s %s %s", response.status_code, request.method, request.url)
        if self.verbose:
            response.read()
            self.sink.log(self.level, "response headers: %s", dict(response.headers))
            self.sink.log(self.level, "response body: %s", response.text)

    def event_hooks(self) -> Dict[str, List[Callable]]:
        return {"request": [self.log_request], "response": [self.log_response]}


class ConnectionProvider:
    """Per-tier httpx.Client cache for one client context."""

    def __init__(
        self,
        credentials: Credentials,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        log_level: int = logging.INFO,
        http_logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
        urls: Optional[List[str]] = None,
    ):
        """
        Args:
            credentials: API key / secret pair
            base_url: Fixed host; when None one of `urls` is picked at random
            timeout: Connect/read timeout in seconds
            log_level: Level HTTP traffic is logged at
            http_logger: Logger sink for HTTP traffic
            transport: Optional httpx transport (tests, proxies)
            urls: Candidate hosts (defaults to BASE_URLS)
        """
        self.credentials = credentials
        self.timeout = timeout
        self.http_log = HttpLogger(http_logger or logging.getLogger(HTTP_LOGGER_NAME), log_level)
        self._base_url_override = base_url
        self._urls = list(urls or BASE_URLS)
        self._transport = transport
        self._url: Optional[str] = None
        self._connections: Dict[TrustTier, httpx.Client] = {}
        # Replaced on reload; another thread may still be sending through them
        self._retired: List[httpx.Client] = []
        self._lock = threading.RLock()

    @property
    def base_url(self) -> str:
        """Configured override, else a random known host fixed until reload()."""
        if self._base_url_override:
            return self._base_url_override
        if self._url is None:
            with self._lock:
                if self._url is None:
                    self._url = random.choice(self._urls)
        return self._url

    def _check_credentials(self, tier: TrustTier):
        if tier in (TrustTier.SECURE, TrustTier.SIGNED) and not self.credentials.has_api_key():
            raise MissingCredentialsError(f"An API key is required for {tier.value} requests")
        if tier == TrustTier.SIGNED and not self.credentials.has_secret_key():
            raise MissingCredentialsError("A secret key is required for signed requests")

    def build(self, tier: TrustTier) -> httpx.Client:
        """Build a fresh client for a tier (not cached)."""
        self._check_credentials(tier)

        headers = {}
        auth = None
        if tier in (TrustTier.SECURE, TrustTier.SIGNED):
            headers[API_KEY_HEADER] = self.credentials.api_key
        if tier == TrustTier.SIGNED:
            auth = SignatureAuth(self.credentials)

        kwargs = {}
        if self._transport is not None:
            kwargs["transport"] = self._transport

        logger.debug(f"Building {tier.value} connection to {self.base_url} (timeout={self.timeout}s)")
        return httpx.Client(
            base_url=self.base_url,
            headers=headers,
            auth=auth,
            timeout=self.timeout,
            event_hooks=self.http_log.event_hooks(),
            **kwargs,
        )

    def connection_for(self, tier: TrustTier) -> httpx.Client:
        """Cached client for a tier, built on first use."""
        tier = TrustTier(tier)
        connection = self._connections.get(tier)
        if connection is not None:
            return connection

        with self._lock:
            connection = self._connections.get(tier)
            if connection is None:
                connection = self.build(tier)
                self._connections = {**self._connections, tier: connection}
            return connection

    def reload(self, tier: Optional[TrustTier] = None):
        """
        Drop cached connections so the next request rebuilds them.

        With no tier, every connection is dropped and, unless a base URL is
        configured, a new host is picked (failover / credential rotation).
        Dropped connections stay open for callers still holding them and are
        closed by close().
        """
        with self._lock:
            if tier is None:
                stale = list(self._connections.values())
                self._connections = {}
                self._url = None
            else:
                tier = TrustTier(tier)
                remaining = dict(self._connections)
                stale = [remaining.pop(tier)] if tier in remaining else []
                self._connections = remaining
            self._retired.extend(stale)

        logger.info(f"Reloaded {'all' if tier is None else tier.value} connection(s)")

    def close(self):
        with self._lock:
            stale = list(self._connections.values()) + self._retired
            self._connections = {}
            self._retired = []
        for connection in stale:
            connection.close()
