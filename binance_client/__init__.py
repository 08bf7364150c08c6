"""
Binance.US REST API client

Provides:
- Request signing (HMAC-SHA256 with injected timestamp)
- Per-tier connection handling (public, API key, signed)
- Typed errors for every failed request
- Endpoint catalog for wallet, market data and spot trading
"""

from binance_client.client import BinanceClient
from binance_client.config import Settings
from binance_client.credentials import Credentials
from binance_client.exceptions import (
    BinanceError,
    InternalServerError,
    IPBannedError,
    MalformedRequestError,
    MissingCredentialsError,
    RateLimitExceededError,
    RequestError,
    RequestTimeoutError,
    ResponseReadTimeout,
    TransportError,
    WAFLimitError,
)
from binance_client.request import RequestDescriptor, TrustTier
from binance_client.response import Response, Result
from binance_client.wallet import Coin

__version__ = "0.1.0"

__all__ = [
    "BinanceClient",
    "Settings",
    "Credentials",
    "RequestDescriptor",
    "TrustTier",
    "Response",
    "Result",
    "Coin",
    # Errors
    "BinanceError",
    "MissingCredentialsError",
    "RequestError",
    "RequestTimeoutError",
    "TransportError",
    "WAFLimitError",
    "IPBannedError",
    "RateLimitExceededError",
    "ResponseReadTimeout",
    "MalformedRequestError",
    "InternalServerError",
]
