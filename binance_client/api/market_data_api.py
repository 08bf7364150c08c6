"""
Market data endpoints for Binance.US
Public except historical_trades, which needs the API key header.
"""

from datetime import datetime
from typing import Callable, Optional, Union

from binance_client.request import TrustTier
from binance_client.response import Result

__all__ = [
    "ping",
    "time",
    "exchange_info",
    "depth",
    "trades",
    "historical_trades",
    "agg_trades",
    "candlestick",
    "klines",
    "price",
    "book_ticker",
    "avg_price",
    "avg_price_24h",
]

Timestamp = Union[int, datetime]


def ping(request_func: Callable) -> Result:
    """Test connectivity to the REST API"""
    return request_func("GET", "/api/v3/ping")


def time(request_func: Callable) -> Result:
    """Current server time"""
    return request_func("GET", "/api/v3/time")


def exchange_info(request_func: Callable) -> Result:
    """Exchange trading rules and symbol information"""
    return request_func("GET", "/api/v3/exchangeInfo")


def depth(request_func: Callable, symbol: str, limit: Optional[int] = None) -> Result:
    """
    Order book

    Weight depends on limit: 5-100 -> 1, 500 -> 5, 1000 -> 10, 5000 -> 50.
    """
    params = {"symbol": symbol, "limit": limit}
    return request_func("GET", "/api/v3/depth", params)


def trades(request_func: Callable, symbol: str, limit: Optional[int] = None) -> Result:
    """Recent trades (up to 1000)"""
    params = {"symbol": symbol, "limit": limit}
    return request_func("GET", "/api/v3/trades", params)


def historical_trades(
    request_func: Callable, symbol: str, from_id: Optional[int] = None, limit: Optional[int] = None
) -> Result:
    """Older trades (weight 5, API key required)"""
    params = {"symbol": symbol, "fromId": from_id, "limit": limit}
    return request_func("GET", "/api/v3/historicalTrades", params, TrustTier.SECURE)


def agg_trades(
    request_func: Callable,
    symbol: str,
    from_id: Optional[int] = None,
    start_time: Optional[Timestamp] = None,
    end_time: Optional[Timestamp] = None,
    limit: Optional[int] = None,
) -> Result:
    """Compressed/aggregate trades"""
    params = {
        "symbol": symbol,
        "fromId": from_id,
        "startTime": start_time,
        "endTime": end_time,
        "limit": limit,
    }
    return request_func("GET", "/api/v3/aggTrades", params)


def candlestick(
    request_func: Callable,
    symbol: str,
    interval: str,
    start_time: Optional[Timestamp] = None,
    end_time: Optional[Timestamp] = None,
    limit: Optional[int] = None,
) -> Result:
    """Kline/candlestick bars, e.g. interval="1h" """
    params = {
        "symbol": symbol,
        "interval": interval,
        "startTime": start_time,
        "endTime": end_time,
        "limit": limit,
    }
    return request_func("GET", "/api/v3/klines", params)


klines = candlestick


def price(request_func: Callable, symbol: str) -> Result:
    """Latest price for a symbol"""
    return request_func("GET", "/api/v3/ticker/price", {"symbol": symbol})


def book_ticker(request_func: Callable, symbol: str) -> Result:
    """Best price/qty on the order book"""
    return request_func("GET", "/api/v3/ticker/bookTicker", {"symbol": symbol})


def avg_price(request_func: Callable, symbol: str) -> Result:
    """Current average price"""
    return request_func("GET", "/api/v3/avgPrice", {"symbol": symbol})


def avg_price_24h(request_func: Callable, symbol: str) -> Result:
    """24 hour rolling window price change statistics"""
    return request_func("GET", "/api/v3/ticker/24hr", {"symbol": symbol})
