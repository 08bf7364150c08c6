"""
Market data accessors

Float-valued helpers over the market data endpoints. Unlike the endpoint
catalog these unwrap the Result, so typed errors are raised.
"""

import logging
from typing import Any, Callable, Dict

from binance_client.api import market_data_api
from binance_client.constants import COINS, DEFAULT_QUOTE
from binance_client.currency_utils import symbol_for

logger = logging.getLogger(__name__)


def _price_field(payload: Dict[str, Any], symbol: str, *fields: str) -> float:
    for field_name in fields:
        value = payload.get(field_name)
        if value not in (None, ""):
            return float(value)
    raise ValueError(f"No {'/'.join(fields)} in ticker response for {symbol}: {payload}")


def price_for(request_func: Callable, symbol: str) -> float:
    """Latest price for a symbol, e.g. price_for(request, "BTCUSD") -> 43210.5"""
    payload = market_data_api.price(request_func, symbol).unwrap()
    return _price_field(payload, symbol, "price")


def avg_price(request_func: Callable, symbol: str) -> float:
    """Current average price (exchange-defined window, usually 5 minutes)"""
    payload = market_data_api.avg_price(request_func, symbol).unwrap()
    return _price_field(payload, symbol, "price")


average_price = avg_price


def avg_price_24h(request_func: Callable, symbol: str) -> float:
    """
    Price from the 24h rolling ticker

    Uses the 24h weightedAvgPrice, then lastPrice, then a plain price field.
    """
    payload = market_data_api.avg_price_24h(request_func, symbol).unwrap()
    return _price_field(payload, symbol, "weightedAvgPrice", "lastPrice", "price")


average_price_24h = avg_price_24h


def book_ticker(request_func: Callable, symbol: str) -> Dict[str, Any]:
    """Best bid/ask price and quantity"""
    return market_data_api.book_ticker(request_func, symbol).unwrap()


class CoinMarket:
    """
    Accessors for one listed coin against a quote currency

    Usage:
        btc = CoinMarket(request_func, "btc")   # BTCUSD
        btc.price()
    """

    def __init__(self, request_func: Callable, coin: str, quote: str = DEFAULT_QUOTE):
        coin = coin.upper()
        if coin not in COINS:
            raise ValueError(f"Unknown coin: {coin}")
        self.request_func = request_func
        self.coin = coin
        self.quote = quote.upper()
        self.symbol = symbol_for(coin, quote)

    def price(self) -> float:
        return price_for(self.request_func, self.symbol)

    def avg_price(self) -> float:
        return avg_price(self.request_func, self.symbol)

    def avg_price_24h(self) -> float:
        return avg_price_24h(self.request_func, self.symbol)

    def book_ticker(self) -> Dict[str, Any]:
        return book_ticker(self.request_func, self.symbol)

    def __repr__(self) -> str:
        return f"<CoinMarket {self.symbol}>"
