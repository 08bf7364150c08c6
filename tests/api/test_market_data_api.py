"""Tests for binance_client/api/market_data_api.py"""

from unittest.mock import MagicMock

import pytest

from binance_client.api import market_data_api
from binance_client.request import TrustTier


@pytest.fixture
def request_func():
    return MagicMock()


class TestNoParamEndpoints:
    @pytest.mark.parametrize(
        "endpoint, path",
        [
            (market_data_api.ping, "/api/v3/ping"),
            (market_data_api.time, "/api/v3/time"),
            (market_data_api.exchange_info, "/api/v3/exchangeInfo"),
        ],
    )
    def test_public_get(self, request_func, endpoint, path):
        result = endpoint(request_func)

        request_func.assert_called_once_with("GET", path)
        assert result is request_func.return_value


class TestOrderBookAndTrades:
    def test_depth(self, request_func):
        market_data_api.depth(request_func, "BTCUSD", limit=100)
        request_func.assert_called_once_with("GET", "/api/v3/depth", {"symbol": "BTCUSD", "limit": 100})

    def test_trades(self, request_func):
        market_data_api.trades(request_func, "BTCUSD")
        request_func.assert_called_once_with("GET", "/api/v3/trades", {"symbol": "BTCUSD", "limit": None})

    def test_historical_trades_needs_api_key(self, request_func):
        market_data_api.historical_trades(request_func, "BTCUSD", from_id=10, limit=5)
        request_func.assert_called_once_with(
            "GET",
            "/api/v3/historicalTrades",
            {"symbol": "BTCUSD", "fromId": 10, "limit": 5},
            TrustTier.SECURE,
        )

    def test_agg_trades(self, request_func):
        market_data_api.agg_trades(request_func, "ETHUSD", start_time=1, end_time=2)
        request_func.assert_called_once_with(
            "GET",
            "/api/v3/aggTrades",
            {"symbol": "ETHUSD", "fromId": None, "startTime": 1, "endTime": 2, "limit": None},
        )


class TestCandlesticks:
    def test_candlestick(self, request_func):
        market_data_api.candlestick(request_func, "BTCUSD", "1h", limit=24)
        request_func.assert_called_once_with(
            "GET",
            "/api/v3/klines",
            {"symbol": "BTCUSD", "interval": "1h", "startTime": None, "endTime": None, "limit": 24},
        )

    def test_klines_alias(self):
        assert market_data_api.klines is market_data_api.candlestick


class TestTickers:
    @pytest.mark.parametrize(
        "endpoint, path",
        [
            (market_data_api.price, "/api/v3/ticker/price"),
            (market_data_api.book_ticker, "/api/v3/ticker/bookTicker"),
            (market_data_api.avg_price, "/api/v3/avgPrice"),
            (market_data_api.avg_price_24h, "/api/v3/ticker/24hr"),
        ],
    )
    def test_symbol_ticker(self, request_func, endpoint, path):
        endpoint(request_func, "BTCUSD")
        request_func.assert_called_once_with("GET", path, {"symbol": "BTCUSD"})
