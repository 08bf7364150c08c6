"""
Tests for binance_client/market_data.py

Accessors unwrap Results: payloads become floats, errors are raised.
"""

from unittest.mock import MagicMock

import pytest

from binance_client import market_data
from binance_client.exceptions import MalformedRequestError
from binance_client.request import RequestDescriptor
from binance_client.response import Response, Result


def _returning(payload):
    return MagicMock(return_value=Result.success(payload))


class TestPriceFor:
    def test_parses_price(self):
        request_func = _returning({"symbol": "BTCUSD", "price": "123.45"})

        assert market_data.price_for(request_func, "BTCUSD") == 123.45
        request_func.assert_called_once_with("GET", "/api/v3/ticker/price", {"symbol": "BTCUSD"})

    def test_missing_price_raises(self):
        with pytest.raises(ValueError, match="BTCUSD"):
            market_data.price_for(_returning({"symbol": "BTCUSD"}), "BTCUSD")

    def test_error_is_raised(self):
        error = MalformedRequestError(
            RequestDescriptor.build("GET", "/api/v3/ticker/price"),
            Response(status=400, body={"code": -1121, "msg": "Invalid symbol."}),
        )
        request_func = MagicMock(return_value=Result.failure(error))

        with pytest.raises(MalformedRequestError) as exc_info:
            market_data.price_for(request_func, "NOPE")
        assert exc_info.value.code == -1121


class TestAvgPrice:
    def test_parses_price(self):
        request_func = _returning({"mins": 5, "price": "9.35751834"})

        assert market_data.avg_price(request_func, "LTCUSD") == 9.35751834
        assert request_func.call_args[0][1] == "/api/v3/avgPrice"

    def test_alias(self):
        assert market_data.average_price is market_data.avg_price


class TestAvgPrice24h:
    def test_prefers_weighted_average(self):
        payload = {"weightedAvgPrice": "0.29628482", "lastPrice": "4.00000200"}
        request_func = _returning(payload)

        assert market_data.avg_price_24h(request_func, "BNBUSD") == 0.29628482
        assert request_func.call_args[0][1] == "/api/v3/ticker/24hr"

    def test_falls_back_to_last_price(self):
        payload = {"weightedAvgPrice": "", "lastPrice": "4.00000200"}
        assert market_data.avg_price_24h(_returning(payload), "BNBUSD") == 4.000002

    def test_falls_back_to_price(self):
        assert market_data.avg_price_24h(_returning({"price": "7"}), "BNBUSD") == 7.0

    def test_alias(self):
        assert market_data.average_price_24h is market_data.avg_price_24h


class TestBookTicker:
    def test_returns_payload(self):
        payload = {"symbol": "BTCUSD", "bidPrice": "1", "bidQty": "2", "askPrice": "3", "askQty": "4"}
        assert market_data.book_ticker(_returning(payload), "BTCUSD") == payload


class TestCoinMarket:
    """Tests for the per-coin accessor view"""

    def test_builds_usd_symbol(self):
        market = market_data.CoinMarket(MagicMock(), "btc")
        assert market.symbol == "BTCUSD"
        assert repr(market) == "<CoinMarket BTCUSD>"

    def test_other_quote(self):
        assert market_data.CoinMarket(MagicMock(), "eth", "usdt").symbol == "ETHUSDT"

    def test_unknown_coin_raises(self):
        with pytest.raises(ValueError, match="FOO"):
            market_data.CoinMarket(MagicMock(), "foo")

    def test_price_uses_symbol(self):
        request_func = _returning({"symbol": "ADAUSD", "price": "0.35"})

        assert market_data.CoinMarket(request_func, "ada").price() == 0.35
        request_func.assert_called_once_with("GET", "/api/v3/ticker/price", {"symbol": "ADAUSD"})

    def test_averages_and_book_ticker(self):
        request_func = _returning({"price": "2", "weightedAvgPrice": "3", "bidPrice": "1"})
        market = market_data.CoinMarket(request_func, "LTC")

        assert market.avg_price() == 2.0
        assert market.avg_price_24h() == 3.0
        assert market.book_ticker()["bidPrice"] == "1"
        paths = [call[0][1] for call in request_func.call_args_list]
        assert paths == ["/api/v3/avgPrice", "/api/v3/ticker/24hr", "/api/v3/ticker/bookTicker"]
