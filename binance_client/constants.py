"""
Client Constants

Hosts, header names, defaults and the coin list for Binance.US.
"""

from typing import List

# Known-good API hosts; one is picked at random per client lifetime
BASE_URLS: List[str] = [
    "https://api.binance.us",
]

API_KEY_HEADER = "X-MBX-APIKEY"

DEFAULT_TIMEOUT = 5.0  # seconds
DEFAULT_LOG_LEVEL = "info"
HTTP_LOGGER_NAME = "binance_client.http"

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")
# Methods whose params travel in the query string; the others send a form body
QUERY_METHODS = ("GET", "DELETE")

SATOSHIS_PER_UNIT = 100_000_000

# Coins listed on Binance.US (quoted against USD)
COINS: List[str] = [
    "ADA",
    "ALGO",
    "ATOM",
    "BAND",
    "BAT",
    "BCH",
    "BNB",
    "BTC",
    "BUSD",
    "COMP",
    "DAI",
    "DASH",
    "DOGE",
    "EGLD",
    "ENJ",
    "EOS",
    "ETC",
    "ETH",
    "HBAR",
    "HNT",
    "ICX",
    "IOTA",
    "KNC",
    "LINK",
    "LTC",
    "MANA",
    "MATIC",
    "MKR",
    "NANO",
    "NEO",
    "OMG",
    "ONE",
    "ONT",
    "OXT",
    "PAXG",
    "QTUM",
    "REP",
    "RVN",
    "SOL",
    "STORJ",
    "UNI",
    "USDC",
    "USDT",
    "VET",
    "VTHO",
    "WAVES",
    "XLM",
    "XTZ",
    "ZEC",
    "ZEN",
    "ZIL",
    "ZRX",
]

DEFAULT_QUOTE = "USD"
