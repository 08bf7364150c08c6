"""
Currency utilities

Satoshi-scaled amount conversion and Binance.US symbol helpers.
"""

from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Union

from binance_client.constants import DEFAULT_QUOTE, SATOSHIS_PER_UNIT

Amount = Union[str, int, float, Decimal, None]


def to_satoshi(amount: Amount) -> int:
    """
    Convert a decimal amount to integer satoshis (1e-8 units)

    Strings are parsed exactly; anything unparseable counts as zero.
    Fractions below one satoshi are truncated.

    Examples:
        "0.5"        -> 50000000
        "0.00000001" -> 1
        None         -> 0
    """
    if amount is None or amount == "":
        return 0
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return 0
    return int((value * SATOSHIS_PER_UNIT).to_integral_value(rounding=ROUND_DOWN))


def from_satoshi(satoshi: int) -> float:
    """Integer satoshis back to a float amount"""
    return satoshi / float(SATOSHIS_PER_UNIT)


def symbol_for(coin: str, quote: str = DEFAULT_QUOTE) -> str:
    """
    Binance.US symbol for a coin/quote pair

    Examples:
        ("btc", "usd") -> "BTCUSD"
        ("ETH",)       -> "ETHUSD"
    """
    return f"{coin.upper()}{quote.upper()}"

