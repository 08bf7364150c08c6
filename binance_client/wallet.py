"""
Wallet balances

Typed view over the capital config endpoint: one Coin per asset holding a
positive free balance. Amounts are kept as integer satoshis.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from binance_client.api import wallet_api
from binance_client.currency_utils import from_satoshi, to_satoshi

logger = logging.getLogger(__name__)


class Coin(BaseModel):
    symbol: str
    name: Optional[str] = None
    amount_satoshi: int = 0
    withdrawing: Optional[str] = None
    trading: Optional[bool] = None
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, json: Dict[str, Any]) -> "Coin":
        return cls(
            symbol=json["coin"],
            name=json.get("name"),
            amount_satoshi=to_satoshi(json.get("free")),
            withdrawing=json.get("withdrawing"),
            trading=json.get("trading"),
            raw=json,
        )

    @property
    def amount(self) -> float:
        return from_satoshi(self.amount_satoshi)

    @property
    def balance(self) -> float:
        return self.amount


def coins(request_func: Callable, recv_window: Optional[int] = None) -> List[Coin]:
    """
    Coins with a positive free balance

    Raises:
        RequestError: typed error from the executor
    """
    entries = wallet_api.coins(request_func, recv_window=recv_window).unwrap() or []

    held = []
    for entry in entries:
        coin = Coin.from_json(entry)
        if coin.amount_satoshi > 0:
            held.append(coin)

    logger.debug(f"Wallet holds {len(held)} of {len(entries)} coins")
    return held
