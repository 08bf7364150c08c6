"""
Wallet endpoints for Binance.US
All wallet endpoints are SIGNED.
"""

from datetime import datetime
from typing import Callable, Optional, Union

from binance_client.request import TrustTier
from binance_client.response import Result

__all__ = ["coins", "snapshot", "account_status"]

Timestamp = Union[int, datetime]


def coins(request_func: Callable, recv_window: Optional[int] = None) -> Result:
    """All coins' wallet information (weight 1)"""
    params = {"recvWindow": recv_window}
    return request_func("GET", "/sapi/v1/capital/config/getall", params, TrustTier.SIGNED)


def snapshot(
    request_func: Callable,
    type: str,
    start_time: Optional[Timestamp] = None,
    end_time: Optional[Timestamp] = None,
    recv_window: Optional[int] = None,
) -> Result:
    """
    Daily account snapshot

    Args:
        request_func: Request function (method, path, params, tier) -> Result
        type: Snapshot type, e.g. "SPOT"
        start_time: Epoch ms or datetime
        end_time: Epoch ms or datetime
        recv_window: Server-side clock skew tolerance in ms
    """
    params = {
        "type": type,
        "startTime": start_time,
        "endTime": end_time,
        "recvWindow": recv_window,
    }
    return request_func("GET", "/api/v1/accountSnapshot", params, TrustTier.SIGNED)


def account_status(request_func: Callable, recv_window: Optional[int] = None) -> Result:
    """Account status detail"""
    params = {"recvWindow": recv_window}
    return request_func("GET", "/api/v1/account", params, TrustTier.SIGNED)
