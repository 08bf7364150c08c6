"""
Spot account and trade endpoints for Binance.US
Handles order creation, cancellation and queries. All endpoints are SIGNED.
"""

from datetime import datetime
from typing import Callable, Optional, Union

from binance_client.request import TrustTier
from binance_client.response import Result

__all__ = [
    "create_order",
    "cancel_order",
    "cancel_all_orders",
    "get_order",
    "current_orders",
    "all_orders",
    "account_information",
    "trades_list",
]

Timestamp = Union[int, datetime]
Number = Union[int, float, str]


def create_order(
    request_func: Callable,
    symbol: str,
    side: str,  # "BUY" or "SELL"
    type: str,  # "LIMIT", "MARKET", "STOP_LOSS_LIMIT", ...
    time_in_force: Optional[str] = None,
    quantity: Optional[Number] = None,
    quote_order_qty: Optional[Number] = None,
    price: Optional[Number] = None,
    new_client_order_id: Optional[str] = None,
    stop_price: Optional[Number] = None,
    iceberg_qty: Optional[Number] = None,
    new_order_response_type: Optional[str] = None,
    recv_window: Optional[int] = None,
) -> Result:
    """
    Send in a new order

    Args:
        request_func: Request function (method, path, params, tier) -> Result
        symbol: Trading pair, e.g. "BTCUSD"
        side: "BUY" or "SELL"
        type: Order type
        time_in_force: "GTC", "IOC" or "FOK"
        quantity: Amount of base asset
        quote_order_qty: Amount of quote asset to spend/receive (MARKET only)
        price: Limit price
        new_client_order_id: Caller-chosen unique order id
        stop_price: Trigger price for stop orders
        iceberg_qty: Visible quantity for iceberg orders
        new_order_response_type: "ACK", "RESULT" or "FULL"
        recv_window: Server-side clock skew tolerance in ms

    A ResponseReadTimeout from this call does NOT mean the order failed;
    check get_order() before sending it again.
    """
    params = {
        "symbol": symbol,
        "side": side,
        "type": type,
        "timeInForce": time_in_force,
        "quantity": quantity,
        "quoteOrderQty": quote_order_qty,
        "price": price,
        "newClientOrderId": new_client_order_id,
        "stopPrice": stop_price,
        "icebergQty": iceberg_qty,
        "newOrderRespType": new_order_response_type,
        "recvWindow": recv_window,
    }
    return request_func("POST", "/api/v3/order", params, TrustTier.SIGNED)


def cancel_order(
    request_func: Callable,
    symbol: str,
    order_id: Optional[int] = None,
    orig_client_order_id: Optional[str] = None,
    new_client_order_id: Optional[str] = None,
    recv_window: Optional[int] = None,
) -> Result:
    """Cancel an active order (order_id or orig_client_order_id required)"""
    params = {
        "symbol": symbol,
        "orderId": order_id,
        "origClientOrderId": orig_client_order_id,
        "newClientOrderId": new_client_order_id,
        "recvWindow": recv_window,
    }
    return request_func("DELETE", "/api/v3/order", params, TrustTier.SIGNED)


def cancel_all_orders(request_func: Callable, symbol: str, recv_window: Optional[int] = None) -> Result:
    """Cancel all active orders on a symbol"""
    params = {"symbol": symbol, "recvWindow": recv_window}
    return request_func("DELETE", "/api/v3/openOrders", params, TrustTier.SIGNED)


def get_order(
    request_func: Callable,
    symbol: str,
    order_id: Optional[int] = None,
    orig_client_order_id: Optional[str] = None,
    new_client_order_id: Optional[str] = None,
    recv_window: Optional[int] = None,
) -> Result:
    """Check an order's status"""
    params = {
        "symbol": symbol,
        "orderId": order_id,
        "origClientOrderId": orig_client_order_id,
        "newClientOrderId": new_client_order_id,
        "recvWindow": recv_window,
    }
    return request_func("GET", "/api/v3/order", params, TrustTier.SIGNED)


def current_orders(
    request_func: Callable, symbol: Optional[str] = None, recv_window: Optional[int] = None
) -> Result:
    """
    All open orders on a symbol, or on every symbol when symbol is None
    (weight 1 with a symbol, 40 without).
    """
    params = {"symbol": symbol, "recvWindow": recv_window}
    return request_func("GET", "/api/v3/openOrders", params, TrustTier.SIGNED)


def all_orders(
    request_func: Callable,
    symbol: str,
    order_id: Optional[int] = None,
    start_time: Optional[Timestamp] = None,
    end_time: Optional[Timestamp] = None,
    limit: Optional[int] = None,
    recv_window: Optional[int] = None,
) -> Result:
    """All account orders: active, canceled, or filled"""
    params = {
        "symbol": symbol,
        "orderId": order_id,
        "startTime": start_time,
        "endTime": end_time,
        "limit": limit,
        "recvWindow": recv_window,
    }
    return request_func("GET", "/api/v3/allOrders", params, TrustTier.SIGNED)


def account_information(request_func: Callable, recv_window: Optional[int] = None) -> Result:
    """Current account information, including balances"""
    params = {"recvWindow": recv_window}
    return request_func("GET", "/api/v3/account", params, TrustTier.SIGNED)


def trades_list(
    request_func: Callable,
    symbol: str,
    start_time: Optional[Timestamp] = None,
    end_time: Optional[Timestamp] = None,
    from_id: Optional[int] = None,
    limit: Optional[int] = None,
    recv_window: Optional[int] = None,
) -> Result:
    """Trades for a specific account and symbol"""
    params = {
        "symbol": symbol,
        "startTime": start_time,
        "endTime": end_time,
        "fromId": from_id,
        "limit": limit,
        "recvWindow": recv_window,
    }
    return request_func("GET", "/api/v3/myTrades", params, TrustTier.SIGNED)
