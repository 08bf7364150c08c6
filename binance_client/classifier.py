"""
Response classification

Maps an HTTP status/body pair to a Result. The status code always decides
the error type; `code`/`msg` in the body only enrich the error.
"""

from typing import Any, Dict, Optional, Type

from binance_client.exceptions import (
    InternalServerError,
    IPBannedError,
    MalformedRequestError,
    RateLimitExceededError,
    RequestError,
    ResponseReadTimeout,
    WAFLimitError,
)
from binance_client.request import RequestDescriptor
from binance_client.response import Response, Result

# Statuses with a dedicated error type; checked before the 4xx/5xx ranges
STATUS_ERRORS: Dict[int, Type[RequestError]] = {
    403: WAFLimitError,
    418: IPBannedError,
    429: RateLimitExceededError,
    504: ResponseReadTimeout,
}

_UNKNOWN_REQUEST = RequestDescriptor(method="UNKNOWN", path="")


def error_type_for(status: int) -> Type[RequestError]:
    """Error class for a non-2xx status."""
    if status in STATUS_ERRORS:
        return STATUS_ERRORS[status]
    if 400 <= status < 500:
        return MalformedRequestError
    return InternalServerError


def classify_response(response: Response, request: Optional[RequestDescriptor] = None) -> Result:
    if response.is_success:
        return Result.success(response.parsed_body)

    error_cls = error_type_for(response.status)
    return Result.failure(error_cls(request or _UNKNOWN_REQUEST, response))


def classify(status: int, body: Any, request: Optional[RequestDescriptor] = None) -> Result:
    """
    Classify an already-parsed body.

    Args:
        status: HTTP status code
        body: Parsed JSON body (mapping, list, or None)
        request: Originating descriptor, attached to any error

    Returns:
        Result.success(body) for 2xx, otherwise Result.failure(<typed error>)
    """
    return classify_response(Response(status=status, body=body), request)
