"""
Typed errors for the Binance.US client.

Every failed request surfaces as exactly one RequestError subclass. Callers
pick a retry policy from the class:

- InternalServerError: retry with backoff
- RateLimitExceededError: back off before the next request
- IPBannedError: stop all traffic, the address is banned
- ResponseReadTimeout: the outcome is UNKNOWN, query order/operation status
  before resubmitting anything
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from binance_client.request import RequestDescriptor
    from binance_client.response import Response


class BinanceError(Exception):
    """Base error for everything raised by this package."""


class MissingCredentialsError(BinanceError):
    """An authenticated tier was requested but the key (or secret) is absent."""


class RequestError(BinanceError):
    """
    A request that did not produce a usable payload.

    Carries the originating descriptor and, when the server answered, the
    response. Never carries the secret key.
    """

    status_code: Optional[int] = None

    def __init__(self, request: "RequestDescriptor", response: Optional["Response"] = None):
        self.request = request
        self.response = response
        super().__init__(self.message)

    @property
    def status(self) -> Optional[int]:
        if self.status_code is not None:
            return self.status_code
        if self.response is not None:
            return self.response.status
        return None

    @property
    def code(self) -> Optional[int]:
        return self.response.error_code if self.response is not None else None

    @property
    def msg(self) -> Optional[str]:
        return self.response.error_message if self.response is not None else None

    @property
    def request_method(self) -> str:
        return self.request.method

    @property
    def request_path(self) -> str:
        return self.request.path

    @property
    def message(self) -> str:
        parts = [f"[{type(self).__name__}]"]
        if self.status is not None:
            parts.append(f"[{self.status}]")
        if self.code is not None:
            parts.append(f"[{self.code}]")
        text = "".join(parts) + f" {self.request_method} {self.request_path}"
        if self.msg:
            text += f" - {self.msg}"
        return text

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        return (type(self), (self.request, self.response))


class RequestTimeoutError(RequestError):
    """No response arrived within the configured timeout."""


class TransportError(RequestError):
    """Transport-level failure (DNS, refused connection, unreadable payload)."""


class MalformedRequestError(RequestError):
    """HTTP 4XX: the request was malformed, the issue is on the sender's side."""


class InternalServerError(RequestError):
    """HTTP 5XX: the issue is on the exchange's side."""


class WAFLimitError(RequestError):
    """HTTP 403: a Web Application Firewall rule was violated."""

    status_code = 403


class IPBannedError(RequestError):
    """
    HTTP 418: the IP has been auto-banned for continuing to send requests
    after receiving 429 codes. Do not retry.
    """

    status_code = 418


class RateLimitExceededError(RequestError):
    """HTTP 429: a request rate limit was broken."""

    status_code = 429


class ResponseReadTimeout(RequestError):
    """
    HTTP 504: the API sent the message to the matching engine but did not
    get a response within the timeout period.

    This is NOT necessarily a failed operation. The execution status is
    UNKNOWN and could have been a success: check order or operation state
    before submitting it again.
    """

    status_code = 504
