"""
Response and Result types

Response is the explicit view over one HTTP answer. Result is what the
executor hands back: either the parsed payload or a typed error, checked
explicitly by the caller.
"""

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from binance_client.exceptions import RequestError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNPARSED = object()


@dataclass(frozen=True)
class Response:
    status: int
    body: Any = None
    text: str = ""

    @classmethod
    def from_text(cls, status: int, text: str) -> "Response":
        """Parse a raw body; anything that is not JSON is kept as text only."""
        if not text:
            return cls(status=status, body=None, text="")
        try:
            body = json.loads(text)
        except ValueError:
            logger.debug(f"Response body for HTTP {status} is not JSON ({len(text)} bytes)")
            body = _UNPARSED
        return cls(status=status, body=body, text=text)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_parsed(self) -> bool:
        return self.body is not _UNPARSED

    @property
    def parsed_body(self) -> Any:
        return self.body if self.is_parsed else None

    @property
    def error_code(self) -> Optional[int]:
        body = self.parsed_body
        if isinstance(body, dict):
            return body.get("code")
        return None

    @property
    def error_message(self) -> Optional[str]:
        body = self.parsed_body
        if isinstance(body, dict):
            return body.get("msg")
        return None

    def __reduce__(self):
        # The unparsed marker is process-local; re-derive it from the text
        if not self.is_parsed:
            return (Response.from_text, (self.status, self.text))
        return (Response, (self.status, self.body, self.text))


class Result(Generic[T]):
    """Outcome of one request: a payload or a typed error, never both."""

    __slots__ = ("_payload", "_error")

    def __init__(self, payload: Optional[T] = None, error: Optional["RequestError"] = None):
        self._payload = payload
        self._error = error

    @classmethod
    def success(cls, payload: T) -> "Result[T]":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: "RequestError") -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def payload(self) -> Optional[T]:
        return self._payload

    @property
    def error(self) -> Optional["RequestError"]:
        return self._error

    def unwrap(self) -> T:
        """Return the payload, or raise the typed error."""
        if self._error is not None:
            raise self._error
        return self._payload

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"Result(ok, payload={self._payload!r})"
        return f"Result(error={self._error!r})"
