"""
Request descriptors

A RequestDescriptor is the declarative form of one API call: method, path,
ordered params and trust tier. Descriptors are built fresh per call, never
mutated, and consumed once by the executor.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from binance_client.constants import HTTP_METHODS, QUERY_METHODS


class TrustTier(str, Enum):
    """Authentication requirement of an endpoint, fixed at the call site."""

    PUBLIC = "public"  # no credentials
    SECURE = "secure"  # API key header only
    SIGNED = "signed"  # API key header + timestamp + HMAC signature


def to_milliseconds(value: datetime) -> int:
    """Epoch milliseconds for a datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def to_plain_number(value: Union[float, Decimal]) -> str:
    """
    Fixed-point text for a number (the API rejects exponent notation)

    Examples:
        0.00001          -> "0.00001"
        Decimal("1E-7")  -> "0.0000001"
    """
    return format(Decimal(str(value)), "f")


def _normalize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = to_milliseconds(value)
        elif isinstance(value, (float, Decimal)):
            value = to_plain_number(value)
        elif isinstance(value, Enum):
            value = value.value
        normalized[key] = value
    return normalized


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    tier: TrustTier = TrustTier.PUBLIC

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        tier: TrustTier = TrustTier.PUBLIC,
    ) -> "RequestDescriptor":
        """
        Validate and freeze a request description.

        None-valued params are dropped, datetimes become epoch milliseconds,
        and the caller's key order is kept.

        Raises:
            ValueError: unsupported method or empty/relative path
        """
        if not method:
            raise ValueError("Request method is required")
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported method: {method}")
        if not path or not path.startswith("/"):
            raise ValueError(f"Request path must be absolute, got {path!r}")

        return cls(
            method=method,
            path=path,
            params=MappingProxyType(_normalize_params(params)),
            tier=TrustTier(tier),
        )

    @property
    def sends_query(self) -> bool:
        """GET/DELETE carry params in the query string, POST/PUT in a form body."""
        return self.method in QUERY_METHODS

    def __str__(self) -> str:
        return f"{self.method} {self.path}"

    def __reduce__(self):
        # mappingproxy does not pickle; ship a plain copy
        return (_restore_descriptor, (self.method, self.path, dict(self.params), self.tier))


def _restore_descriptor(method: str, path: str, params: Dict[str, Any], tier: TrustTier) -> RequestDescriptor:
    return RequestDescriptor(method=method, path=path, params=MappingProxyType(params), tier=tier)
