"""
Request signing for Binance.US SIGNED endpoints

Signed requests carry two extra query parameters, appended in this order:
- timestamp: epoch milliseconds at send time
- signature: hex HMAC-SHA256 of (query string + body), keyed by the secret

The timestamp is added to the query BEFORE the signature is computed, since
the signature covers it. Both are recomputed on every send.
"""

import hashlib
import hmac
import logging
import time
from typing import Generator, Union

import httpx

from binance_client.credentials import Credentials
from binance_client.exceptions import MissingCredentialsError

logger = logging.getLogger(__name__)


def current_timestamp_ms() -> int:
    """Current wall-clock time in epoch milliseconds"""
    return int(time.time() * 1000)


def generate_signature(secret_key: str, payload: Union[str, bytes]) -> str:
    """
    Generate HMAC-SHA256 signature for a request payload

    Args:
        secret_key: API secret
        payload: Query string followed by the request body

    Returns:
        Lowercase hex digest
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return hmac.new(secret_key.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def total_params(request: httpx.Request) -> bytes:
    """The exact bytes the signature covers: encoded query + body."""
    return request.url.query + request.content


class SignatureAuth(httpx.Auth):
    """
    httpx auth flow that timestamps and signs the outgoing request.

    Installed on the SIGNED-tier connection only; runs right before the
    request goes to the transport.
    """

    requires_request_body = True

    def __init__(self, credentials: Credentials):
        if not credentials.has_secret_key():
            raise MissingCredentialsError("A secret key is required for signed requests")
        self._credentials = credentials

    def sign(self, request: httpx.Request) -> httpx.Request:
        request.url = request.url.copy_add_param("timestamp", str(current_timestamp_ms()))
        signature = generate_signature(self._credentials.secret_key, total_params(request))
        request.url = request.url.copy_add_param("signature", signature)
        return request

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.sign(request)

    def __repr__(self) -> str:
        return "SignatureAuth(secret_key=***)"
