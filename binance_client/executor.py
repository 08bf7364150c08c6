"""
Request executor

One descriptor, one HTTP attempt, one Result. Nothing is retried here;
callers choose a retry policy from the error type they get back.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from binance_client.classifier import classify_response
from binance_client.connection import ConnectionProvider
from binance_client.exceptions import RequestTimeoutError, TransportError
from binance_client.request import RequestDescriptor, TrustTier
from binance_client.response import Response, Result

logger = logging.getLogger(__name__)


class RequestExecutor:
    def __init__(self, connections: ConnectionProvider):
        self.connections = connections

    def _dispatch(self, connection: httpx.Client, request: RequestDescriptor) -> httpx.Response:
        params = dict(request.params)
        if request.sends_query:
            return connection.request(request.method, request.path, params=params)
        return connection.request(request.method, request.path, data=params)

    def execute(self, request: RequestDescriptor) -> Result:
        """
        Send a request and classify the outcome.

        Returns:
            Result carrying the parsed JSON payload, or one of:
            - RequestTimeoutError: no response within the timeout
            - TransportError: DNS / connection / protocol failure, or a 2xx
              answer whose body is not JSON
            - a status-derived error from the classifier

        Raises:
            MissingCredentialsError: tier needs credentials the client lacks
        """
        connection = self.connections.connection_for(request.tier)

        try:
            http_response = self._dispatch(connection, request)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {request}: {e}")
            return Result.failure(RequestTimeoutError(request))
        except httpx.HTTPError as e:
            logger.warning(f"Transport error on {request}: {type(e).__name__}: {e}")
            return Result.failure(TransportError(request))

        response = Response.from_text(http_response.status_code, http_response.text)

        if response.is_success and not response.is_parsed:
            logger.warning(f"Unreadable payload for {request} (HTTP {response.status})")
            return Result.failure(TransportError(request, response))

        result = classify_response(response, request)
        if result.ok:
            logger.debug(f"{request} -> HTTP {response.status}")
        else:
            logger.warning(str(result.error))
        return result

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        tier: TrustTier = TrustTier.PUBLIC,
    ) -> Result:
        """Build a descriptor and execute it (the request_func used by the endpoint catalog)."""
        return self.execute(RequestDescriptor.build(method, path, params, tier))
