"""
HTTP client for the OpenVPN Cloud management API.

Authenticates with OAuth client credentials and implements ``RouteApi``
over aiohttp. Each public method makes one API call (plus a token request
when the cached token is missing or about to expire). Nothing is retried.
"""

from __future__ import annotations

import asyncio
import base64
import json
import time
from typing import Any

import aiohttp

from ..config import ClientConfig
from ..errors import (
    ApiConnectionError,
    ApiTimeoutError,
    AuthenticationError,
    ErrorContext,
    InvalidResponseError,
    error_from_status,
)
from ..logging import ApiCallLog, StructuredLogger, generate_request_id, get_logger, timed
from .types import Route, RoutePatch, RouteSpec

API_PREFIX = "/api/beta"
TOKEN_PATH = f"{API_PREFIX}/oauth/token"


class CloudClient:
    """
    aiohttp implementation of the route API.

    Example:
        ```python
        async with CloudClient(ClientConfig(cloud_id="acme")) as client:
            route = await client.get_route_by_id("r1")
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        logger: StructuredLogger | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = self.config.resolved_base_url()
        self._session = session
        self._owns_session = session is None
        self._logger = logger or get_logger()
        self._token: str | None = None
        self._token_expires_at = 0.0
        self._token_lock = asyncio.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None

    async def __aenter__(self) -> CloudClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        self._bind_loop()
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    def _bind_loop(self) -> None:
        # A session and lock are tied to the loop they were first used on.
        loop = asyncio.get_running_loop()
        if self._loop is loop:
            return
        if self._loop is not None and self._owns_session:
            self._session = None
        self._token_lock = asyncio.Lock()
        self._loop = loop

    def _get_session(self) -> aiohttp.ClientSession:
        self._bind_loop()
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_session = True
        return self._session

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def _token_valid(self) -> bool:
        return self._token is not None and time.monotonic() < self._token_expires_at

    async def _access_token(self) -> str:
        self._bind_loop()
        async with self._token_lock:
            if self._token_valid():
                return self._token  # type: ignore[return-value]

            client_id, client_secret = self.config.require_credentials()
            status, data = await self._send(
                "POST",
                f"{TOKEN_PATH}?grant_type=client_credentials",
                headers={"Authorization": _basic_auth(client_id, client_secret)},
            )
            token = (data or {}).get("access_token")
            if not token:
                raise AuthenticationError(
                    "Token endpoint returned no access_token",
                    http_status=status,
                    context=ErrorContext(method="POST", path=TOKEN_PATH),
                )
            expires_in = float((data or {}).get("expires_in", 3600))
            self._token = token
            self._token_expires_at = time.monotonic() + max(expires_in - self.config.token_refresh_margin, 0.0)
            self._logger.debug("Obtained access token", expires_in=expires_in)
            return token

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        *,
        payload: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        not_found_ok: bool = False,
    ) -> tuple[int, Any]:
        """Send one request. Returns ``(status, decoded body or None)``."""
        request_id = generate_request_id()
        log_path = path.split("?", 1)[0]
        context = ErrorContext(request_id=request_id, method=method, path=log_path)
        session = self._get_session()
        call = ApiCallLog(request_id=request_id, method=method, path=log_path)

        with timed() as timer:
            try:
                async with session.request(
                    method,
                    f"{self.base_url}{path}",
                    json=payload,
                    headers=headers,
                ) as resp:
                    status = resp.status
                    body = await resp.text()
            except asyncio.TimeoutError as e:
                call.success, call.error = False, "timeout"
                call.duration_ms = timer.stop()
                self._logger.log_api_call(call)
                raise ApiTimeoutError(
                    f"{method} {log_path} timed out",
                    timeout=self.config.timeout,
                    context=context,
                    cause=e,
                ) from e
            except aiohttp.ClientError as e:
                call.success, call.error = False, str(e)
                call.duration_ms = timer.stop()
                self._logger.log_api_call(call)
                raise ApiConnectionError(f"{method} {log_path} failed: {e}", context=context, cause=e) from e

        call.status_code = status
        call.duration_ms = timer.elapsed_ms

        if status == 404 and not_found_ok:
            self._logger.log_api_call(call)
            return status, None

        if status >= 400:
            call.success = False
            call.error = _error_message(body) or f"HTTP {status}"
            self._logger.log_api_call(call)
            raise error_from_status(status, call.error, context=context)

        self._logger.log_api_call(call)
        if not body:
            return status, None
        try:
            return status, json.loads(body)
        except json.JSONDecodeError as e:
            raise InvalidResponseError(
                f"{method} {log_path} returned non-JSON body",
                http_status=status,
                context=context,
                cause=e,
            ) from e

    async def _api(
        self,
        method: str,
        path: str,
        *,
        payload: dict[str, Any] | None = None,
        not_found_ok: bool = False,
    ) -> tuple[int, Any]:
        token = await self._access_token()
        try:
            return await self._send(
                method,
                f"{API_PREFIX}{path}",
                payload=payload,
                headers={"Authorization": f"Bearer {token}"},
                not_found_ok=not_found_ok,
            )
        except AuthenticationError:
            # Revoked or rejected token; fetch a fresh one on the next call.
            if self._token == token:
                self._token = None
                self._token_expires_at = 0.0
            raise

    # ------------------------------------------------------------------
    # RouteApi
    # ------------------------------------------------------------------

    async def create_route(self, network_item_id: str, spec: RouteSpec) -> Route:
        _, data = await self._api("POST", f"/networks/{network_item_id}/routes", payload=spec.to_api())
        if not isinstance(data, dict):
            raise InvalidResponseError("Create route returned no route object")
        data.setdefault("networkItemId", network_item_id)
        return Route.from_api(data)

    async def get_route_by_id(self, route_id: str) -> Route | None:
        _, data = await self._api("GET", f"/routes/{route_id}", not_found_ok=True)
        if data is None:
            return None
        return Route.from_api(data)

    async def update_route(self, network_item_id: str, patch: RoutePatch) -> None:
        await self._api(
            "PUT",
            f"/networks/{network_item_id}/routes/{patch.id}",
            payload=patch.to_api(),
        )

    async def delete_route(self, network_item_id: str, route_id: str) -> None:
        await self._api("DELETE", f"/networks/{network_item_id}/routes/{route_id}")


def _basic_auth(client_id: str, client_secret: str) -> str:
    credentials = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode("ascii")
    return f"Basic {credentials}"


def _error_message(body: str) -> str:
    """Pull a readable message out of an API error body."""
    if not body:
        return ""
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return body.strip()
    if isinstance(data, dict):
        for key in ("errorMessage", "message", "error_description", "error"):
            if data.get(key):
                return str(data[key])
    return body.strip()


__all__ = ["CloudClient", "API_PREFIX", "TOKEN_PATH"]
