"""ApiService — async JSON-over-HTTP client with auth and retries.

Wraps :class:`httpx.AsyncClient`.  Transport failures (timeouts, refused
connections, socket errors) are retried with exponential backoff; HTTP
error statuses are not retried.  Typed calls send
``Accept: application/json`` and deserialize the body with pydantic.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

import httpx
from pydantic import TypeAdapter

from cloudcore.config.models import ApiConfig
from cloudcore.contracts.auth import Authentication
from cloudcore.errors import RequestFailedError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

RETRYABLE_ERRORS: tuple[type[BaseException], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    OSError,
)

UnsuccessfulAction = Callable[[httpx.Response], None]


def build_async_client(config: ApiConfig | None = None) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the configured timeout and user agent."""
    config = config or ApiConfig()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
    )


def get_header_value(
    headers: httpx.Headers | Mapping[str, str], name: str, delimiter: str = ";"
) -> str | None:
    """Return every value of header *name* joined by *delimiter*, or ``None``."""
    if isinstance(headers, httpx.Headers):
        values = headers.get_list(name)
    else:
        lowered = name.lower()
        values = [v for k, v in headers.items() if k.lower() == lowered]
    if not values:
        return None
    return delimiter.join(values)


class ApiService:
    """Async HTTP client for JSON APIs.

    Args:
        client: Client to send requests with; one is built from *config*
            when omitted.  An injected client is still closed by
            :meth:`aclose`.
        authentication: Token source consulted on every request.
        auth_token: Static bearer token, used when no *authentication* is set.
        config: Retry and timeout settings.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        authentication: Authentication | None = None,
        auth_token: str | None = None,
        config: ApiConfig | None = None,
    ) -> None:
        self.config = config or ApiConfig()
        self.client = client or build_async_client(self.config)
        self._authentication = authentication
        self._auth_token = auth_token
        self._disposed = False

    # --- Authentication ---

    def set_auth_token(self, token: str | Authentication) -> None:
        """Replace the credential used for subsequent requests."""
        if isinstance(token, str):
            self._auth_token = token
            self._authentication = None
        else:
            self._authentication = token
            self._auth_token = None

    def try_get_access_token(self) -> str | None:
        """The bearer token to send, or ``None`` when no credential is set."""
        if self._authentication is not None:
            access_token = self._authentication.access_token
            if access_token is not None and access_token.bearer_token:
                return access_token.bearer_token
        return self._auth_token or None

    def build_request_headers(
        self, headers: Mapping[str, str] | None = None, *, json_call: bool = True
    ) -> httpx.Headers:
        request_headers = httpx.Headers(dict(headers or {}))
        if json_call and "Accept" not in request_headers:
            request_headers["Accept"] = JSON_MEDIA_TYPE
        token = self.try_get_access_token()
        if token and "Authorization" not in request_headers:
            request_headers["Authorization"] = f"Bearer {token}"
        return request_headers

    # --- Typed verbs ---

    async def get[T](
        self,
        url: str,
        response_type: type[T] | Any = Any,
        *,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
    ) -> T:
        return await self.execute_request_typed(
            "GET", url, response_type, headers=headers, unsuccessful_action=unsuccessful_action
        )

    async def post[T](
        self,
        url: str,
        response_type: type[T] | Any = Any,
        *,
        json: Any = None,
        content: str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
    ) -> T:
        return await self.execute_request_typed(
            "POST",
            url,
            response_type,
            json=json,
            content=content,
            headers=headers,
            unsuccessful_action=unsuccessful_action,
        )

    async def post_multipart[T](
        self,
        url: str,
        files: Mapping[str, Any],
        response_type: type[T] | Any = Any,
        *,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
    ) -> T:
        return await self.execute_request_typed(
            "POST",
            url,
            response_type,
            files=files,
            data=data,
            headers=headers,
            unsuccessful_action=unsuccessful_action,
        )

    async def put[T](
        self,
        url: str,
        response_type: type[T] | Any = Any,
        *,
        json: Any = None,
        content: str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
    ) -> T:
        return await self.execute_request_typed(
            "PUT",
            url,
            response_type,
            json=json,
            content=content,
            headers=headers,
            unsuccessful_action=unsuccessful_action,
        )

    async def delete[T](
        self,
        url: str,
        response_type: type[T] | Any = Any,
        *,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
    ) -> T:
        return await self.execute_request_typed(
            "DELETE", url, response_type, headers=headers, unsuccessful_action=unsuccessful_action
        )

    # --- Core request path ---

    async def execute_request_typed[T](
        self,
        method: str,
        url: str,
        response_type: type[T] | Any = Any,
        *,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
        **request_kwargs: Any,
    ) -> T:
        """Send a request and deserialize the response into *response_type*.

        ``str`` returns the raw body text and ``httpx.Response`` the response
        itself; anything else is validated from the JSON body.

        Raises:
            RequestFailedError: On a non-success status, after
                *unsuccessful_action* (if any) has been called.
        """
        request_headers = self.build_request_headers(headers, json_call=True)
        response = await self._send(method, url, request_headers, **request_kwargs)

        if not response.is_success:
            if unsuccessful_action is not None:
                unsuccessful_action(response)
            raise RequestFailedError(
                f"Request to url: {url} failed, Response: {response.status_code} {response.text}",
                status_code=response.status_code,
                response_body=response.text,
                request_object=request_kwargs.get("json", request_kwargs.get("content")),
            )
        return _deserialize(response, response_type)

    async def execute_request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        unsuccessful_action: UnsuccessfulAction | None = None,
        **request_kwargs: Any,
    ) -> httpx.Response:
        """Send a request and return the raw response, whatever its status."""
        request_headers = self.build_request_headers(headers, json_call=False)
        response = await self._send(method, url, request_headers, **request_kwargs)
        if not response.is_success and unsuccessful_action is not None:
            unsuccessful_action(response)
        return response

    async def _send(
        self, method: str, url: str, headers: httpx.Headers, **request_kwargs: Any
    ) -> httpx.Response:
        if self._disposed:
            raise RuntimeError("ApiService has been closed")

        attempt = 0
        while True:
            try:
                return await self.client.request(method, url, headers=headers, **request_kwargs)
            except RETRYABLE_ERRORS as exc:
                if attempt >= self.config.retry_attempts:
                    logger.error("%s %s failed after %d retries: %s", method, url, attempt, exc)
                    raise
                attempt += 1
                delay = self.config.retry_backoff_base**attempt
                logger.warning(
                    "%s %s failed (%s), retry %d/%d in %.1fs",
                    method,
                    url,
                    type(exc).__name__,
                    attempt,
                    self.config.retry_attempts,
                    delay,
                )
                await asyncio.sleep(delay)

    # --- Lifecycle ---

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def aclose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        await self.client.aclose()

    async def __aenter__(self) -> ApiService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def _deserialize(response: httpx.Response, response_type: Any) -> Any:
    if response_type is str:
        return response.text
    if response_type is httpx.Response:
        return response
    if not response.content:
        return None
    return TypeAdapter(response_type).validate_json(response.content)
