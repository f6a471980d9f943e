"""HTTP transport shared by every Link and Resource of an entry point."""

import logging
import time
from typing import Any, Dict, Mapping, Optional

import httpx

from .errors import HyperclientConnectionError, HyperclientParseError
from .logging import log_event

DEFAULT_HEADERS = {
    "Accept": "application/hal+json",
    "Content-Type": "application/json",
}

_UNSET = object()


class Response:
    """
    Thin view over an ``httpx.Response``.
    - ``success`` is True for 2xx statuses
    - ``body`` is the parsed JSON object, ``{}`` for an empty body
    """

    def __init__(self, raw: httpx.Response):
        self.raw = raw
        self._body: Any = _UNSET

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    @property
    def success(self) -> bool:
        return self.raw.is_success

    @property
    def body(self) -> Dict[str, Any]:
        if self._body is _UNSET:
            self._body = self._safe_json()
        return self._body

    def _safe_json(self) -> Dict[str, Any]:
        # Handle empty responses (204 No Content, HEAD, etc.)
        if not self.raw.content:
            return {}

        try:
            data = self.raw.json()
        except ValueError as exc:
            snippet = (self.raw.text or "")[:500]
            raise HyperclientParseError(
                f"Expected JSON from {self.raw.request.method} "
                f"{self.raw.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, dict):
            raise HyperclientParseError(
                f"Expected top-level JSON object from "
                f"{self.raw.request.method} {self.raw.request.url}, "
                f"got {type(data).__name__}"
            )
        return data

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"


class Connection:
    """
    Synchronous HAL+JSON transport.
    - Resolves relative hrefs against ``base_url``
    - Sends request bodies as JSON
    - Returns every HTTP response, including non-2xx ones
    - Raises HyperclientConnectionError on network/timeout errors
    """

    def __init__(
        self,
        *,
        base_url: str,
        headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        base_url = (base_url or "").strip()
        if not base_url:
            raise ValueError("base_url must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("hyperclient.connection")

        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=self.base_url,
            headers={**DEFAULT_HEADERS, **dict(headers or {})},
            timeout=timeout_seconds,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def run_request(
        self,
        method: str,
        url: str,
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """
        Core request method, used directly for verbs without a helper.
        - One attempt, no retries
        - Raises HyperclientConnectionError on transport failures
        - Returns a Response whatever the status code
        """
        method = method.upper()
        start = time.perf_counter()

        try:
            raw = self.http.request(
                method,
                url,
                json=body,
                headers=dict(headers) if headers else None,
            )
        except httpx.TransportError as exc:
            log_event(
                "http_call",
                logger=self.log,
                level=logging.DEBUG,
                method=method,
                url=url,
                status="exception",
                error_type=type(exc).__name__,
                duration_ms=int((time.perf_counter() - start) * 1000),
            )
            raise HyperclientConnectionError(
                f"Network/timeout error calling {method} {url}: {exc}"
            ) from exc

        log_event(
            "http_call",
            logger=self.log,
            level=logging.DEBUG,
            method=method,
            url=str(raw.request.url),
            status=raw.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        return Response(raw)

    def get(self, url: str) -> Response:
        return self.run_request("GET", url)

    def head(self, url: str) -> Response:
        return self.run_request("HEAD", url)

    def delete(self, url: str) -> Response:
        return self.run_request("DELETE", url)

    def post(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        return self.run_request("POST", url, dict(params or {}))

    def put(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        return self.run_request("PUT", url, dict(params or {}))

    def patch(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Response:
        return self.run_request("PATCH", url, dict(params or {}))


__all__ = ["Connection", "Response", "DEFAULT_HEADERS"]
