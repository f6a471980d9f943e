"""The root of a navigation session."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .connection import Connection
from .link import Link


class EntryPoint(Link):
    """
    Link to the API root that owns the connection every Link and Resource
    reached from it shares.

        with EntryPoint("https://api.example.org/") as api:
            for order in api.embedded.orders:
                print(order.id)
    """

    def __init__(
        self,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        url = (url or "").strip()
        if not url:
            raise ValueError("url must be provided.")
        super().__init__({"href": url}, self)
        self._headers = dict(headers or {})
        self._timeout_seconds = timeout_seconds
        self._logger = logger
        self._http = http
        self._connection: Optional[Connection] = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "EntryPoint":
        from .config import create_entry_point_from_env

        return create_entry_point_from_env(**kwargs)

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            self._connection = Connection(
                base_url=self.href,
                headers=self._headers,
                timeout_seconds=self._timeout_seconds,
                logger=self._logger,
                http=self._http,
            )
        return self._connection

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> "EntryPoint":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["EntryPoint"]
