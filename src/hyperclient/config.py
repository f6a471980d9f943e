from __future__ import annotations

import os
from typing import TYPE_CHECKING, Tuple

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .entry_point import EntryPoint

DEFAULT_TIMEOUT_SECONDS = 10.0


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, float]:
    """Load the API root URL and request timeout from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    url = os.getenv("HYPERCLIENT_URL", "").strip()
    raw_timeout = os.getenv("HYPERCLIENT_TIMEOUT", "").strip()
    if not raw_timeout:
        return url, DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ValueError(
            f"HYPERCLIENT_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
        ) from exc
    return url, timeout


def create_entry_point_from_env(**kwargs) -> "EntryPoint":
    """Create an EntryPoint from environment variables."""
    from .entry_point import EntryPoint

    url, timeout_seconds = load_env_config()
    if not url:
        raise ValueError("Missing HYPERCLIENT_URL in environment.")
    kwargs.setdefault("timeout_seconds", timeout_seconds)
    return EntryPoint(url, **kwargs)


__all__ = ["load_env_config", "create_entry_point_from_env", "DEFAULT_TIMEOUT_SECONDS"]
