"""Exception taxonomy for hyperclient."""

from __future__ import annotations

from typing import Iterable


class HyperclientError(Exception):
    """Base error for client failures."""


class MissingURITemplateVariables(HyperclientError):
    """Raised when a templated href is expanded without all of its variables."""

    def __init__(self, template: str, missing: Iterable[str]):
        self.template = template
        self.missing = list(missing)
        super().__init__(
            f"Missing URI template variables {', '.join(self.missing)} "
            f"for {template!r}"
        )


class MissingHrefError(HyperclientError):
    """Raised when a link without an href is asked for its URL."""

    def __init__(self, description):
        self.description = description
        super().__init__(f"Link has no href: {dict(description)!r}")


class HyperclientConnectionError(HyperclientError):
    """Network or timeout failure while talking to the API."""


class HyperclientParseError(HyperclientError):
    pass


class HyperclientModelValidationError(HyperclientError):
    pass


__all__ = [
    "HyperclientError",
    "MissingURITemplateVariables",
    "MissingHrefError",
    "HyperclientConnectionError",
    "HyperclientParseError",
    "HyperclientModelValidationError",
]
