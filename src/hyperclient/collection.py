"""Read-only mapping wrappers for the parts of a HAL document."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

_MISSING = object()

LINKS_KEY = "_links"
EMBEDDED_KEY = "_embedded"


class Collection(Mapping[str, Any]):
    """
    Mapping over a parsed HAL section.
    Keys are also readable as attributes: ``collection.name``.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def fetch(self, key: str, default: Any = _MISSING) -> Any:
        """Like ``[]`` but with an optional fallback instead of KeyError."""
        if key in self._data:
            return self._data[key]
        if default is _MISSING:
            raise KeyError(key)
        return default

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._data!r}>"


class Attributes(Collection):
    """Plain properties of a document, without ``_links`` and ``_embedded``."""

    def __init__(self, body: Optional[Mapping[str, Any]] = None):
        body = body or {}
        super().__init__(
            {k: v for k, v in body.items() if k not in (LINKS_KEY, EMBEDDED_KEY)}
        )


class LinkCollection(Collection):
    """
    Relation name -> Link, or list of Link for array-valued relations.
    """

    def __init__(self, links: Optional[Mapping[str, Any]], entry_point: Any):
        from .link import Link

        parsed: Dict[str, Any] = {}
        for rel, value in (links or {}).items():
            if isinstance(value, list):
                parsed[rel] = [Link(item, entry_point) for item in value]
            elif isinstance(value, Mapping):
                parsed[rel] = Link(value, entry_point)
            else:
                parsed[rel] = value
        super().__init__(parsed)


class ResourceCollection(Collection):
    """
    Relation name -> embedded Resource, or list of Resource.
    """

    def __init__(self, embedded: Optional[Mapping[str, Any]], entry_point: Any):
        from .resource import Resource

        parsed: Dict[str, Any] = {}
        for rel, value in (embedded or {}).items():
            if isinstance(value, list):
                parsed[rel] = [Resource(item, entry_point) for item in value]
            elif isinstance(value, Mapping):
                parsed[rel] = Resource(value, entry_point)
            else:
                parsed[rel] = value
        super().__init__(parsed)


__all__ = [
    "Collection",
    "Attributes",
    "LinkCollection",
    "ResourceCollection",
    "LINKS_KEY",
    "EMBEDDED_KEY",
]
