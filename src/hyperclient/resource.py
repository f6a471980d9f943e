"""A fetched or embedded HAL document."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .collection import (
    EMBEDDED_KEY,
    LINKS_KEY,
    Attributes,
    LinkCollection,
    ResourceCollection,
)
from .errors import HyperclientModelValidationError

T = TypeVar("T", bound=BaseModel)


class Resource:
    """
    Snapshot of a HAL document.

    The body is split into ``attributes``, ``links`` (relation -> Link) and
    ``embedded`` (relation -> Resource). Any name not defined on the class
    resolves against those three, in that order:

        resource.name       # attribute
        resource.next       # Link
        resource.orders     # embedded Resource(s)
    """

    def __init__(
        self,
        body: Optional[Mapping[str, Any]],
        entry_point: Any,
        response: Any = None,
    ):
        self.body = body
        self.entry_point = entry_point
        self.response = response

        source = body or {}
        self.attributes = Attributes(source)
        self.links = LinkCollection(source.get(LINKS_KEY), entry_point)
        self.embedded = ResourceCollection(source.get(EMBEDDED_KEY), entry_point)

    @property
    def success(self) -> bool:
        if self.response is not None:
            return bool(self.response.success)
        return self.body is not None

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code

    @property
    def self_link(self) -> Any:
        return self.links.get("self")

    def as_model(self, model: Type[T]) -> T:
        """Validate the raw body into a pydantic model."""
        try:
            return model.model_validate(self.body or {})
        except ValidationError as exc:
            raise HyperclientModelValidationError(
                f"Resource did not match model {model.__name__}: {exc}"
            ) from exc

    def _lookup(self, name: str) -> Any:
        for section in (self.attributes, self.links, self.embedded):
            if name in section:
                return section[name]
        raise KeyError(name)

    def __getitem__(self, name: str) -> Any:
        return self._lookup(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or hasattr(type(self), name):
            raise AttributeError(name)
        # Not yet set while __init__ is still running.
        if name in ("attributes", "links", "embedded"):
            raise AttributeError(name)
        try:
            return self._lookup(name)
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    # Not a sequence: keeps iter() and flatten helpers off __getitem__.
    __iter__ = None

    def __contains__(self, name: str) -> bool:
        return any(
            name in section
            for section in (self.attributes, self.links, self.embedded)
        )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} attributes={self.attributes.to_dict()!r} "
            f"links={list(self.links)!r} embedded={list(self.embedded)!r}>"
        )


__all__ = ["Resource"]
