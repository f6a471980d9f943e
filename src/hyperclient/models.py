from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

T = TypeVar("T", bound=BaseModel)


class LinkDescription(BaseModel):
    """Typed view of a HAL link object. Unknown keys are ignored."""

    href: Optional[str] = None
    templated: bool = False
    type: Optional[str] = None
    deprecation: Optional[str] = None
    name: Optional[str] = None
    profile: Optional[str] = None
    title: Optional[str] = None
    hreflang: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class HALModel(BaseModel):
    """
    Base model for typed views of a Resource body (see Resource.as_model).
    _links/_embedded stay loosely typed because HAL allows:
      - single link objects
      - arrays of link objects
      - single or listed embedded documents
    """

    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")
    embedded: Dict[str, Any] = Field(default_factory=dict, alias="_embedded")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def link(self, rel: str) -> Optional[LinkDescription]:
        value = self.links.get(rel)
        if isinstance(value, list):
            value = value[0] if value else None
        if not isinstance(value, dict):
            return None
        return LinkDescription.model_validate(value)

    def link_href(self, rel: str) -> Optional[str]:
        link = self.link(rel)
        return link.href if link else None

    def embedded_raw(self, rel: str) -> Optional[Dict[str, Any]]:
        value = self.embedded.get(rel)
        return value if isinstance(value, dict) else None

    def embedded_as(self, rel: str, model: Type[T]) -> Optional[T]:
        raw = self.embedded_raw(rel)
        if not raw:
            return None
        try:
            return model.model_validate(raw)
        except ValidationError:
            return None


__all__ = ["HALModel", "LinkDescription"]
