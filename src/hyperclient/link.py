"""Links between HAL resources and their lazy resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from . import uri_template
from .errors import HyperclientConnectionError, MissingHrefError
from .resource import Resource


@dataclass(frozen=True)
class _Fetched:
    body: Any
    response: Any


@dataclass(frozen=True)
class _Failed:
    response: Any = None


_FetchResult = Union[_Fetched, _Failed]


class Link:
    """
    One HAL link description bound to an entry point.

    Metadata is read straight from the description. Anything else is read
    from the Resource the link points to, fetched on demand:

        orders = root.orders             # Link
        orders.title                     # description, no request
        orders.expand(page=2).embedded   # GET, then Resource.embedded
    """

    def __init__(
        self,
        description: Mapping[str, Any],
        entry_point: Any,
        uri_variables: Optional[Mapping[str, Any]] = None,
    ):
        self._description = description
        self._entry_point = entry_point
        self._uri_variables: Dict[str, Any] = dict(uri_variables or {})

    # --- Description ------------------------------------------------------ #

    @property
    def description(self) -> Mapping[str, Any]:
        return self._description

    @property
    def entry_point(self) -> Any:
        return self._entry_point

    @property
    def uri_variables(self) -> Dict[str, Any]:
        return dict(self._uri_variables)

    @property
    def href(self) -> Optional[str]:
        return self._description.get("href")

    @property
    def type(self) -> Optional[str]:
        return self._description.get("type")

    @property
    def deprecation(self) -> Optional[str]:
        return self._description.get("deprecation")

    @property
    def name(self) -> Optional[str]:
        return self._description.get("name")

    @property
    def profile(self) -> Optional[str]:
        return self._description.get("profile")

    @property
    def title(self) -> Optional[str]:
        return self._description.get("title")

    @property
    def hreflang(self) -> Optional[str]:
        return self._description.get("hreflang")

    @property
    def templated(self) -> bool:
        return bool(self._description.get("templated"))

    @property
    def variables(self) -> List[str]:
        if not self.templated:
            return []
        return uri_template.variables(self.href or "")

    # --- Resolution ------------------------------------------------------- #

    def expand(
        self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> "Link":
        """Return a new Link carrying ``values`` as its URI variables."""
        bound = dict(values or {})
        bound.update(kwargs)
        return Link(self._description, self._entry_point, bound)

    @property
    def url(self) -> str:
        href = self.href
        if href is None:
            raise MissingHrefError(self._description)
        if not self.templated:
            return href
        return uri_template.expand(href, self._uri_variables)

    @property
    def connection(self) -> Any:
        return self._entry_point.connection

    # --- Transport verbs -------------------------------------------------- #

    def get(self) -> Any:
        url = self.url
        return self.connection.get(url)

    def head(self) -> Any:
        url = self.url
        return self.connection.head(url)

    def delete(self) -> Any:
        url = self.url
        return self.connection.delete(url)

    def options(self) -> Any:
        url = self.url
        return self.connection.run_request("options", url, None, None)

    def post(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        url = self.url
        return self.connection.post(url, params if params is not None else {})

    def put(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        url = self.url
        return self.connection.put(url, params if params is not None else {})

    def patch(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        url = self.url
        return self.connection.patch(url, params if params is not None else {})

    # --- Materialization -------------------------------------------------- #

    def _fetch(self) -> _FetchResult:
        try:
            response = self.get()
        except HyperclientConnectionError:
            return _Failed()
        if response.success:
            return _Fetched(response.body, response)
        return _Failed(response)

    def resource(self) -> Resource:
        """
        GET the link and build a Resource from it.
        A failed request yields a Resource with an empty body.
        """
        result = self._fetch()
        if isinstance(result, _Fetched):
            return Resource(result.body, self._entry_point, result.response)
        return Resource(None, self._entry_point, result.response)

    # --- Delegation ------------------------------------------------------- #

    # Not a sequence: iter() and flatten helpers see a single item.
    __iter__ = None

    def __getattr__(self, name: str) -> Any:
        # Private and protocol names (__iter__, __len__, __deepcopy__...) and
        # names the class defines itself are never resolved remotely.
        if name.startswith("_") or hasattr(type(self), name):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return getattr(self.resource(), name)

    def __getitem__(self, key: str) -> Any:
        return self.resource()[key]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {dict(self._description)!r}>"


__all__ = ["Link"]
