"""RFC 6570 URI template helpers used to resolve templated hrefs."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from uritemplate import URITemplate

from .errors import MissingURITemplateVariables


def variables(template: str) -> List[str]:
    """
    Returns the variable names referenced by ``template`` in declaration order.
    A name repeated anywhere in the template is listed once, at its first
    occurrence.
    Example: variables('/orders{?id,owner}') -> ['id', 'owner']
    """
    names: List[str] = []
    for variable in URITemplate(template).variables:
        for name in variable.variable_names:
            if name not in names:
                names.append(name)
    return names


OPTIONAL_OPERATORS = ("?", "&")


def _render(value: Any) -> Any:
    # uritemplate handles None itself; scalars go in as text, JSON-style.
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_render(item) for item in value]
    if isinstance(value, dict):
        return {key: _render(item) for key, item in value.items()}
    return str(value)


def _required(template: str) -> List[str]:
    """Names outside form-style query expressions (``{?a}``, ``{&a}``)."""
    names: List[str] = []
    for variable in URITemplate(template).variables:
        if variable.operator in OPTIONAL_OPERATORS:
            continue
        for name in variable.variable_names:
            if name not in names:
                names.append(name)
    return names


def expand(template: str, values: Optional[Mapping[str, Any]] = None) -> str:
    """
    Expands ``template`` with ``values``.

    Simple, reserved and path variables must be present in ``values``.
    Form-style query variables are optional and dropped when unbound, but a
    template with variables still needs at least one of them bound. A
    variable bound to None is left undefined and dropped from the result.
    Example: expand('/orders{?id,owner}', {'id': 1}) -> '/orders?id=1'
    """
    values = values or {}
    declared = variables(template)
    if declared and not any(name in values for name in declared):
        raise MissingURITemplateVariables(template, declared)
    missing = [name for name in _required(template) if name not in values]
    if missing:
        raise MissingURITemplateVariables(template, missing)

    rendered: Dict[str, Any] = {
        name: _render(value) for name, value in values.items()
    }
    return URITemplate(template).expand(rendered)


__all__ = ["variables", "expand", "MissingURITemplateVariables"]
