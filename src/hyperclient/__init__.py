"""hyperclient package exports."""

from .collection import Attributes, Collection, LinkCollection, ResourceCollection
from .config import create_entry_point_from_env, load_env_config
from .connection import Connection, Response
from .entry_point import EntryPoint
from .errors import (
    HyperclientConnectionError,
    HyperclientError,
    HyperclientModelValidationError,
    HyperclientParseError,
    MissingHrefError,
    MissingURITemplateVariables,
)
from .link import Link
from .logging import log_event, setup_logging
from .models import HALModel, LinkDescription
from .resource import Resource

__all__ = [
    # Navigation
    "EntryPoint",
    "Link",
    "Resource",
    "Attributes",
    "Collection",
    "LinkCollection",
    "ResourceCollection",
    # Transport
    "Connection",
    "Response",
    # Exceptions
    "HyperclientError",
    "MissingURITemplateVariables",
    "MissingHrefError",
    "HyperclientConnectionError",
    "HyperclientParseError",
    "HyperclientModelValidationError",
    # Typed views
    "HALModel",
    "LinkDescription",
    # Config / logging helpers
    "load_env_config",
    "create_entry_point_from_env",
    "setup_logging",
    "log_event",
]
