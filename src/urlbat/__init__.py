"""
urlbat

Builds URL strings from a base, a path template with ``:name`` placeholders
and a bag of parameters. Parameters not used in the path become a sorted,
form-encoded query string.

Usage:
    from urlbat import build, UrlBuilder

    build("http://example.com/", "/users/:id", {"id": 42, "expand": True})
    # 'http://example.com/users/42?expand=true'

    api = UrlBuilder("https://api.example.com/v1", {"format": "json"})
    api.build("/users/:id", {"id": 42})
"""

from .builder import (
    BuildArguments,
    UrlBuilder,
    assemble,
    build,
    build_from_base,
    build_from_template,
    normalize_arguments,
)
from .config import BuilderSettings, Settings, get_settings, reload_settings
from .encoding import encode_path_segment, encode_query_component, render_value
from .exceptions import MissingPathParameterError, UrlbatConfigError, UrlbatError
from .join import join_segments
from .log_config import (
    BuildContext,
    configure_from_settings,
    configure_logging,
    get_context_logger,
)
from .query import build_query, is_absent
from .template import Substitution, find_placeholders, substitute_path
from .types import UNDEFINED, Missing, Null, Value, lookup

__version__ = "1.0.0"

__all__ = [
    # Entry points
    "build",
    "build_from_template",
    "build_from_base",
    "UrlBuilder",
    # Pipeline stages
    "BuildArguments",
    "normalize_arguments",
    "Substitution",
    "find_placeholders",
    "substitute_path",
    "join_segments",
    "build_query",
    "is_absent",
    "assemble",
    # Encoding
    "render_value",
    "encode_path_segment",
    "encode_query_component",
    # Parameter values
    "UNDEFINED",
    "Missing",
    "Null",
    "Value",
    "lookup",
    # Errors
    "UrlbatError",
    "MissingPathParameterError",
    "UrlbatConfigError",
    # Configuration
    "Settings",
    "BuilderSettings",
    "get_settings",
    "reload_settings",
    # Logging
    "get_context_logger",
    "configure_logging",
    "configure_from_settings",
    "BuildContext",
    # Package metadata
    "__version__",
]
