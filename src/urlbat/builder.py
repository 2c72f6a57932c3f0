"""
URL building entry points.

Two call shapes are supported:

    build("http://example.com/path/:p", {"p": 1})
    build("http://example.com/", "/path/:p", {"p": 1})

Both are normalized into a (base, path_template, params) triple and passed
through substitution, joining and query building in that order.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, overload

from .join import join_segments
from .log_config import get_context_logger
from .query import build_query
from .template import substitute_path
from .types import ParamBag

if TYPE_CHECKING:
    from .config import Settings


logger = get_context_logger("urlbat.builder")


@dataclass(frozen=True)
class BuildArguments:
    """Canonical arguments of a build call."""

    base: str
    path_template: str
    params: ParamBag = field(default_factory=dict)


def normalize_arguments(
    first: str,
    second: str | ParamBag | None = None,
    third: ParamBag | None = None,
) -> BuildArguments:
    """
    Resolve either call shape into a BuildArguments triple.

    A mapping in second position is the params and ``first`` is the whole
    template with an empty base. Otherwise ``first`` is the base, ``second``
    the path template and ``third`` the params.
    """
    if isinstance(second, Mapping):
        return BuildArguments(base="", path_template=first, params=second)
    return BuildArguments(
        base=first,
        path_template=second or "",
        params=third if third is not None else {},
    )


def assemble(joined: str, query: str) -> str:
    """Append ``?query`` to ``joined`` when the query is non-empty."""
    if not query:
        return joined
    return f"{joined}?{query}"


def _build(args: BuildArguments) -> str:
    substitution = substitute_path(args.path_template, args.params)
    joined = join_segments(args.base, substitution.path)
    query = build_query(args.params, substitution.consumed)
    url = assemble(joined, query)

    logger.debug(
        "Built URL",
        base=args.base,
        path_template=args.path_template,
        url=url,
    )
    return url


def build_from_template(template: str, params: ParamBag | None = None) -> str:
    """
    Build a URL from a single template.

    Args:
        template: Full URL template, e.g. "http://example.com/users/:id"
        params: Path and query parameters

    Returns:
        str: Built URL

    Raises:
        MissingPathParameterError: A placeholder's parameter is None or UNDEFINED
    """
    return _build(BuildArguments(base="", path_template=template, params=params or {}))


def build_from_base(
    base: str, path_template: str, params: ParamBag | None = None
) -> str:
    """
    Build a URL from a base and a path template.

    Args:
        base: Base URL, used verbatim apart from its trailing slash
        path_template: Path template joined onto the base
        params: Path and query parameters

    Returns:
        str: Built URL

    Raises:
        MissingPathParameterError: A placeholder's parameter is None or UNDEFINED
    """
    return _build(
        BuildArguments(base=base, path_template=path_template, params=params or {})
    )


@overload
def build(template: str, params: ParamBag | None = None, /) -> str: ...


@overload
def build(
    base: str, path_template: str, params: ParamBag | None = None, /
) -> str: ...


def build(first, second=None, third=None, /):
    """
    Build a URL from either ``(template, params)`` or
    ``(base, path_template, params)``.

    Examples:
        >>> build("http://example.com/", "/path/:p", {"p": "a b", "q": "b c"})
        'http://example.com/path/a%20b?q=b+c'
        >>> build("/base", {"zero": 0, "empty": None})
        '/base?zero=0'
    """
    return _build(normalize_arguments(first, second, third))


class UrlBuilder:
    """
    URL builder bound to a base URL and default parameters.

    Per-call parameters override the bound ones. Builders are never mutated;
    ``with_params`` and ``with_base_url`` return new instances.

    Example:
        api = UrlBuilder("https://api.example.com/v1", {"format": "json"})
        api.build("/users/:id", {"id": 42})
        # 'https://api.example.com/v1/users/42?format=json'
    """

    def __init__(
        self,
        base_url: str = "",
        base_params: dict[str, Any] | None = None,
    ):
        """
        Args:
            base_url: Base URL for every built URL
            base_params: Default parameters merged under per-call parameters
        """
        self.base_url = base_url
        self.base_params = base_params or {}

    def build(self, path_template: str = "", params: ParamBag | None = None) -> str:
        """
        Build a URL under the bound base.

        Args:
            path_template: Path template joined onto the base URL
            params: Per-call parameters

        Returns:
            str: Built URL
        """
        final_params = {**self.base_params, **(params or {})}
        return build_from_base(self.base_url, path_template, final_params)

    def with_params(self, **params: Any) -> "UrlBuilder":
        """Return a new builder with additional bound parameters."""
        new_builder = self.copy()
        new_builder.base_params.update(params)
        return new_builder

    def with_base_url(self, base_url: str) -> "UrlBuilder":
        """Return a new builder with a different base URL."""
        new_builder = self.copy()
        new_builder.base_url = base_url
        return new_builder

    def copy(self) -> "UrlBuilder":
        return UrlBuilder(
            base_url=self.base_url,
            base_params=self.base_params.copy(),
        )

    def to_config(self) -> dict[str, Any]:
        return {
            "base_url": self.base_url,
            "params": self.base_params.copy(),
        }

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "UrlBuilder":
        """
        Create a builder from a configuration dictionary.

        Args:
            config: Mapping with optional "base_url" and "params" keys

        Returns:
            UrlBuilder: New builder
        """
        return cls(
            base_url=config.get("base_url", ""),
            base_params=dict(config.get("params", {})),
        )

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "UrlBuilder":
        """Create a builder from the ``builder`` section of the settings."""
        if settings is None:
            from .config import get_settings

            settings = get_settings()
        return cls(
            base_url=settings.builder.base_url,
            base_params=dict(settings.builder.base_params),
        )

    def __repr__(self) -> str:
        return f"UrlBuilder(base_url='{self.base_url}', params={len(self.base_params)})"


__all__ = [
    "BuildArguments",
    "normalize_arguments",
    "assemble",
    "build",
    "build_from_template",
    "build_from_base",
    "UrlBuilder",
]
