"""Path template placeholder substitution."""

import re
from dataclasses import dataclass, field

from .encoding import encode_path_segment, render_value
from .exceptions import MissingPathParameterError
from .log_config import get_context_logger
from .types import Missing, Null, ParamBag, lookup

# ":name" where name is a maximal run of ASCII word characters
PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z0-9_]+)")

logger = get_context_logger("urlbat.template")


@dataclass(frozen=True)
class Substitution:
    """Result of substituting a path template."""

    path: str
    consumed: frozenset[str] = field(default_factory=frozenset)


def find_placeholders(template: str) -> list[str]:
    """Return placeholder names in order of first appearance.

    >>> find_placeholders("/users/:id/posts/:post_id/:id")
    ['id', 'post_id']
    """
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


def substitute_path(template: str, params: ParamBag) -> Substitution:
    """Replace ``:name`` placeholders in a path template.

    Names not present in ``params`` are left untouched. Present names are
    rendered, path-segment encoded and recorded as consumed so they stay
    out of the query string.

    Args:
        template: Path template
        params: Parameter bag

    Returns:
        Substitution with the resulting path and the consumed names

    Raises:
        MissingPathParameterError: A placeholder's name maps to None or UNDEFINED
    """
    consumed: set[str] = set()

    def replacer(match: re.Match) -> str:
        name = match.group(1)
        found = lookup(params, name)
        if isinstance(found, Missing):
            return match.group(0)
        if isinstance(found, Null):
            logger.debug(
                "Path parameter has no value",
                parameter=name,
                template=template,
            )
            raise MissingPathParameterError(
                f"Path parameter '{name}' has no value",
                parameter=name,
                template=template,
            )
        consumed.add(name)
        return encode_path_segment(render_value(found.value))

    path = PLACEHOLDER_PATTERN.sub(replacer, template)

    if consumed:
        logger.debug(
            "Substituted path placeholders",
            template=template,
            consumed=sorted(consumed),
        )

    return Substitution(path=path, consumed=frozenset(consumed))


__all__ = [
    "PLACEHOLDER_PATTERN",
    "Substitution",
    "find_placeholders",
    "substitute_path",
]
