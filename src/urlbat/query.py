"""Query string construction."""

import math
from collections.abc import Iterable
from typing import Any

from .encoding import encode_query_component, render_value
from .types import UNDEFINED, ParamBag


def is_absent(value: Any) -> bool:
    """Check whether a value is left out of the query string.

    ``None``, ``UNDEFINED``, NaN and the empty string are absent. ``0`` and
    ``False`` are not.
    """
    if value is None or value is UNDEFINED:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ""


def build_query(params: ParamBag, consumed: Iterable[str] = frozenset()) -> str:
    """
    Build a form-encoded query string from the unconsumed parameters.

    Keys are sorted by code point so the output does not depend on the
    order of ``params``.

    Args:
        params: Parameter bag
        consumed: Names already substituted into the path

    Returns:
        str: Query string without the leading "?", or "" if nothing remains
    """
    skip = frozenset(consumed)
    query_parts = []

    for key in sorted(k for k in params if k not in skip):
        value = params[key]
        if is_absent(value):
            continue
        encoded_key = encode_query_component(key)
        encoded_value = encode_query_component(render_value(value))
        query_parts.append(f"{encoded_key}={encoded_value}")

    return "&".join(query_parts)


__all__ = ["is_absent", "build_query"]
