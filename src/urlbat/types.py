"""Type definitions for URL building parameters."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Union


class _Undefined:
    """Absent-marker for a parameter that is declared but carries no value."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

ParamValue = Union[str, int, float, bool, None, _Undefined]
ParamBag = Mapping[str, Any]


@dataclass(frozen=True)
class Missing:
    """The name is not a key of the params at all."""


@dataclass(frozen=True)
class Null:
    """The name is a key whose value is ``None`` or ``UNDEFINED``."""


@dataclass(frozen=True)
class Value:
    """The name is a key with a usable value."""

    value: Any


Lookup = Union[Missing, Null, Value]


def lookup(params: ParamBag, name: str) -> Lookup:
    """Classify ``params[name]`` as missing, null or a present value.

    Args:
        params: Parameter bag
        name: Parameter name

    Returns:
        Missing, Null or Value wrapping the raw value
    """
    if name not in params:
        return Missing()
    value = params[name]
    if value is None or value is UNDEFINED:
        return Null()
    return Value(value)


__all__ = [
    "UNDEFINED",
    "ParamValue",
    "ParamBag",
    "Missing",
    "Null",
    "Value",
    "Lookup",
    "lookup",
]
