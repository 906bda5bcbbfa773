"""Adaptation of caller-supplied parameters into an immutable parameter set."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable

from quickquery.core.exceptions import ParameterError

ParameterSet = Mapping[str, Any]

EMPTY_PARAMETERS: ParameterSet = MappingProxyType({})


def to_parameter_set(
    parameters: Mapping[str, Any] | Iterable[Any] | None = None,
    /,
    *pairs: Any,
    **named: Any,
) -> ParameterSet:
    """Build a read-only name -> value mapping.

    Accepts a mapping, a flat ``name, value, name, value`` sequence (either
    as one iterable or spread as positional arguments), a sequence of
    ``(name, value)`` tuples, or keyword arguments. Names must be unique
    non-empty strings.
    """

    values: dict[str, Any] = {}

    def _add(name: Any, value: Any) -> None:
        if not isinstance(name, str):
            raise ParameterError(f"Parameter name must be a string, got {type(name).__name__}")
        if not name:
            raise ParameterError("Parameter name cannot be empty")
        if name in values:
            raise ParameterError(f"Duplicate parameter name: {name}")
        values[name] = value

    if pairs:
        items: list[Any] = [parameters, *pairs]
    elif parameters is None:
        items = []
    elif isinstance(parameters, Mapping):
        for name, value in parameters.items():
            _add(name, value)
        items = []
    elif isinstance(parameters, (str, bytes)):
        raise ParameterError("Parameters must be a mapping or a sequence, not a string")
    else:
        items = list(parameters)

    if items and all(isinstance(item, tuple) and len(item) == 2 for item in items):
        for name, value in items:
            _add(name, value)
    elif items:
        if len(items) % 2:
            raise ParameterError(
                f"Expected alternating names and values, got {len(items)} item(s)"
            )
        for name, value in zip(items[::2], items[1::2]):
            _add(name, value)

    for name, value in named.items():
        _add(name, value)

    if not values:
        return EMPTY_PARAMETERS
    return MappingProxyType(values)


__all__ = ["EMPTY_PARAMETERS", "ParameterSet", "to_parameter_set"]
