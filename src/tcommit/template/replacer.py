"""Replacer: the lookup a template consults for variable values."""

from collections.abc import Callable, Mapping
from typing import Protocol


class Replacer(Protocol):
    def get(self, key: str) -> tuple[str, bool]:
        """Return ``(value, True)`` for a known key, ``("", False)`` otherwise."""


class ReplacerFunc:
    """Adapts a ``key -> (value, found)`` callable to the Replacer protocol."""

    def __init__(self, func: Callable[[str], tuple[str, bool]]):
        self._func = func

    def get(self, key: str) -> tuple[str, bool]:
        return self._func(key)


def replacer_from_map(mapping: Mapping[str, str]) -> ReplacerFunc:
    """Build a replacer backed by a static mapping."""

    def lookup(key):
        if key in mapping:
            return mapping[key], True
        return "", False

    return ReplacerFunc(lookup)
