"""Embedded-language formatter registry.

Provides a dict-like interface for the formatters a :class:`Formatter`
delegates ``<script>``, ``<style>`` and expression content to.
"""

from __future__ import annotations

from collections.abc import Callable, ItemsView, KeysView, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sveltefmt.options import FormatOptions

# (content, options) -> formatted content
SubFormatter = Callable[[str, "FormatOptions"], str]


class FormatterRegistry:
    """Dict-like registry of embedded-language formatters keyed by language.

    Supports:
        - registry['css'] = func
        - registry.update({'ts': func})
        - func = registry['css']
        - 'css' in registry

    Mutations replace the underlying dict (copy-on-write), so a snapshot
    taken with :meth:`copy` is never affected by later registrations.
    """

    __slots__ = ("_formatters",)

    def __init__(self, formatters: Mapping[str, SubFormatter] | None = None):
        self._formatters: dict[str, SubFormatter] = dict(formatters or {})

    def __getitem__(self, language: str) -> SubFormatter:
        return self._formatters[language]

    def __setitem__(self, language: str, func: SubFormatter) -> None:
        new = self._formatters.copy()
        new[language] = func
        self._formatters = new

    def __delitem__(self, language: str) -> None:
        new = self._formatters.copy()
        del new[language]
        self._formatters = new

    def __contains__(self, language: object) -> bool:
        return language in self._formatters

    def __len__(self) -> int:
        return len(self._formatters)

    def get(self, language: str, default: SubFormatter | None = None) -> SubFormatter | None:
        return self._formatters.get(language, default)

    def update(self, mapping: Mapping[str, SubFormatter]) -> None:
        """Batch registration."""
        new = self._formatters.copy()
        new.update(mapping)
        self._formatters = new

    def copy(self) -> dict[str, SubFormatter]:
        """Return a copy of the underlying dict."""
        return self._formatters.copy()

    def keys(self) -> KeysView[str]:
        return self._formatters.keys()

    def items(self) -> ItemsView[str, SubFormatter]:
        return self._formatters.items()
