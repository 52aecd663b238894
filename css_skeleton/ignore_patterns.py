# css_skeleton/ignore_patterns.py
# Glob-style class-name filters (e.g. "br_*", ".br_*") used to keep utility
# classes out of generated selectors.

from __future__ import annotations

import re
from typing import Iterable, Iterator, Pattern, Tuple, Union

DEFAULT_IGNORE_CLASS_PATTERNS: Tuple[str, ...] = ("br_*", ".br_*")


def glob_to_regex(glob: str) -> Pattern[str]:
    """Convert a glob pattern (only `*` is special) into an anchored regex."""
    g = glob[1:] if glob.startswith(".") else glob
    body = ".*".join(re.escape(part) for part in g.split("*"))
    return re.compile(f"^{body}$")


class IgnorePatterns:
    """
    Immutable, pre-compiled set of ignore globs.
    Build it once from configuration and pass it around explicitly.
    """

    __slots__ = ("_patterns", "_compiled")

    def __init__(self, patterns: Iterable[str] = DEFAULT_IGNORE_CLASS_PATTERNS):
        self._patterns: Tuple[str, ...] = tuple(patterns)
        self._compiled: Tuple[Pattern[str], ...] = tuple(glob_to_regex(p) for p in self._patterns)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    def matches(self, class_name: str) -> bool:
        return any(rx.fullmatch(class_name) for rx in self._compiled)

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IgnorePatterns):
            return NotImplemented
        return self._patterns == other._patterns

    def __hash__(self) -> int:
        return hash(self._patterns)

    def __repr__(self) -> str:
        return f"IgnorePatterns({list(self._patterns)!r})"


DEFAULT_IGNORE = IgnorePatterns()


def is_ignored_class(cls: str, patterns: Union[IgnorePatterns, Iterable[str]] = DEFAULT_IGNORE) -> bool:
    """True if `cls` matches any of the ignore patterns."""
    if not isinstance(patterns, IgnorePatterns):
        patterns = IgnorePatterns(patterns)
    return patterns.matches(cls)
