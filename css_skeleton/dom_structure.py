# css_skeleton/dom_structure.py
# Minimal element interface the selector logic depends on, plus the
# BeautifulSoup-backed implementation used for real HTML input.

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .errors import RootNotFoundError


class Element(Protocol):
    """What the flattener needs from a DOM node: a tag name, attributes, element children."""

    @property
    def tag_name(self) -> str: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    def children(self) -> Sequence["Element"]: ...


def _children(el: Tag) -> Iterable[Tag]:
    for child in el.children:
        if isinstance(child, Tag):
            yield child


class SoupElement:
    """Adapts a bs4 Tag to the Element interface."""

    __slots__ = ("tag",)

    def __init__(self, tag: Tag):
        self.tag = tag

    @property
    def tag_name(self) -> str:
        return self.tag.name or ""

    def get_attribute(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if value is None:
            return None
        # bs4 hands back multi-valued attributes (class, rel, ...) as lists
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def children(self) -> List["SoupElement"]:
        return [SoupElement(k) for k in _children(self.tag)]

    def __repr__(self) -> str:
        return f"SoupElement(<{self.tag_name}>)"


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def select_root(soup: BeautifulSoup, selector: str) -> SoupElement:
    """
    Resolve `selector` to the first matching element in `soup`.
    Raises RootNotFoundError when nothing matches, the match is not a tag,
    or soupsieve rejects the selector.
    """
    try:
        match = soup.select_one(selector)
    except (SelectorSyntaxError, NotImplementedError) as e:
        # soupsieve raises NotImplementedError for pseudo-elements and at-rules
        raise RootNotFoundError(selector, f"invalid selector: {e}") from e
    if match is None:
        raise RootNotFoundError(selector)
    if not isinstance(match, Tag):
        raise RootNotFoundError(selector, "match is not an element")
    return SoupElement(match)
