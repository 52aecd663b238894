# css_skeleton/selector_rule.py
# Pick the single selector token that represents one element.

from __future__ import annotations

from typing import FrozenSet, List, Optional

from .dom_structure import Element
from .ignore_patterns import DEFAULT_IGNORE, IgnorePatterns

SKIPPED_TAGS: FrozenSet[str] = frozenset({"script", "style", "br"})


def usable_classes(el: Element, ignore: IgnorePatterns = DEFAULT_IGNORE) -> List[str]:
    class_attr = (el.get_attribute("class") or "").strip()
    return [c for c in class_attr.split() if not ignore.matches(c)]


def selector_for_element(el: Element, ignore: IgnorePatterns = DEFAULT_IGNORE) -> Optional[str]:
    """
    Rules, first match wins:
      - script/style/br never get a selector (their children are still walked)
      - class beats id, and only the first class that survives `ignore` is used
      - otherwise the id, if any
      - otherwise None: the element is transparent
    """
    tag = (el.tag_name or "").lower()
    if tag in SKIPPED_TAGS:
        return None

    classes = usable_classes(el, ignore)
    if classes:
        return f".{classes[0]}"

    id_attr = (el.get_attribute("id") or "").strip()
    if id_attr:
        return f"#{id_attr}"

    return None
