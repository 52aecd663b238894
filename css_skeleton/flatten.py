# css_skeleton/flatten.py
# Walk a subtree and emit one empty rule block per distinct selector path.

from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from .dom_structure import Element
from .ignore_patterns import DEFAULT_IGNORE, IgnorePatterns
from .selector_rule import selector_for_element

Frame = Tuple[Element, Tuple[str, ...], bool]


def build_flat_css(
    root: Element,
    selector_parent: str = "",
    ignore: IgnorePatterns = DEFAULT_IGNORE,
    emit_intermediate: bool = True,
) -> List[str]:
    """
    Return CSS blocks of the form "selector {}" for every element under `root`
    that has a class or id, in document order, without duplicates.

    `selector_parent` is prefixed to every selector and, when non-empty, also
    gets its own block at the top. With emit_intermediate=False only leaf
    elements produce blocks.
    """
    results: List[str] = []
    seen: Set[str] = set()
    prefix = (selector_parent or "").strip()

    # explicit stack; the root itself never joins the path
    stack: List[Frame] = [(root, (), True)]

    while stack:
        el, path, is_root = stack.pop()

        sel = selector_for_element(el, ignore)
        new_path = path + (sel,) if (not is_root and sel) else path

        children = el.children()

        if not is_root and sel and (emit_intermediate or not children):
            joined = " ".join(new_path)
            full = f"{prefix} {joined}" if prefix else joined
            if full not in seen:
                seen.add(full)
                results.append(f"{full} {{}}")

        # reversed so pops come out in document order
        for child in reversed(children):
            stack.append((child, new_path, False))

    if prefix:
        root_line = f"{prefix} {{}}"
        if root_line not in results:
            results.insert(0, root_line)

    return results


def render_css(lines: Sequence[str]) -> str:
    return "\n".join(lines)
