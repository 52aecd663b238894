# service/pipeline.py
# Selector → parse → root lookup → flatten glue shared by the CLI and the API.

from __future__ import annotations

import logging
import os
from typing import List, Optional

from css_skeleton.dom_structure import parse_html, select_root
from css_skeleton.errors import EmptySelectorError
from css_skeleton.flatten import build_flat_css, render_css
from css_skeleton.html_files import read_file_utf8
from css_skeleton.ignore_patterns import IgnorePatterns

from service.settings import get_settings

log = logging.getLogger(__name__)


def validate_root_selector(selector: Optional[str]) -> str:
    """Return the trimmed selector, or raise EmptySelectorError."""
    if selector is None or not selector.strip():
        raise EmptySelectorError()
    return selector.strip()


def extract_lines(
    html: str,
    root_selector: str,
    ignore: Optional[IgnorePatterns] = None,
    emit_intermediate: Optional[bool] = None,
) -> List[str]:
    """
    Parse `html`, resolve `root_selector` to its first match and flatten that
    subtree into "selector {}" lines. Unset options fall back to settings.
    """
    st = get_settings()
    selector = validate_root_selector(root_selector)
    if ignore is None:
        ignore = st.ignore_patterns()
    if emit_intermediate is None:
        emit_intermediate = st.EMIT_INTERMEDIATE

    soup = parse_html(html)
    root = select_root(soup, selector)
    lines = build_flat_css(root, selector, ignore=ignore, emit_intermediate=emit_intermediate)
    log.debug("extracted %d rule(s) under %r", len(lines), selector)
    return lines


def extract_css(
    html: str,
    root_selector: str,
    ignore: Optional[IgnorePatterns] = None,
    emit_intermediate: Optional[bool] = None,
) -> str:
    return render_css(extract_lines(html, root_selector, ignore, emit_intermediate))


def extract_css_from_file(
    path: str | os.PathLike,
    root_selector: str,
    ignore: Optional[IgnorePatterns] = None,
    emit_intermediate: Optional[bool] = None,
) -> str:
    """
    File-based variant. The selector is validated before the file is touched.
    """
    selector = validate_root_selector(root_selector)
    html = read_file_utf8(path)
    return extract_css(html, selector, ignore, emit_intermediate)
