# css_skeleton/__init__.py
# Re-export commonly used helpers for convenience.

from .ignore_patterns import DEFAULT_IGNORE_CLASS_PATTERNS, IgnorePatterns, glob_to_regex, is_ignored_class
from .dom_structure import Element, SoupElement, parse_html, select_root
from .selector_rule import selector_for_element
from .flatten import build_flat_css, render_css
from .html_files import find_html_files, read_file_utf8
from .errors import (
    EmptySelectorError,
    ExtractionError,
    HtmlReadError,
    NoHtmlFilesError,
    OperationCancelled,
    RootNotFoundError,
)

__all__ = [
    "DEFAULT_IGNORE_CLASS_PATTERNS",
    "IgnorePatterns",
    "glob_to_regex",
    "is_ignored_class",
    "Element",
    "SoupElement",
    "parse_html",
    "select_root",
    "selector_for_element",
    "build_flat_css",
    "render_css",
    "find_html_files",
    "read_file_utf8",
    "EmptySelectorError",
    "ExtractionError",
    "HtmlReadError",
    "NoHtmlFilesError",
    "OperationCancelled",
    "RootNotFoundError",
]
