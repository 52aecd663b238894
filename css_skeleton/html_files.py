# css_skeleton/html_files.py
# Locate candidate HTML sources in a project tree and read them as UTF-8.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Sequence

from .errors import HtmlReadError

log = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm")
DEFAULT_EXCLUDE_DIRS = ("node_modules",)
DEFAULT_PRIORITY_NAMES = ("index.html", "under.html", "interview.html")
DEFAULT_MAX_FILES = 100


def _walk_html(root: Path, exclude_dirs: Iterable[str]) -> Iterable[Path]:
    excluded = set(exclude_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        # prune in place so os.walk never descends into excluded trees
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for name in sorted(filenames):
            if name.lower().endswith(HTML_SUFFIXES):
                yield Path(dirpath) / name


def prioritize(files: Sequence[Path], priority_names: Sequence[str] = DEFAULT_PRIORITY_NAMES) -> List[Path]:
    """Move the first file named like each priority name to the front, in priority order."""
    wanted = [n.lower() for n in priority_names]
    front: List[Path] = []
    for name in wanted:
        hit = next((f for f in files if f.name.lower() == name), None)
        if hit is not None:
            front.append(hit)
    rest = [f for f in files if f not in front]
    return front + rest


def find_html_files(
    root_dir: str | os.PathLike,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    limit: int = DEFAULT_MAX_FILES,
    priority_names: Sequence[str] = DEFAULT_PRIORITY_NAMES,
) -> List[Path]:
    """
    Return up to `limit` .html/.htm files below `root_dir`, skipping excluded
    directories, with priority names (index.html, ...) first.
    """
    root = Path(root_dir)
    found: List[Path] = []
    for p in _walk_html(root, exclude_dirs):
        if len(found) >= limit:
            break
        found.append(p)
    log.debug("found %d html file(s) under %s", len(found), root)
    return prioritize(found, priority_names)


def relative_label(path: Path, root_dir: str | os.PathLike) -> str:
    try:
        return str(path.relative_to(root_dir))
    except ValueError:
        return str(path)


def read_file_utf8(path: str | os.PathLike) -> str:
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise HtmlReadError(str(path), e) from e
