# main.py
# Command-line front end: pick an HTML file, enter a root selector, and
# insert the generated skeleton CSS into a stylesheet (or print it).
#
#   python main.py --dir site --selector ".sec01 .card" --output site/style.css --line 12

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from css_skeleton.errors import (
    EmptySelectorError,
    ExtractionError,
    NoHtmlFilesError,
    OperationCancelled,
    RootNotFoundError,
)
from css_skeleton.html_files import find_html_files, relative_label
from css_skeleton.ignore_patterns import IgnorePatterns
from service.pipeline import extract_css_from_file, validate_root_selector
from service.settings import get_settings

log = logging.getLogger("html2css")

Prompt = Callable[[str], str]

SELECTOR_PROMPT = "Enter the CSS selector for the root element (e.g., .sec01 .card): "


# -----------------------------------------------------------------------------
# Prompts
# -----------------------------------------------------------------------------
def _ask(prompt_fn: Prompt, message: str) -> str:
    try:
        return prompt_fn(message)
    except (EOFError, KeyboardInterrupt):
        raise OperationCancelled()


def pick_html_file(root_dir: str | os.PathLike, prompt_fn: Prompt = input) -> Path:
    """
    List candidate HTML files under `root_dir` and let the user choose one by number.
    An empty answer cancels.
    """
    st = get_settings()
    files = find_html_files(
        root_dir,
        exclude_dirs=st.HTML_EXCLUDE_DIRS,
        limit=st.HTML_MAX_FILES,
        priority_names=st.HTML_PRIORITY_FILES,
    )
    if not files:
        raise NoHtmlFilesError(str(root_dir))

    print("Select the source HTML file from which to extract CSS selectors:")
    for i, f in enumerate(files, start=1):
        print(f"  {i:>3}. {f.name}  ({relative_label(f, root_dir)})")

    while True:
        answer = _ask(prompt_fn, "File number: ").strip()
        if not answer:
            raise OperationCancelled()
        if answer.isdigit() and 1 <= int(answer) <= len(files):
            return files[int(answer) - 1]
        print(f"Please enter a number between 1 and {len(files)}.")


def prompt_root_selector(prompt_fn: Prompt = input) -> str:
    while True:
        answer = _ask(prompt_fn, SELECTOR_PROMPT)
        try:
            return validate_root_selector(answer)
        except EmptySelectorError as e:
            print(e)


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------
def insert_into_file(path: str | os.PathLike, css: str, line: Optional[int] = None) -> None:
    """
    Insert the CSS block before 1-based `line` of `path` (end of file when
    None or past the end). A missing file is created.
    """
    target = Path(path)
    existing = target.read_text(encoding="utf-8") if target.exists() else ""
    lines = existing.splitlines(keepends=True)

    at = len(lines) if line is None else max(0, min(line - 1, len(lines)))
    if at > 0 and not lines[at - 1].endswith("\n"):
        lines[at - 1] += "\n"
    lines.insert(at, f"\n{css}\n")

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("".join(lines), encoding="utf-8")


# -----------------------------------------------------------------------------
# Entry
# -----------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2css",
        description="Generate empty CSS rule blocks mirroring the class/id structure under an HTML element.",
    )
    parser.add_argument("--dir", default=".", help="Project directory searched for .html/.htm files")
    parser.add_argument("--file", help="HTML file to read (skips the file picker)")
    parser.add_argument("--selector", help="Root element selector (skips the prompt)")
    parser.add_argument("--output", help="Stylesheet to insert into; prints to stdout when omitted")
    parser.add_argument("--line", type=int, help="1-based line of --output to insert before (default: end)")
    parser.add_argument("--leaf-only", action="store_true", help="Only emit blocks for elements without children")
    parser.add_argument(
        "--ignore",
        action="append",
        metavar="GLOB",
        help="Class pattern to ignore (repeatable); replaces IGNORE_CLASS_PATTERNS",
    )
    return parser


def run(argv: Optional[Sequence[str]] = None, prompt_fn: Prompt = input) -> int:
    args = build_parser().parse_args(argv)
    try:
        st = get_settings()
    except (RuntimeError, ValueError) as e:
        log.error("Invalid configuration: %s", e)
        return 1

    ignore: Optional[IgnorePatterns] = IgnorePatterns(args.ignore) if args.ignore else None
    emit_intermediate = False if args.leaf_only else st.EMIT_INTERMEDIATE

    try:
        # the selector is checked before any file is read
        if args.selector is not None:
            selector = validate_root_selector(args.selector)
        html_path = Path(args.file) if args.file else pick_html_file(args.dir, prompt_fn)
        if args.selector is None:
            selector = prompt_root_selector(prompt_fn)

        css = extract_css_from_file(html_path, selector, ignore=ignore, emit_intermediate=emit_intermediate)
    except OperationCancelled:
        return 1
    except RootNotFoundError as e:
        log.warning("%s", e)
        return 1
    except ExtractionError as e:
        log.error("%s", e)
        return 1

    if args.output:
        try:
            insert_into_file(args.output, css, args.line)
        except OSError as e:
            log.error("Cannot write CSS to %s: %s", args.output, e)
            return 1
    else:
        print(css)

    log.info("Generated CSS from HTML based on selector.")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
