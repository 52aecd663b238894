# css_skeleton/errors.py
# Failures raised at the I/O and input boundaries of an extract operation.
# The selector/flattening core itself never raises.

from __future__ import annotations


class ExtractionError(Exception):
    """Base class: the extract operation was aborted before producing CSS."""


class NoHtmlFilesError(ExtractionError):
    def __init__(self, root_dir: str):
        self.root_dir = root_dir
        super().__init__("No HTML source file was found in the workspace.")


class HtmlReadError(ExtractionError):
    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read HTML file: {cause}")


class EmptySelectorError(ExtractionError, ValueError):
    def __init__(self):
        super().__init__("Selector cannot be empty")


class RootNotFoundError(ExtractionError, LookupError):
    def __init__(self, selector: str, reason: str = "no matching element"):
        self.selector = selector
        self.reason = reason
        super().__init__(f"Cannot find a valid element with selector: {selector} ({reason})")


class OperationCancelled(ExtractionError):
    """The user backed out of a prompt; abort quietly."""
