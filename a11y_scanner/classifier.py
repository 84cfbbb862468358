"""File-kind classification by extension."""

import os

from a11y_scanner.models import FileKind

EXTENSION_KINDS = {
    ".jsx": FileKind.MARKUP_COMPONENT,
    ".tsx": FileKind.MARKUP_COMPONENT,
    ".js": FileKind.SCRIPT,
    ".ts": FileKind.SCRIPT,
    ".html": FileKind.PAGE_MARKUP,
    ".htm": FileKind.PAGE_MARKUP,
    ".css": FileKind.STYLESHEET,
    ".scss": FileKind.STYLESHEET,
}

SUPPORTED_EXTENSIONS = tuple(EXTENSION_KINDS)


def _extension(path: str) -> str:
    return os.path.splitext(path)[1].lower()


def classify(path: str) -> FileKind:
    return EXTENSION_KINDS.get(_extension(path), FileKind.UNKNOWN)


def file_type_label(path: str) -> str:
    """Short display label for reports: ``jsx``, ``html``, ``scss``..."""
    ext = _extension(path)
    if ext not in EXTENSION_KINDS:
        return "unknown"
    if ext == ".htm":
        return "html"
    return ext[1:]


def is_supported(path: str) -> bool:
    return classify(path) != FileKind.UNKNOWN
