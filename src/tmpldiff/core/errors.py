"""Error types raised while rendering, comparing, and displaying templates"""

from pathlib import Path


class TmplDiffError(Exception):
    """Base for all errors the CLI reports without a traceback."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class TemplateReadError(TmplDiffError):
    """A template source or target file could not be read."""

    def __init__(self, path: Path, what: str, details: str | None = None):
        self.path = Path(path)
        self.what = what
        super().__init__(f"Failed to read {what} file {self.path}", details)


class RenderError(TmplDiffError):
    """The templating engine rejected the template or its variables."""


class EmptyHunksError(TmplDiffError):
    """Hunk display was requested for a diff with no changes."""
