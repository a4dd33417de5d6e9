"""Typed conversion errors.

Every failure the engine detects is fatal and surfaces as one of these. Each
carries a human-readable message plus a ``context`` dict with the offending
slide position, template id, counts, or path.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SlideMarkdownError(Exception):
    """Base class for all conversion failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "context": self.context}


class MalformedDocument(SlideMarkdownError):
    pass


class ConfigParseError(SlideMarkdownError):
    pass


class NoTemplatesError(SlideMarkdownError):
    pass


class DuplicateTemplateIdError(SlideMarkdownError):
    pass


class BlankTemplateIdError(SlideMarkdownError):
    pass


class UnknownTemplateError(SlideMarkdownError):
    pass


class InsufficientContentError(SlideMarkdownError):
    pass


class MediaNotFoundError(SlideMarkdownError):
    pass


class AssetFetchError(SlideMarkdownError):
    pass
