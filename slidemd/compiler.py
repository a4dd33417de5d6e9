"""Parse and validate a .smd document in one step."""

from __future__ import annotations

from .models.presentation import Presentation
from .parse.document import parse_document
from .validate.structure import validate_presentation


def load_presentation(text: str) -> Presentation:
    """Split, parse, and validate a document. Raises on the first failure."""
    return validate_presentation(parse_document(text))
