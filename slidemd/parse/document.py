""".smd document parser.

A document is an EDN configuration block, a line reading ``END``, then slides.
Each slide starts with a ``-*-*-`` marker line that may carry a header of the
form ``[template-id] Optional title``. Slide bodies are Markdown, cut into
content blocks on blank lines.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..errors import MalformedDocument
from ..models.presentation import Presentation, Slide
from .config_block import parse_config

DOCUMENT_SEPARATOR = "\nEND\n"

_SLIDE_MARKER_RE = re.compile(r"^-\*-\*-[ \t]*", re.MULTILINE)
_HEADER_RE = re.compile(r"^\[([\w-]+)\]\s*(.*)$")
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")


def split_document(text: str) -> Tuple[str, str]:
    """Split raw text into (config block, slide body) on the first END line."""
    parts = text.split(DOCUMENT_SEPARATOR, 1)
    if len(parts) != 2:
        raise MalformedDocument(
            "Invalid .smd file: 'END' separator not found.",
            {"separator": "END"},
        )
    return parts[0], parts[1]


def parse_slide_header(line: str) -> Tuple[Optional[str], Optional[str]]:
    """Parse a slide header into (template_id, title)."""
    stripped = line.strip()
    match = _HEADER_RE.match(stripped)
    if match:
        title = match.group(2).strip()
        return match.group(1), title or None
    return None, stripped or None


def split_blocks(content: str) -> List[str]:
    """Cut slide body text into trimmed, non-blank content blocks."""
    blocks = (chunk.strip() for chunk in _BLOCK_SPLIT_RE.split(content))
    return [block for block in blocks if block]


def parse_slide(raw_slide: str) -> Slide:
    header_line, _, content = raw_slide.partition("\n")
    template_id, title = parse_slide_header(header_line)
    return Slide(template_id=template_id, title=title, blocks=split_blocks(content))


def parse_slides(body: str) -> List[Slide]:
    """Parse the slide-body part into slides, in document order."""
    fragments = _SLIDE_MARKER_RE.split(body)
    return [parse_slide(fragment) for fragment in fragments if fragment.strip()]


def parse_document(text: str) -> Presentation:
    """Parse a whole .smd document. No semantic validation is performed."""
    header, body = split_document(text)
    config = parse_config(header)
    return Presentation(
        title=config.title,
        templates=config.templates,
        slides=parse_slides(body),
    )
