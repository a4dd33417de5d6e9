"""Markdown to HTML conversion for text slots."""

from __future__ import annotations

import re

import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

_BARE_CODE_CLASS_RE = re.compile(r'<code class="(\w+)">')


def prefix_code_languages(html: str) -> str:
    """Rewrite ``<code class="lang">`` to the ``language-lang`` form Prism expects."""
    return _BARE_CODE_CLASS_RE.sub(r'<code class="language-\1">', html)


def render_markdown(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
