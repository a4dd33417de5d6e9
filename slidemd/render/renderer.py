"""Presentation to self-contained HTML renderer."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..models.presentation import Element, ElementKind, Presentation, Slide
from ..models.render_map import RenderMap, RenderMapEntry
from ..validate.structure import validate_slide
from .assets import AssetProvider, highlighter_css, highlighter_scripts
from .mapping import map_content
from .markup import prefix_code_languages, render_markdown
from .media import EmbeddedMedia, embed_file, extract_image_path
from .page import render_page
from .styles import build_css_gradient, build_position_style

Embedder = Callable[[Path, str], EmbeddedMedia]
Markup = Callable[[str], str]

DEFAULT_TITLE = "Presentation"


class Renderer:
    def __init__(
        self,
        assets: AssetProvider,
        embedder: Embedder = embed_file,
        markup: Markup = render_markdown,
        highlight_languages: Sequence[str] = ("clojure",),
    ) -> None:
        self.assets = assets
        self.embedder = embedder
        self.markup = markup
        self.highlight_languages = list(highlight_languages)
        self._fragment_renderers: Dict[ElementKind, Callable[[Element, str, Path, str], str]] = {
            ElementKind.TEXT: self._render_text,
            ElementKind.IMAGE: self._render_image,
            ElementKind.VIDEO: self._render_video,
            ElementKind.UNKNOWN: self._render_unsupported,
        }

    def render(self, presentation: Presentation, base_dir: Path, output_path: Path) -> RenderMap:
        """Render a validated Presentation to output_path and return a RenderMap."""
        document, render_map = self.render_html(presentation, base_dir)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        return render_map

    def render_html(self, presentation: Presentation, base_dir: Path) -> Tuple[str, RenderMap]:
        render_map = RenderMap()
        backgrounds: Dict[str, Optional[str]] = {}
        slides: List[Dict[str, object]] = []

        for index, slide in enumerate(presentation.slides):
            template = validate_slide(index, slide, presentation.templates)
            if template.template_id not in backgrounds:
                backgrounds[template.template_id] = build_css_gradient(template.background)

            slides.append({
                "index": index,
                "active": index == 0,
                "background": backgrounds[template.template_id],
                "content": self._render_slide_content(template.elements, slide, Path(base_dir)),
            })
            render_map.entries.append(RenderMapEntry(
                slide_index=index,
                position=index + 1,
                template_id=template.template_id,
                title=slide.title,
                element_count=len(template.elements),
                block_count=len(slide.blocks),
            ))

        css_url, css_key = highlighter_css()
        scripts = [
            self.assets.fetch(url, key)
            for url, key in highlighter_scripts(self.highlight_languages)
        ]
        document = render_page(
            title=presentation.title or DEFAULT_TITLE,
            highlighter_css=self.assets.fetch(css_url, css_key),
            highlighter_js="\n".join(scripts),
            options=self._slide_options(presentation.slides),
            slides=slides,
            slide_count=len(presentation.slides),
        )
        return document, render_map

    def _render_slide_content(self, elements: Sequence[Element], slide: Slide, base_dir: Path) -> str:
        fragments = []
        for element, block in map_content(elements, slide.blocks):
            style = html.escape(build_position_style(element))
            fragments.append(self._fragment_renderers[element.kind](element, block, base_dir, style))
        return "\n".join(fragments)

    def _render_text(self, element: Element, block: str, base_dir: Path, style: str) -> str:
        body = prefix_code_languages(self.markup(block))
        return f'<div class="content-element text-content" style="{style}">{body}</div>'

    def _render_image(self, element: Element, block: str, base_dir: Path, style: str) -> str:
        media = self.embedder(base_dir, extract_image_path(block))
        return (
            f'<div class="content-element image-content" style="{style}">'
            f'<img src="{media.data_uri}" alt="Embedded Image">'
            "</div>"
        )

    def _render_video(self, element: Element, block: str, base_dir: Path, style: str) -> str:
        media = self.embedder(base_dir, block.strip())
        attributes = []
        if element.controls:
            attributes.append("controls")
        if element.autoplay:
            attributes.append("autoplay muted")
        attributes.append(f'src="{media.data_uri}"')
        return (
            f'<div class="content-element video-content" style="{style}">'
            f"<video {' '.join(attributes)}>"
            "Your browser does not support the video tag."
            "</video></div>"
        )

    def _render_unsupported(self, element: Element, block: str, base_dir: Path, style: str) -> str:
        return (
            f'<div class="content-element unsupported-content" style="{style}">'
            f"Unsupported element type: {html.escape(element.type)}</div>"
        )

    def _slide_options(self, slides: Sequence[Slide]) -> List[Dict[str, object]]:
        options = []
        for index, slide in enumerate(slides):
            label = f"{index + 1} - {slide.title}" if slide.title else str(index + 1)
            options.append({"value": index, "label": label})
        return options
