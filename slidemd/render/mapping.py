"""Template resolution and greedy content-to-slot mapping."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..models.presentation import Element, Slide, Template

BLOCK_JOINER = "\n\n"


def effective_template_id(slide: Slide, templates: Sequence[Template]) -> Optional[str]:
    """Return the slide's explicit template id, or the default template's id."""
    if slide.template_id is not None:
        return slide.template_id
    return templates[0].template_id if templates else None


def resolve_template(slide: Slide, templates: Sequence[Template]) -> Optional[Template]:
    """Look up the template a slide renders with.

    An explicit reference wins; otherwise the first declared template is the
    default. Returns None for a dangling reference.
    """
    template_id = effective_template_id(slide, templates)
    for template in templates:
        if template.template_id == template_id:
            return template
    return None


def map_content(
    elements: Sequence[Element], blocks: Sequence[str]
) -> List[Tuple[Element, str]]:
    """Pair template elements with content blocks by position.

    With more blocks than elements, every block from the last element's slot
    onwards is merged into that last slot, joined by blank lines.
    """
    element_count = len(elements)
    if element_count == 0:
        return []
    if len(blocks) < element_count:
        return list(zip(elements, blocks))

    last = element_count - 1
    pairs = list(zip(elements[:last], blocks[:last]))
    pairs.append((elements[last], BLOCK_JOINER.join(blocks[last:])))
    return pairs
