"""Structural validation of templates against slides."""

from __future__ import annotations

from typing import Dict, List

from ..errors import (
    BlankTemplateIdError,
    DuplicateTemplateIdError,
    InsufficientContentError,
    NoTemplatesError,
    UnknownTemplateError,
)
from ..models.presentation import Presentation, Slide, Template
from ..render.mapping import effective_template_id, resolve_template


def _slide_label(index: int, slide: Slide) -> str:
    return f"Slide {index + 1} ('{slide.title or ''}')"


def validate_templates(templates: List[Template]) -> None:
    """Raise if the template list is empty, has duplicate ids, or blank ids."""
    if not templates:
        raise NoTemplatesError("Validation Failed: No templates found in EDN header.")

    ids = [template.template_id for template in templates]
    seen: Dict[str, int] = {}
    duplicates: List[str] = []
    for template_id in ids:
        seen[template_id] = seen.get(template_id, 0) + 1
        if seen[template_id] == 2:
            duplicates.append(template_id)
    if duplicates:
        raise DuplicateTemplateIdError(
            "Validation Failed: Template :slide-template IDs are not unique.",
            {"ids": ids, "duplicates": duplicates},
        )

    if any(not template_id.strip() for template_id in ids):
        raise BlankTemplateIdError(
            "Validation Failed: Template :slide-template IDs cannot be blank.",
            {"ids": ids},
        )


def validate_slide(index: int, slide: Slide, templates: List[Template]) -> Template:
    """Check one slide against its resolved template and return that template."""
    template = resolve_template(slide, templates)
    if template is None:
        template_id = effective_template_id(slide, templates)
        raise UnknownTemplateError(
            f"Validation Failed: {_slide_label(index, slide)} uses non-existent "
            f"template-id '{template_id}'.",
            {"slide": index + 1, "title": slide.title, "template_id": template_id},
        )

    expected = len(template.elements)
    provided = len(slide.blocks)
    if provided < expected:
        raise InsufficientContentError(
            f"Validation Failed: {_slide_label(index, slide)} for template "
            f"'{template.display_name}' expects at least {expected} content "
            f"block(s), but {provided} were provided.",
            {
                "slide": index + 1,
                "title": slide.title,
                "template_id": template.template_id,
                "template_name": template.name,
                "expected": expected,
                "provided": provided,
            },
        )
    return template


def validate_presentation(presentation: Presentation) -> Presentation:
    """Validate templates, then every slide in order. Returns the input unchanged."""
    validate_templates(presentation.templates)
    for index, slide in enumerate(presentation.slides):
        validate_slide(index, slide, presentation.templates)
    return presentation
