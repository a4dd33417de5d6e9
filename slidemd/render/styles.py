"""CSS derived from template data: background gradients and element placement."""

from __future__ import annotations

from typing import List, Optional

from ..models.presentation import Background, Element, ElementKind

# Orientation names the layer stacking, not the gradient axis: horizontal
# bands stack top to bottom.
GRADIENT_DIRECTIONS = {
    "horizontal": "to bottom",
    "vertical": "to right",
}


def _parse_proportion(proportion: str) -> float:
    return float(proportion.strip().rstrip("%"))


def build_css_gradient(background: Optional[Background]) -> Optional[str]:
    """Build a banded linear-gradient from a template background.

    Layer proportions are accumulated as-is; totals above or below 100% are
    not corrected.
    """
    if background is None or not background.layers:
        return None

    direction = GRADIENT_DIRECTIONS[background.orientation]
    stops: List[str] = []
    position = 0.0
    for layer in background.layers:
        next_position = position + _parse_proportion(layer.proportion)
        stops.append(f"{layer.color} {position}% {next_position}%")
        position = next_position
    return f"linear-gradient({direction}, {', '.join(stops)})"


def build_position_style(element: Element) -> str:
    """Absolute placement for an element, plus text overrides for text slots."""
    parts = ["position: absolute;"]
    if element.position.x:
        parts.append(f"left: {element.position.x};")
    if element.position.y:
        parts.append(f"top: {element.position.y};")
    if element.kind is ElementKind.TEXT and element.style is not None:
        if element.style.color:
            parts.append(f"color: {element.style.color};")
        if element.style.alignment:
            parts.append(f"text-align: {element.style.alignment};")
    return " ".join(parts)
