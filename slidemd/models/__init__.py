"""Pydantic models for slidemd contracts."""

from .base import SlideBaseModel
from .config import Config
from .presentation import (
    Background,
    DeckConfig,
    Element,
    ElementKind,
    ElementStyle,
    Layer,
    Position,
    Presentation,
    Slide,
    Template,
)
from .render_map import RenderMap, RenderMapEntry

__all__ = [
    "Config",
    "SlideBaseModel",
    "Background",
    "DeckConfig",
    "Element",
    "ElementKind",
    "ElementStyle",
    "Layer",
    "Position",
    "Presentation",
    "Slide",
    "Template",
    "RenderMap",
    "RenderMapEntry",
]
