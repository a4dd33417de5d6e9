"""Presentation contracts: templates, elements, and parsed slides."""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .base import LenientHeaderModel, SlideBaseModel

Orientation = Literal["horizontal", "vertical"]

_PROPORTION_RE = re.compile(r"^\s*\d+(\.\d+)?\s*%?\s*$")


class ElementKind(str, Enum):
    """Closed set of element variants the renderer knows how to draw."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    UNKNOWN = "unknown"

    @classmethod
    def from_type(cls, type_name: str) -> "ElementKind":
        for kind in (cls.TEXT, cls.IMAGE, cls.VIDEO):
            if kind.value == type_name:
                return kind
        return cls.UNKNOWN


class Layer(SlideBaseModel):
    color: str
    proportion: str = Field(..., description="Percentage string, e.g. '30%'")

    @field_validator("proportion")
    @classmethod
    def check_proportion(cls, value: str) -> str:
        if not _PROPORTION_RE.match(value):
            raise ValueError(f"proportion must be a number with an optional %, got {value!r}")
        return value


class Background(SlideBaseModel):
    orientation: Orientation = "horizontal"
    layers: List[Layer] = Field(default_factory=list)


class Position(SlideBaseModel):
    x: Optional[str] = None
    y: Optional[str] = None


class ElementStyle(LenientHeaderModel):
    color: Optional[str] = None
    alignment: Optional[str] = None


class Element(SlideBaseModel):
    type: str
    position: Position = Field(default_factory=Position)
    style: Optional[ElementStyle] = None
    controls: bool = True
    autoplay: bool = False

    @property
    def kind(self) -> ElementKind:
        return ElementKind.from_type(self.type)


class Template(SlideBaseModel):
    template_id: str = Field("", alias="slide_template")
    name: Optional[str] = Field(None, alias="template_name")
    background: Optional[Background] = None
    elements: List[Element] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.template_id


class DeckConfig(LenientHeaderModel):
    """Decoded configuration block."""

    title: Optional[str] = None
    templates: List[Template] = Field(default_factory=list)


class Slide(SlideBaseModel):
    template_id: Optional[str] = None
    title: Optional[str] = None
    blocks: List[str] = Field(default_factory=list)


class Presentation(SlideBaseModel):
    title: Optional[str] = None
    templates: List[Template] = Field(default_factory=list)
    slides: List[Slide] = Field(default_factory=list)
