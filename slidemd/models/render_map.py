"""RenderMap contracts."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import SlideBaseModel


class RenderMapEntry(SlideBaseModel):
    slide_index: int
    position: int
    template_id: str
    title: Optional[str] = None
    element_count: int
    block_count: int


class RenderMap(SlideBaseModel):
    entries: List[RenderMapEntry] = Field(default_factory=list)
