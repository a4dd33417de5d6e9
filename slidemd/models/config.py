"""Config model."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, constr

from .base import SlideBaseModel

NonEmptyStr = constr(min_length=1)


class Config(SlideBaseModel):
    input_path: NonEmptyStr = Field(..., description="Source .smd document")
    base_dir: NonEmptyStr = Field(..., description="Directory media paths resolve against")
    output_path: NonEmptyStr = Field(..., description="Generated HTML path")
    cache_dir: NonEmptyStr = Field(..., description="Highlighter asset cache directory")
    log_path: Optional[NonEmptyStr] = Field(None, description="JSONL run log path")
    render_map_path: Optional[NonEmptyStr] = Field(None, description="RenderMap JSON path")
    highlight_languages: List[NonEmptyStr] = Field(default_factory=lambda: ["clojure"])
