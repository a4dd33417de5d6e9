"""Base models shared by parsed documents and run artifacts."""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class SlideBaseModel(BaseModel):
    """Immutable, strict model. Parsed slides and templates never change after decode."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=False)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize with sorted keys so repeated runs produce identical artifacts."""
        return json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=True, indent=indent)


class LenientHeaderModel(SlideBaseModel):
    """Header record that tolerates keys the renderer does not use (e.g. :author)."""

    model_config = ConfigDict(extra="ignore")
