"""Models listing (``GET /models``) response."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelInfo(BaseModel):
    """One available model; unknown keys are kept as extra attributes."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: Optional[str] = None
    owned_by: Optional[str] = None


class ModelResponse(BaseModel):
    """List of models available to the credential."""

    object: Optional[str] = None
    data: List[ModelInfo] = Field(default_factory=list)

    def ids(self) -> List[str]:
        return [m.id for m in self.data]


__all__ = ["ModelInfo", "ModelResponse"]
