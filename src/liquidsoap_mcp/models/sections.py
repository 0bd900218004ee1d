from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DocSection(BaseModel):
    """One page of the Liquidsoap documentation site."""

    model_config = ConfigDict(frozen=True)

    key: str  # e.g. "reference"
    url: str
    description: str
