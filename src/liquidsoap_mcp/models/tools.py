"""Input models for the tool handlers.

Handlers build these from the raw MCP ``arguments`` mapping and translate
``pydantic.ValidationError`` into ``ValidationInputError``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator

DEFAULT_MAX_LENGTH = 50_000


class GetDocumentationInput(BaseModel):
    section: StrictStr
    max_length: float = Field(default=DEFAULT_MAX_LENGTH, gt=0)

    @field_validator("max_length", mode="before")
    @classmethod
    def default_when_unset(cls, v: Any) -> Any:
        # null and 0 both mean "no preference"
        if v is None or (isinstance(v, int | float) and not isinstance(v, bool) and v == 0):
            return DEFAULT_MAX_LENGTH
        return v

    @property
    def limit(self) -> int:
        """Character cap applied to the extracted text; fractions are floored."""
        return int(self.max_length)


class SearchFunctionsInput(BaseModel):
    query: StrictStr = Field(min_length=1, max_length=500)


class GetExamplesInput(BaseModel):
    task: StrictStr = Field(min_length=1, max_length=500)


class ValidateScriptInput(BaseModel):
    script: StrictStr
