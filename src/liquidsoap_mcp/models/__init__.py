from __future__ import annotations

from liquidsoap_mcp.models.cache import CacheEntry
from liquidsoap_mcp.models.sections import DocSection
from liquidsoap_mcp.models.tools import (
    GetDocumentationInput,
    GetExamplesInput,
    SearchFunctionsInput,
    ValidateScriptInput,
)

__all__ = [
    # sections
    "DocSection",
    # cache
    "CacheEntry",
    # tools
    "GetDocumentationInput",
    "SearchFunctionsInput",
    "GetExamplesInput",
    "ValidateScriptInput",
]
