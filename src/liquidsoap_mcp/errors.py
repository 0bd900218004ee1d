from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    FETCH_FAILED = "FETCH_FAILED"
    UNKNOWN_SECTION = "UNKNOWN_SECTION"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    MISSING_ARGUMENTS = "MISSING_ARGUMENTS"
    INVALID_INPUT = "INVALID_INPUT"


class LiquidsoapMCPError(Exception):
    """Raised by tool handlers for all expected failure conditions.

    Caught by the dispatcher and rendered into an MCP tool result with
    ``isError=True``. Business logic should let it propagate.
    """

    code: ErrorCode

    def __init__(
        self,
        message: str,
        suggestion: str = "",
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_text(self) -> str:
        text = f"Error: {self.message}"
        if self.suggestion:
            text += f"\n\nSuggestion: {self.suggestion}"
        return text


class FetchError(LiquidsoapMCPError):
    code = ErrorCode.FETCH_FAILED


class UnknownSectionError(LiquidsoapMCPError):
    code = ErrorCode.UNKNOWN_SECTION


class UnknownToolError(LiquidsoapMCPError):
    code = ErrorCode.UNKNOWN_TOOL


class MissingArgumentsError(LiquidsoapMCPError):
    code = ErrorCode.MISSING_ARGUMENTS


class ValidationInputError(LiquidsoapMCPError):
    code = ErrorCode.INVALID_INPUT
