"""Error types raised by the handler.

Provides error codes and a structured error payload that the logging facade
can inspect when a log line could not be produced or written.
Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorCode(StrEnum):
    """Failure classes of a single handle() call."""
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"
    WRITE_FAILED = "WRITE_FAILED"


class LogError(BaseModel):
    """Structured description of a failed log call.
    
    Example:
        >>> err = LogError.create("cannot represent object", ErrorCode.SERIALIZATION_FAILED)
        >>> str(err)
        '[SERIALIZATION_FAILED] cannot represent object'
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, validate_default=True)

    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    code: ErrorCode = Field(..., description="Machine-readable error classification")
    details: str | None = Field(default=None, description="Underlying exception type and text")

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return (str(v) or type(v).__name__) if isinstance(v, Exception) else v

    @classmethod
    def create(cls, message: str, code: ErrorCode, *, details: str | None = None) -> Self:
        return cls(message=message, code=code, details=details)

    def render(self) -> str:
        return f"[{self.code}] {self.message}"

    __str__ = render


class YaduException(Exception):
    """Exception wrapping a LogError for raising."""

    __slots__ = ("error",)
    code: ErrorCode = ErrorCode.SERIALIZATION_FAILED

    def __init__(self, error: LogError) -> None:
        self.error = error
        super().__init__(error.render())

    @classmethod
    def from_exc(cls, exc: BaseException, context: str = "") -> Self:
        """Wrap an underlying exception; callers chain it with ``raise ... from exc``."""
        return cls(LogError(
            message=f"{context}: {exc}" if context else (str(exc) or type(exc).__name__),
            code=cls.code,
            details=f"{type(exc).__name__}: {exc}",
        ))


class SerializationError(YaduException):
    """The attribute tree could not be serialized. Nothing was written."""

    code = ErrorCode.SERIALIZATION_FAILED


class WriteError(YaduException):
    """The output stream rejected a fully assembled line."""

    code = ErrorCode.WRITE_FAILED
