"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """Classification of a failed conversion."""

    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    EMPTY_INPUT = "empty_input"


@dataclass(frozen=True)
class ConversionRequest:
    """Raw input text plus the chosen conversion id."""

    conversion_id: str
    input_text: str


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome.

    Exactly one of ``output`` and ``error`` is set.
    """

    conversion_id: str
    output: str | None = None
    error: FailureKind | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if (self.output is None) == (self.error is None):
            raise ValueError("ConversionResult needs exactly one of output or error.")
        if self.output is not None and self.message is not None:
            raise ValueError("Successful results carry no message.")

    @classmethod
    def success(cls, conversion_id: str, output: str) -> ConversionResult:
        return cls(conversion_id=conversion_id, output=output)

    @classmethod
    def failure(
        cls,
        conversion_id: str,
        error: FailureKind,
        message: str | None = None,
    ) -> ConversionResult:
        return cls(conversion_id=conversion_id, error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class NotFound:
    """Lookup outcome for an id that is not registered."""

    conversion_id: str
