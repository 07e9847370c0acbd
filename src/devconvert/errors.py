"""Exception hierarchy for devconvert."""

from __future__ import annotations


class DevConvertError(Exception):
    """Base class for all devconvert errors."""

    exit_code = 1


class ConversionError(DevConvertError):
    """Raised when a conversion cannot be carried out."""


class ParseError(ConversionError):
    """Raised when input does not conform to the expected source grammar."""

    exit_code = 3


class EmptyInputError(ConversionError):
    """Raised when there is nothing to convert."""

    exit_code = 4


class UnknownConversionError(DevConvertError):
    """Raised when a conversion id is not registered."""

    exit_code = 2

    def __init__(self, conversion_id: str, available: list[str] | None = None) -> None:
        self.conversion_id = conversion_id
        message = f"Unknown conversion '{conversion_id}'."
        if available:
            message += f" Available conversions: {', '.join(available)}"
        super().__init__(message)


class RegistryError(DevConvertError):
    """Raised on invalid converter registration."""


class HistoryError(DevConvertError):
    """Raised when a history entry cannot be stored or read."""
