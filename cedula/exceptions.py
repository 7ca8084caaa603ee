from __future__ import annotations

from enum import Enum

from stdnum.exceptions import InvalidComponent, InvalidFormat, InvalidLength, ValidationError

__all__ = [
    "ErrorKind",
    "InvalidComponent",
    "InvalidFormat",
    "InvalidLength",
    "ValidationError",
]


class ErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"
    INVALID_LENGTH = "invalid_length"
    INVALID_COMPONENT = "invalid_component"

    @property
    def exception(self) -> type[ValidationError]:
        return _EXCEPTIONS[self]

    @classmethod
    def of(cls, error: ValidationError) -> ErrorKind:
        for kind, exc_type in _EXCEPTIONS.items():
            if isinstance(error, exc_type):
                return kind
        raise ValueError(f"Unsupported validation error: {type(error).__name__}")


_EXCEPTIONS: dict[ErrorKind, type[ValidationError]] = {
    ErrorKind.INVALID_FORMAT: InvalidFormat,
    ErrorKind.INVALID_LENGTH: InvalidLength,
    ErrorKind.INVALID_COMPONENT: InvalidComponent,
}
