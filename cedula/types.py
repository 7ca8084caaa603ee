from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from cedula.exceptions import ErrorKind, ValidationError


@dataclass(frozen=True)
class ValidResult:
    compact: str
    is_individual: bool = True
    is_company: bool = False
    is_valid: bool = field(default=True, init=False)


@dataclass(frozen=True)
class InvalidResult:
    error_kind: ErrorKind
    is_valid: bool = field(default=False, init=False)

    @property
    def error(self) -> ValidationError:
        return self.error_kind.exception()


ValidateReturn = ValidResult | InvalidResult


class Validator(ABC):
    name: str
    local_name: str
    abbreviation: str

    @abstractmethod
    def compact(self, value: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def format(self, value: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def validate(self, value: str) -> ValidateReturn:
        raise NotImplementedError

    def is_valid(self, value: str) -> bool:
        return self.validate(value).is_valid
