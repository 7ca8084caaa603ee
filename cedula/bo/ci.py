"""CI (Cédula de Identidad, Bolivian national identity card number).

The CI is 7 or 8 digits followed by the two-letter code of the issuing
department and an optional extension of up to two letters or digits,
e.g. ``1234567-SC`` or ``12345678-LP-1A``.

>>> validate("1234567-SC")
ValidResult(compact='1234567SC', is_individual=True, is_company=False, is_valid=True)
>>> validate("1234567-XX").error_kind
<ErrorKind.INVALID_COMPONENT: 'invalid_component'>
>>> format("1234567sc1")
'1234567-SC-1'
"""

from __future__ import annotations

import logging
import re
import string

from cedula.exceptions import ErrorKind
from cedula.types import InvalidResult, ValidateReturn, ValidResult, Validator
from cedula.util.strings import clean_unicode

SEPARATORS = " -."
DEPARTMENTS: dict[str, str] = {
    "LP": "La Paz",
    "OR": "Oruro",
    "PT": "Potosí",
    "CB": "Cochabamba",
    "CH": "Chuquisaca",
    "TJ": "Tarija",
    "SC": "Santa Cruz",
    "BE": "Beni",
    "PD": "Pando",
}
VALID_DEPARTMENTS = frozenset(DEPARTMENTS)

NUMBER_LENGTHS = (7, 8)
DEPARTMENT_LENGTH = 2
MAX_EXTENSION_LENGTH = 2
MIN_TOTAL_LENGTH = 9
MAX_TOTAL_LENGTH = 12

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_uppercase)
ALPHANUMERIC = DIGITS | LETTERS

NUMBER_RE = re.compile(r"(\d*)(.*)", re.ASCII | re.DOTALL)
FORMAT_RE = re.compile(r"^(\d{7,8})([A-Z]{2})(\w{0,2})$", re.ASCII)

logger = logging.getLogger(__name__)


def _reject(value: str, kind: ErrorKind, reason: str) -> InvalidResult:
    logger.debug("Rejected CI %r (%s): %s", value, kind.value, reason)
    return InvalidResult(error_kind=kind)


class CedulaDeIdentidad(Validator):
    name = "Bolivian National Identity Card"
    local_name = "Cédula de Identidad"
    abbreviation = "CI"

    def compact(self, value: str) -> str:
        cleaned, error = clean_unicode(value, SEPARATORS)
        if error:
            raise error
        return cleaned

    def format(self, value: str) -> str:
        cleaned = self.compact(value)
        match = FORMAT_RE.match(cleaned)
        if not match:
            return cleaned

        number, department, extension = match.groups()
        if extension:
            return f"{number}-{department}-{extension}"
        return f"{number}-{department}"

    def validate(self, value: str) -> ValidateReturn:
        cleaned, error = clean_unicode(value, SEPARATORS)
        if error:
            return _reject(value, ErrorKind.INVALID_FORMAT, "disallowed characters")

        if not all(ch in ALPHANUMERIC for ch in cleaned):
            return _reject(value, ErrorKind.INVALID_FORMAT, "disallowed characters")

        number, rest = NUMBER_RE.fullmatch(cleaned).groups()
        if not number:
            return _reject(value, ErrorKind.INVALID_FORMAT, "does not start with a digit")

        if len(number) not in NUMBER_LENGTHS:
            return _reject(value, ErrorKind.INVALID_LENGTH, f"number has {len(number)} digits")

        if len(rest) < DEPARTMENT_LENGTH:
            return _reject(value, ErrorKind.INVALID_LENGTH, "department code missing")

        department = rest[:DEPARTMENT_LENGTH].upper()
        extension = rest[DEPARTMENT_LENGTH:]
        if not all(ch in LETTERS for ch in department):
            return _reject(value, ErrorKind.INVALID_FORMAT, f"department {department!r} is not alphabetic")

        if len(extension) > MAX_EXTENSION_LENGTH:
            return _reject(value, ErrorKind.INVALID_FORMAT, f"extension {extension!r} too long")

        if extension and not all(ch in ALPHANUMERIC for ch in extension):
            return _reject(value, ErrorKind.INVALID_FORMAT, f"extension {extension!r} is not alphanumeric")

        total_length = len(number) + len(department) + len(extension)
        if not MIN_TOTAL_LENGTH <= total_length <= MAX_TOTAL_LENGTH:
            return _reject(value, ErrorKind.INVALID_LENGTH, f"total length {total_length}")

        if department not in VALID_DEPARTMENTS:
            return _reject(value, ErrorKind.INVALID_COMPONENT, f"unknown department {department!r}")

        return ValidResult(compact=cleaned.upper(), is_individual=True, is_company=False)


_impl = CedulaDeIdentidad()

name = _impl.name
local_name = _impl.local_name
abbreviation = _impl.abbreviation
compact = _impl.compact
format = _impl.format
validate = _impl.validate
is_valid = _impl.is_valid
