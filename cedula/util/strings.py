from __future__ import annotations

import string

from stdnum.util import clean

from cedula.exceptions import InvalidFormat, ValidationError

ALPHABET = frozenset(string.ascii_letters + string.digits)


def clean_unicode(value: str, deletechars: str = "") -> tuple[str, None] | tuple[None, ValidationError]:
    """Strip separators and whitespace, upper-case, and check the alphabet.

    Unicode dashes and spaces are folded to their ASCII forms first, so
    ``"1234567–SC"`` cleans the same way as ``"1234567-SC"``. Letters and
    digits are never folded: fullwidth or other non-ASCII ones are rejected.
    """
    if not isinstance(value, str):
        return None, InvalidFormat()

    # checked before clean() and upper() so "１" or "ß" cannot turn into ASCII
    if any(ch.isalnum() and ch not in ALPHABET for ch in value):
        return None, InvalidFormat()

    try:
        stripped = clean(value, deletechars).strip()
    except ValidationError as exc:
        return None, exc

    if not all(ch in ALPHABET for ch in stripped):
        return None, InvalidFormat()
    return stripped.upper(), None
