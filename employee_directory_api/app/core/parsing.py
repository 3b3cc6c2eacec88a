"""
Lenient parsing of request parameters.

Clients send employee data as URL-encoded forms (``name=John&salary=70000``)
in the request body or, for deletions, in the query string.  Nothing in
here raises on bad input: numbers that fail to parse fall back to a
default and missing keys come back as ``None``.  The rules mirror what
the existing clients of the service rely on:

* form keys are case-insensitive and a repeated key yields all of its
  values joined with ``","``;
* integers are 32-bit, optionally signed and surrounded by whitespace;
* floats additionally accept ``","`` thousands separators, exponents,
  ``NaN`` and ``Infinity``.
"""

from __future__ import annotations

import math
import re
from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_WHITESPACE = " \t\n\v\f\r"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9][0-9,]*(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_SPECIAL_FLOATS = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "∞": math.inf,
    "+∞": math.inf,
    "-∞": -math.inf,
}


class FormValues:
    """Case-insensitive view over the pairs of a URL-encoded form."""

    def __init__(self, pairs: List[Tuple[str, str]]) -> None:
        self._values: Dict[str, List[str]] = {}
        for key, value in pairs:
            self._values.setdefault(key.lower(), []).append(value)

    def get(self, key: str) -> Optional[str]:
        values = self._values.get(key.lower())
        if values is None:
            return None
        return ",".join(values)


def parse_form(text: str) -> FormValues:
    """Parse a URL-encoded body or query string.

    A leading ``"?"`` is ignored.  ``"+"`` decodes to a space and blank
    values are kept, so ``name=`` is present with an empty value.
    """
    if text.startswith("?"):
        text = text[1:]
    return FormValues(parse_qsl(text, keep_blank_values=True))


def parse_int(value: Optional[str], default: int = 0) -> int:
    """Parse a 32-bit signed integer, returning ``default`` on failure."""
    if value is None:
        return default
    text = value.strip(_WHITESPACE)
    if not _INTEGER_RE.fullmatch(text):
        return default
    number = int(text)
    if not INT32_MIN <= number <= INT32_MAX:
        return default
    return number


def parse_float(value: Optional[str], default: float = 0.0) -> float:
    """Parse a floating-point number, returning ``default`` on failure.

    Values too large for a float parse as infinity rather than failing.
    """
    if value is None:
        return default
    text = value.strip(_WHITESPACE)
    special = _SPECIAL_FLOATS.get(text.lower())
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(text):
        return default
    return float(text.replace(",", ""))


def starts_with_segments(path: str, prefix: str) -> bool:
    """Return whether ``path`` begins with the whole segments of ``prefix``.

    ``/employees/7`` starts with ``/employees`` but ``/employeesX`` does
    not.  The comparison ignores case.
    """
    if path[: len(prefix)].lower() != prefix.lower():
        return False
    return len(path) == len(prefix) or path[len(prefix)] == "/"
