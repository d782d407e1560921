r"""
The ``byte-ranges-specifier`` grammar of `RFC 7233
<https://tools.ietf.org/html/rfc7233#section-2.1>`_, restricted to the ``bytes`` unit,
written as regular expression fragments (one per production) and processed with
:data:`re.VERBOSE`.

Blanks are tolerated around the digits, the hyphen and the commas of the range set
(as Apache tolerates them), so the following all tokenize to the same specs:

    >>> from range_header.grammar import tokenize
    >>> tokenize("bytes=0-10,-5")
    [FromToAll(begin=0, end=10), Last(length=5)]
    >>> tokenize("bytes= 0 - 10 , - 5")
    [FromToAll(begin=0, end=10), Last(length=5)]

Anything else is a syntax error for the whole header, and :func:`tokenize` returns
``None`` rather than raising.
"""
from __future__ import annotations

import re
from typing import List, NamedTuple, Union

from .log_utils import log

__all__ = [
    "BYTES_UNIT",
    "U64_MAX",
    "FromToAll",
    "FromTo",
    "Last",
    "RangeSpec",
    "tokenize",
]

BYTES_UNIT = "bytes"
U64_MAX = 2 ** 64 - 1  # positions are unsigned 64-bit

# ws = *( SP / HTAB )

ws = r"[ \t]*"

# digits = 1*DIGIT (ASCII only: ``\d`` would also accept other Unicode digits)

digits = r"[0-9]+"

# from-to-all = digits ws "-" ws digits

from_to_all = rf"(?P<begin> {digits} ) {ws} - {ws} (?P<end> {digits} )"

# from-to = digits ws "-"

from_to = rf"(?P<offset> {digits} ) {ws} -"

# last = "-" ws digits

last = rf"- {ws} (?P<length> {digits} )"

# byte-ranges-specifier = "bytes=" range-set

byte_ranges_specifier = rf"{BYTES_UNIT} = (?P<range_set> .* )"

_RE_SPECIFIER = re.compile(byte_ranges_specifier, re.VERBOSE | re.DOTALL)
_RE_FROM_TO_ALL = re.compile(from_to_all, re.VERBOSE)
_RE_FROM_TO = re.compile(from_to, re.VERBOSE)
_RE_LAST = re.compile(last, re.VERBOSE)


class FromToAll(NamedTuple):
    """A ``first-last`` range spec, e.g. ``200-300`` (both positions inclusive)."""

    begin: int
    end: int


class FromTo(NamedTuple):
    """A ``first-`` range spec, e.g. ``200-`` (from a position to the end)."""

    offset: int


class Last(NamedTuple):
    """A ``-suffix-length`` range spec, e.g. ``-200`` (the final 200 bytes)."""

    length: int


RangeSpec = Union[FromToAll, FromTo, Last]


class _Overflow(ValueError):
    pass


def _u64(numeral: str) -> int:
    # ``int`` refuses very long numerals outright, leading zeros included
    significant = numeral.lstrip("0") or "0"
    if len(significant) > len(str(U64_MAX)):
        raise _Overflow(numeral)
    value = int(significant)
    if value > U64_MAX:
        raise _Overflow(numeral)
    return value


def _tokenize_spec(element: str) -> RangeSpec | None:
    """
    Match a single (non-blank) element of the range set against each of the three
    range spec productions in turn.

    Raises :exc:`_Overflow` if a numeral in an otherwise matching element does not
    fit in an unsigned 64-bit integer.
    """
    m = _RE_FROM_TO_ALL.fullmatch(element)
    if m:
        return FromToAll(begin=_u64(m["begin"]), end=_u64(m["end"]))
    m = _RE_FROM_TO.fullmatch(element)
    if m:
        return FromTo(offset=_u64(m["offset"]))
    m = _RE_LAST.fullmatch(element)
    if m:
        return Last(length=_u64(m["length"]))
    return None


def tokenize(header: str | bytes) -> List[RangeSpec] | None:
    """
    Recognise the whole of ``header`` as a ``byte-ranges-specifier`` and give its
    range specs in the order they appear.

    Empty (or blank) elements of the comma-separated range set are skipped, but a
    range set with no specs at all does not match.

    Args:
      header : The value of a ``Range`` request header. Bytes are decoded as
               ISO-8859-1 (the charset of HTTP field values).

    Returns:
      A list of :class:`FromToAll`, :class:`FromTo` and :class:`Last` specs, or
      ``None`` if the header is not syntactically valid (including when any numeral
      in it overflows an unsigned 64-bit integer).
    """
    if isinstance(header, bytes):
        header = header.decode("latin-1")
    if not isinstance(header, str):
        log.debug(f"Range header of type {type(header).__name__} is not a string")
        return None
    m = _RE_SPECIFIER.fullmatch(header)
    if m is None:
        log.debug(f"Range header {header!r} is not a {BYTES_UNIT} range specifier")
        return None
    specs = []
    for element in m["range_set"].split(","):
        element = element.strip(" \t")
        if not element:
            continue
        try:
            spec = _tokenize_spec(element)
        except _Overflow as exc:
            log.debug(f"Range header {header!r} overflows at {exc}")
            return None
        if spec is None:
            log.debug(f"Range header {header!r} has a malformed spec {element!r}")
            return None
        specs.append(spec)
    if not specs:
        log.debug(f"Range header {header!r} has an empty range set")
        return None
    return specs
