r"""
Normalization turns the range specs given by :func:`~range_header.grammar.tokenize`
into concrete :class:`~range_header.byte_range.ByteRange` values for a resource of a
known size:

- ``first-last`` is dropped if ``first`` is past the end of the resource, otherwise
  ``last`` is clamped to the final byte (and an inverted spec is then dropped)
- ``first-`` runs to the end of the resource, and is dropped if ``first`` is past it
- ``-suffix`` is the final ``suffix`` bytes, or the whole resource if it is shorter

Specs are normalized independently, so an unsatisfiable spec does not affect the
others, and the resulting ranges keep the order the specs were given in (overlapping
ranges are not merged).
"""
from __future__ import annotations

from typing import Iterable

from .byte_range import ByteRange, validate_total_size
from .grammar import FromTo, FromToAll, Last, RangeSpec, tokenize
from .log_utils import log

__all__ = ["normalize_spec", "normalize", "parse"]


def normalize_spec(spec: RangeSpec, total_size: int) -> ByteRange | None:
    """
    Convert a single range spec to the :class:`~range_header.byte_range.ByteRange`
    it selects from a resource of ``total_size`` bytes.

    Args:
      spec       : A :class:`~range_header.grammar.FromToAll`,
                   :class:`~range_header.grammar.FromTo` or
                   :class:`~range_header.grammar.Last` range spec.
      total_size : The length of the resource in bytes.

    Returns:
      The byte range, or ``None`` if the spec selects no bytes of the resource.
    """
    if isinstance(spec, FromToAll):
        if spec.begin >= total_size:
            return None
        end = min(spec.end, total_size - 1)
        if spec.begin > end:
            return None
        return ByteRange(offset=spec.begin, length=end - spec.begin + 1)
    elif isinstance(spec, FromTo):
        if spec.offset >= total_size:
            return None
        return ByteRange(offset=spec.offset, length=total_size - spec.offset)
    elif isinstance(spec, Last):
        length = min(spec.length, total_size)
        if length == 0:
            return None
        return ByteRange(offset=total_size - length, length=length)
    raise TypeError(f"{spec=} is not a range spec")


def normalize(specs: Iterable[RangeSpec], total_size: int) -> list[ByteRange]:
    """
    Normalize each of ``specs`` in turn, keeping the byte ranges which select at
    least one byte of the resource, in the order given.

    Args:
      specs      : The range specs as given by
                   :func:`~range_header.grammar.tokenize`.
      total_size : The length of the resource in bytes.
    """
    byte_ranges = []
    for spec in specs:
        byte_range = normalize_spec(spec, total_size)
        if byte_range is None:
            log.debug(f"Dropped {spec} (unsatisfiable for {total_size} bytes)")
        else:
            byte_ranges.append(byte_range)
    return byte_ranges


def parse(header: str | bytes, total_size: int) -> list[ByteRange]:
    """
    Parse a ``Range`` request header (`RFC 7233
    <https://tools.ietf.org/html/rfc7233>`_, ``bytes`` unit only) into the byte
    ranges it requests from a resource of ``total_size`` bytes.

    Invalid input never raises: a header that does not match the grammar, or a
    resource of size zero, gives an empty list, and any range spec which cannot be
    satisfied (or is inverted) is dropped while the others are kept. Ranges come
    back in the order requested, without merging overlaps.

        >>> from range_header import parse
        >>> parse("bytes=10-100", 200)
        [ByteRange(offset=10, length=91)]
        >>> parse("bytes=10-", 200)
        [ByteRange(offset=10, length=190)]
        >>> parse("bytes=-100", 200)
        [ByteRange(offset=100, length=100)]
        >>> parse("invalid input", 200)
        []

    Raises :exc:`TypeError` or :exc:`ValueError` only if ``total_size`` is not an
    unsigned 64-bit integer, which is a mistake on the caller's part.

    Args:
      header     : The value of the ``Range`` request header.
      total_size : The length in bytes of the resource representation being served.
    """
    validate_total_size(total_size)
    if total_size == 0:
        log.debug(f"No range in {header!r} is satisfiable for an empty resource")
        return []
    specs = tokenize(header)
    if specs is None:
        return []
    return normalize(specs, total_size)
