from __future__ import annotations

__all__ = [
    "range_termini",
    "range_len",
    "validate_range",
]

from ranges import Range


def range_termini(rng: Range) -> tuple[int, int]:
    """The first and last byte positions covered by a :class:`~ranges.Range`,
    i.e. the ``offset`` and ``end`` of the :class:`~range_header.ByteRange` for it
    (and the two numerals of its ``first-last`` spec).

    Open bounds are stepped inwards by one, so ``Range(2, 5)`` (half-open, the
    python-ranges default) gives ``(2, 4)``. Raises :exc:`ValueError` for an empty
    range, which covers no bytes.

    Args:
      rng : A discrete range of byte positions.
    """
    if rng.isempty():
        raise ValueError("Empty range has no termini")
    start = rng.start if rng.include_start else rng.start + 1
    end = rng.end if rng.include_end else rng.end - 1
    return start, end


def range_len(rng: Range) -> int:
    """Get the number of byte positions in a :class:`~ranges.Range`
    (``0`` if it is empty).

    Args:
      rng : A :class:`~ranges.Range` (which by default will be
            half-closed, i.e. not inclusive of the end position).
    """
    if rng.isempty():
        return 0
    rmin, rmax = range_termini(rng)
    return rmax - rmin + 1


def validate_range(
    byte_range: Range | tuple[int, int], allow_empty: bool = True
) -> Range:
    """Validate ``byte_range`` and convert to a half-closed (i.e.
    not inclusive of the end position) ``[start,end)`` :class:`~ranges.Range`
    if given as integer tuple.

    Args:
      byte_range  : Either a :class:`tuple` of two :class:`int` positions with
                    which to create a :class:`~ranges.Range` (which by
                    default will be half-closed, i.e. not inclusive of
                    the end position); or simply a :class:`~ranges.Range`.
      allow_empty : Whether to accept an empty range (else :exc:`ValueError`)
    """
    complain_about_types = (
        f"{byte_range=} must be a Range from the python-ranges"
        " package or an integer 2-tuple"
    )
    if isinstance(byte_range, tuple):
        if len(byte_range) != 2:
            raise TypeError(complain_about_types)
        if not all(isinstance(x, int) for x in byte_range):
            raise TypeError(complain_about_types)
        byte_range = Range(*byte_range)
    elif not isinstance(byte_range, Range):
        raise TypeError(complain_about_types)
    elif not all(isinstance(o, int) for o in [byte_range.start, byte_range.end]):
        raise TypeError("Ranges must be discrete: use integers for start and end")
    if not allow_empty and byte_range.isempty():
        raise ValueError("Range is empty")
    return byte_range
