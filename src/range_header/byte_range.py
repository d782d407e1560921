from __future__ import annotations

from ranges import Range

from .grammar import U64_MAX, FromToAll
from .range_utils import range_len, range_termini, validate_range

__all__ = ["ByteRange", "validate_total_size"]


class ByteRange:
    """
    A concrete, non-empty run of bytes within a resource, given by the zero-based
    ``offset`` of its first byte and its ``length`` in bytes.

    Instances are immutable and compare (and hash) by value, so a list of them can be
    checked against an expected list directly:

        >>> from range_header import ByteRange, parse
        >>> parse("bytes=10-100", 200) == [ByteRange(offset=10, length=91)]
        True
    """

    __slots__ = ("_offset", "_length")

    def __init__(self, offset: int, length: int):
        for name, value in (("offset", offset), ("length", length)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name}={value!r} must be an integer")
        if not 0 <= offset <= U64_MAX:
            raise ValueError(f"{offset=} must be an unsigned 64-bit position")
        if length <= 0:
            raise ValueError(f"{length=} must be positive")
        if offset + length - 1 > U64_MAX:
            raise ValueError(f"{offset=} + {length=} overruns an unsigned 64-bit size")
        object.__setattr__(self, "_offset", offset)
        object.__setattr__(self, "_length", length)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def offset(self) -> int:
        "Position of the first byte in the range."
        return self._offset

    @property
    def length(self) -> int:
        "Number of bytes in the range (always at least 1)."
        return self._length

    @property
    def end(self) -> int:
        "Position of the last byte in the range (inclusive)."
        return self._offset + self._length - 1

    @property
    def stop(self) -> int:
        "Position just past the last byte in the range (exclusive)."
        return self._offset + self._length

    def __eq__(self, other):
        if not isinstance(other, ByteRange):
            return NotImplemented
        return (self.offset, self.length) == (other.offset, other.length)

    def __hash__(self):
        return hash((self.__class__.__name__, self.offset, self.length))

    def __repr__(self):
        return f"{self.__class__.__name__}(offset={self.offset}, length={self.length})"

    def __reduce__(self):
        return (self.__class__, (self.offset, self.length))

    def to_range(self) -> Range:
        """
        The half-open ``[offset, stop)`` :class:`~ranges.Range` (from the
        `python-ranges <https://python-ranges.readthedocs.io/en/latest/>`_ library)
        covering the same bytes.
        """
        return Range(self.offset, self.stop)

    @classmethod
    def from_range(cls, byte_range: Range | tuple[int, int]) -> ByteRange:
        """
        Create a :class:`ByteRange` from a non-empty :class:`~ranges.Range` or an
        integer 2-tuple, presumed to be the half-open ``[start, stop)`` interval.

        Args:
          byte_range : The range of positions to cover.
        """
        rng = validate_range(byte_range, allow_empty=False)
        start, _ = range_termini(rng)
        return cls(offset=start, length=range_len(rng))

    def to_spec(self) -> FromToAll:
        """
        The ``first-last`` range spec requesting exactly this range, which normalizes
        back to an equal :class:`ByteRange` against any resource it fits in.
        """
        return FromToAll(begin=self.offset, end=self.end)


def validate_total_size(total_size: int) -> int:
    """
    Check the resource size given by the caller is an unsigned 64-bit integer.

    Raises :exc:`TypeError` for a non-integer (including :class:`bool`), or
    :exc:`ValueError` if it is negative or too large.
    """
    if not isinstance(total_size, int) or isinstance(total_size, bool):
        raise TypeError(f"{total_size=} must be an integer")
    if not 0 <= total_size <= U64_MAX:
        raise ValueError(f"{total_size=} must be an unsigned 64-bit size")
    return total_size
