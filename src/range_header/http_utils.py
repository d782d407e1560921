r"""Helpers for the HTTP layer around :func:`~range_header.normalize.parse`.

On the way in, the HTTP `range request
<https://developer.mozilla.org/en-US/docs/Web/HTTP/Range_requests>`_
header is read from the request headers (a :class:`dict` or ``httpx.Headers``), for
example:

.. code-block:: python

    {"range": "bytes=0-1"}

would request the two bytes at positions ``0`` and ``1`` (i.e. the inclusive
interval ``[0,1]``), and :func:`parse_range_header` gives
``[ByteRange(offset=0, length=2)]`` for any resource of at least two bytes.

On the way out, a server answering ``206 Partial Content`` for a single range sends
a `Content-Range
<https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Range>`_ header
giving the range and the total size of the resource (:func:`content_range`), or for
``416 Range Not Satisfiable`` just the total size (:func:`unsatisfied_content_range`).
Whether to answer 416 at all is left to the caller: an empty list of ranges can
equally be taken as a cue to serve the full resource.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping

MYPY = False  # when using mypy will be overrided as True
if MYPY or not TYPE_CHECKING:  # pragma: no cover
    import httpx  # avoid importing to Sphinx type checker

from .byte_range import validate_total_size
from .grammar import BYTES_UNIT
from .normalize import parse

if TYPE_CHECKING:  # pragma: no cover
    from .byte_range import ByteRange

__all__ = [
    "byte_range_spec",
    "range_header",
    "content_range",
    "unsatisfied_content_range",
    "partial_content_headers",
    "detect_header_value",
    "parse_range_header",
    "request_byte_ranges",
]


def byte_range_spec(byte_range: ByteRange) -> str:
    """Prepare the ``first-last`` byte range substring for a HTTP `range request
    <https://developer.mozilla.org/en-US/docs/Web/HTTP/Range_requests>`_.

    For example:

      >>> from range_header import ByteRange
      >>> from range_header.http_utils import byte_range_spec
      >>> byte_range_spec(ByteRange(offset=0, length=2))
      '0-1'

    Args:
      byte_range : range of the bytes to be requested (0-based)
    """
    return f"{byte_range.offset}-{byte_range.end}"


def range_header(byte_ranges: Iterable[ByteRange]) -> dict[str, str]:
    """
    Prepare a :class:`dict` to pass as a ``httpx`` request header
    with a single key ``range`` whose value requests each of the byte ranges
    (in the order given).

    For example:

      >>> from range_header import ByteRange
      >>> from range_header.http_utils import range_header
      >>> range_header([ByteRange(0, 2), ByteRange(10, 5)])
      {'range': 'bytes=0-1,10-14'}

    Args:
      byte_ranges : ranges of the bytes to be requested (0-based)
    """
    specs = [byte_range_spec(rng) for rng in byte_ranges]
    if not specs:
        raise ValueError("A range header must request at least one byte range")
    return {"range": f"{BYTES_UNIT}={','.join(specs)}"}


def content_range(byte_range: ByteRange, total_size: int) -> str:
    """
    The ``Content-Range`` header value for a partial content response carrying
    ``byte_range`` of a resource of ``total_size`` bytes.

      >>> from range_header import ByteRange
      >>> from range_header.http_utils import content_range
      >>> content_range(ByteRange(10, 91), 200)
      'bytes 10-100/200'
    """
    validate_total_size(total_size)
    if byte_range.stop > total_size:
        raise ValueError(f"{byte_range} does not fit in {total_size} bytes")
    return f"{BYTES_UNIT} {byte_range_spec(byte_range)}/{total_size}"


def unsatisfied_content_range(total_size: int) -> str:
    """
    The ``Content-Range`` header value for a ``416 Range Not Satisfiable`` response
    about a resource of ``total_size`` bytes, e.g. ``'bytes */200'``.
    """
    validate_total_size(total_size)
    return f"{BYTES_UNIT} */{total_size}"


def partial_content_headers(byte_range: ByteRange, total_size: int) -> dict[str, str]:
    """
    The headers describing a single-range ``206 Partial Content`` response body.
    """
    return {
        "content-range": content_range(byte_range, total_size),
        "content-length": str(byte_range.length),
    }


def detect_header_value(headers: Mapping, key: str, source: str = "Request"):
    """
    Look up ``key`` in request headers whose names may be title case (``Range``),
    lower case (``range``, as HTTP/2 sends them) or capitalised. Header containers
    that are already case-insensitive, like ``httpx.Headers``, match on the first
    try.

    Raises :exc:`KeyError` naming the ``source`` if no variant is present.
    """
    variants = key.title(), key.lower(), key.capitalize()
    try:
        return next(headers.get(k) for k in variants if k in headers)
    except StopIteration:
        raise KeyError(f"{source} was missing '{key}' header")


def parse_range_header(headers: Mapping, total_size: int) -> list[ByteRange]:
    """
    Read the ``Range`` header from ``headers`` and parse it for a resource of
    ``total_size`` bytes. A request without the header requests no ranges.

    Args:
      headers    : The request headers (a :class:`dict`, or ``httpx.Headers``
                   which are already case-insensitive).
      total_size : The length in bytes of the resource representation being served.
    """
    try:
        header = detect_header_value(headers=headers, key="range")
    except KeyError:
        validate_total_size(total_size)
        return []
    return parse(header, total_size)


def request_byte_ranges(request, total_size: int) -> list[ByteRange]:
    """
    Parse the ``Range`` header of an ``httpx.Request`` (such as one received by a
    proxy) for a resource of ``total_size`` bytes.

    Note: ``request`` is type checked 'manually' (not via type hints) due to
    Sphinx type hints bug with the ``httpx`` library.
    """
    if not isinstance(request, httpx.Request):
        raise NotImplementedError("Only HTTPX requests currently supported")
    return parse_range_header(headers=request.headers, total_size=total_size)
