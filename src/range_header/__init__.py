r"""
:mod:`range_header` parses the HTTP ``Range`` request header (`RFC 7233
<https://tools.ietf.org/html/rfc7233>`_, ``bytes`` unit only) into the concrete byte
ranges it requests from a resource of known size, for servers and proxies deciding
whether to answer with `206 Partial Content
<https://developer.mozilla.org/en-US/docs/Web/HTTP/Status/206>`_.

Each range spec in the header is one of ``first-last``, ``first-`` or ``-suffix``,
and is turned into a :class:`~range_header.byte_range.ByteRange` giving the
``offset`` of its first byte and its ``length``:

    >>> from range_header import parse
    >>> parse("bytes=10-100", 200)
    [ByteRange(offset=10, length=91)]
    >>> parse("bytes=500-600,601-999", 10000)
    [ByteRange(offset=500, length=101), ByteRange(offset=601, length=399)]

Parsing never fails on the header: anything the server should ignore (a malformed
header, another range unit, a resource of size zero) gives the empty list, and a
spec that cannot be satisfied is dropped without affecting the others.

    >>> parse("bytes=5-4", 10)
    []
    >>> parse("bytes=-15", 10)
    [ByteRange(offset=0, length=10)]

Each :class:`~range_header.byte_range.ByteRange` converts to the half-open
:class:`~ranges.Range` of the `python-ranges
<https://python-ranges.readthedocs.io/en/latest/>`_ library (and back), and
:mod:`range_header.http_utils` reads the header from ``httpx`` requests and writes
the ``Content-Range`` header of the response.
"""

# Get classes into package namespace but exclude from __all__ so Sphinx can access types

from . import grammar, http_utils, normalize, range_utils
from .byte_range import ByteRange
from .grammar import FromTo, FromToAll, Last, tokenize
from .normalize import parse

__all__ = [
    "byte_range",
    "grammar",
    "normalize",
    "http_utils",
    "range_utils",
    "log_utils",
]

__version__ = "0.1.0"
__author__ = "Louis Maddox"
__license__ = "MIT"
__description__ = "Parse HTTP Range request headers into byte ranges."
__url__ = "https://github.com/lmmx/range-header"
__uri__ = __url__
__email__ = "louismmx@gmail.com"
