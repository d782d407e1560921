from pytest import mark

from range_header.grammar import U64_MAX, FromTo, FromToAll, Last, tokenize


@mark.parametrize(
    "header,expected",
    [
        ("bytes=10-100", [FromToAll(10, 100)]),
        ("bytes=10-", [FromTo(10)]),
        ("bytes=-100", [Last(100)]),
        ("bytes=0-0", [FromToAll(0, 0)]),
        ("bytes=-0", [Last(0)]),
        ("bytes=5-4", [FromToAll(5, 4)]),
        ("bytes=007-010", [FromToAll(7, 10)]),
    ],
)
def test_single_spec(header, expected):
    assert tokenize(header) == expected


def test_spec_order_is_kept():
    header = "bytes=500-600,-5,601-,0-0,500-600"
    expected = [
        FromToAll(500, 600),
        Last(5),
        FromTo(601),
        FromToAll(0, 0),
        FromToAll(500, 600),
    ]
    assert tokenize(header) == expected


@mark.parametrize(
    "header",
    [
        "bytes= 10 - 100 , - 5 ,3 -",
        "bytes=10\t-\t100,\t-\t5,3-\t",
        "bytes=10 -100,-  5 , 3-",
    ],
)
def test_blanks_are_tolerated(header):
    assert tokenize(header) == [FromToAll(10, 100), Last(5), FromTo(3)]


@mark.parametrize(
    "header,expected",
    [
        ("bytes=1-2,,3-4", [FromToAll(1, 2), FromToAll(3, 4)]),
        ("bytes=1-2, ,3-4", [FromToAll(1, 2), FromToAll(3, 4)]),
        ("bytes=,1-2", [FromToAll(1, 2)]),
        ("bytes=1-2,", [FromToAll(1, 2)]),
    ],
)
def test_empty_elements_are_skipped(header, expected):
    assert tokenize(header) == expected


@mark.parametrize(
    "header",
    [
        "invalid input",
        "",
        "bytes",
        "bytes=",
        "bytes=,",
        "bytes= , ",
        "bytes =0-1",
        "bytes= =0-1",
        " bytes=0-1",
        "items=0-1",
        "BYTES=0-1",
        "Bytes=0-1",
        "bytes=-",
        "bytes=1",
        "bytes=1-2-3",
        "bytes=--1",
        "bytes=1 2-3",
        "bytes=0x10-20",
        "bytes=a-b",
        "bytes=0-1,a-2",
        "bytes=0-1;2-3",
        "bytes=0-1\n",
        "bytes=+1-2",
        "bytes=1.5-2",
        "bytes=١-٢",  # Arabic-Indic digits are not ASCII digits
    ],
)
def test_invalid_header(header):
    assert tokenize(header) is None


@mark.parametrize(
    "header,expected",
    [
        (f"bytes={U64_MAX}-", [FromTo(U64_MAX)]),
        (f"bytes=-{U64_MAX}", [Last(U64_MAX)]),
        (f"bytes=0-{U64_MAX}", [FromToAll(0, U64_MAX)]),
        (f"bytes=0{U64_MAX}-", [FromTo(U64_MAX)]),
        ("bytes=" + "0" * 5000 + "1-2", [FromToAll(1, 2)]),
        ("bytes=-" + "0" * 5000 + "5", [Last(5)]),
        ("bytes=0-" + "0" * 5000, [FromToAll(0, 0)]),
        ("bytes=" + "0" * 5000 + f"{U64_MAX}-", [FromTo(U64_MAX)]),
    ],
)
def test_largest_numeral(header, expected):
    assert tokenize(header) == expected


@mark.parametrize(
    "header",
    [
        f"bytes={U64_MAX + 1}-",
        f"bytes=-{U64_MAX + 1}",
        f"bytes=0-{U64_MAX + 1}",
        f"bytes=0-10,{U64_MAX + 1}-",
        "bytes=0-10,-" + "9" * 5000,
    ],
)
def test_overflow_invalidates_header(header):
    assert tokenize(header) is None


def test_bytes_header():
    assert tokenize(b"bytes=0-1,-2") == [FromToAll(0, 1), Last(2)]


@mark.parametrize("header", [None, 10, ["bytes=0-1"]])
def test_non_string_header(header):
    assert tokenize(header) is None
