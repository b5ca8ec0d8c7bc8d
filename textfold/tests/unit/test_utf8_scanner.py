import pytest

from textfold.encoding import mode
from textfold.encoding.guard import encoding_stack_depth
from textfold.scanner import seems_utf8, trailing_count


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"plain ascii",
        b"Fran\xc3\xa7ois",
        b"\xe2\x82\xac50",
        b"\xf0\x9f\x98\x80",
        "Łódź".encode("utf-8"),
    ],
)
def test_accepts_modern_utf8(data: bytes) -> None:
    assert seems_utf8(data)


@pytest.mark.parametrize(
    "data",
    [
        b"\xf8\x88\x80\x80\x80",
        b"\xfb\xbf\xbf\xbf\xbf",
        b"\xfc\x84\x80\x80\x80\x80",
        b"\xfd\xbf\xbf\xbf\xbf\xbf",
    ],
)
def test_accepts_historical_five_and_six_byte_forms(data: bytes) -> None:
    assert seems_utf8(data)
    with pytest.raises(UnicodeDecodeError):
        data.decode("utf-8")


@pytest.mark.parametrize(
    "data",
    [
        b"\x80",
        b"\xbf abc",
        b"\xfe",
        b"\xff",
        b"caf\xe9",
        b"\xc3",
        b"\xe2\x82",
        b"\xc3\x28",
        b"\xe2\x82\x2c",
        b"\xfc\x84\x80\x80\x80",
        b"ok\xc3\xa7\xc3",
    ],
)
def test_rejects_malformed(data: bytes) -> None:
    assert not seems_utf8(data)


def test_continuation_must_start_with_10_bits() -> None:
    for trailing in (0x00, 0x40, 0xC0):
        assert not seems_utf8(bytes([0xC3, trailing | 0x27]))
    assert seems_utf8(bytes([0xC3, 0x80 | 0x27]))


@pytest.mark.parametrize(
    "lead, expected",
    [
        (0x41, 0),
        (0x80, None),
        (0xC2, 1),
        (0xE2, 2),
        (0xF0, 3),
        (0xF8, 4),
        (0xFC, 5),
        (0xFE, None),
    ],
)
def test_trailing_count(lead: int, expected) -> None:
    assert trailing_count(lead) == expected


def test_str_input_is_encoded_first() -> None:
    assert seems_utf8("naïve")
    assert seems_utf8(bytearray(b"na\xc3\xafve"))


def test_length_is_measured_in_bytes_when_overloaded(overloaded) -> None:
    data = "çà".encode("utf-8")
    assert mode.strlen(data) == 2
    assert seems_utf8(data)
    assert not seems_utf8(data + b"\xc3")
    assert mode.internal_encoding() == "UTF-8"
    assert encoding_stack_depth() == 0
