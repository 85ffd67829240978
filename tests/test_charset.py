import pytest

from gsm7_lib import (
    ESCAPE,
    GSM7_BASIC_TABLE,
    GSM7_EXTENDED_TABLE,
    InvalidCodeError,
    NotEncodableError,
    TruncatedEscapeError,
    decode_base,
    decode_escape,
    decode_septets,
    encode_base,
    encode_escape,
    encode_septets,
    is_encodable,
    septet_length,
)


def test_basic_table_has_128_entries():
    assert len(GSM7_BASIC_TABLE) == 128


@pytest.mark.parametrize(
    "septet, char",
    [
        (0x00, "@"),
        (0x01, "£"),
        (0x0A, "\n"),
        (0x0D, "\r"),
        (0x10, "Δ"),
        (0x20, " "),
        (0x24, "¤"),
        (0x30, "0"),
        (0x40, "¡"),
        (0x41, "A"),
        (0x5F, "§"),
        (0x60, "¿"),
        (0x61, "a"),
        (0x7F, "à"),
    ],
)
def test_decode_base_known_positions(septet, char):
    assert decode_base(septet) == char
    assert encode_base(char) == septet


@pytest.mark.parametrize("septet", [-1, 128, 0xFF])
def test_decode_base_rejects_out_of_range(septet):
    with pytest.raises(InvalidCodeError) as excinfo:
        decode_base(septet)
    assert excinfo.value.code == septet
    assert not excinfo.value.escaped


def test_escape_marker_is_not_a_character():
    with pytest.raises(NotEncodableError):
        encode_base("\x1b")


def test_encode_base_rejects_extension_characters():
    with pytest.raises(NotEncodableError) as excinfo:
        encode_base("€")
    assert excinfo.value.char == "€"


def test_extension_table_round_trips():
    assert len(GSM7_EXTENDED_TABLE) == 10
    for code, char in GSM7_EXTENDED_TABLE.items():
        assert decode_escape(code) == char
        assert encode_escape(char) == code


def test_decode_escape_rejects_unknown_code():
    with pytest.raises(InvalidCodeError) as excinfo:
        decode_escape(0x00)
    assert excinfo.value.escaped


def test_encode_escape_rejects_basic_characters():
    with pytest.raises(NotEncodableError):
        encode_escape("a")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        GSM7_EXTENDED_TABLE[0x01] = "x"


def test_septet_helpers():
    assert encode_septets("a{") == [0x61, ESCAPE, 0x28]
    assert decode_septets([0x61, ESCAPE, 0x28]) == "a{"
    assert septet_length("a€") == 3
    assert is_encodable("Hello [world]")
    assert not is_encodable("你好")


def test_septet_length_rejects_unsupported_characters():
    with pytest.raises(NotEncodableError):
        septet_length("a中")


def test_decode_septets_is_strict():
    with pytest.raises(TruncatedEscapeError):
        decode_septets([0x41, ESCAPE])
    with pytest.raises(InvalidCodeError):
        decode_septets([ESCAPE, 0x41])
