import codecs

import pytest

from gsm7_lib import register
from gsm7_lib.registry import CODEC_NAME

register()


def test_register_is_idempotent():
    register()
    assert codecs.lookup("gsm7-packed").name == CODEC_NAME


@pytest.mark.parametrize("name", ["gsm7-packed", "GSM7_PACKED", "gsm-7-packed"])
def test_aliases(name):
    assert "Hello".encode(name) == bytes.fromhex("C8329BFD06")


def test_decode_through_codecs():
    assert bytes.fromhex("31D98C56B3DD1A").decode("gsm7-packed") == "1234567"


def test_encode_error_reports_position():
    with pytest.raises(UnicodeEncodeError) as excinfo:
        "ab中".encode("gsm7-packed")
    assert excinfo.value.start == 2
    assert excinfo.value.end == 3


def test_decode_error_reports_position():
    with pytest.raises(UnicodeDecodeError) as excinfo:
        bytes([0xC1, 0x0D, 0x00]).decode("gsm7-packed")
    assert excinfo.value.start == 0
    assert excinfo.value.end == 3


def test_only_strict_errors_supported():
    with pytest.raises(ValueError):
        "Hello".encode("gsm7-packed", "replace")
