import io

import pytest

from gsm7_lib.bitio import (
    BitInput,
    BitOutput,
    BufferSink,
    BufferSource,
    StreamSink,
    StreamSource,
)


def test_bit_input_reads_lsb_first_across_bytes():
    bits = BitInput(BufferSource(b"\x54\x3a"))
    assert bits.read_bits(7) == 0x54
    assert bits.read_bits(7) == 0x74
    assert bits.bits_read == 14
    assert not bits.byte_aligned


def test_bit_input_reports_shortfall():
    bits = BitInput(BufferSource(b"\xff"))
    assert bits.read_bits(7) == 0x7F
    assert bits.read_bits(7) is None
    assert bits.at_end()


def test_bit_input_at_end_keeps_lookahead_byte():
    bits = BitInput(BufferSource(b"\x01\x02"))
    assert bits.read_bits(8) == 0x01
    assert not bits.at_end()
    assert bits.read_bits(8) == 0x02
    assert bits.at_end()


def test_bit_output_packs_lsb_first():
    sink = BufferSink()
    bits = BitOutput(sink)
    bits.write_bits(0x54, 7)
    bits.write_bits(0x74, 7)
    assert bits.bit_count == 14
    assert bits.pending_bits == 6
    assert bits.align() == 2
    assert sink.getvalue() == b"\x54\x3a"


def test_bit_output_rejects_values_wider_than_count():
    bits = BitOutput(BufferSink())
    with pytest.raises(ValueError):
        bits.write_bits(8, 3)
    with pytest.raises(ValueError):
        bits.write_bits(-1, 3)
    assert bits.bit_count == 0


def test_bit_output_write_bytes_unaligned():
    sink = BufferSink()
    bits = BitOutput(sink)
    bits.write_bit(1)
    bits.write_bytes(b"\xff")
    bits.align()
    assert bits.bit_count == 16
    assert sink.getvalue() == b"\xff\x01"


def test_align_with_one_bits():
    sink = BufferSink()
    bits = BitOutput(sink)
    bits.write_bits(0, 3)
    assert bits.align(pad_bit=1) == 5
    assert sink.getvalue() == b"\xf8"


def test_stream_source_reads_in_chunks():
    source = StreamSource(io.BytesIO(b"abc"), chunk_size=2)
    assert [source.read_byte() for _ in range(4)] == [0x61, 0x62, 0x63, None]


def test_stream_sink_buffers_until_flush():
    stream = io.BytesIO()
    sink = StreamSink(stream, buffer_size=4)
    sink.write(b"ab")
    assert stream.getvalue() == b""
    sink.flush()
    assert stream.getvalue() == b"ab"
    sink.write(b"cdef")
    assert stream.getvalue() == b"abcdef"


def test_stream_adapters_reject_non_positive_sizes():
    with pytest.raises(ValueError):
        StreamSource(io.BytesIO(), chunk_size=0)
    with pytest.raises(ValueError):
        StreamSink(io.BytesIO(), buffer_size=0)
