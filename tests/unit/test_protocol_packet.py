"""Test telemetry packet decoding."""

import numpy as np
import pytest

from sensorstream.exceptions import FramingError, ProtocolError
from sensorstream.protocol.packet import (
    NUM_CHANNELS,
    PACKET_SIZE,
    decode_packet,
    format_hex,
    samples_to_array,
    sign_extend_24,
)

FIXTURE = bytes.fromhex("00 05 00 7F FF FF 00 00 01 00 00 80 00 00 00 00 FF FF FF FF FF")


def _packet(index: int, *fields: bytes, header: int = 0) -> bytes:
    return bytes([header, index]) + b"".join(fields)


class TestSignExtend24:
    """Test 24-bit two's-complement conversion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (0x000000, 0),
            (0x000001, 1),
            (0x7FFFFF, 8388607),
            (0x800000, -8388608),
            (0xFFFFFF, -1),
            (0xFFFFFE, -2),
        ],
    )
    def test_boundaries(self, raw, expected):
        """Test sign-extension boundary values."""
        assert sign_extend_24(raw) == expected


class TestDecodePacket:
    """Test decoding of complete packets."""

    def test_decode_fixture(self):
        """Test reference packet with max positive and min negative readings."""
        sample = decode_packet(FIXTURE)

        assert sample.sample_index == 5
        assert sample.channels[0] == 8388607
        # Bytes 7-9 of the fixture are 00 01 00
        assert sample.channels[1] == 256
        assert sample.channels[2] == -8388608
        assert sample.raw == FIXTURE

    def test_skip_byte_is_ignored(self):
        """Test non-zero status byte does not affect the reading."""
        packet = _packet(
            7,
            b"\xAA\x00\x00\x01",
            b"\x00\xFF\xFF\xFF",
            b"\x55\x00\x00\x00",
        )
        sample = decode_packet(packet)

        assert sample.channels == (1, -1, 0)
        assert sample.status == (0xAA, 0x00, 0x55)

    def test_header_byte_retained(self):
        """Test byte 0 is kept on the record."""
        packet = _packet(0, *(b"\x00" * 4 for _ in range(NUM_CHANNELS)), header=0xA0)
        sample = decode_packet(packet)
        assert sample.header == 0xA0
        assert sample.channels == (0, 0, 0)

    def test_sample_index_full_range(self):
        """Test sample index is unsigned 8-bit."""
        packet = _packet(255, *(b"\x00" * 4 for _ in range(NUM_CHANNELS)))
        assert decode_packet(packet).sample_index == 255

    def test_accepts_bytearray(self):
        """Test bytes-like input is decoded and stored as bytes."""
        sample = decode_packet(bytearray(FIXTURE))
        assert sample.raw == FIXTURE
        assert isinstance(sample.raw, bytes)

    @pytest.mark.parametrize("length", [0, 1, PACKET_SIZE - 1, PACKET_SIZE + 1])
    def test_wrong_length(self, length):
        """Test mis-sized packet raises FramingError."""
        with pytest.raises(FramingError, match=f"{length} bytes"):
            decode_packet(b"\x00" * length)

    def test_framing_error_is_protocol_error(self):
        """Test FramingError belongs to the protocol error family."""
        with pytest.raises(ProtocolError):
            decode_packet(b"\x00")


class TestHexRendering:
    """Test diagnostic hex rendering."""

    def test_fixture_hex(self):
        """Test exact lowercase space-separated rendering."""
        assert decode_packet(FIXTURE).hex == (
            "00 05 00 7f ff ff 00 00 01 00 00 80 00 00 00 00 ff ff ff ff ff"
        )

    def test_format_hex_matches_record(self):
        """Test format_hex and SampleRecord.hex agree."""
        assert format_hex(FIXTURE) == decode_packet(FIXTURE).hex

    def test_repeatable(self):
        """Test rendering the same bytes twice gives the same string."""
        assert format_hex(FIXTURE) == format_hex(FIXTURE)

    def test_distinct_inputs_distinct_output(self):
        """Test rendering distinguishes equal-length inputs."""
        other = FIXTURE[:-1] + b"\xFE"
        assert format_hex(FIXTURE) != format_hex(other)

    def test_single_digit_bytes_padded(self):
        """Test bytes below 0x10 render with a leading zero."""
        assert format_hex(b"\x01\x0a") == "01 0a"


class TestSamplesToArray:
    """Test numeric stacking of decoded samples."""

    def test_shape_and_values(self):
        """Test samples stack into (n, NUM_CHANNELS) int32."""
        samples = [decode_packet(FIXTURE), decode_packet(FIXTURE)]
        array = samples_to_array(samples)

        assert array.shape == (2, NUM_CHANNELS)
        assert array.dtype == np.int32
        assert array[0].tolist() == [8388607, 256, -8388608]

    def test_empty(self):
        """Test no samples gives an empty array with channel columns."""
        array = samples_to_array([])
        assert array.shape == (0, NUM_CHANNELS)
