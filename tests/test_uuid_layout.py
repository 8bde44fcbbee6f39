"""Tests for radixcode.core.uuid_layout.

The 16-byte layout has to match the mixed-endian GUID layout exactly,
so most checks here are against fixed byte vectors.
"""
import uuid

import pytest

from radixcode.core.uuid_layout import (
    UUID_BYTES,
    HALF_LIMIT,
    halves_to_bytes,
    bytes_to_halves,
    uuid_halves,
    uuid_to_bytes,
    uuid_from_bytes,
)

CANONICAL_HIGH = 0xEAB0268403A74D99
CANONICAL_LOW = 0xBD10EDD7BF2445AE
CANONICAL_LAYOUT = bytes.fromhex("8426b0eaa703994dbd10edd7bf2445ae")


class TestHalvesToBytes:
    """Test halves_to_bytes function."""

    def test_canonical_vector(self):
        """Known halves should produce the golden byte layout."""
        assert halves_to_bytes(CANONICAL_HIGH, CANONICAL_LOW) == CANONICAL_LAYOUT

    def test_field_order(self):
        """Each field of the high half is byte-reversed on its own."""
        data = halves_to_bytes(0x0011223344556677, 0x8899AABBCCDDEEFF)
        assert data[0:4] == bytes.fromhex("33221100")
        assert data[4:6] == bytes.fromhex("5544")
        assert data[6:8] == bytes.fromhex("7766")
        assert data[8:] == bytes.fromhex("8899aabbccddeeff")

    def test_length(self):
        assert len(halves_to_bytes(0, 0)) == UUID_BYTES
        assert halves_to_bytes(0, 0) == bytes(16)
        assert halves_to_bytes(HALF_LIMIT - 1, HALF_LIMIT - 1) == b"\xff" * 16

    def test_negative_half_raises(self):
        with pytest.raises(ValueError, match="Halves must be"):
            halves_to_bytes(-1, 0)

    def test_too_large_half_raises(self):
        with pytest.raises(ValueError, match="Halves must be"):
            halves_to_bytes(0, HALF_LIMIT)


class TestBytesToHalves:
    """Test bytes_to_halves function."""

    def test_canonical_vector(self):
        assert bytes_to_halves(CANONICAL_LAYOUT) == (CANONICAL_HIGH, CANONICAL_LOW)

    def test_accepts_bytearray(self):
        assert bytes_to_halves(bytearray(CANONICAL_LAYOUT)) == (CANONICAL_HIGH, CANONICAL_LOW)

    def test_wrong_length_raises(self):
        """Anything but 16 bytes should raise ValueError."""
        with pytest.raises(ValueError, match="must be 16 bytes"):
            bytes_to_halves(bytes(15))
        with pytest.raises(ValueError, match="must be 16 bytes"):
            bytes_to_halves(bytes(17))

    def test_inverse_of_halves_to_bytes(self):
        pairs = [
            (0, 0),
            (1, 1),
            (HALF_LIMIT - 1, 0),
            (0x8000000000000000, 0x8000000000000000),
            (0x0123456789ABCDEF, 0xFEDCBA9876543210),
        ]
        for high, low in pairs:
            assert bytes_to_halves(halves_to_bytes(high, low)) == (high, low)


class TestUuidLayout:
    """Test the uuid.UUID wrappers."""

    def test_uuid_halves(self, canonical_uuid):
        assert uuid_halves(canonical_uuid) == (CANONICAL_HIGH, CANONICAL_LOW)

    def test_uuid_to_bytes(self, canonical_uuid):
        assert uuid_to_bytes(canonical_uuid) == CANONICAL_LAYOUT

    def test_matches_bytes_le(self):
        """The layout is the one uuid.UUID.bytes_le uses."""
        for i in range(50):
            value = uuid.UUID(int=(i * 0x9E3779B97F4A7C15F39CC0605CEDC835) % (1 << 128))
            assert uuid_to_bytes(value) == value.bytes_le

    def test_not_plain_big_endian(self, canonical_uuid):
        assert uuid_to_bytes(canonical_uuid) != canonical_uuid.bytes

    def test_roundtrip(self, canonical_uuid):
        assert uuid_from_bytes(uuid_to_bytes(canonical_uuid)) == canonical_uuid
        for _ in range(20):
            value = uuid.uuid4()
            assert uuid_from_bytes(uuid_to_bytes(value)) == value

    def test_nil_and_max(self):
        assert uuid_from_bytes(bytes(16)) == uuid.UUID(int=0)
        assert uuid_from_bytes(b"\xff" * 16) == uuid.UUID(int=(1 << 128) - 1)
