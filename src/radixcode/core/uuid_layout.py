"""Byte layout of 128-bit identifiers.

A UUID is held as two unsigned 64-bit halves, high and low. Its 16-byte
layout is the mixed-endian one used by GUIDs:

    bytes 0-3   high bits 63..32, little-endian
    bytes 4-5   high bits 31..16, little-endian
    bytes 6-7   high bits 15..0,  little-endian
    bytes 8-15  low, big-endian

Other systems exchange identifiers in this layout, so it must not be
replaced by plain big-endian. It is the same layout as uuid.UUID.bytes_le.
"""

import struct
import uuid

# time_low, time_mid, time_hi_and_version
_HIGH_FIELDS = struct.Struct("<IHH")
_LOW = struct.Struct(">Q")

UUID_BYTES = 16
HALF_LIMIT = 1 << 64


def halves_to_bytes(high: int, low: int) -> bytes:
    """Lay out the two 64-bit halves of an identifier as 16 bytes."""
    if not 0 <= high < HALF_LIMIT or not 0 <= low < HALF_LIMIT:
        raise ValueError(
            f"Halves must be 0-{HALF_LIMIT - 1}, got high={high}, low={low}"
        )
    return _HIGH_FIELDS.pack(high >> 32, (high >> 16) & 0xFFFF, high & 0xFFFF) + _LOW.pack(low)


def bytes_to_halves(data: bytes) -> tuple[int, int]:
    """Read the (high, low) halves back from a 16-byte layout."""
    if len(data) != UUID_BYTES:
        raise ValueError(f"Identifier layout must be {UUID_BYTES} bytes, got {len(data)}")
    field32, field16a, field16b = _HIGH_FIELDS.unpack_from(data, 0)
    (low,) = _LOW.unpack_from(data, _HIGH_FIELDS.size)
    high = field32 << 32 | field16a << 16 | field16b
    return high, low


def uuid_halves(value: uuid.UUID) -> tuple[int, int]:
    """Split a UUID into its most and least significant 64 bits."""
    return value.int >> 64, value.int & (HALF_LIMIT - 1)


def uuid_to_bytes(value: uuid.UUID) -> bytes:
    return halves_to_bytes(*uuid_halves(value))


def uuid_from_bytes(data: bytes) -> uuid.UUID:
    high, low = bytes_to_halves(data)
    return uuid.UUID(int=high << 64 | low)
