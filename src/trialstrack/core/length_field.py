"""The container's 4-byte decompressed-length field.

The file only stores the low half of the 8-byte size the LZMA decoder
expects; the high half is always zero.
"""

from __future__ import annotations

import struct

from trialstrack.core.constants import LENGTH_FIELD_SIZE, MAX_DATA_SIZE, WIDE_LENGTH_SIZE


def widen_bytes(raw: bytes) -> bytes:
    """Zero-extend the on-disk 4-byte field to the decoder's 8-byte field."""
    if len(raw) != LENGTH_FIELD_SIZE:
        raise ValueError(
            f"Length field must be {LENGTH_FIELD_SIZE} bytes, got {len(raw)}"
        )
    return bytes(raw) + b"\x00" * (WIDE_LENGTH_SIZE - LENGTH_FIELD_SIZE)


def widen_length(raw: bytes) -> int:
    """Interpret the on-disk 4-byte field as a 64-bit little-endian length."""
    return struct.unpack("<Q", widen_bytes(raw))[0]


def narrow_length(length: int) -> bytes:
    """Encode *length* as the on-disk 4-byte field.

    Raises:
        ValueError: If the length cannot be stored in 32 bits.
    """
    if length < 0 or length > MAX_DATA_SIZE:
        raise ValueError(
            f"Track data size out of range for the container: {length} bytes (max {MAX_DATA_SIZE})"
        )
    return struct.pack("<I", length)
