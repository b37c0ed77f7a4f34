"""Shared test fixtures for trialstrack tests."""

from __future__ import annotations

import lzma
import struct
from pathlib import Path

import pytest

from trialstrack.core.records import DecompressedTrack

# Canonical LZMA defaults: lc=3, lp=0, pb=2, 16 MiB dictionary
DEFAULT_PROPERTIES = bytes([0x5D, 0x00, 0x00, 0x01, 0x00])

RISING_HEADER = b"\xAA" * 50


def lzma_stream(data: bytes, properties: bytes = DEFAULT_PROPERTIES) -> bytes:
    """Compress data to a bare LZMA stream (no .lzma header) using the given properties."""
    packed, dict_size = struct.unpack("<BI", properties)
    lzma_filter = {
        "id": lzma.FILTER_LZMA1,
        "dict_size": max(dict_size, 4096),
        "lc": packed % 9,
        "lp": (packed // 9) % 5,
        "pb": (packed // 9) // 5,
    }
    encoded = lzma.compress(data, format=lzma.FORMAT_ALONE, filters=[lzma_filter])
    return encoded[13:]


def make_track_bytes(
    header: bytes,
    data: bytes,
    properties: bytes = DEFAULT_PROPERTIES,
    declared_size: int | None = None,
    stream: bytes | None = None,
) -> bytes:
    """Build raw track file bytes: header + properties + uint32 size + LZMA stream."""
    if declared_size is None:
        declared_size = len(data)
    if stream is None:
        stream = lzma_stream(data, properties)
    return header + properties + struct.pack("<I", declared_size) + stream


def write_track_file(path: Path, header: bytes, data: bytes, **kwargs) -> Path:
    path.write_bytes(make_track_bytes(header, data, **kwargs))
    return path


@pytest.fixture
def track_data() -> bytes:
    """A payload with enough repetition to actually compress."""
    return b"TRACK\x00\x01\x02" + bytes(range(256)) * 8 + b"finish line" * 20


@pytest.fixture
def rising_track(track_data: bytes) -> DecompressedTrack:
    return DecompressedTrack(
        header=RISING_HEADER,
        data=track_data,
        properties=DEFAULT_PROPERTIES,
    )


@pytest.fixture
def rising_file(tmp_path: Path, track_data: bytes) -> Path:
    """A valid Trials Rising track file on disk."""
    return write_track_file(tmp_path / "rising.trk", RISING_HEADER, track_data)
