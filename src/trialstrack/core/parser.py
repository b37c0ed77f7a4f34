"""Binary reader: track file stream -> DecompressedTrack."""

from __future__ import annotations

import logging
from typing import BinaryIO

from trialstrack.core.compression import decompress_payload
from trialstrack.core.constants import LENGTH_FIELD_SIZE, PROPERTIES_SIZE, Game, header_length
from trialstrack.core.length_field import widen_length
from trialstrack.core.records import DecompressedTrack, TrackPrefix

logger = logging.getLogger(__name__)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise ValueError(
            f"Unexpected end of file reading {what}: expected {size} bytes, got {len(data)}"
        )
    return data


def _remaining(stream: BinaryIO) -> int:
    """Bytes left between the current position and the end of the stream."""
    pos = stream.tell()
    end = stream.seek(0, 2)
    stream.seek(pos)
    return end - pos


def read_prefix(stream: BinaryIO, game: Game | int) -> TrackPrefix:
    """Read the uncompressed part of a track file.

    Leaves the stream positioned at the start of the compressed data.
    """
    header = _read_exact(stream, header_length(game), "track header")
    properties = _read_exact(stream, PROPERTIES_SIZE, "LZMA properties")
    length_field = _read_exact(stream, LENGTH_FIELD_SIZE, "decompressed length")
    declared = widen_length(length_field)
    return TrackPrefix(
        game=game,
        header=header,
        properties=properties,
        length_field=length_field,
        declared_size=declared,
        compressed_size=_remaining(stream),
    )


def parse_track(stream: BinaryIO, game: Game | int) -> DecompressedTrack:
    """Parse and decompress a full track file from a binary stream.

    Raises:
        ValueError: Truncated prefix or decoded size mismatch.
        lzma.LZMAError: Corrupt properties or compressed stream.
    """
    prefix = read_prefix(stream, game)
    logger.debug(
        "Header %d bytes, declared size %d, compressed %d bytes",
        len(prefix.header), prefix.declared_size, prefix.compressed_size,
    )
    data = decompress_payload(stream.read(), prefix.properties, prefix.length_field)
    return DecompressedTrack(header=prefix.header, data=data, properties=prefix.properties)
