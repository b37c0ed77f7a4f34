"""LZMA compression/decompression for track payloads.

Both directions go through the standard library's .lzma ("alone") format,
whose 13-byte header is properties(5) + uint64 decompressed size(8).
Track files store the same properties but only a 4-byte size, so the
header is rebuilt before decoding and stripped after encoding.
"""

from __future__ import annotations

import logging
import lzma
from dataclasses import dataclass

from trialstrack.core.constants import ALONE_HEADER_SIZE, PROPERTIES_SIZE
from trialstrack.core.length_field import widen_bytes
from trialstrack.core.properties import CoderParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedPayload:
    """Encoder output: its own properties block and the compressed stream."""

    properties: bytes
    stream: bytes


def decompress_payload(
    compressed: bytes,
    properties: bytes,
    length_field: bytes,
) -> bytes:
    """Decompress a track payload.

    Args:
        compressed: Everything after the length field.
        properties: The raw 5-byte LZMA properties block.
        length_field: The on-disk 4-byte decompressed size.

    Returns:
        Exactly the declared number of decompressed bytes.

    Raises:
        ValueError: If the properties are short or the output size is wrong.
        lzma.LZMAError: If liblzma rejects the properties or the stream.
            liblzma only supports lc + lp <= 4, so tracks written with a larger
            lc (the LZMA SDK allows up to 8) cannot be decoded.
    """
    if len(properties) != PROPERTIES_SIZE:
        raise ValueError(
            f"LZMA properties must be {PROPERTIES_SIZE} bytes, got {len(properties)}"
        )
    wide = widen_bytes(length_field)
    expected = int.from_bytes(wide, "little")
    logger.debug(
        "Decoding %d compressed bytes, expecting %d", len(compressed), expected
    )

    decoder = lzma.LZMADecompressor(format=lzma.FORMAT_ALONE)
    data = decoder.decompress(bytes(properties) + wide + bytes(compressed))
    # Bytes past the declared size (an end marker) stay in unused_data
    if len(data) != expected:
        raise ValueError(
            f"Decompressed size mismatch: expected {expected}, got {len(data)}"
        )
    return data


def compress_payload(data: bytes, params: CoderParams) -> EncodedPayload:
    """Compress a track payload with the given coder parameters.

    The stream is written in "size unknown" mode and ends with an
    end-of-payload marker.

    Raises:
        lzma.LZMAError: If liblzma rejects the parameters.
    """
    encoded = lzma.compress(
        data,
        format=lzma.FORMAT_ALONE,
        filters=[params.to_filter()],
    )
    logger.debug("Encoded %d bytes into %d", len(data), len(encoded) - ALONE_HEADER_SIZE)
    return EncodedPayload(
        properties=encoded[:PROPERTIES_SIZE],
        stream=encoded[ALONE_HEADER_SIZE:],
    )
