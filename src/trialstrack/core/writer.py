"""Binary writer: DecompressedTrack -> track file bytes."""

from __future__ import annotations

from typing import BinaryIO

from trialstrack.core.compression import EncodedPayload, compress_payload
from trialstrack.core.length_field import narrow_length
from trialstrack.core.records import DecompressedTrack


def encode_track(track: DecompressedTrack) -> tuple[bytes, EncodedPayload]:
    """Validate and compress a track without touching any output.

    Returns:
        Tuple of (length_field, encoded_payload).

    Raises:
        ValueError: Short properties or data too large for the length field.
        lzma.LZMAError: The encoder rejected the coder parameters.
    """
    params = track.coder_params
    length_field = narrow_length(len(track.data))
    return length_field, compress_payload(track.data, params)


def write_track(track: DecompressedTrack, stream: BinaryIO) -> None:
    """Serialize a track to a binary stream.

    Layout: header, encoder-generated properties, 4-byte length, LZMA stream.
    The properties are regenerated by the encoder, so they can differ from
    ``track.properties`` (e.g. a rounded-up dictionary size)
    while still decoding the same stream.
    """
    length_field, payload = encode_track(track)
    stream.write(track.header)
    stream.write(payload.properties)
    stream.write(length_field)
    stream.write(payload.stream)
