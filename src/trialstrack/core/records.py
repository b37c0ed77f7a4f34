"""Data classes for a decompressed track and the results around it."""

from __future__ import annotations

from dataclasses import dataclass

from trialstrack.core.constants import Game
from trialstrack.core.properties import CoderParams, params_from_bytes


@dataclass(frozen=True)
class DecompressedTrack:
    """The three parts needed to put a track file back together.

    header: opaque game-specific bytes, carried through untouched.
    data: the decompressed track payload.
    properties: the 5-byte LZMA properties block.

    A track with all three fields empty is the failure sentinel
    returned by ``decompress``.
    """

    header: bytes = b""
    data: bytes = b""
    properties: bytes = b""

    @property
    def is_empty(self) -> bool:
        return not (self.header or self.data or self.properties)

    @property
    def coder_params(self) -> CoderParams:
        return params_from_bytes(self.properties)


EMPTY_TRACK = DecompressedTrack()


@dataclass(frozen=True)
class DecompressResult:
    """Outcome of a decompression that keeps the failure reason.

    On failure ``track`` is EMPTY_TRACK and ``error`` holds the message.
    """

    track: DecompressedTrack
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TrackPrefix:
    """Everything in a track file in front of the compressed stream."""

    game: Game | int
    header: bytes
    properties: bytes
    length_field: bytes
    declared_size: int
    compressed_size: int

    @property
    def coder_params(self) -> CoderParams:
        return params_from_bytes(self.properties)
