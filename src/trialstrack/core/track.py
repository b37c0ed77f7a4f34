"""Facade for loading and saving track files."""

from __future__ import annotations

import io
import logging
import lzma
from pathlib import Path

from trialstrack.core.constants import Game
from trialstrack.core.parser import parse_track, read_prefix
from trialstrack.core.records import EMPTY_TRACK, DecompressedTrack, DecompressResult, TrackPrefix
from trialstrack.core.writer import write_track

logger = logging.getLogger(__name__)

# Everything a bad or unreadable track file can raise while decoding
_DECODE_ERRORS = (OSError, EOFError, ValueError, lzma.LZMAError)


def decompress_result(path: str | Path, game: Game | int) -> DecompressResult:
    """Decompress a track file, reporting failures as data instead of raising."""
    path = Path(path)
    logger.debug("Decompressing file: %s", path)
    try:
        with open(path, "rb") as f:
            track = parse_track(f, game)
    except _DECODE_ERRORS as e:
        logger.warning("Failed to decompress %s: %s", path, e)
        logger.debug("Decompression traceback", exc_info=True)
        return DecompressResult(track=EMPTY_TRACK, error=str(e) or type(e).__name__)
    return DecompressResult(track=track)


def decompress(path: str | Path, game: Game | int) -> DecompressedTrack:
    """Decompress a track file.

    Never raises: on any failure the returned track has empty header,
    data and properties (see ``DecompressedTrack.is_empty``).
    """
    return decompress_result(path, game).track


def compress(path: str | Path, track: DecompressedTrack) -> None:
    """Compress a track back into a file the games can load.

    The track is encoded in memory before *path* is opened, so a rejected
    track leaves an existing file alone. All errors propagate.
    """
    raw = track_to_bytes(track)
    path = Path(path)
    with open(path, "wb") as f:
        f.write(raw)
    logger.debug("Wrote %s (%d data bytes, %d on disk)", path, len(track.data), len(raw))


def inspect_track(path: str | Path, game: Game | int) -> TrackPrefix:
    """Read a track file's header, properties and sizes without decoding it."""
    with open(path, "rb") as f:
        return read_prefix(f, game)


def track_from_bytes(raw: bytes, game: Game | int) -> DecompressedTrack:
    """Decompress a track held in memory. Returns EMPTY_TRACK on failure."""
    try:
        return parse_track(io.BytesIO(raw), game)
    except _DECODE_ERRORS as e:
        logger.warning("Failed to decompress track bytes: %s", e)
        return EMPTY_TRACK


def track_to_bytes(track: DecompressedTrack) -> bytes:
    """Serialize a track to bytes in memory."""
    buf = io.BytesIO()
    write_track(track, buf)
    return buf.getvalue()
