"""LZMA coder properties: 5 raw bytes <-> (lc, lp, pb, dictionary size)."""

from __future__ import annotations

import lzma
import struct
from dataclasses import dataclass

from trialstrack.core.constants import MIN_DICT_SIZE, PROPERTIES_SIZE


@dataclass(frozen=True)
class CoderParams:
    """Decoded LZMA1 coder parameters.

    lc: literal context bits, lp: literal position bits,
    pb: position bits, dict_size: dictionary size in bytes.
    """

    lc: int
    lp: int
    pb: int
    dict_size: int

    def to_filter(self) -> dict[str, int]:
        """Filter chain entry for the lzma module.

        Dictionaries below 4 KiB are raised to 4 KiB, the encoder's minimum.
        """
        return {
            "id": lzma.FILTER_LZMA1,
            "dict_size": max(self.dict_size, MIN_DICT_SIZE),
            "lc": self.lc,
            "lp": self.lp,
            "pb": self.pb,
        }


def params_from_bytes(properties: bytes) -> CoderParams:
    """Decode a 5-byte LZMA properties block.

    The first byte packs lc/lp/pb as ``(pb * 5 + lp) * 9 + lc``, followed by
    the dictionary size as a little-endian uint32. Extra trailing bytes are
    ignored.

    Raises:
        ValueError: If fewer than 5 bytes are given.
    """
    if len(properties) < PROPERTIES_SIZE:
        raise ValueError(
            f"LZMA properties too short: expected {PROPERTIES_SIZE} bytes, got {len(properties)}"
        )
    packed, dict_size = struct.unpack_from("<BI", properties, 0)
    lc = packed % 9
    remainder = packed // 9
    lp = remainder % 5
    pb = remainder // 5
    return CoderParams(lc=lc, lp=lp, pb=pb, dict_size=dict_size)
