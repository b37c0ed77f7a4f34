"""Constants for the Trials track container format."""

from enum import IntEnum

# LZMA coder properties: one lc/lp/pb byte + uint32 dictionary size
PROPERTIES_SIZE = 5

# Decompressed length on disk: low 4 bytes of an 8-byte slot, high 4 implicit zero
LENGTH_FIELD_SIZE = 4
WIDE_LENGTH_SIZE = 8

# Largest decompressed payload the 4-byte length field can express
MAX_DATA_SIZE = 0xFFFFFFFF

# .lzma "alone" header produced by the encoder: properties(5) + uint64 size(8)
ALONE_HEADER_SIZE = PROPERTIES_SIZE + WIDE_LENGTH_SIZE

# Smallest dictionary liblzma accepts when encoding (LZMA_DICT_SIZE_MIN)
MIN_DICT_SIZE = 4096


class Game(IntEnum):
    """Game release that produced a track file."""
    UNKNOWN = 0
    EVOLUTION = 1
    FUSION = 2
    BLOOD_DRAGON = 3
    RISING = 4


# Uncompressed header size (bytes) in front of the LZMA properties
HEADER_LENGTHS: dict[Game, int] = {
    Game.EVOLUTION: 37,
    Game.FUSION: 57,
    Game.BLOOD_DRAGON: 57,
    Game.RISING: 50,
}


def header_length(game: Game | int) -> int:
    """Return the fixed header size for *game*.

    Anything without a mapping (Game.UNKNOWN, out-of-range ints) gets 0.
    That silently parses the whole file as LZMA data, which is what the
    track editor has always done, so it is kept rather than raised on.
    """
    return HEADER_LENGTHS.get(game, 0)
