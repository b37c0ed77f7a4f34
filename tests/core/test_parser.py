"""Tests for the track file reader."""

import lzma
from io import BytesIO

import pytest

from tests.conftest import DEFAULT_PROPERTIES, RISING_HEADER, make_track_bytes
from trialstrack.core.constants import Game
from trialstrack.core.parser import parse_track, read_prefix


class TestReadPrefix:
    def test_prefix_fields(self):
        raw = make_track_bytes(RISING_HEADER, b"hello")
        stream = BytesIO(raw)
        prefix = read_prefix(stream, Game.RISING)
        assert prefix.header == RISING_HEADER
        assert prefix.properties == DEFAULT_PROPERTIES
        assert prefix.length_field == b"\x05\x00\x00\x00"
        assert prefix.declared_size == 5
        assert prefix.compressed_size == len(raw) - 50 - 5 - 4
        assert stream.tell() == 50 + 5 + 4

    def test_header_size_follows_game(self):
        raw = make_track_bytes(b"\x01" * 37, b"hello")
        prefix = read_prefix(BytesIO(raw), Game.EVOLUTION)
        assert prefix.header == b"\x01" * 37
        assert prefix.declared_size == 5

    def test_header_bytes_are_opaque(self):
        header = bytes(range(57))
        prefix = read_prefix(BytesIO(make_track_bytes(header, b"x")), Game.FUSION)
        assert prefix.header == header

    def test_coder_params(self):
        prefix = read_prefix(BytesIO(make_track_bytes(RISING_HEADER, b"x")), Game.RISING)
        assert prefix.coder_params.dict_size == 1 << 24

    def test_truncated_header_raises(self):
        with pytest.raises(ValueError, match="track header"):
            read_prefix(BytesIO(b"\xAA" * 20), Game.RISING)

    def test_truncated_properties_raises(self):
        with pytest.raises(ValueError, match="LZMA properties"):
            read_prefix(BytesIO(RISING_HEADER + b"\x5D\x00"), Game.RISING)

    def test_truncated_length_raises(self):
        with pytest.raises(ValueError, match="decompressed length"):
            read_prefix(BytesIO(RISING_HEADER + DEFAULT_PROPERTIES + b"\x05"), Game.RISING)


class TestParseTrack:
    def test_end_to_end_hello(self):
        raw = make_track_bytes(RISING_HEADER, b"hello")
        track = parse_track(BytesIO(raw), Game.RISING)
        assert track.header == b"\xAA" * 50
        assert track.data == b"hello"
        assert track.properties == bytes([0x5D, 0, 0, 1, 0])

    def test_unknown_game_reads_no_header(self):
        raw = make_track_bytes(b"", b"no header here")
        track = parse_track(BytesIO(raw), Game.UNKNOWN)
        assert track.header == b""
        assert track.data == b"no header here"

    def test_garbage_stream_raises(self):
        raw = make_track_bytes(RISING_HEADER, b"hello", stream=b"\xFF" * 40)
        with pytest.raises(lzma.LZMAError):
            parse_track(BytesIO(raw), Game.RISING)
