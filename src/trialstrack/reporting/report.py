"""Track inspection report data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from trialstrack.core.constants import Game
from trialstrack.core.records import TrackPrefix


@dataclass
class TrackReport:
    """Summary of a track file's uncompressed prefix."""

    source_file: str = ""
    game: str = ""
    header_size: int = 0
    properties_hex: str = ""
    lc: int = 0
    lp: int = 0
    pb: int = 0
    dict_size: int = 0
    declared_size: int = 0
    compressed_size: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def compression_ratio(self) -> float:
        if self.declared_size == 0:
            return 0.0
        return self.compressed_size / self.declared_size

    @classmethod
    def from_prefix(cls, source_file: str, prefix: TrackPrefix) -> TrackReport:
        params = prefix.coder_params
        game = prefix.game.name if isinstance(prefix.game, Game) else str(prefix.game)
        return cls(
            source_file=source_file,
            game=game,
            header_size=len(prefix.header),
            properties_hex=prefix.properties.hex(" ").upper(),
            lc=params.lc,
            lp=params.lp,
            pb=params.pb,
            dict_size=params.dict_size,
            declared_size=prefix.declared_size,
            compressed_size=prefix.compressed_size,
        )

    def to_dict(self) -> dict:
        return {
            "source_file": self.source_file,
            "game": self.game,
            "header_size": self.header_size,
            "properties": self.properties_hex,
            "lc": self.lc,
            "lp": self.lp,
            "pb": self.pb,
            "dict_size": self.dict_size,
            "declared_size": self.declared_size,
            "compressed_size": self.compressed_size,
            "compression_ratio": round(self.compression_ratio, 4),
            "created_at": self.created_at.isoformat(),
        }
