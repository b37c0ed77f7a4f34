"""CLI interface for trialstrack using Typer."""

from __future__ import annotations

import logging
import lzma
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from trialstrack import __version__
from trialstrack.core.constants import Game

# Part files written by `unpack` and read back by `pack`
HEADER_SUFFIX = ".header"
DATA_SUFFIX = ".data"
PROPERTIES_SUFFIX = ".props"


class GameChoice(str, Enum):
    """User-facing game selection (separate from the Game enum)."""
    evolution = "evolution"
    fusion = "fusion"
    blood_dragon = "blood-dragon"
    rising = "rising"


_GAME_MAP = {
    GameChoice.evolution: Game.EVOLUTION,
    GameChoice.fusion: Game.FUSION,
    GameChoice.blood_dragon: Game.BLOOD_DRAGON,
    GameChoice.rising: Game.RISING,
}

app = typer.Typer(
    name="trialstrack",
    help="Decompress and recompress Trials track (.trk) files.",
    add_completion=False,
)
console = Console()

_verbose = False
_quiet = False


def _print(msg: str, *, verbose_only: bool = False) -> None:
    """Print respecting --verbose/--quiet flags. Errors bypass --quiet."""
    if _quiet:
        return
    if verbose_only and not _verbose:
        return
    console.print(msg)


def _error(msg: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {msg}")
    return typer.Exit(1)


def _part_paths(stem: Path) -> tuple[Path, Path, Path]:
    """Header, data and properties paths for a part-file stem."""
    return (
        stem.with_name(stem.name + HEADER_SUFFIX),
        stem.with_name(stem.name + DATA_SUFFIX),
        stem.with_name(stem.name + PROPERTIES_SUFFIX),
    )


def version_callback(value: bool) -> None:
    if value:
        console.print(f"trialstrack {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show extra info and debug logging.",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only show errors.",
    ),
) -> None:
    """trialstrack: Read and write Trials track files."""
    global _verbose, _quiet
    _verbose = verbose
    _quiet = quiet
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


@app.command()
def info(
    file: Path = typer.Argument(..., help="Path to the track file."),
    game: GameChoice = typer.Option(
        GameChoice.rising, "--game", "-g",
        help="Game the track belongs to (selects the header size).",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the report as JSON.",
    ),
    report: Path | None = typer.Option(
        None, "--report", "-r",
        help="Also save the report (.json or .md).",
    ),
) -> None:
    """Show the uncompressed header and LZMA settings of a track file."""
    from trialstrack.core.track import inspect_track
    from trialstrack.reporting.formatters import save_report, to_json
    from trialstrack.reporting.report import TrackReport

    if not file.exists():
        raise _error(f"File not found: {file}")

    try:
        prefix = inspect_track(file, _GAME_MAP[game])
    except (ValueError, OSError) as e:
        raise _error(str(e)) from e

    track_report = TrackReport.from_prefix(str(file), prefix)

    if as_json:
        console.print_json(to_json(track_report))
    else:
        table = Table(title=f"Track {file.name}")
        table.add_column("Field", style="dim")
        table.add_column("Value")
        table.add_row("Game", track_report.game)
        table.add_row("Header size", str(track_report.header_size))
        table.add_row("Properties", track_report.properties_hex)
        table.add_row("lc / lp / pb", f"{track_report.lc} / {track_report.lp} / {track_report.pb}")
        table.add_row("Dictionary size", str(track_report.dict_size))
        table.add_row("Declared size", str(track_report.declared_size))
        table.add_row("Compressed size", str(track_report.compressed_size))
        console.print(table)

    if report:
        save_report(track_report, report)
        _print(f"Report saved: [cyan]{report}[/cyan]")


@app.command()
def unpack(
    file: Path = typer.Argument(..., help="Path to the track file."),
    game: GameChoice = typer.Option(
        GameChoice.rising, "--game", "-g",
        help="Game the track belongs to (selects the header size).",
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o",
        help="Directory for the part files (default: next to the track).",
    ),
) -> None:
    """Decompress a track into .header, .data and .props part files."""
    from trialstrack.core.track import decompress_result

    if not file.exists():
        raise _error(f"File not found: {file}")

    result = decompress_result(file, _GAME_MAP[game])
    if not result.ok:
        raise _error(f"Could not decompress {file.name}: {result.error}")

    target_dir = output_dir or file.parent
    target_dir.mkdir(parents=True, exist_ok=True)
    header_path, data_path, props_path = _part_paths(target_dir / file.stem)

    track = result.track
    header_path.write_bytes(track.header)
    data_path.write_bytes(track.data)
    props_path.write_bytes(track.properties)

    _print(
        f"Unpacked [cyan]{file.name}[/cyan]: header {len(track.header)} bytes,"
        f" data {len(track.data)} bytes"
    )
    _print(f"Parts written to [cyan]{target_dir}[/cyan]", verbose_only=True)


@app.command()
def pack(
    parts: Path = typer.Argument(
        ..., help="Part-file stem, e.g. out/track for out/track.header/.data/.props.",
    ),
    output: Path = typer.Option(
        ..., "--output", "-o", help="Track file to write.",
    ),
) -> None:
    """Compress .header, .data and .props part files into a track file."""
    from trialstrack.core.records import DecompressedTrack
    from trialstrack.core.track import compress

    paths = _part_paths(parts)
    missing = [p for p in paths if not p.exists()]
    if missing:
        raise _error(f"Missing part file: {missing[0]}")

    header_path, data_path, props_path = paths
    track = DecompressedTrack(
        header=header_path.read_bytes(),
        data=data_path.read_bytes(),
        properties=props_path.read_bytes(),
    )

    try:
        compress(output, track)
    except (ValueError, lzma.LZMAError, OSError) as e:
        raise _error(str(e)) from e

    _print(f"Packed [cyan]{output}[/cyan] ({len(track.data)} data bytes)")


@app.command()
def recompress(
    file: Path = typer.Argument(..., help="Path to the track file."),
    output: Path = typer.Option(
        ..., "--output", "-o", help="Track file to write.",
    ),
    game: GameChoice = typer.Option(
        GameChoice.rising, "--game", "-g",
        help="Game the track belongs to (selects the header size).",
    ),
) -> None:
    """Decompress a track and compress it again into a new file."""
    from trialstrack.core.track import compress, decompress_result

    if not file.exists():
        raise _error(f"File not found: {file}")

    result = decompress_result(file, _GAME_MAP[game])
    if not result.ok:
        raise _error(f"Could not decompress {file.name}: {result.error}")

    try:
        compress(output, result.track)
    except (ValueError, lzma.LZMAError, OSError) as e:
        raise _error(f"Could not write {output}: {e}") from e

    _print(f"Recompressed [cyan]{file.name}[/cyan] -> [cyan]{output}[/cyan]")
