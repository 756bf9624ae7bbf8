from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer

from subshift.core.errors import SubshiftError
from subshift.core.operations import read_subtitles, shift_subtitles, suggest_output_filename
from subshift.core.shift import ShiftMode
from subshift.core.subtitle.srt_io import write_srt
from subshift.core.timestamps import format_timestamp
from subshift.utils.logger import get_logger

logger = get_logger("subshift.cli")

app = typer.Typer(help="Shift SubRip (.srt) subtitle timings by a millisecond offset")


def _fail(msg: str) -> NoReturn:
    typer.secho(f"Error: {msg}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _fmt_span(start_ms: int, end_ms: int) -> str:
    return f"{format_timestamp(start_ms)} --> {format_timestamp(end_ms)}"


@app.command()
def info(
    input: Path = typer.Argument(..., exists=True, dir_okay=False, help="Input .srt file"),
):
    """Show cue count and time bounds of a subtitle file."""
    try:
        res = read_subtitles(input)
    except SubshiftError as e:
        _fail(str(e))

    typer.echo(f"file:  {input.name}")
    typer.echo(f"cues:  {res.cue_count}")
    typer.echo(f"start: {format_timestamp(res.first_start_ms)}")
    typer.echo(f"end:   {format_timestamp(res.last_end_ms)}")


@app.command()
def shift(
    input: Path = typer.Argument(..., exists=True, dir_okay=False, help="Input .srt file"),
    offset: int = typer.Option(..., "--offset", "-o", help="Offset in ms (positive = later, negative = earlier)"),
    mode: ShiftMode = typer.Option(ShiftMode.FULL, help="full: every cue; partial: cues starting inside --start/--end"),
    start: Optional[str] = typer.Option(None, help="Window start for partial mode (e.g. 00:01:30,000, 1:30, 90)"),
    end: Optional[str] = typer.Option(None, help="Window end for partial mode"),
    out: Optional[Path] = typer.Option(None, help="Output path (default: <input>-shifted.srt next to input)"),
    preview: int = typer.Option(0, min=0, help="Print the first N cues before/after shifting"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write the output file"),
):
    """Shift subtitle timings and write the result to a new file."""
    if offset == 0:
        _fail("Please enter a non-zero offset")
    if mode is ShiftMode.PARTIAL and (start is None or end is None):
        _fail("--start and --end are required in partial mode")

    try:
        res = read_subtitles(input)
        shifted = shift_subtitles(res.cues, offset, mode, start, end)
    except SubshiftError as e:
        _fail(str(e))

    changed = sum(1 for a, b in zip(res.cues, shifted) if a != b)

    for before, after in list(zip(res.cues, shifted))[:preview]:
        typer.echo(f"#{before.index}  {_fmt_span(before.start_ms, before.end_ms)}")
        typer.echo(f"{' ' * (len(str(before.index)) + 3)}{_fmt_span(after.start_ms, after.end_ms)}")

    sign = "+" if offset > 0 else ""
    typer.echo(f"changed {changed}/{len(shifted)} cues by {sign}{offset}ms ({mode.value})")

    if dry_run:
        return

    out_path = out or input.with_name(suggest_output_filename(input.name))
    write_srt(shifted, out_path)
    logger.info(f"CLI_WRITE path={out_path} cues={len(shifted)}")
    typer.echo(f"wrote {out_path}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (default: SUBSHIFT_API_HOST or 0.0.0.0)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: SUBSHIFT_API_PORT or 8000)"),
):
    """Run the HTTP API."""
    from subshift.api.main import run

    run(host=host, port=port)


if __name__ == "__main__":
    app()
