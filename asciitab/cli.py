"""asciitab CLI entry point."""

import logging
import sys
from collections.abc import Callable
from typing import Any

import click
import numpy as np

from asciitab import __version__
from asciitab.errors import AsciiTabError
from asciitab.generators import (
    DEFAULT_CHORDS_PER_MEASURE,
    DEFAULT_MEASURES,
    DEFAULT_SPAN,
    ChordGenerator,
    RandomChordGenerator,
    ScaleChordGenerator,
    new_rng,
    random_tab,
    scale_tab,
)
from asciitab.instrument import INSTRUMENT_NAMES, get_instrument
from asciitab.scale import Scale, new_scale, random_note, random_scale_name
from asciitab.tab_exporter import SUPPORTED_FORMATS, TabExporter
from asciitab.tab_models import Tab

MAX_MEASURES = 64
MAX_CHORDS_PER_MEASURE = 32
MAX_SPAN = 12


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _resolve_scale(key: str | None, scale_name: str | None, rng: np.random.Generator) -> Scale:
    """Build the requested scale, drawing a random key or pattern for any left out."""
    if key is None:
        key = random_note(rng)
    if scale_name is None:
        scale_name = random_scale_name(rng)
    return new_scale(scale_name, key)


def _get_generator(any_fret: bool, scale: Scale, rng: np.random.Generator) -> ChordGenerator:
    """Return the ChordGenerator for the requested mode."""
    if any_fret:
        return RandomChordGenerator(rng)
    return ScaleChordGenerator(rng, scale)


def _emit(tab: Tab, header: str, output: str | None, output_format: str, labels: bool) -> None:
    """Write the rendered tab to stdout, or to ``output`` when given."""
    exporter = TabExporter(title=header, output_format=output_format, labels=labels)
    try:
        if output is None:
            click.echo(exporter.render(tab), nl=False)
            return
        exporter.export(tab, output)
    except AsciiTabError as exc:
        click.echo(f"  ERROR: Could not render tab — {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)

    click.echo(header)
    click.echo(f"Done!  Tab written to '{output}'.")


def _shared_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options common to every tab-producing subcommand."""
    options = [
        click.option("--key", default=None, metavar="PITCH",
                     help="Root note of the scale, e.g. A, C#, Bb. Random when omitted."),
        click.option("--scale", "scale_name", default=None, metavar="NAME",
                     help="Scale pattern: major or minor. Random when omitted."),
        click.option("--instrument", type=click.Choice(list(INSTRUMENT_NAMES), case_sensitive=False),
                     default="guitar", show_default=True, help="Instrument whose strings are tabbed."),
        click.option("--seed", type=int, default=None,
                     help="Seed for the random stream. Defaults to the current time."),
        click.option("--labels", is_flag=True, default=False,
                     help="Prefix each line with its string name."),
        click.option("--format", "output_format", type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
                     default="text", show_default=True, help="Output format: plain text or Markdown."),
        click.option("--output", "-o", default=None, metavar="PATH",
                     help="Destination file. Defaults to stdout."),
        click.option("--verbose", "-v", is_flag=True, default=False,
                     help="Log generation details to stderr."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="asciitab")
def main() -> None:
    """asciitab — ASCII tabs for guitar and ukulele, for practice or inspiration."""


# ── random subcommand ──────────────────────────────────────────────────────────

@main.command()
@_shared_options
@click.option(
    "--measures",
    type=click.IntRange(1, MAX_MEASURES),
    default=DEFAULT_MEASURES,
    show_default=True,
    help="Number of measures to generate.",
)
@click.option(
    "--chords",
    type=click.IntRange(1, MAX_CHORDS_PER_MEASURE),
    default=DEFAULT_CHORDS_PER_MEASURE,
    show_default=True,
    help="Chords per measure.",
)
@click.option(
    "--any-fret",
    is_flag=True,
    default=False,
    help="Ignore the scale and pick any of the first four frets.",
)
def random(
    key: str | None,
    scale_name: str | None,
    instrument: str,
    seed: int | None,
    labels: bool,
    output_format: str,
    output: str | None,
    verbose: bool,
    measures: int,
    chords: int,
    any_fret: bool,
) -> None:
    """
    Generate a tab of random chords, by default restricted to one scale.

    \b
    Examples:
      asciitab random --key=A#
      asciitab random --key=E --scale=minor --instrument=ukulele
      asciitab random --measures 8 --seed 42 -o practice.txt
    """
    _configure_logging(verbose)
    rng = new_rng(seed)
    try:
        scale = _resolve_scale(key, scale_name, rng)
    except AsciiTabError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)

    generator = _get_generator(any_fret, scale, rng)
    tab = random_tab(get_instrument(instrument), generator, measures, chords)
    _emit(tab, f"Random tab in {scale}", output, output_format, labels)


# ── scale subcommand ───────────────────────────────────────────────────────────

@main.command()
@_shared_options
@click.option(
    "--span",
    type=click.IntRange(1, MAX_SPAN),
    default=DEFAULT_SPAN,
    show_default=True,
    help="Frets above the root covered on each string.",
)
def scale(
    key: str | None,
    scale_name: str | None,
    instrument: str,
    seed: int | None,
    labels: bool,
    output_format: str,
    output: str | None,
    verbose: bool,
    span: int,
) -> None:
    """
    Walk every note of a scale across the strings, lowest string first.

    \b
    Examples:
      asciitab scale --key=B
      asciitab scale --key=G --scale=major --labels
      asciitab scale --key=A --scale=minor --format md -o a_minor.md
    """
    _configure_logging(verbose)
    rng = new_rng(seed)
    try:
        resolved = _resolve_scale(key, scale_name, rng)
    except AsciiTabError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)

    tab = scale_tab(get_instrument(instrument), resolved, span)
    _emit(tab, f"Basic scale in {resolved}", output, output_format, labels)
