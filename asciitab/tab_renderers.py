"""Renderer implementations for tablature output formats."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from asciitab.errors import EmptyTabError
from asciitab.instrument import InstrumentString
from asciitab.tab_models import Chord, Tab, blank_chord

logger = logging.getLogger(__name__)

BAR_LINE = "|"
REST = "-"


class TabSection:
    """
    A running group of measures printed together, one token list per string.

    A section is built once per render and discarded; it never mutates the Tab
    it is built from.
    """

    def __init__(self, strings: Sequence[InstrumentString]) -> None:
        self.strings = list(strings)
        self.sequences: dict[InstrumentString, list[str]] = {s: [] for s in self.strings}

    def add_labels(self) -> None:
        """Prefix every line with its string name, padded to the widest name."""
        width = max(len(s.name) for s in self.strings)
        for string in self.strings:
            self.sequences[string].append(string.name.ljust(width))

    def add_bar_line(self) -> None:
        """Append a vertical line to separate measures."""
        for string in self.strings:
            self.sequences[string].append(BAR_LINE)

    def add_column(self, chord: Chord) -> None:
        """
        Append one column for ``chord``: the fret number on played strings and
        rests elsewhere, all padded with rests to the widest fret in the column.
        """
        values: dict[InstrumentString, str | None] = {}
        for string in self.strings:
            fret = chord.fret_for(string)
            values[string] = None if fret is None else str(fret)

        width = max([len(v) for v in values.values() if v is not None], default=1)
        for string in self.strings:
            value = values[string]
            token = REST * width if value is None else value.ljust(width, REST)
            self.sequences[string].append(token)

    def add_chords(self, chords: Sequence[Chord]) -> None:
        """Append each chord bracketed by a blank spacer column on both sides."""
        if not chords:
            return
        blank = blank_chord(chords[0].instrument)
        for chord in chords:
            self.add_column(blank)
            self.add_column(chord)
            self.add_column(blank)

    def lines(self) -> list[str]:
        """
        One line per string, lowest-pitched string at the bottom.

        Strings are declared low to high, so print order is the declaration
        order reversed, as in standard tablature.
        """
        return ["".join(self.sequences[s]) for s in reversed(self.strings)]


def layout(tab: Tab, *, labels: bool = False) -> TabSection:
    """
    Lay out every measure of ``tab`` into a single TabSection.

    Raises:
        EmptyTabError: If the tab has no measures or its first measure is empty.
    """
    instrument = tab.instrument
    if instrument is None:
        raise EmptyTabError("Cannot render a tab with no measures or an empty first measure.")

    section = TabSection(instrument.strings)
    if labels:
        section.add_labels()
    section.add_bar_line()

    for measure in tab.measures:
        if not measure.chords:
            continue
        section.add_chords(measure.chords)
        section.add_bar_line()

    logger.debug("Laid out %d measure(s) on %d string(s)", len(tab.measures), len(instrument))
    return section


def render_lines(tab: Tab, *, labels: bool = False) -> list[str]:
    """Rendered tab as one text line per string, top line first."""
    return layout(tab, labels=labels).lines()


class TabRenderer(ABC):
    """Abstract tab renderer."""

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Default filename extension for this renderer."""

    @abstractmethod
    def render(self, tab: Tab, *, title: str = "", labels: bool = False) -> str:
        """Render a tab into a file content string."""


class TextTabRenderer(TabRenderer):
    """Plain ASCII tablature, optionally preceded by a title line."""

    @property
    def default_extension(self) -> str:
        return ".txt"

    def render(self, tab: Tab, *, title: str = "", labels: bool = False) -> str:
        lines = render_lines(tab, labels=labels)
        if title:
            lines = [title, *lines]
        return "\n".join(lines) + "\n"


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class MarkdownTabRenderer(TabRenderer):
    """Render tablature as a Markdown document with the tab in a fenced block."""

    @property
    def default_extension(self) -> str:
        return ".md"

    def render(self, tab: Tab, *, title: str = "", labels: bool = False) -> str:
        body = "\n".join(render_lines(tab, labels=labels))
        heading = f"# {_escape_html(title)}\n\n" if title else ""
        return f"{heading}```text\n{body}\n```\n"
