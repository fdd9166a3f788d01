"""Data models for tablature: chords, measures and tabs."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from asciitab.instrument import Instrument, InstrumentString


@dataclass(frozen=True)
class Chord:
    """
    Fret positions on an Instrument for a single instant.

    Strings absent from ``positions`` are not played. A chord with no positions
    at all is a blank chord and renders as a spacer column.
    """

    instrument: Instrument
    positions: Mapping[InstrumentString, int] = field(default_factory=lambda: MappingProxyType({}))

    def fret_for(self, string: InstrumentString) -> int | None:
        return self.positions.get(string)

    @property
    def is_blank(self) -> bool:
        return not self.positions


def new_chord(instrument: Instrument, frets: Mapping[str, int]) -> Chord:
    """
    Build a Chord from a mapping of string names to fret numbers.

    Raises:
        StringNotFoundError: If a name is not a string of ``instrument``.
        ValueError:          If a fret is negative.
    """
    positions: dict[InstrumentString, int] = {}
    for name, fret in frets.items():
        string = instrument.get_string(name)
        if fret < 0:
            raise ValueError(f"Fret for string '{name}' must be non-negative, got {fret}.")
        positions[string] = int(fret)
    return Chord(instrument=instrument, positions=MappingProxyType(positions))


def blank_chord(instrument: Instrument) -> Chord:
    """A Chord with no positions, used as a rest/spacer."""
    return Chord(instrument=instrument)


@dataclass
class Measure:
    """A series of chords displayed together between two bar lines."""

    chords: list[Chord] = field(default_factory=list)

    def add_chord(self, chord: Chord) -> None:
        self.chords.append(chord)

    def __len__(self) -> int:
        return len(self.chords)


@dataclass
class Tab:
    """
    An ordered group of measures to be rendered together.

    All measures are expected to target the same Instrument; the renderer
    takes its strings from the first chord of the first measure.
    """

    measures: list[Measure] = field(default_factory=list)

    def add_measure(self, measure: Measure) -> None:
        self.measures.append(measure)

    @property
    def instrument(self) -> Instrument | None:
        if not self.measures or not self.measures[0].chords:
            return None
        return self.measures[0].chords[0].instrument
