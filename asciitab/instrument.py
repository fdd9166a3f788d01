"""Instrument and InstrumentString: named open strings and fret → pitch lookup."""

from collections.abc import Iterable
from dataclasses import dataclass

from asciitab.errors import StringNotFoundError
from asciitab.pitch import PROGRESSION, PitchProgression
from asciitab.scale import Scale

# ── Tunings (declared low → high pitch) ─────────────────────────────────────

GUITAR_TUNING: tuple[str, ...] = ("E", "A", "D", "G", "B", "e")
UKULELE_TUNING: tuple[str, ...] = ("G", "C", "E", "A")

INSTRUMENT_NAMES: tuple[str, ...] = ("guitar", "ukulele")


@dataclass(frozen=True)
class InstrumentString:
    """
    A physical string on an Instrument.

    The display name doubles as the open pitch, so a lower-case "e" names the
    high E string while still sounding E.
    """

    name: str

    @property
    def open_pitch(self) -> str:
        return self.name

    def pitch_at(self, fret: int, progression: PitchProgression = PROGRESSION) -> str:
        """Pitch sounded when this string is stopped at ``fret``."""
        return progression.advance_by(self.open_pitch, fret)

    def frets_in_scale(
        self,
        scale: Scale,
        max_fret: int,
        progression: PitchProgression = PROGRESSION,
    ) -> list[int]:
        """
        Frets ``0 .. max_fret - 1`` whose pitch belongs to ``scale``, ascending.
        """
        frets: list[int] = []
        pitch = self.open_pitch
        for fret in range(max_fret):
            if progression.matches(pitch, scale.pitches):
                frets.append(fret)
            pitch = progression.advance(pitch)
        return frets

    def index_of_pitch(
        self,
        target: str,
        search_limit: int,
        progression: PitchProgression = PROGRESSION,
    ) -> int | None:
        """
        First fret below ``search_limit`` that sounds ``target``.

        Returns:
            The fret number, or None when the pitch does not occur in range.
        """
        pitch = self.open_pitch
        for fret in range(search_limit):
            if progression.equivalent(pitch, target):
                return fret
            pitch = progression.advance(pitch)
        return None


@dataclass(frozen=True)
class Instrument:
    """
    An ordered, immutable set of strings, lowest pitch first.

    String names are expected to be unique: chords address strings by name and
    a duplicate would shadow the later string.
    """

    name: str
    strings: tuple[InstrumentString, ...]

    def __len__(self) -> int:
        return len(self.strings)

    def __iter__(self):
        return iter(self.strings)

    @property
    def string_names(self) -> list[str]:
        return [s.name for s in self.strings]

    @property
    def lowest(self) -> InstrumentString:
        return self.strings[0]

    def get_string(self, name: str) -> InstrumentString:
        """
        Look up a string by its exact display name.

        Raises:
            StringNotFoundError: If no string carries that name.
        """
        for string in self.strings:
            if string.name == name:
                return string
        raise StringNotFoundError(name, self.string_names)


def new_instrument(names: Iterable[str], name: str = "custom") -> Instrument:
    """
    Build an Instrument whose strings are named, in order, from ``names``.

    Raises:
        ValueError: If ``names`` is empty.
    """
    strings = tuple(InstrumentString(n) for n in names)
    if not strings:
        raise ValueError("An instrument needs at least one string.")
    return Instrument(name=name, strings=strings)


def guitar() -> Instrument:
    """Six-string guitar in standard tuning."""
    return new_instrument(GUITAR_TUNING, name="guitar")


def ukulele() -> Instrument:
    """Four-string ukulele in standard (re-entrant) G C E A tuning."""
    return new_instrument(UKULELE_TUNING, name="ukulele")


def get_instrument(name: str) -> Instrument:
    """
    Return the instrument registered under ``name``.

    Raises:
        ValueError: If ``name`` is not one of INSTRUMENT_NAMES.
    """
    normalized = name.strip().lower()
    if normalized == "guitar":
        return guitar()
    if normalized == "ukulele":
        return ukulele()
    supported = ", ".join(INSTRUMENT_NAMES)
    raise ValueError(f"Unsupported instrument '{name}'. Use one of: {supported}.")
