"""Pitch arithmetic over the chromatic progression table."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ── Progression table ───────────────────────────────────────────────────────

#: One semitone up. Flat spellings are keys only; successors are always
#: naturals or sharps, so "A#" and "Bb" both advance to "B".
_SEMITONE_UP: dict[str, str] = {
    "Ab": "A",
    "A": "A#",
    "A#": "B",
    "Bb": "B",
    "B": "C",
    "C": "C#",
    "C#": "D",
    "Db": "D",
    "D": "D#",
    "D#": "E",
    "Eb": "E",
    "E": "F",
    "F": "F#",
    "F#": "G",
    "Gb": "G",
    "G": "G#",
    "G#": "A",
}

SEMITONES_PER_OCTAVE = 12


def normalize(pitch: str) -> str:
    """
    Canonical spelling of a pitch name: upper-case letter, lower-case accidental.

    ``"e"`` → ``"E"``, ``"bb"`` → ``"Bb"``, ``"c#"`` → ``"C#"``.
    """
    pitch = pitch.strip()
    return pitch[:1].upper() + pitch[1:].lower()


@dataclass(frozen=True, eq=False)
class PitchProgression:
    """
    Read-only "one semitone up" table with lookup helpers.

    Scale construction and fret searches take a progression as an argument, so
    an alternative table can be injected without touching module state.
    """

    table: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(_SEMITONE_UP)))

    def keys(self) -> list[str]:
        """Every spelling the table recognises, in declaration order."""
        return list(self.table)

    def is_known(self, pitch: str) -> bool:
        return normalize(pitch) in self.table

    def advance(self, pitch: str) -> str:
        """
        Return the pitch one semitone above ``pitch``.

        Lookup is case-insensitive. A pitch missing from the table is returned
        unchanged; callers that need validation must check ``is_known`` first.
        """
        return self.table.get(normalize(pitch), pitch)

    def advance_by(self, pitch: str, steps: int) -> str:
        for _ in range(steps):
            pitch = self.advance(pitch)
        return pitch

    def equivalent(self, first: str, second: str) -> bool:
        """
        True if both names spell the same pitch.

        Two known spellings are enharmonic when they share a successor.
        """
        a, b = normalize(first), normalize(second)
        if a == b:
            return True
        return a in self.table and b in self.table and self.table[a] == self.table[b]

    def matches(self, candidate: str, pitches: Iterable[str]) -> bool:
        """Case-insensitive, enharmonic-aware membership test."""
        return any(self.equivalent(candidate, p) for p in pitches)


#: Default process-wide table, constructed once at import.
PROGRESSION = PitchProgression()


def advance(pitch: str) -> str:
    """Module-level shortcut for ``PROGRESSION.advance``."""
    return PROGRESSION.advance(pitch)


def matches(candidate: str, pitches: Iterable[str]) -> bool:
    """Module-level shortcut for ``PROGRESSION.matches``."""
    return PROGRESSION.matches(candidate, pitches)
