"""Scale: a named step pattern applied to a root pitch."""

from dataclasses import dataclass
from types import MappingProxyType

import numpy as np

from asciitab.errors import UnknownPitchError, UnknownScalePatternError
from asciitab.pitch import PROGRESSION, PitchProgression, normalize

# ── Step patterns (semitones between consecutive degrees) ───────────────────

#: W-W-H-W-W-W-H
MAJOR_STEPS: tuple[int, ...] = (2, 2, 1, 2, 2, 2, 1)

#: W-H-W-W-H-W-W (natural minor)
MINOR_STEPS: tuple[int, ...] = (2, 1, 2, 2, 1, 2, 2)

SCALE_STEPS = MappingProxyType(
    {
        "major": MAJOR_STEPS,
        "minor": MINOR_STEPS,
    }
)


def scale_names() -> list[str]:
    """Names of every registered step pattern."""
    return list(SCALE_STEPS)


@dataclass(frozen=True)
class Scale:
    """
    An ordered collection of pitches built from a root and a step pattern.

    Attributes:
        name:    Pattern name, e.g. "major".
        root:    Root pitch in canonical spelling.
        pitches: One pitch per scale degree, starting at the root and stopping
                 one step short of the octave.
    """

    name: str
    root: str
    pitches: tuple[str, ...]

    def __str__(self) -> str:
        return f"<{self.root} {self.name} {' '.join(self.pitches)}>"

    def __len__(self) -> int:
        return len(self.pitches)


def new_scale(name: str, root: str, progression: PitchProgression = PROGRESSION) -> Scale:
    """
    Build a Scale by walking ``name``'s step pattern up from ``root``.

    The current pitch is recorded before each step is taken, so the returned
    scale has exactly one pitch per step and the closing octave is omitted.

    Raises:
        UnknownScalePatternError: If ``name`` is not a registered pattern.
        UnknownPitchError:        If ``root`` or any derived pitch is missing
                                  from the progression table.
    """
    steps = SCALE_STEPS.get(name.strip().lower())
    if steps is None:
        raise UnknownScalePatternError(name)

    pitch = normalize(root)
    pitches: list[str] = []
    for step in steps:
        pitches.append(pitch)
        for _ in range(step):
            # advance() is identity on a miss
            if not progression.is_known(pitch):
                raise UnknownPitchError(pitch)
            pitch = progression.advance(pitch)

    return Scale(name=name.strip().lower(), root=pitches[0], pitches=tuple(pitches))


# ── Random selection ────────────────────────────────────────────────────────

def random_scale_name(rng: np.random.Generator) -> str:
    """Uniformly random pattern name."""
    names = scale_names()
    return names[int(rng.integers(len(names)))]


def random_note(rng: np.random.Generator, progression: PitchProgression = PROGRESSION) -> str:
    """
    Uniformly random key of the progression table.

    Every spelling is a key, so pitches with a flat alias (A#/Bb, ...) are
    twice as likely as naturals such as E or B.
    """
    keys = progression.keys()
    return keys[int(rng.integers(len(keys)))]


def random_scale(rng: np.random.Generator, progression: PitchProgression = PROGRESSION) -> Scale:
    """A scale with a random pattern and a random root."""
    return new_scale(random_scale_name(rng), random_note(rng, progression), progression)
