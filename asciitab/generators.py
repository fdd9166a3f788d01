"""Chord generators: random, random-in-scale, and full scale traversal."""

import logging
import time
from abc import ABC, abstractmethod

import numpy as np

from asciitab.instrument import Instrument
from asciitab.pitch import PROGRESSION, PitchProgression
from asciitab.scale import Scale
from asciitab.tab_models import Chord, Measure, Tab, new_chord

logger = logging.getLogger(__name__)

# ── Generation constants ────────────────────────────────────────────────────
MAX_RANDOM_FRET = 4         # random chords draw frets from [0, 4)
SKIP_PROBABILITY = 0.5      # chance a string is left unplayed by RandomChordGenerator
PLAY_THRESHOLD = 0.7        # a string plays in-scale only when a draw exceeds this
SCALE_WINDOW = 4            # in-scale candidates are searched on frets 0..4

LOW_STRING_ROOT_LIMIT = 6   # lowest string is skipped if the root is not in frets 0..5
ROOT_SEARCH_LIMIT = 12      # any pitch occurs within one octave of frets
DEFAULT_SPAN = 4            # frets above the root covered per string

DEFAULT_MEASURES = 4
DEFAULT_CHORDS_PER_MEASURE = 4


def new_rng(seed: int | None = None) -> np.random.Generator:
    """
    Create the random stream shared by one generation run.

    Without an explicit seed the stream is seeded from wall-clock time, so two
    runs differ while draws within a run stay sequential.
    """
    if seed is None:
        seed = time.time_ns()
    logger.debug("Seeding random stream with %d", seed)
    return np.random.default_rng(seed)


# ── Abstract base ────────────────────────────────────────────────────────────

class ChordGenerator(ABC):
    """
    Abstract Strategy for producing one Chord on an Instrument.

    Concrete subclasses draw from the ``rng`` they are constructed with; the
    generator never reaches for a module-level random source.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    @abstractmethod
    def generate(self, instrument: Instrument) -> Chord:
        """
        Produce a Chord for ``instrument``.

        Args:
            instrument: Instrument whose strings the chord addresses.

        Returns:
            A Chord with zero or more played strings.
        """


# ── Concrete strategies ──────────────────────────────────────────────────────

class RandomChordGenerator(ChordGenerator):
    """
    Unconstrained chords: each string independently sounds with probability
    ``1 - SKIP_PROBABILITY`` at a fret drawn uniformly from ``[0, MAX_RANDOM_FRET)``.
    """

    def generate(self, instrument: Instrument) -> Chord:
        frets: dict[str, int] = {}
        for string in instrument.strings:
            if self.rng.random() < SKIP_PROBABILITY:
                continue
            frets[string.name] = int(self.rng.integers(MAX_RANDOM_FRET))
        return new_chord(instrument, frets)


class ScaleChordGenerator(ChordGenerator):
    """
    Chords restricted to the pitches of a Scale.

    For each string the candidate frets are the in-scale frets of the window
    ``0 .. SCALE_WINDOW``. A string plays when a uniform draw exceeds
    ``PLAY_THRESHOLD`` (about a 30% chance), at a candidate chosen uniformly.

    Major and minor scales never skip more than one semitone, so the window
    always yields candidates for those patterns. A string with no candidates
    is left unplayed rather than failing.
    """

    def __init__(
        self,
        rng: np.random.Generator,
        scale: Scale,
        progression: PitchProgression = PROGRESSION,
    ) -> None:
        super().__init__(rng)
        self.scale = scale
        self.progression = progression

    def generate(self, instrument: Instrument) -> Chord:
        frets: dict[str, int] = {}
        for string in instrument.strings:
            candidates = string.frets_in_scale(self.scale, SCALE_WINDOW + 1, self.progression)
            if self.rng.random() <= PLAY_THRESHOLD:
                continue
            if not candidates:
                logger.debug("No in-scale fret on string %s for %s", string.name, self.scale)
                continue
            frets[string.name] = candidates[int(self.rng.integers(len(candidates)))]
        return new_chord(instrument, frets)


def random_chord(instrument: Instrument, rng: np.random.Generator) -> Chord:
    """Single unconstrained random chord."""
    return RandomChordGenerator(rng).generate(instrument)


def random_chord_in_scale(instrument: Instrument, scale: Scale, rng: np.random.Generator) -> Chord:
    """Single random chord whose notes belong to ``scale``."""
    return ScaleChordGenerator(rng, scale).generate(instrument)


def random_tab(
    instrument: Instrument,
    generator: ChordGenerator,
    measures: int = DEFAULT_MEASURES,
    chords_per_measure: int = DEFAULT_CHORDS_PER_MEASURE,
) -> Tab:
    """
    Build a Tab of ``measures`` measures, each holding ``chords_per_measure``
    chords drawn from ``generator``.
    """
    tab = Tab()
    for _ in range(measures):
        measure = Measure()
        for _ in range(chords_per_measure):
            measure.add_chord(generator.generate(instrument))
        tab.add_measure(measure)
    logger.debug(
        "Generated random tab: %d measure(s) x %d chord(s) with %s",
        measures,
        chords_per_measure,
        type(generator).__name__,
    )
    return tab


# ── Scale traversal ──────────────────────────────────────────────────────────

def scale_traversal(
    instrument: Instrument,
    scale: Scale,
    span: int = DEFAULT_SPAN,
    progression: PitchProgression = PROGRESSION,
) -> list[Measure]:
    """
    Walk ``scale`` up the neck one string at a time, lowest string first.

    Algorithm
    ---------
    For every string:

    1. **Root fret** – find the first fret sounding the scale root. The lowest
       string is only searched over its first LOW_STRING_ROOT_LIMIT frets so the
       pattern does not start high up the neck; other strings are searched over
       a full octave. A string without a root fret is skipped.

    2. **Notes** – emit one single-note Chord for every in-scale fret in
       ``[root_fret, root_fret + span]``, ascending, as one Measure.

    Deterministic: no random draws are made.
    """
    measures: list[Measure] = []
    for index, string in enumerate(instrument.strings):
        limit = LOW_STRING_ROOT_LIMIT if index == 0 else ROOT_SEARCH_LIMIT
        root_fret = string.index_of_pitch(scale.root, limit, progression)
        if root_fret is None:
            logger.debug("Root %s not within %d frets of string %s; skipping", scale.root, limit, string.name)
            continue

        in_scale = string.frets_in_scale(scale, root_fret + span + 1, progression)
        measure = Measure()
        for fret in in_scale:
            if fret >= root_fret:
                measure.add_chord(new_chord(instrument, {string.name: fret}))
        measures.append(measure)

    logger.debug("Scale traversal of %s produced %d measure(s)", scale, len(measures))
    return measures


def scale_tab(
    instrument: Instrument,
    scale: Scale,
    span: int = DEFAULT_SPAN,
    progression: PitchProgression = PROGRESSION,
) -> Tab:
    """Tab holding one scale_traversal measure per playable string."""
    return Tab(measures=scale_traversal(instrument, scale, span, progression))
