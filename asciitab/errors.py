"""Typed errors raised by the asciitab core."""


class AsciiTabError(Exception):
    """Base class for every error raised by the tab generation core."""


class UnknownScalePatternError(AsciiTabError, ValueError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"Unknown scale pattern '{pattern}'.")
        self.pattern = pattern


class UnknownPitchError(AsciiTabError, ValueError):
    def __init__(self, pitch: str) -> None:
        super().__init__(f"No pitch progression found for '{pitch}'.")
        self.pitch = pitch


class StringNotFoundError(AsciiTabError, LookupError):
    def __init__(self, name: str, instrument_names: list[str] | None = None) -> None:
        available = ", ".join(instrument_names or [])
        super().__init__(f"String '{name}' not found on instrument [{available}].")
        self.name = name


class EmptyTabError(AsciiTabError, ValueError):
    """Raised when a tab has no measures, or its first measure has no chords."""
