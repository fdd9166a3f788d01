"""asciitab: ASCII tablature generator for guitar and ukulele."""

__version__ = "0.1.0"
