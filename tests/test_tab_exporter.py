"""Unit tests for TabExporter."""

from pathlib import Path

import pytest

from asciitab.errors import EmptyTabError
from asciitab.instrument import guitar
from asciitab.tab_exporter import TabExporter
from asciitab.tab_models import Measure, Tab, new_chord


def _sample_tab() -> Tab:
    return Tab([Measure([new_chord(guitar(), {"G": 0})])])


def test_unsupported_format() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        TabExporter(output_format="pdf")


def test_format_is_normalized() -> None:
    exporter = TabExporter(output_format=" MD ")
    assert exporter.output_format == "md"
    assert exporter.default_extension == ".md"


def test_render_text_with_labels() -> None:
    content = TabExporter(labels=True).render(_sample_tab())
    assert content.splitlines()[2] == "G|-0-|"


def test_export_writes_rendered_content(tmp_path: Path) -> None:
    out = tmp_path / "riff.md"
    exporter = TabExporter(title="Riff", output_format="md")
    exporter.export(_sample_tab(), str(out))
    assert out.read_text(encoding="utf-8") == exporter.render(_sample_tab())


def test_export_empty_tab_writes_nothing(tmp_path: Path) -> None:
    out = tmp_path / "empty.txt"
    with pytest.raises(EmptyTabError):
        TabExporter().export(Tab(), str(out))
    assert not out.exists()
