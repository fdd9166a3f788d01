"""Unit tests for tab layout and the text/Markdown renderers."""

import pytest

from asciitab.errors import EmptyTabError
from asciitab.instrument import guitar, ukulele
from asciitab.tab_models import Measure, Tab, new_chord
from asciitab.tab_renderers import MarkdownTabRenderer, TextTabRenderer, render_lines


def _sample_tab() -> Tab:
    inst = guitar()
    measure = Measure([new_chord(inst, {"B": 1, "D": 2, "A": 3})])
    return Tab([measure])


def test_single_chord_lines_top_to_bottom() -> None:
    assert render_lines(_sample_tab()) == [
        "|---|",
        "|-1-|",
        "|---|",
        "|-2-|",
        "|-3-|",
        "|---|",
    ]


def test_labels_prefix_each_line() -> None:
    lines = render_lines(_sample_tab(), labels=True)
    assert [line[0] for line in lines] == ["e", "B", "G", "D", "A", "E"]
    assert lines[1] == "B|-1-|"


def test_measures_share_bar_lines() -> None:
    inst = guitar()
    tab = Tab([
        Measure([new_chord(inst, {"A": 3})]),
        Measure([new_chord(inst, {"A": 5}), new_chord(inst, {"E": 0})]),
    ])
    lines = render_lines(tab)
    assert lines[4] == "|-3-|-5----|"
    assert lines[5] == "|---|----0-|"


def test_multi_digit_frets_keep_columns_aligned() -> None:
    inst = guitar()
    tab = Tab([Measure([new_chord(inst, {"e": 12, "B": 3})])])
    lines = render_lines(tab)
    assert lines[0] == "|-12-|"
    assert lines[1] == "|-3--|"
    assert lines[2] == "|----|"
    assert len({len(line) for line in lines}) == 1


def test_blank_chord_renders_rests() -> None:
    inst = guitar()
    tab = Tab([Measure([new_chord(inst, {})])])
    assert render_lines(tab) == ["|---|"] * 6


def test_ukulele_renders_four_lines() -> None:
    inst = ukulele()
    tab = Tab([Measure([new_chord(inst, {"A": 0, "G": 2})])])
    assert render_lines(tab, labels=True) == [
        "A|-0-|",
        "E|---|",
        "C|---|",
        "G|-2-|",
    ]


def test_empty_tab_raises() -> None:
    with pytest.raises(EmptyTabError):
        render_lines(Tab())


def test_empty_first_measure_raises() -> None:
    inst = guitar()
    tab = Tab([Measure(), Measure([new_chord(inst, {"A": 0})])])
    with pytest.raises(EmptyTabError):
        render_lines(tab)


def test_later_empty_measure_is_skipped() -> None:
    inst = guitar()
    tab = Tab([Measure([new_chord(inst, {"A": 3})]), Measure()])
    assert render_lines(tab)[4] == "|-3-|"


def test_rendering_is_idempotent() -> None:
    tab = _sample_tab()
    renderer = TextTabRenderer()
    first = renderer.render(tab, title="Twice")
    second = renderer.render(tab, title="Twice")
    assert first == second
    assert len(tab.measures) == 1
    assert len(tab.measures[0]) == 1


def test_text_renderer_title_line() -> None:
    content = TextTabRenderer().render(_sample_tab(), title="My Riff")
    lines = content.splitlines()
    assert lines[0] == "My Riff"
    assert len(lines) == 7
    assert content.endswith("\n")


def test_text_renderer_without_title() -> None:
    content = TextTabRenderer().render(_sample_tab())
    assert content.splitlines()[0] == "|---|"


def test_markdown_renderer_has_heading_and_fence() -> None:
    content = MarkdownTabRenderer().render(_sample_tab(), title="My Song")
    assert content.startswith("# My Song\n")
    assert "```text\n|---|\n|-1-|" in content
    assert content.rstrip().endswith("```")


def test_markdown_renderer_escapes_angle_brackets() -> None:
    content = MarkdownTabRenderer().render(_sample_tab(), title="Scale <C major>")
    assert "# Scale &lt;C major&gt;" in content


def test_default_extensions() -> None:
    assert TextTabRenderer().default_extension == ".txt"
    assert MarkdownTabRenderer().default_extension == ".md"
