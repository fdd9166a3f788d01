"""Tests for the asciitab command line interface."""

from pathlib import Path

from click.testing import CliRunner

from asciitab import __version__
from asciitab.cli import main


def test_version() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_scale_command_a_minor() -> None:
    result = CliRunner().invoke(main, ["scale", "--key=A", "--scale=minor"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "Basic scale in <A minor A B C D E F G>"
    assert len(lines) == 7
    assert lines[-1].startswith("|-5--7--8-|")


def test_scale_command_ukulele_labels() -> None:
    result = CliRunner().invoke(main, ["scale", "--key=C", "--scale=major", "--instrument=ukulele", "--labels"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert [line[0] for line in lines[1:]] == ["A", "E", "C", "G"]


def test_random_command_is_reproducible_with_seed() -> None:
    runner = CliRunner()
    args = ["random", "--key=C", "--scale=major", "--seed", "7"]
    first = runner.invoke(main, args)
    second = runner.invoke(main, args)
    assert first.exit_code == 0
    assert first.output == second.output
    assert first.output.startswith("Random tab in <C major C D E F G A B>")


def test_random_command_any_fret_shape() -> None:
    result = CliRunner().invoke(main, ["random", "--any-fret", "--measures", "2", "--chords", "3", "--seed", "1"])
    assert result.exit_code == 0
    tab_lines = result.output.splitlines()[1:]
    assert len(tab_lines) == 6
    assert all(line.count("|") == 3 for line in tab_lines)


def test_random_key_and_scale_when_omitted() -> None:
    result = CliRunner().invoke(main, ["random", "--seed", "3"])
    assert result.exit_code == 0
    assert result.output.startswith("Random tab in <")


def test_unknown_scale_name_exits_with_error() -> None:
    result = CliRunner().invoke(main, ["random", "--key=C", "--scale=dorian"])
    assert result.exit_code == 1
    assert "ERROR" in result.output
    assert "dorian" in result.output


def test_unknown_key_exits_with_error() -> None:
    result = CliRunner().invoke(main, ["scale", "--key=H", "--scale=major"])
    assert result.exit_code == 1
    assert "ERROR" in result.output


def test_output_file(tmp_path: Path) -> None:
    out = tmp_path / "scale.md"
    result = CliRunner().invoke(
        main, ["scale", "--key=G", "--scale=major", "--format", "md", "-o", str(out)]
    )
    assert result.exit_code == 0
    assert "Done!" in result.output
    content = out.read_text(encoding="utf-8")
    assert content.startswith("# Basic scale in &lt;G major")
    assert "```text" in content
