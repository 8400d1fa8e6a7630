from __future__ import annotations

import pytest

import utils
from packager import Invalid, describe, validate_directory, validate_inputs


@pytest.mark.parametrize("text", ["3", "0", "-12", "+7", " 42 ", "2147483647", "-2147483648"])
def test_is_valid_version_accepts_integers(text) -> None:
    assert utils.is_valid_version(text)


@pytest.mark.parametrize("text", ["", " ", "1.0", "v1", "1_000", "abc", "2147483648", "0x10"])
def test_is_valid_version_rejects_non_integers(text) -> None:
    assert not utils.is_valid_version(text)


def test_validate_directory_source(tmp_path) -> None:
    assert validate_directory(str(tmp_path / "nope"), True) == Invalid.SOURCE_NOT_FOUND
    assert validate_directory(str(tmp_path), True) == Invalid.SOURCE_EMPTY
    (tmp_path / "only_dir").mkdir()
    assert validate_directory(str(tmp_path), True) is None


def test_validate_directory_output(tmp_path) -> None:
    assert validate_directory(str(tmp_path / "nope"), False) == Invalid.OUTPUT_NOT_FOUND
    assert validate_directory(str(tmp_path), False) is None
    (tmp_path / "leftover.txt").write_text("x")
    assert validate_directory(str(tmp_path), False) == Invalid.OUTPUT_NOT_EMPTY


def test_validate_directory_rejects_file_path(tmp_path) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x")
    assert validate_directory(str(f), True) == Invalid.SOURCE_NOT_FOUND


def test_validate_inputs(source_tree, out_dir) -> None:
    assert validate_inputs(str(source_tree), str(out_dir), "1") is None
    assert validate_inputs(str(source_tree), str(out_dir), "one") == (Invalid.VERSION_NOT_INTEGER, "one")
    assert validate_inputs(str(out_dir), str(out_dir), "1") == (Invalid.SOURCE_EMPTY, str(out_dir))
    assert validate_inputs(str(source_tree), str(source_tree), "1") == (Invalid.OUTPUT_NOT_EMPTY, str(source_tree))


def test_describe_messages() -> None:
    assert describe(Invalid.SOURCE_EMPTY, "/s") == "Folder '/s' is empty."
    assert describe(Invalid.OUTPUT_NOT_EMPTY, "/o") == "Output folder '/o' is not empty."
    assert describe(Invalid.OUTPUT_NOT_FOUND, "/o") == "Folder '/o' not found."


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *a: next(it))


def test_select_folder_reprompts_until_directory_exists(tmp_path, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["", str(tmp_path / "missing"), str(tmp_path)])
    assert utils.select_folder("Enter the source folder path:") == str(tmp_path)
    out = capsys.readouterr().out
    assert out.count("Invalid folder path. Please try again.") == 2


def test_select_version_reprompts_until_integer(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["x", "1.5", "9"])
    assert utils.select_version() == "9"
    assert capsys.readouterr().out.count("Invalid version. Please enter a valid number:") == 2
