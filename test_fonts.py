"""Tests for font registration and resolution."""

import pytest

from boxtext import fonts


@pytest.fixture(autouse=True)
def empty_registry(monkeypatch):
    monkeypatch.setattr(fonts, "_FONT_PATHS", {})


@pytest.fixture
def fonts_dir(tmp_path):
    for name in ("roboto-regular.ttf", "Roboto-Bold.otf", "readme.txt"):
        (tmp_path / name).write_bytes(b"")
    return tmp_path


def test_register_fonts_discovers_font_files(fonts_dir):
    assert fonts.register_fonts(fonts_dir) == ["Roboto-Bold", "Roboto-Regular"]
    assert fonts.get_font_path("roboto-regular") == fonts_dir / "roboto-regular.ttf"


def test_register_fonts_empty_directory(tmp_path):
    assert fonts.register_fonts(tmp_path) == []


def test_register_missing_font_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        fonts.register_font("Ghost", tmp_path / "ghost.ttf")


def test_resolve_registered_name(fonts_dir):
    fonts.register_font("Body", fonts_dir / "roboto-regular.ttf")
    assert fonts.resolve_font_path("body") == fonts_dir / "roboto-regular.ttf"


def test_resolve_plain_path(fonts_dir):
    path = fonts_dir / "Roboto-Bold.otf"
    assert fonts.resolve_font_path(str(path)) == path


def test_resolve_unknown_face(tmp_path):
    with pytest.raises(FileNotFoundError):
        fonts.resolve_font_path(str(tmp_path / "nope.ttf"))
