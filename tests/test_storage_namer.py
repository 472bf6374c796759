import pytest

from workhub.services.file.storage_namer import (
    build_download_name,
    extension_of,
    generate_stored_name,
    pick_download_extension,
)


def test_stored_names_do_not_collide():
    names = {generate_stored_name(".sb3") for _ in range(10_000)}
    assert len(names) == 10_000


def test_stored_name_keeps_extension_case():
    name = generate_stored_name(".PNG")
    assert name.endswith(".PNG")
    assert len(name) == 36 + 4


def test_stored_name_without_extension():
    name = generate_stored_name("")
    assert "." not in name
    assert len(name) == 36


@pytest.mark.parametrize("extension", ["./etc", ".a/b", ".p\\ng", ".png\n", "png"])
def test_stored_name_drops_unsafe_extension(extension):
    name = generate_stored_name(extension)
    assert len(name) == 36
    assert "/" not in name and "\\" not in name and "\n" not in name


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("project.sb3", ".sb3"),
        ("archive.tar.gz", ".gz"),
        ("noext", ""),
        (".hidden", ""),
        ("", ""),
        ("../../evil.png", ".png"),
        ("C:\\Users\\kid\\art.JPG", ".JPG"),
        ("dir.v2/file", ""),
    ],
)
def test_extension_of(filename, expected):
    assert extension_of(filename) == expected


def test_download_name_format():
    assert build_download_name(3, 2, "Alice", ".sb3") == "3-2-Alice.sb3"


def test_download_name_without_extension():
    assert build_download_name(1, 10, "Bob", "") == "1-10-Bob"


def test_download_name_strips_line_breaks():
    name = build_download_name(3, 2, "Al\r\nice", ".png")
    assert "\r" not in name and "\n" not in name
    assert name == "3-2-Alice.png"


def test_download_name_replaces_quote_and_slashes():
    name = build_download_name(3, 2, 'a"b\\c/d', ".png")
    assert name == "3-2-a_b_c_d.png"
    for ch in ('"', "\\", "/"):
        assert ch not in name


@pytest.mark.parametrize("student_name", ["   ", "\r\n", "", " \n "])
def test_download_name_falls_back_for_blank_names(student_name):
    assert build_download_name(3, 2, student_name, ".sb3") == "download.sb3"


def test_download_extension_prefers_original_name():
    assert pick_download_extension("art.jpeg", "abc.jpg") == ".jpeg"
    assert pick_download_extension("art", "abc.jpg") == ".jpg"
    assert pick_download_extension("art", "abc") == ""
