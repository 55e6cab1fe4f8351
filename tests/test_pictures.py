import io
import sys

import pytest

from numlex.pictures import (
    Picture,
    append_by_initial,
    average_price_above,
    main,
    pictures_by_painter,
    read_binary,
    read_pictures,
    write_binary,
)


@pytest.fixture
def gallery():
    return [
        Picture(1, "Ivan", "Sunflowers", 10.0),
        Picture(2, "Maria", "Harbour", 20.0),
        Picture(3, "Ivan", "Winter", 30.0),
    ]


def test_average_price_above(gallery):
    assert average_price_above(gallery, 15.0) == 25.0


def test_average_price_above_none_dearer(gallery):
    assert average_price_above(gallery, 30.0) == 0.0
    assert average_price_above([], 0.0) == 0.0


def test_average_price_is_between_extremes(gallery):
    result = average_price_above(gallery, 0.0)
    assert min(p.price for p in gallery) <= result <= max(p.price for p in gallery)


def test_append_by_initial(gallery, tmp_path):
    path = tmp_path / "info.txt"
    assert append_by_initial(gallery, "I", path) == 2
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "1;Sunflowers;10.000000 leva"
    assert len(lines) == 2


def test_append_by_initial_appends(gallery, tmp_path):
    path = tmp_path / "info.txt"
    append_by_initial(gallery, "M", path)
    append_by_initial(gallery, "M", path)
    assert path.read_text(encoding="utf-8").count("Harbour") == 2


def test_append_by_initial_no_match(gallery, tmp_path):
    path = tmp_path / "info.txt"
    assert append_by_initial(gallery, "Z", path) == 0
    assert path.read_text(encoding="utf-8") == ""


def test_binary_round_trip(gallery, tmp_path):
    path = tmp_path / "picture.bin"
    write_binary(gallery, path)
    assert list(read_binary(path)) == gallery


def test_binary_layout(tmp_path):
    path = tmp_path / "picture.bin"
    write_binary([Picture(1, "A", "B", 1.0)], path)
    assert path.read_bytes() == (
        b"\x01\x00\x00\x00" b"\x01\x00\x00\x00A" b"\x01\x00\x00\x00B" b"\x00\x00\x80?"
    )


def test_binary_rejects_long_name(tmp_path):
    with pytest.raises(ValueError):
        write_binary([Picture(1, "x" * 30, "B", 1.0)], tmp_path / "picture.bin")


def test_binary_truncated_record(gallery, tmp_path):
    path = tmp_path / "picture.bin"
    write_binary(gallery, path)
    path.write_bytes(path.read_bytes()[:-2])
    with pytest.raises(ValueError):
        list(read_binary(path))


def test_pictures_by_painter(gallery, tmp_path):
    path = tmp_path / "picture.bin"
    write_binary(gallery, path)
    found = pictures_by_painter(path, "Ivan")
    assert [p.picture_name for p in found] == ["Sunflowers", "Winter"]
    assert pictures_by_painter(path, "Nobody") == []


def test_read_pictures():
    lines = ["7\n", "Ivan\n", "Sunflowers\n", "12.5\n", "8\n", "Maria\n", "Harbour\n", "3\n"]
    assert list(read_pictures(lines)) == [
        Picture(7, "Ivan", "Sunflowers", 12.5),
        Picture(8, "Maria", "Harbour", 3.0),
    ]


def test_read_pictures_truncates_names():
    pictures = list(read_pictures(["1\n", "y" * 40 + "\n", "t\n", "1\n"]))
    assert pictures[0].person_name == "y" * 29


def test_read_pictures_incomplete():
    with pytest.raises(ValueError):
        list(read_pictures(["1\n", "Ivan\n"]))


def test_read_pictures_bad_code():
    with pytest.raises(ValueError):
        list(read_pictures(["one\n", "Ivan\n", "T\n", "1\n"]))


def _entries(count):
    return "".join(f"{i}\nPainter\nTitle\n{i}.5\n" for i in range(count))


def test_main_reprompts_for_count(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n40\n4\n" + _entries(4)))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("N na broi el: ")
    assert out.count("n ne otgovarq na uslovieto") == 2


def test_main_missing_entries(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n" + _entries(2)))
    assert main([]) == 1


def test_main_no_count(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n"))
    assert main([]) == 1