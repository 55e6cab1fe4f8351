"""A small catalogue of paintings, stored as text and as binary records."""

import argparse
import struct
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from os import PathLike

NAME_LIMIT = 29
MIN_COUNT = 3
MAX_COUNT = 30

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")

StrPath = str | PathLike[str]


@dataclass
class Picture:
    """One painting: catalogue code, painter, title and price."""

    code: int
    person_name: str
    picture_name: str
    price: float


def average_price_above(pictures: Iterable[Picture], price: float) -> float:
    """Average price of the pictures dearer than ``price``; 0 when there is none."""
    prices = [picture.price for picture in pictures if picture.price > price]
    total = sum(prices)
    return total / len(prices) if total else 0.0


def append_by_initial(pictures: Iterable[Picture], letter: str, path: StrPath) -> int:
    """Append the pictures whose painter starts with ``letter`` to a text file.

    Returns how many were written.
    """
    written = 0
    with open(path, "a", encoding="utf-8") as out:
        for picture in pictures:
            if picture.person_name[:1] == letter:
                out.write(f"{picture.code};{picture.picture_name};{picture.price:f} leva\n")
                written += 1
    return written


def _encode_name(name: str) -> bytes:
    data = name.encode("utf-8")
    if len(data) > NAME_LIMIT:
        raise ValueError(f"name longer than {NAME_LIMIT} bytes: {name!r}")
    return data


def write_binary(pictures: Iterable[Picture], path: StrPath) -> None:
    """Write pictures as binary records."""
    with open(path, "wb") as out:
        for picture in pictures:
            person = _encode_name(picture.person_name)
            title = _encode_name(picture.picture_name)
            out.write(_INT.pack(picture.code))
            out.write(_INT.pack(len(person)))
            out.write(person)
            out.write(_INT.pack(len(title)))
            out.write(title)
            out.write(_FLOAT.pack(picture.price))


def _read_exact(handle, size: int) -> bytes:
    data = handle.read(size)
    if len(data) != size:
        raise ValueError("truncated picture record")
    return data


def _read_name(handle) -> str:
    (size,) = _INT.unpack(_read_exact(handle, _INT.size))
    if not 0 <= size <= NAME_LIMIT:
        raise ValueError(f"invalid name length {size}")
    return _read_exact(handle, size).decode("utf-8")


def read_binary(path: StrPath) -> Iterator[Picture]:
    """Yield the pictures stored in a binary file."""
    with open(path, "rb") as handle:
        while head := handle.read(_INT.size):
            if len(head) != _INT.size:
                raise ValueError("truncated picture record")
            (code,) = _INT.unpack(head)
            person = _read_name(handle)
            title = _read_name(handle)
            (price,) = _FLOAT.unpack(_read_exact(handle, _FLOAT.size))
            yield Picture(code, person, title, price)


def pictures_by_painter(path: StrPath, painter: str) -> list[Picture]:
    """The pictures in a binary file painted by ``painter``."""
    return [picture for picture in read_binary(path) if picture.person_name == painter]


def _name(line: str) -> str:
    return line.rstrip("\r\n")[:NAME_LIMIT]


def read_pictures(lines: Iterable[str]) -> Iterator[Picture]:
    """Parse pictures from lines: code, painter, title and price, four lines each."""
    source = iter(lines)
    for code_line in source:
        rest = list(islice(source, 3))
        if len(rest) != 3:
            raise ValueError("incomplete picture entry")
        person_line, title_line, price_line = rest
        yield Picture(
            code=int(code_line.strip()),
            person_name=_name(person_line),
            picture_name=_name(title_line),
            price=float(price_line.strip()),
        )


def _read_count(lines: Iterator[str]) -> int | None:
    print("N na broi el: ", end="", flush=True)
    for line in lines:
        try:
            count = int(line.strip())
        except ValueError:
            count = None
        if count is not None and MIN_COUNT < count < MAX_COUNT:
            return count
        print("n ne otgovarq na uslovieto, molq vuvedete novo n\nN:", end="", flush=True)
    return None


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many pictures from standard input."""
    parser = argparse.ArgumentParser(
        description="Read a number of pictures (more than 3, fewer than 30) from standard input."
    )
    parser.parse_args(argv)

    lines = iter(sys.stdin.readline, "")
    count = _read_count(lines)
    if count is None:
        print("Error!", file=sys.stderr)
        return 1
    try:
        pictures = list(islice(read_pictures(lines), count))
    except ValueError as exc:
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    if len(pictures) != count:
        print("Error!", file=sys.stderr)
        return 1
    return 0