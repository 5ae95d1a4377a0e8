"""Beer repositories backed by a CSV file or by a fixed in-memory list."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

from beerscli.model import Beer, BeerRepo, new_beer, new_beer_type

DEFAULT_CSV_PATH = "data/beers.csv"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_BEER_FIELDS = 7


def _to_int(text: str) -> int:
    """Parse a decimal integer strictly; anything else counts as 0."""
    return int(text) if _INTEGER.fullmatch(text) else 0


def _read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of ``path`` without their line endings.

    A file that cannot be opened or read yields no lines.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError:
        return []
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _split(line: str, needed: int, line_number: int) -> list[str]:
    values = line.split(",")
    if len(values) < needed:
        raise ValueError(
            f"line {line_number}: expected at least {needed} fields, got {len(values)}"
        )
    return values


def read_beer_names(path: str | PathLike[str]) -> dict[int, str]:
    """Map product identifiers to beer names from the first two CSV columns.

    Identifiers that are not integers are read as 0; a later line with the
    same identifier replaces an earlier one. A missing file gives an empty
    mapping; a line with fewer than two fields raises ValueError.
    """
    names: dict[int, str] = {}
    for number, line in enumerate(_read_lines(path), start=1):
        values = _split(line, 2, number)
        names[_to_int(values[0])] = values[1]
    return names


class CsvRepository(BeerRepo):
    """Reads beers from a comma-separated file.

    Columns are: product id, name, category, price, type, brewer, country.
    """

    def __init__(self, path: str | PathLike[str] = DEFAULT_CSV_PATH) -> None:
        self.path = path

    def get_beers(self) -> list[Beer]:
        """Return the beers in file order.

        A missing or unreadable file gives an empty list; a line with fewer
        than seven fields raises ValueError.
        """
        beers = []
        for number, line in enumerate(_read_lines(self.path), start=1):
            values = _split(line, _BEER_FIELDS, number)
            beers.append(
                new_beer(
                    _to_int(values[0]),
                    values[1],
                    values[2],
                    values[5],
                    values[6],
                    values[3],
                    new_beer_type(values[4]),
                )
            )
        return beers


class InMemoryRepository(BeerRepo):
    """A fixed pair of beers, handy for trying the tools without any data."""

    def get_beers(self) -> list[Beer]:
        """Return the built-in beers."""
        return [
            new_beer(
                127,
                "Mad Jack Mixer",
                "Domestic Specialty",
                "Molson",
                "Canada",
                "23.95",
                new_beer_type("Lager"),
            ),
            new_beer(
                8520130,
                "Grolsch 0.0",
                "Non-Alcoholic Beer",
                "Grolsch Export B.V.",
                "Canada",
                "49.50",
                new_beer_type("Non-Alcoholic Beer"),
            ),
        ]