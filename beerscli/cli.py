"""Command line tool that prints beers from a CSV file or an HTTP listing."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from beerscli.errors import DataUnreachableError
from beerscli.model import Beer, BeerRepo
from beerscli.ontario import DEFAULT_URL, OntarioRepository
from beerscli.service import BeerNotFoundError, FetchingService
from beerscli.storage import DEFAULT_CSV_PATH, CsvRepository

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_id(text: str) -> int:
    """Parse a decimal identifier; anything that is not one counts as 0."""
    return int(text) if _INTEGER.fullmatch(text) else 0


def _format_beer(beer: Beer) -> str:
    beer_type = "<nil>" if beer.type is None else str(beer.type)
    fields = (
        beer.product_id,
        beer.name,
        beer.price,
        beer.beer_id,
        beer.category,
        beer_type,
        beer.brewer,
        beer.country,
    )
    return "{" + " ".join(str(field) for field in fields) + "}"


def _format_beers(beers: Sequence[Beer]) -> str:
    return "[" + " ".join(_format_beer(beer) for beer in beers) + "]"


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the ``beers-cli`` command line."""
    parser = argparse.ArgumentParser(prog="beers-cli")
    parser.add_argument(
        "--csv", action="store_true", help="load data from csv"
    )
    parser.add_argument(
        "--csv-path",
        default=DEFAULT_CSV_PATH,
        help="path of the csv file read with --csv",
    )
    parser.add_argument(
        "--url", default=DEFAULT_URL, help="base address of the beer listing"
    )
    commands = parser.add_subparsers(dest="command")
    beers = commands.add_parser("beers", help="Print data about beers")
    beers.add_argument("-i", "--id", default="", help="id of the beer")
    return parser


def build_repository(
    use_csv: bool, csv_path: str = DEFAULT_CSV_PATH, url: str = DEFAULT_URL
) -> BeerRepo:
    """Return a CSV repository when ``use_csv`` is set, otherwise an HTTP one."""
    if use_csv:
        return CsvRepository(csv_path)
    return OntarioRepository(url)


def run_beers(service: FetchingService, beer_id: str, out: TextIO) -> None:
    """Write the beer named by ``beer_id`` to ``out``, or every beer when it is empty.

    Errors from the service propagate.
    """
    if beer_id:
        beer = service.fetch_by_id(_parse_id(beer_id))
        print(_format_beer(beer), file=out)
        return
    print(_format_beers(service.fetch_beers()), file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stdout)
        return 0

    repository = build_repository(args.csv, args.csv_path, args.url)
    service = FetchingService(repository)
    try:
        run_beers(service, args.id, sys.stdout)
    except (BeerNotFoundError, DataUnreachableError, ValueError, OSError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())