"""Small fixed catalogues of beers and stores, queried by identifier."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence

BEERS: dict[str, str] = {
    "01D9X58E7NPXX5MVCR9QN794CH": "Mad Jack Mixer",
    "01D9X5BQ5X48XMMVZ2F2G3R5MS": "Keystone Ice",
    "01D9X5CVS1M9VR5ZD627XDF6ND": "Belgian Moon",
}

STORES: dict[str, str] = {
    "01DC9ZAPGKEQJS4P4A48EG3P43": "Mercadona",
    "01DC9ZB23EW0J0ARAER09SJDKC": "Carrefour",
    "01DC9ZB89V1PQD977ZE6QXSQHH": "Alcampo",
}


def format_catalog(catalog: Mapping) -> str:
    """Render a catalogue as ``map[key:value ...]`` with keys in sorted order."""
    entries = " ".join(f"{key}:{catalog[key]}" for key in sorted(catalog))
    return f"map[{entries}]"


def lookup(catalog: Mapping, item_id) -> str:
    """Return the entry for ``item_id``, or an empty string when there is none."""
    return catalog.get(item_id, "")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="beers-cli")
    commands = parser.add_subparsers(dest="command")

    beers = commands.add_parser("beers", help="Print data about beers")
    beers.add_argument("-i", "--id", default="", help="id of the beer")

    stores = commands.add_parser("stores", help="Print data about stores")
    stores.add_argument("-s", "--st", dest="id", default="", help="id of the store")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print a whole catalogue, or the entry named by ``--id``/``--st``."""
    args = _build_parser().parse_args(argv)
    if args.command is None:
        print("You must specified a command beers", file=sys.stderr)
        return 1

    catalog = BEERS if args.command == "beers" else STORES
    if args.id:
        print(lookup(catalog, args.id))
    else:
        print(format_catalog(catalog))
    return 0


if __name__ == "__main__":
    sys.exit(main())