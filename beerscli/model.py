"""Beer data model, beer types and JSON decoding of beer listings."""

from __future__ import annotations

import enum
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class BeerType(enum.IntEnum):
    """Kind of beer, as reported by the product catalogue."""

    UNKNOWN = 0
    LAGER = 1
    MALT = 2
    ALE = 3
    FLAVOURED_MALT = 4
    STOUT = 5
    PORTER = 6
    NON_ALCOHOLIC = 7

    def __str__(self) -> str:
        return _LABELS[self]


# Porter is displayed as "Stout" by the catalogue.
_LABELS = {
    BeerType.LAGER: "Lager",
    BeerType.MALT: "Malt",
    BeerType.ALE: "Ale",
    BeerType.FLAVOURED_MALT: "Flavoured Malt",
    BeerType.STOUT: "Stout",
    BeerType.PORTER: "Stout",
    BeerType.NON_ALCOHOLIC: "Non-Alcoholic",
    BeerType.UNKNOWN: "unknown",
}

_BY_NAME = {
    "Lager": BeerType.LAGER,
    "Malt": BeerType.MALT,
    "Ale": BeerType.ALE,
    "Flavoured Malt": BeerType.FLAVOURED_MALT,
    "Stout": BeerType.STOUT,
    "Porter": BeerType.PORTER,
    "Non-Alcoholic": BeerType.NON_ALCOHOLIC,
    "unknown": BeerType.UNKNOWN,
}


def new_beer_type(name: str) -> BeerType:
    """Return the beer type called ``name``; unrecognised names are UNKNOWN."""
    return _BY_NAME.get(name, BeerType.UNKNOWN)


def _decode_int(key: str, value: Any, current: int) -> int:
    if value is None:
        return current
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {value!r} into integer field {key!r}")
    return value


def _decode_str(key: str, value: Any, current: str) -> str:
    if value is None:
        return current
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {value!r} into string field {key!r}")
    return value


def _decode_type(value: Any) -> BeerType | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {value!r} into beer type")
    return new_beer_type(value)


@dataclass
class Beer:
    """A single beer product."""

    product_id: int = 0
    name: str = ""
    price: str = ""
    beer_id: int = 0
    category: str = ""
    type: BeerType | None = None
    brewer: str = ""
    country: str = ""

    @classmethod
    def from_json(cls, data: Any) -> Beer:
        """Build a beer from a decoded JSON object.

        Keys match field names case-insensitively; unknown keys are ignored,
        missing or null keys keep their default. A value of the wrong JSON
        type raises ValueError.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"cannot decode {data!r} into a beer")
        beer = cls()
        for key, value in data.items():
            field = key.lower() if isinstance(key, str) else key
            if field in _INT_FIELDS:
                setattr(beer, field, _decode_int(field, value, getattr(beer, field)))
            elif field in _STR_FIELDS:
                setattr(beer, field, _decode_str(field, value, getattr(beer, field)))
            elif field == "type":
                beer.type = _decode_type(value)
        return beer


_INT_FIELDS = frozenset({"product_id", "beer_id"})
_STR_FIELDS = frozenset({"name", "price", "category", "brewer", "country"})


class BeerRepo(ABC):
    """A source of beers."""

    @abstractmethod
    def get_beers(self) -> list[Beer]:
        """Return every beer the source knows about."""


def new_beer(
    product_id: int,
    name: str,
    category: str,
    brewer: str,
    country: str,
    price: str,
    beer_type: BeerType | None,
) -> Beer:
    """Create a beer from its parts."""
    return Beer(
        product_id=product_id,
        name=name,
        category=category,
        type=beer_type,
        brewer=brewer,
        country=country,
        price=price,
    )


def parse_beers(content: str | bytes) -> list[Beer]:
    """Decode a JSON array of beer objects.

    A JSON ``null`` yields an empty list; anything else that is not an array
    raises ValueError.
    """
    decoded = json.loads(content)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError("expected a JSON array of beers")
    return [Beer.from_json(item) for item in decoded]