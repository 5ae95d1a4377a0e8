# beerscli

Small command-line tools for looking up beers. Beers come from one of three
repositories:

- a CSV file, one beer per line with the columns
  `product_id,name,category,price,type,brewer,country`;
- a fixed in-memory list of two beers;
- an HTTP products listing that answers `GET <url>/products` with a JSON
  array of beer objects.

Only the standard library is used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### beers-cli

Lists every beer, or prints the one whose product id is given.

```
beers-cli beers                              # all beers, from the HTTP listing
beers-cli beers --id 127                     # a single beer
beers-cli --csv beers                        # read data/beers.csv instead
beers-cli --csv --csv-path my.csv beers -i 127
beers-cli --url http://localhost:8080 beers
```

Options before the `beers` command:

- `--csv` reads beers from a CSV file instead of the HTTP listing;
- `--csv-path` names that file (default `data/beers.csv`, relative to the
  current directory);
- `--url` is the base address of the HTTP listing (default
  `http://localhost:3000`; `/products` is appended).

The `beers` command takes `-i`/`--id`. An id that is not a decimal integer is
read as 0. A beer is printed as its fields in braces, for example:

```
{127 Mad Jack Mixer 23.95 0 Domestic Specialty Lager Molson Canada}
```

and a list of beers as such entries inside `[...]`.

Without a command the help text is printed. When the listing cannot be
reached or its answer cannot be decoded, when no beer has the requested id, or
when a CSV line has fewer than seven fields, the message is written to
standard error and the exit status is 1. A CSV file that does not exist is
read as empty.

### beers-catalog

Prints a small fixed catalogue of beers or stores, keyed by identifier.

```
beers-catalog beers
beers-catalog beers -i 01D9X58E7NPXX5MVCR9QN794CH
beers-catalog stores -s 01DC9ZAPGKEQJS4P4A48EG3P43
```

The whole catalogue is printed as `map[key:value ...]` with keys sorted; an
unknown identifier prints an empty line. Without a command it prints an error
and exits with status 1.

## Library use

```python
from beerscli.storage import InMemoryRepository
from beerscli.service import FetchingService

service = FetchingService(InMemoryRepository())
beer = service.fetch_by_id(127)
print(beer.name, beer.price, beer.type)
```

- `beerscli.model` holds the `Beer` dataclass (with `Beer.from_json`), the
  `BeerType` enumeration, the abstract `BeerRepo`, `new_beer`,
  `new_beer_type` (unknown names give `BeerType.UNKNOWN`) and `parse_beers`,
  which turns a JSON array into beers.
- `beerscli.storage` has `CsvRepository`, `InMemoryRepository` and
  `read_beer_names`, which maps the first two CSV columns to `{id: name}`.
- `beerscli.ontario` has `OntarioRepository(url, timeout)`, which fetches and
  decodes `<url>/products`.
- `beerscli.service` has `FetchingService` with `fetch_beers()` and
  `fetch_by_id()`, and `ConcurrentFetchingService`, which searches chunks of
  the listing in parallel threads (when several beers match, the last one
  wins). A missing beer raises `BeerNotFoundError`; `number_of_chunks` gives
  the number of chunks needed.
- `beerscli.errors` has `DataUnreachableError` with `wrap_data_unreachable`,
  `new_data_unreachable` and `is_data_unreachable`, and `BadResponseError`.
- `beerscli.catalog` has the `BEERS` and `STORES` catalogues,
  `format_catalog` and `lookup`.

Every repository provides `get_beers()`, so a custom source only needs to
subclass `BeerRepo` and implement that one method.

## What it does not do

The package only reads beer data; it does not serve a products listing, ship
a CSV data file, or add, change or delete beers. `beers-cli` always uses the
plain `FetchingService`; the concurrent service is available only from
Python.