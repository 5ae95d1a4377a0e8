"""Beer repository backed by an HTTP product listing."""

from __future__ import annotations

from urllib.error import HTTPError, URLError
from urllib.request import urlopen

from beerscli.errors import wrap_data_unreachable
from beerscli.model import Beer, BeerRepo, parse_beers

DEFAULT_URL = "http://localhost:3000"
PRODUCTS_ENDPOINT = "/products"


class OntarioRepository(BeerRepo):
    """Fetches beers as JSON from ``<url>/products``."""

    def __init__(self, url: str = DEFAULT_URL, timeout: float | None = None) -> None:
        self.url = url
        self.timeout = timeout

    def get_beers(self) -> list[Beer]:
        """Download and decode the product listing.

        Raises DataUnreachableError when the request, the read or the
        decoding fails. A non-success status is not an error by itself:
        its body is decoded like any other.
        """
        address = f"{self.url}{PRODUCTS_ENDPOINT}"
        try:
            response = urlopen(address, timeout=self.timeout)
        except HTTPError as err:
            response = err
        except (URLError, OSError, ValueError) as err:
            raise wrap_data_unreachable(
                err, "error getting response to %s", PRODUCTS_ENDPOINT
            ) from err

        try:
            contents = response.read()
        except OSError as err:
            raise wrap_data_unreachable(
                err, "error reading the response from %s", PRODUCTS_ENDPOINT
            ) from err
        finally:
            response.close()

        try:
            return parse_beers(contents)
        except ValueError as err:
            raise wrap_data_unreachable(err, "can't parsing response into beers") from err