"""Services that fetch beers from a repository."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from beerscli.model import Beer, BeerRepo

BEERS_PER_CHUNK = 10


class BeerNotFoundError(LookupError):
    """No beer carries the requested product identifier."""

    def __init__(self, beer_id: int) -> None:
        super().__init__(f"Beer {beer_id} not found")
        self.beer_id = beer_id


def number_of_chunks(count: int, per_chunk: int) -> int:
    """Return how many chunks of ``per_chunk`` items are needed to hold ``count`` items."""
    if per_chunk <= 0:
        raise ValueError("per_chunk must be positive")
    if count <= 0:
        return 0
    return -(-count // per_chunk)


class FetchingService:
    """Fetches beers from a repository, all at once or by product identifier."""

    def __init__(self, repository: BeerRepo) -> None:
        self.repository = repository

    def fetch_beers(self) -> list[Beer]:
        """Return every beer in the repository; repository errors propagate."""
        return self.repository.get_beers()

    def fetch_by_id(self, beer_id: int) -> Beer:
        """Return the first beer whose product identifier is ``beer_id``.

        Raises BeerNotFoundError when there is none.
        """
        found = next(
            (beer for beer in self.fetch_beers() if beer.product_id == beer_id), None
        )
        if found is None:
            raise BeerNotFoundError(beer_id)
        return found


def _last_match(chunk: list[Beer], beer_id: int) -> Beer | None:
    match = None
    for beer in chunk:
        if beer.product_id == beer_id:
            match = beer
    return match


class ConcurrentFetchingService(FetchingService):
    """A fetching service that searches chunks of the listing in parallel threads."""

    def __init__(self, repository: BeerRepo, per_chunk: int = BEERS_PER_CHUNK) -> None:
        super().__init__(repository)
        if per_chunk <= 0:
            raise ValueError("per_chunk must be positive")
        self.per_chunk = per_chunk

    def fetch_by_id(self, beer_id: int) -> Beer:
        """Search the beers in chunks, one thread per chunk.

        When several beers match, the one latest in the listing wins.
        Raises BeerNotFoundError when there is none.
        """
        beers = self.fetch_beers()
        chunks = number_of_chunks(len(beers), self.per_chunk)
        if chunks == 0:
            raise BeerNotFoundError(beer_id)

        slices = [
            beers[start : start + self.per_chunk]
            for start in range(0, len(beers), self.per_chunk)
        ]
        with ThreadPoolExecutor(max_workers=chunks) as pool:
            results = list(pool.map(lambda chunk: _last_match(chunk, beer_id), slices))

        matches = [beer for beer in results if beer is not None]
        if not matches:
            raise BeerNotFoundError(beer_id)
        return matches[-1]