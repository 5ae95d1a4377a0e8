import pytest

from beerscli.model import Beer, BeerType, new_beer
from beerscli.storage import CsvRepository, InMemoryRepository, read_beer_names

ROW_MAD_JACK = "127,Mad Jack Mixer,Domestic Specialty,23.95,Lager,Molson,Canada"
ROW_GROLSCH = (
    "8520130,Grolsch 0.0,Non-Alcoholic Beer,49.50,Non-Alcoholic,"
    "Grolsch Export B.V.,Canada"
)


def _write(tmp_path, text, name="beers.csv"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return path


def test_csv_repository_reads_columns_in_order(tmp_path):
    path = _write(tmp_path, ROW_MAD_JACK + "\n" + ROW_GROLSCH + "\n")
    beers = CsvRepository(path).get_beers()
    assert beers == [
        new_beer(
            127,
            "Mad Jack Mixer",
            "Domestic Specialty",
            "Molson",
            "Canada",
            "23.95",
            BeerType.LAGER,
        ),
        new_beer(
            8520130,
            "Grolsch 0.0",
            "Non-Alcoholic Beer",
            "Grolsch Export B.V.",
            "Canada",
            "49.50",
            BeerType.NON_ALCOHOLIC,
        ),
    ]


def test_csv_repository_without_trailing_newline(tmp_path):
    path = _write(tmp_path, ROW_MAD_JACK + "\n" + ROW_GROLSCH)
    beers = CsvRepository(path).get_beers()
    assert [beer.product_id for beer in beers] == [127, 8520130]


def test_csv_repository_strips_crlf(tmp_path):
    path = _write(tmp_path, ROW_MAD_JACK + "\r\n" + ROW_GROLSCH + "\r\n")
    beers = CsvRepository(path).get_beers()
    assert [beer.country for beer in beers] == ["Canada", "Canada"]


def test_csv_repository_missing_file_is_empty(tmp_path):
    assert CsvRepository(tmp_path / "absent.csv").get_beers() == []


def test_csv_repository_empty_file_is_empty(tmp_path):
    assert CsvRepository(_write(tmp_path, "")).get_beers() == []


def test_csv_repository_short_line_raises(tmp_path):
    path = _write(tmp_path, "127,Mad Jack Mixer,Domestic Specialty\n")
    with pytest.raises(ValueError):
        CsvRepository(path).get_beers()


def test_csv_repository_non_numeric_id_reads_as_zero(tmp_path):
    path = _write(tmp_path, "abc" + ROW_MAD_JACK[3:] + "\n")
    [beer] = CsvRepository(path).get_beers()
    assert beer.product_id == 0
    assert beer.name == "Mad Jack Mixer"


def test_csv_repository_unknown_type(tmp_path):
    path = _write(tmp_path, ROW_MAD_JACK.replace("Lager", "Weird") + "\n")
    [beer] = CsvRepository(path).get_beers()
    assert beer.type is BeerType.UNKNOWN


def test_csv_repository_porter_is_shown_as_stout(tmp_path):
    path = _write(tmp_path, ROW_MAD_JACK.replace("Lager", "Porter") + "\n")
    [beer] = CsvRepository(path).get_beers()
    assert beer.type is BeerType.PORTER
    assert str(beer.type) == "Stout"


def test_read_beer_names(tmp_path):
    path = _write(tmp_path, ROW_MAD_JACK + "\n" + ROW_GROLSCH + "\n")
    assert read_beer_names(path) == {127: "Mad Jack Mixer", 8520130: "Grolsch 0.0"}


def test_read_beer_names_later_line_wins(tmp_path):
    path = _write(tmp_path, "127,First\n127,Second\n")
    assert read_beer_names(path) == {127: "Second"}


def test_read_beer_names_missing_file(tmp_path):
    assert read_beer_names(tmp_path / "absent.csv") == {}


def test_read_beer_names_short_line_raises(tmp_path):
    path = _write(tmp_path, "127\n")
    with pytest.raises(ValueError):
        read_beer_names(path)


def test_in_memory_repository_contents():
    beers = InMemoryRepository().get_beers()
    assert beers[0] == Beer(
        product_id=127,
        name="Mad Jack Mixer",
        price="23.95",
        category="Domestic Specialty",
        type=BeerType.LAGER,
        brewer="Molson",
        country="Canada",
    )
    assert beers[1].product_id == 8520130
    assert beers[1].name == "Grolsch 0.0"
    assert beers[1].brewer == "Grolsch Export B.V."
    assert beers[1].price == "49.50"
    assert beers[1].type is BeerType.UNKNOWN


def test_in_memory_repository_returns_fresh_lists():
    repo = InMemoryRepository()
    first = repo.get_beers()
    first.clear()
    assert len(repo.get_beers()) == 2