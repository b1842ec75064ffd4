import pytest

from city_connector.labels import index_cities, normalize_city


def test_normalize_city_folds_accents_and_punctuation():
    assert normalize_city("São Paulo") == "sao paulo"
    assert normalize_city("  Sao   Paulo. ") == "sao paulo"


def test_normalize_city_repairs_mojibake():
    assert normalize_city("SÃ£o Paulo") == "sao paulo"


def test_normalize_city_treats_underscores_as_spaces():
    assert normalize_city("New_York") == "new york"


def test_normalize_city_empty():
    assert normalize_city("") == ""
    assert normalize_city(None) == ""


def test_index_cities_assigns_labels_in_first_seen_order():
    index = index_cities(["Lyon", "Paris", "lyon", "Zürich"])
    assert len(index) == 3
    assert index.label("LYON") == 1
    assert index.label("Paris") == 2
    assert index.label("Zurich") == 3
    assert index.display_names == ["Lyon", "Paris", "Zürich"]


def test_index_cities_rejects_blank_names():
    with pytest.raises(ValueError):
        index_cities(["Lyon", "..."])
