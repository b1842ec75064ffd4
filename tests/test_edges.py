import pytest

from city_connector.edges import iter_edges, validate_connections


def test_iter_edges_converts_labels_and_skips_self_loops():
    edges = list(iter_edges([(1, 2, 5), (3, 3, 1), (2, 3, 0)]))
    assert edges == [(0, 1, 5), (1, 2, 0)]


def test_validate_accepts_well_formed_connections():
    validate_connections(3, [(1, 2, 5), (3, 3, 0)])


@pytest.mark.parametrize(
    "connection",
    [(0, 1, 1), (1, 4, 1), (1, 2, -1), (1, 2)],
)
def test_validate_rejects_malformed_connections(connection):
    with pytest.raises(ValueError):
        validate_connections(3, [connection])
