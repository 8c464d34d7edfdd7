import pytest

from nr_pars_export.lib import ParameterNotFoundError
from nr_pars_export.matrix_builder import (
    find_shadowed_parameters,
    requested_parameters,
    resolve_parameter,
)

from conftest import make_collection

MEDIA = ["m1", "m2"]


def test_resolve_returns_collection_and_row():
    a = make_collection("A", ["p1", "p2"], MEDIA, [[1, 2], [3, 4]])
    b = make_collection("B", ["p3"], MEDIA, [[5, 6]])

    collection, row_index = resolve_parameter("p3", [a, b])
    assert collection is b
    assert row_index == 0

    collection, row_index = resolve_parameter("p2", [a, b])
    assert collection is a
    assert row_index == 1


def test_first_collection_wins():
    a = make_collection("A", ["p1"], MEDIA, [[1, 2]])
    b = make_collection("B", ["p1"], MEDIA, [[10, 20]])

    for _ in range(3):
        collection, _row = resolve_parameter("p1", [a, b])
        assert collection is a

    collection, _row = resolve_parameter("p1", [b, a])
    assert collection is b


def test_first_row_wins_inside_a_collection():
    a = make_collection("A", ["p1", "p1"], MEDIA, [[1, 2], [3, 4]])
    _collection, row_index = resolve_parameter("p1", [a])
    assert row_index == 0


def test_match_is_exact():
    a = make_collection("A", ["P1", "p10"], MEDIA, [[1, 2], [3, 4]])
    with pytest.raises(ParameterNotFoundError):
        resolve_parameter("p1", [a])


def test_missing_parameter_names_parameter_and_collections():
    a = make_collection("A", ["p1"], MEDIA, [[1, 2]])
    b = make_collection("B", ["p2"], MEDIA, [[1, 2]])

    with pytest.raises(ParameterNotFoundError) as exc_info:
        resolve_parameter("nope", [a, b])

    assert exc_info.value.parameter == "nope"
    assert exc_info.value.searched == ["A", "B"]
    assert "nope" in str(exc_info.value)


def test_requested_parameters_defaults_to_everything_in_order():
    a = make_collection("A", ["p1", "p2"], MEDIA, [[1, 2], [3, 4]])
    b = make_collection("B", ["p1", "p3"], MEDIA, [[5, 6], [7, 8]])

    assert requested_parameters([a, b]) == ["p1", "p2", "p1", "p3"]
    assert requested_parameters([a, b], []) == ["p1", "p2", "p1", "p3"]


def test_requested_parameters_keeps_explicit_list():
    a = make_collection("A", ["p1", "p2"], MEDIA, [[1, 2], [3, 4]])
    assert requested_parameters([a], ("p2", "p1", "p2")) == ["p2", "p1", "p2"]


def test_requested_parameters_single_name_is_one_parameter():
    a = make_collection("A", ["p", "p1"], MEDIA, [[1, 2], [3, 4]])
    assert requested_parameters([a], "p1") == ["p1"]


def test_find_shadowed_parameters():
    a = make_collection("A", ["p1", "p2"], MEDIA, [[1, 2], [3, 4]])
    b = make_collection("B", ["p1", "p3"], MEDIA, [[5, 6], [7, 8]])

    assert find_shadowed_parameters([a, b]) == {"p1": ["A", "B"]}
    assert find_shadowed_parameters([a]) == {}
