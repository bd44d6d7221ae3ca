"""
Unit tests for in-memory table sorting.
"""
import pytest
from helpers.order import OrderState
from helpers.sorting_helpers import sort_table_data


@pytest.fixture
def pets():
    return [
        {'name': 'Rex', 'species': 'dog', 'age': 7},
        {'name': 'whiskers', 'species': 'cat', 'age': 3},
        {'name': 'Bubbles', 'species': 'fish', 'age': None},
        {'name': 'Polly', 'species': 'dog', 'age': 12},
    ]


def names(rows):
    return [row['name'] for row in rows]


def test_sort_string_case_insensitive(pets):
    """Test string sorting is case-insensitive."""
    result = sort_table_data(pets, OrderState(['name'], ['asc']))
    assert names(result) == ['Bubbles', 'Polly', 'Rex', 'whiskers']


def test_sort_numeric_descending_nulls_first(pets):
    """Test plain desc puts missing values first."""
    result = sort_table_data(pets, OrderState(['age'], ['desc']))
    assert names(result) == ['Bubbles', 'Polly', 'Rex', 'whiskers']


def test_sort_numeric_ascending_nulls_last(pets):
    """Test plain asc puts missing values last."""
    result = sort_table_data(pets, OrderState(['age'], ['asc']))
    assert names(result) == ['whiskers', 'Rex', 'Polly', 'Bubbles']


def test_explicit_null_placement(pets):
    """Test the nulls_first / nulls_last directions."""
    result = sort_table_data(pets, OrderState(['age'], ['asc_nulls_first']))
    assert names(result) == ['Bubbles', 'whiskers', 'Rex', 'Polly']

    result = sort_table_data(pets, OrderState(['age'], ['desc_nulls_last']))
    assert names(result) == ['Polly', 'Rex', 'whiskers', 'Bubbles']


def test_multi_column_sort(pets):
    """Test secondary fields break ties of the primary field."""
    result = sort_table_data(pets, OrderState(['species', 'age'], ['asc', 'desc']))
    assert names(result) == ['whiskers', 'Polly', 'Rex', 'Bubbles']


def test_missing_directions_sort_ascending(pets):
    """Test fields without directions sort ascending."""
    result = sort_table_data(pets, OrderState(['name']))
    assert names(result) == ['Bubbles', 'Polly', 'Rex', 'whiskers']


def test_unordered_keeps_input_order(pets):
    """Test an empty order returns the rows unchanged, as a new list."""
    result = sort_table_data(pets, OrderState())
    assert result == pets
    assert result is not pets


def test_custom_key_function():
    """Test sorting objects with a key function."""
    rows = [('b', 2), ('a', 1)]
    result = sort_table_data(rows, OrderState(['n'], ['asc']), key_fn=lambda row, field: row[1])
    assert result == [('a', 1), ('b', 2)]
