"""
Unit tests for render option layering.
"""
import pytest
from helpers.options import default_opts, deep_merge, merge_opts


def test_defaults_when_no_overrides():
    """Test that empty layers leave the defaults untouched."""
    assert merge_opts() == default_opts()
    assert merge_opts({}, {}) == default_opts()


def test_most_specific_layer_wins_per_leaf():
    """Test that each leaf comes from the most specific layer defining it."""
    global_opts = {
        'symbol_asc': 'up',
        'table_attrs': {'class': 'global-table', 'id': 'pets'},
    }
    call_opts = {
        'table_attrs': {'class': 'call-table'},
        'container': True,
    }
    opts = merge_opts(call_opts, global_opts)

    assert opts['table_attrs'] == {'class': 'call-table', 'id': 'pets'}
    assert opts['symbol_asc'] == 'up'
    assert opts['container'] is True
    # Untouched keys keep the defaults
    assert opts['symbol_desc'] == '▾'
    assert opts['container_attrs'] == {'class': 'table-container'}


def test_nested_maps_merge_recursively():
    """Test deep merging more than one level down."""
    base = {'a': {'b': {'c': 1, 'd': 2}, 'e': 3}}
    override = {'a': {'b': {'d': 20}}}
    assert deep_merge(base, override) == {'a': {'b': {'c': 1, 'd': 20}, 'e': 3}}


def test_scalar_replaces_map():
    """Test that a non-map value replaces a map outright."""
    assert deep_merge({'symbol_attrs': {'class': 'x'}}, {'symbol_attrs': None}) == {'symbol_attrs': None}
    assert deep_merge({'symbol_asc': 'a'}, {'symbol_asc': {'nested': 1}}) == {'symbol_asc': {'nested': 1}}


def test_merge_does_not_mutate_inputs():
    """Test that no layer is mutated by merging."""
    global_opts = {'table_attrs': {'class': 'g'}}
    call_opts = {'table_attrs': {'id': 'c'}}
    opts = merge_opts(call_opts, global_opts)
    opts['table_attrs']['class'] = 'changed'

    assert global_opts == {'table_attrs': {'class': 'g'}}
    assert call_opts == {'table_attrs': {'id': 'c'}}
    assert default_opts()['table_attrs'] == {}


def test_merge_returns_fresh_nested_dicts():
    """Test that nested maps in the result aren't shared with the inputs."""
    base = {'container_attrs': {'class': 'table-container'}}
    result = deep_merge(base, None)
    assert result == base
    assert result['container_attrs'] is not base['container_attrs']


@pytest.mark.parametrize('base,override', [(None, None), ({}, None), (None, {})])
def test_empty_layers(base, override):
    """Test that missing layers are treated as empty."""
    assert deep_merge(base, override) == {}
