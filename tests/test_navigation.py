"""
Tests for sort link targets in path and event mode.
"""
from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import pytest
from flask import Flask, url_for

from helpers.navigation import (
    ClickEvent, EventNavigation, PathNavigation, build_path, is_valid_path_helper,
    resolve_navigation
)
from helpers.order import OrderState
from helpers.schema import TableSchema


class Routes:
    """Stand-in for an object exposing path functions."""

    def pet_path(self, *args, **params):
        return '/' + '/'.join(args) + ('?' + '&'.join(sorted(params)) if params else '')


@pytest.fixture
def flask_app():
    app = Flask(__name__)

    @app.route('/pets')
    def pets():
        return ''

    return app


def test_build_path_with_base_path():
    """Test a base path string gets the order as query parameters."""
    url = build_path('/pets', OrderState(['name', 'age'], ['desc', 'asc']))
    query = parse_qs(urlsplit(url).query)
    assert url.startswith('/pets?')
    assert query == {'order_by': ['name', 'age'], 'order_directions': ['desc', 'asc']}


def test_build_path_appends_to_existing_query():
    """Test base paths that already carry a query string."""
    url = build_path('/pets?page=2', OrderState(['name'], ['asc']))
    assert url == '/pets?page=2&order_by=name&order_directions=asc'


def test_build_path_with_callable_helper():
    """Test (function, args) helpers receive args plus query params."""
    helper = Mock(return_value='/built')
    url = build_path((helper, ['pets.index']), OrderState(['name'], ['asc']))
    assert url == '/built'
    helper.assert_called_once_with('pets.index', order_by=['name'], order_directions=['asc'])


def test_build_path_with_object_helper():
    """Test (object, "function_name", args) helpers."""
    url = build_path((Routes(), 'pet_path', ['pets', 'index']), OrderState(['name'], ['asc']))
    assert url == '/pets/index?order_by&order_directions'


def test_build_path_with_url_for(flask_app):
    """Test url_for works as a path helper function."""
    with flask_app.test_request_context():
        url = build_path((url_for, ['pets']), OrderState(['name', 'age'], ['desc', 'asc']))
    assert urlsplit(url).path == '/pets'
    assert parse_qs(urlsplit(url).query) == {
        'order_by': ['name', 'age'],
        'order_directions': ['desc', 'asc'],
    }


def test_build_path_omits_default_order():
    """Test the schema's default order isn't spelled out in the URL."""
    schema = TableSchema({'name'}, default_order=OrderState(['name'], ['asc']))
    assert build_path('/pets', OrderState(['name'], ['asc']), for_=schema) == '/pets'
    assert build_path('/pets', OrderState(['name'], ['desc']), for_=schema) != '/pets'


def test_path_navigation_only_passes_the_field():
    """Test path mode delegates toggling to the order pusher."""
    pusher = Mock(return_value=OrderState(['name'], ['desc']))
    navigation = PathNavigation('/pets', order_pusher=pusher)
    current = OrderState(['name'], ['asc'])

    target = navigation.sort_target(current, 'name')

    assert target == '/pets?order_by=name&order_directions=desc'
    assert navigation.link_attrs(target) == {'href': target}
    pusher.assert_called_once_with(current, 'name')


def test_event_navigation_builds_no_url():
    """Test event mode emits a click event carrying the field."""
    navigation = EventNavigation('sort-table', target='#pets')
    event = navigation.sort_target(OrderState(), 'name')

    assert isinstance(event, ClickEvent)
    assert event.to_dict() == {'event': 'sort-table', 'params': {'order': 'name'}, 'target': '#pets'}
    assert event.to_attrs() == {
        'href': '#',
        'data-click': 'sort-table',
        'data-value-order': 'name',
        'data-target': '#pets',
    }


def test_event_without_target_has_no_target_attr():
    """Test the target attribute is only set when a target is given."""
    attrs = ClickEvent('sort-table', 'name').to_attrs()
    assert 'data-target' not in attrs


@pytest.mark.parametrize('path_helper,event,mode', [
    ('/pets', None, 'path'),
    ((url_for, ['pets.index']), None, 'path'),
    ((Routes(), 'pet_path', []), None, 'path'),
    (None, 'sort-table', 'event'),
])
def test_resolve_navigation_valid(path_helper, event, mode):
    """Test each accepted navigation shape."""
    navigation, error = resolve_navigation(path_helper, event)
    assert error is None
    assert navigation.mode == mode


@pytest.mark.parametrize('path_helper,event', [
    (None, None),
    ('/pets', 'sort-table'),
    ((url_for, 'pets.index'), None),
    ((Routes(), 'missing_path', []), None),
    (('not callable', []), None),
    (['/pets'], None),
    ('', None),
    (None, ''),
    (None, 42),
])
def test_resolve_navigation_invalid(path_helper, event):
    """Test neither, both, or malformed navigation is a configuration error."""
    navigation, error = resolve_navigation(path_helper, event)
    assert navigation is None
    assert error.kind == 'invalid_navigation'
    assert 'path_helper' in error.message
    assert 'event' in error.message


def test_is_valid_path_helper_rejects_wrong_arity():
    """Test tuples of the wrong length are rejected."""
    assert not is_valid_path_helper((url_for,))
    assert not is_valid_path_helper((Routes(), 'pet_path', [], 'extra'))
