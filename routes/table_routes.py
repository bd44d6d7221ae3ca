"""
Demo table routes.

Serves the same pet list as a path-mode table, an event-mode table and a
JSON view of the structured table.
"""
from flask import Blueprint, request, url_for
from markupsafe import Markup, escape

from helpers.order import OrderState
from helpers.response_helpers import error_response, success_response
from helpers.schema import TableSchema
from helpers.sorting_helpers import sort_table_data
from helpers.table import Meta, build_table, render_table
from helpers.template import Column, create_status_message, render_table_page
from helpers.validation_helpers import validate_order_params
from logger import logger

bp = Blueprint('pets', __name__)

PET_SCHEMA = TableSchema(
    sortable={'name', 'species', 'age'},
    default_order=OrderState(['name'], ['asc'])
)

SORT_EVENT = 'sort-table'

# Global data reference
_pets = []


def init_table_routes(pets):
    """Initialize table routes with the rows to display."""
    global _pets
    _pets = list(pets)


def _pet_columns():
    return [
        Column('Name', field='name', content=lambda pet: pet['name']),
        Column('Species', field='species'),
        Column('Age', field='age'),
        # Not in PET_SCHEMA, so rendered as a plain header
        Column('Owner', field='owner'),
        Column('Actions', content=lambda pet: Markup(
            f'<a href="#pet-{escape(pet["id"])}">Show</a>'
        )),
    ]


def _pet_footer():
    return f"{len(_pets)} pets in total"


def _load_pets():
    order, error = validate_order_params(request.args, PET_SCHEMA)
    if error:
        return None, None, error
    meta = Meta(order, PET_SCHEMA)
    return meta, sort_table_data(_pets, order), None


@bp.route('/pets')
def index():
    """Pets table with sort links built by url_for."""
    meta, pets, error = _load_pets()
    if error:
        return error

    logger.debug(f"Rendering pets table ordered by {meta.order.order_by}")
    table_html = render_table(
        items=pets,
        meta=meta,
        columns=_pet_columns(),
        path_helper=(url_for, ['pets.index']),
        foot=_pet_footer,
    )
    return render_table_page(
        'Pets',
        table_html,
        create_status_message(len(pets), item_type='pets')
    )


@bp.route('/pets/events')
def index_events():
    """Pets table whose headers emit 'sort-table' click events."""
    meta, pets, error = _load_pets()
    if error:
        return error

    table_html = render_table(
        items=pets,
        meta=meta,
        columns=_pet_columns(),
        event=SORT_EVENT,
        target='#pets',
        opts={'container': True, 'container_attrs': {'id': 'pets'}},
    )
    return render_table_page(
        'Pets',
        table_html,
        create_status_message(len(pets), item_type='pets'),
        sort_event=SORT_EVENT,
        current_order=meta.order
    )


@bp.route('/api/pets/table')
def table_api():
    """Structured table for client-side rendering."""
    meta, pets, error = _load_pets()
    if error:
        return error

    table, config_error = build_table(
        items=pets,
        meta=meta,
        columns=_pet_columns(),
        path_helper=(url_for, ['pets.index']),
    )
    if config_error:
        return error_response(config_error.message, 500, {'kind': config_error.kind})

    return success_response({'table': table.to_dict(), 'meta': meta.to_dict()})
