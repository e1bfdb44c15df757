import json
import logging
import re

from . import state as state_service
from .selection import (
    get_horizontal_selection_range_end,
    get_horizontal_selection_range_start,
    get_selection_bounds,
    get_vertical_selection_range_end,
    get_vertical_selection_range_start,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_DIMENSION = 2

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _get_config(context):
    config = context.config
    return json.loads(config) if config else {}


def _set_config_value(context, key, value):
    config_dict = _get_config(context)
    config_dict[key] = value
    context.config = json.dumps(config_dict)
    return {"config": config_dict}


def _coerce_dimension(value):
    """Leading integer of ``value``; anything non-numeric or non-positive becomes the default."""
    if isinstance(value, bool) or value is None:
        return DEFAULT_DIMENSION

    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(str(value))
        number = int(match.group(1)) if match else 0

    return number if number > 0 else DEFAULT_DIMENSION


def apply_table_update(context, transform_func, clear_selection=False):
    """
    Run ``transform_func`` over the current attributes and merge its result.

    Structural edits pass ``clear_selection`` since row and column indices in
    the current selection no longer point at the same cells.
    """
    if context.attributes is None:
        return {"error": "No table"}
    try:
        update = transform_func(context.attributes)
        attributes = context.update_attributes(update)
    except Exception as e:
        LOGGER.warning("Table update rejected: %s", e)
        return {"error": str(e)}

    if clear_selection:
        context.clear_selection()

    LOGGER.debug("Applied table update to %s", sorted(update))
    return {
        "attributes": attributes,
        "update": update,
        "selection": context.selection,
        "attributes_changed": True,
    }


def set_initial_row_count(context, initial_row_count):
    return _set_config_value(context, "initialRowCount", initial_row_count)


def set_initial_column_count(context, initial_column_count):
    return _set_config_value(context, "initialColumnCount", initial_column_count)


def create_table(context, row_count=None, column_count=None):
    config_dict = _get_config(context)
    if row_count is None:
        row_count = config_dict.get("initialRowCount", DEFAULT_DIMENSION)
    if column_count is None:
        column_count = config_dict.get("initialColumnCount", DEFAULT_DIMENSION)

    row_count = _coerce_dimension(row_count)
    column_count = _coerce_dimension(column_count)

    if context.attributes is None:
        context.attributes = {}

    return apply_table_update(
        context,
        lambda _: state_service.create_table(row_count, column_count),
        clear_selection=True,
    )


def toggle_fixed_layout(context):
    return apply_table_update(context, state_service.toggle_fixed_layout)


def toggle_header_section(context):
    return apply_table_update(
        context, lambda attrs: state_service.toggle_section(attrs, "head")
    )


def toggle_footer_section(context):
    return apply_table_update(
        context, lambda attrs: state_service.toggle_section(attrs, "foot")
    )


def change_cell_content(context, content):
    selection = context.selection
    if not selection or selection.get("type") != "cell":
        return {"error": "No cell selected"}

    def table_transform(attrs):
        return state_service.update_cell_content(
            attrs,
            selection["section"],
            selection["rowIndex"],
            selection["columnIndex"],
            content,
        )

    return apply_table_update(context, table_transform)


def _get_anchor(context, use_end=False):
    bounds = get_selection_bounds(context.selection)
    if bounds is None:
        return None
    start, end = bounds
    return end if use_end else start


def insert_row(context, delta):
    """Insert a row at the selected row index plus ``delta``."""
    anchor = _get_anchor(context, use_end=delta > 0)
    if anchor is None:
        return {"error": "No selection"}

    def table_transform(attrs):
        return state_service.insert_row(
            attrs, anchor["section"], anchor["rowIndex"] + delta
        )

    return apply_table_update(context, table_transform, clear_selection=True)


def insert_row_before(context):
    return insert_row(context, 0)


def insert_row_after(context):
    return insert_row(context, 1)


def delete_row(context):
    anchor = _get_anchor(context)
    if anchor is None:
        return {"error": "No selection"}

    def table_transform(attrs):
        return state_service.delete_row(attrs, anchor["section"], anchor["rowIndex"])

    return apply_table_update(context, table_transform, clear_selection=True)


def insert_column(context, delta=0):
    """Insert a column at the selected column index plus ``delta``."""
    anchor = _get_anchor(context, use_end=delta > 0)
    if anchor is None:
        return {"error": "No selection"}

    def table_transform(attrs):
        return state_service.insert_column(attrs, anchor["columnIndex"] + delta)

    return apply_table_update(context, table_transform, clear_selection=True)


def insert_column_before(context):
    return insert_column(context, 0)


def insert_column_after(context):
    return insert_column(context, 1)


def delete_column(context):
    anchor = _get_anchor(context)
    if anchor is None:
        return {"error": "No selection"}

    def table_transform(attrs):
        return state_service.delete_column(
            attrs, anchor["section"], anchor["columnIndex"]
        )

    return apply_table_update(context, table_transform, clear_selection=True)


def _select_range(context, start, end):
    if start is None or end is None:
        return {"error": "Nothing to select"}

    selection = {"type": "range", "from": start, "to": end}
    context.set_selection(selection)
    LOGGER.debug("Selected range %s", selection)
    return {"selection": selection}


def select_table(context):
    attrs = context.attributes
    if attrs is None:
        return {"error": "No table"}
    return _select_range(
        context,
        get_vertical_selection_range_start(attrs),
        get_vertical_selection_range_end(attrs),
    )


def select_column(context, column_index):
    attrs = context.attributes
    if attrs is None:
        return {"error": "No table"}
    return _select_range(
        context,
        get_vertical_selection_range_start(attrs, column_index),
        get_vertical_selection_range_end(attrs, column_index),
    )


def select_row(context, section, row_index):
    attrs = context.attributes
    if attrs is None:
        return {"error": "No table"}
    try:
        start = get_horizontal_selection_range_start(attrs, section, row_index)
        end = get_horizontal_selection_range_end(attrs, section, row_index)
    except ValueError as e:
        return {"error": str(e)}
    return _select_range(context, start, end)


def focus_cell(context, section, row_index, column_index):
    selection = {
        "type": "cell",
        "section": section,
        "rowIndex": row_index,
        "columnIndex": column_index,
    }
    context.set_selection(selection)
    context.is_selected = True
    return {"selection": selection}


def update_block_focus(context, is_selected):
    """Track whether the block has focus; losing it drops the selection."""
    context.is_selected = is_selected
    if not is_selected and context.selection is not None:
        LOGGER.debug("Block lost focus, clearing selection")
        context.clear_selection()
    return {"selection": context.selection}
