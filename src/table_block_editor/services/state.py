"""
Pure transforms over table block attributes.

Every function takes the current attributes and returns a merge patch holding
only the sections it changed (see ``merge_update``). Inputs are never
mutated, and rows and cells that are not touched are shared with the input.

Out-of-range row and column indices are not errors: mutations leave the
section unchanged and reads return None.
"""

from ..errors import InvalidDimension, InvalidSection
from ..types import SECTIONS


def _check_section(section):
    if section not in SECTIONS:
        raise InvalidSection(section)


def get_section_rows(state, section):
    """Rows of ``section``; an absent section reads as empty."""
    _check_section(section)
    return state.get(section) or []


def _new_cell(section):
    return {"content": "", "tag": "th" if section == "head" else "td"}


def _is_positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def merge_update(state, update):
    """Apply a partial update over a full table state, returning a new dict."""
    new_state = dict(state)
    new_state.update(update)
    return new_state


def get_column_count(state, section=None):
    """
    Cell count of the first row of ``section``.

    Without a section, the first non-empty section in render order is used.
    Returns 0 when there is no row to measure.
    """
    if section is not None:
        rows = get_section_rows(state, section)
        return len(rows[0].get("cells", [])) if rows else 0

    for name in SECTIONS:
        rows = state.get(name) or []
        if rows:
            return len(rows[0].get("cells", []))
    return 0


def create_table(row_count, column_count):
    if not _is_positive_int(row_count):
        raise InvalidDimension("row_count", row_count)
    if not _is_positive_int(column_count):
        raise InvalidDimension("column_count", column_count)

    return {
        "head": [],
        "body": [
            {"cells": [_new_cell("body") for _ in range(column_count)]}
            for _ in range(row_count)
        ],
        "foot": [],
    }


def _get_cell(rows, row_idx, col_idx):
    if row_idx < 0 or row_idx >= len(rows):
        return None
    cells = rows[row_idx].get("cells", [])
    if col_idx < 0 or col_idx >= len(cells):
        return None
    return cells[col_idx]


def update_cell_attribute(state, section, row_idx, col_idx, attribute_name, value):
    rows = get_section_rows(state, section)
    new_rows = list(rows)

    target_cell = _get_cell(rows, row_idx, col_idx)
    if target_cell is not None:
        target_row = rows[row_idx]
        new_cells = list(target_row["cells"])
        new_cells[col_idx] = {**target_cell, attribute_name: value}
        new_rows[row_idx] = {**target_row, "cells": new_cells}

    return {section: new_rows}


def get_cell_attribute(state, section, row_idx, col_idx, attribute_name):
    cell = _get_cell(get_section_rows(state, section), row_idx, col_idx)
    if cell is None:
        return None
    return cell.get(attribute_name)


def update_cell_content(state, section, row_idx, col_idx, content):
    return update_cell_attribute(state, section, row_idx, col_idx, "content", content)


def insert_row(state, section, row_idx, column_count=None):
    rows = get_section_rows(state, section)

    if column_count is None:
        # Fall back to the section's own width, then to the table's
        column_count = (
            get_column_count(state, section) or get_column_count(state) or 1
        )
    elif not _is_positive_int(column_count):
        raise InvalidDimension("column_count", column_count)

    new_row = {"cells": [_new_cell(section) for _ in range(column_count)]}

    new_rows = list(rows)
    # Ensure row_idx is valid insertion point
    insert_pos = max(0, min(row_idx, len(new_rows)))
    new_rows.insert(insert_pos, new_row)

    return {section: new_rows}


def delete_row(state, section, row_idx):
    rows = get_section_rows(state, section)
    new_rows = list(rows)
    if 0 <= row_idx < len(new_rows):
        del new_rows[row_idx]
    return {section: new_rows}


def insert_column(state, col_idx):
    """
    Insert one empty cell at ``col_idx`` into every row of every section.

    Column insertion is table-wide, unlike ``delete_column``. The update
    covers every non-empty section.
    """
    update = {}
    for section in SECTIONS:
        rows = state.get(section) or []
        if not rows:
            continue

        new_rows = []
        for row in rows:
            new_cells = list(row.get("cells", []))
            insert_pos = max(0, min(col_idx, len(new_cells)))
            new_cells.insert(insert_pos, _new_cell(section))
            new_rows.append({**row, "cells": new_cells})
        update[section] = new_rows

    return update


def delete_column(state, section, col_idx):
    """
    Remove the cell at ``col_idx`` from every row of ``section`` only.

    Rows left without cells are dropped. Other sections keep their width, so
    the table can end up with sections of different column counts.
    """
    rows = get_section_rows(state, section)

    new_rows = []
    for row in rows:
        cells = row.get("cells", [])
        if 0 <= col_idx < len(cells):
            cells = cells[:col_idx] + cells[col_idx + 1 :]
            row = {**row, "cells": cells}
        if cells:
            new_rows.append(row)

    return {section: new_rows}


def toggle_section(state, section):
    rows = get_section_rows(state, section)

    # Section exists, clear it to remove it
    if rows:
        return {section: []}

    # Width of the body's first row, or a single column
    column_count = get_column_count(state, "body") or 1
    return insert_row(state, section, 0, column_count=column_count)


def toggle_fixed_layout(state):
    return {"hasFixedLayout": not state.get("hasFixedLayout", False)}
