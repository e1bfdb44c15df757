"""
Selection range geometry.

The head, body and foot sections are stored as independent row lists but are
rendered as one continuous grid. A range selection is given by two
coordinates, ``from`` and ``to``, which may sit in different sections. The
predicates here classify a single cell against such a range, walking the
sections in head, body, foot order.
"""

from ..types import SECTIONS
from .state import get_section_rows


def is_empty_table_section(rows):
    return not rows


def _coordinate(section, row_idx, col_idx):
    return {"section": section, "rowIndex": row_idx, "columnIndex": col_idx}


def _non_empty_sections(state):
    return [section for section in SECTIONS if state.get(section)]


def _get_row(state, section, row_idx):
    rows = get_section_rows(state, section)
    if row_idx < 0 or row_idx >= len(rows):
        return None
    return rows[row_idx]


def _last_column_index(rows):
    widest = max((len(row.get("cells", [])) for row in rows), default=0)
    return max(widest - 1, 0)


def get_vertical_selection_range_start(state, column_index=None):
    """
    First cell of a whole-column selection, or of the whole table when
    ``column_index`` is omitted. None when the table has no rows.
    """
    sections = _non_empty_sections(state)
    if not sections:
        return None

    if column_index is None:
        column_index = 0
    return _coordinate(sections[0], 0, column_index)


def get_vertical_selection_range_end(state, column_index=None):
    """
    Last cell of a whole-column selection, or of the whole table when
    ``column_index`` is omitted. None when the table has no rows.
    """
    sections = _non_empty_sections(state)
    if not sections:
        return None

    last_section = sections[-1]
    rows = state[last_section]

    if column_index is None:
        all_rows = [row for section in sections for row in state[section]]
        column_index = _last_column_index(all_rows)
    return _coordinate(last_section, len(rows) - 1, column_index)


def get_horizontal_selection_range_start(state, section, row_index):
    row = _get_row(state, section, row_index)
    if row is None or not row.get("cells"):
        return None
    return _coordinate(section, row_index, 0)


def get_horizontal_selection_range_end(state, section, row_index):
    row = _get_row(state, section, row_index)
    # A row without cells has no last column to select
    if row is None or not row.get("cells"):
        return None
    return _coordinate(section, row_index, len(row["cells"]) - 1)


def _section_position(section):
    return SECTIONS.index(section) if section in SECTIONS else -1


def get_selection_bounds(selection):
    """
    Normalize a selection into its top-left and bottom-right coordinates.

    The start is the coordinate in the earlier section. When both ends share
    a section, rows are ordered by index. Columns are always ordered, since a
    column runs through every section. Returns None for no selection.
    """
    if not selection:
        return None

    if selection.get("type") == "cell":
        start = end = _coordinate(
            selection["section"], selection["rowIndex"], selection["columnIndex"]
        )
    else:
        start, end = selection["from"], selection["to"]

    start_pos = _section_position(start["section"])
    end_pos = _section_position(end["section"])
    if start_pos > end_pos:
        start, end = end, start

    start_row, end_row = start["rowIndex"], end["rowIndex"]
    if start_pos == end_pos and start_row > end_row:
        start_row, end_row = end_row, start_row

    min_col = min(start["columnIndex"], end["columnIndex"])
    max_col = max(start["columnIndex"], end["columnIndex"])

    return (
        _coordinate(start["section"], start_row, min_col),
        _coordinate(end["section"], end_row, max_col),
    )


def _is_section_in_range(start, end, section):
    position = _section_position(section)
    if position < 0:
        return False
    return (
        _section_position(start["section"])
        <= position
        <= _section_position(end["section"])
    )


def _is_row_in_range(start, end, section, row_index):
    if not _is_section_in_range(start, end, section):
        return False
    if section == start["section"] and row_index < start["rowIndex"]:
        return False
    if section == end["section"] and row_index > end["rowIndex"]:
        return False
    return True


def is_cell_in_selection_range(selection, section, row_index, column_index):
    bounds = get_selection_bounds(selection)
    if bounds is None:
        return False

    start, end = bounds
    if not start["columnIndex"] <= column_index <= end["columnIndex"]:
        return False
    return _is_row_in_range(start, end, section, row_index)


def is_top_of_selection_range(selection, section, row_index):
    bounds = get_selection_bounds(selection)
    if bounds is None:
        return False

    start, _ = bounds
    return section == start["section"] and row_index == start["rowIndex"]


def is_bottom_of_selection_range(selection, section, row_index):
    bounds = get_selection_bounds(selection)
    if bounds is None:
        return False

    _, end = bounds
    return section == end["section"] and row_index == end["rowIndex"]


def is_left_of_selection_range(selection, section, column_index):
    bounds = get_selection_bounds(selection)
    if bounds is None:
        return False

    start, end = bounds
    return (
        _is_section_in_range(start, end, section)
        and column_index == start["columnIndex"]
    )


def is_right_of_selection_range(selection, section, column_index):
    bounds = get_selection_bounds(selection)
    if bounds is None:
        return False

    start, end = bounds
    return (
        _is_section_in_range(start, end, section)
        and column_index == end["columnIndex"]
    )
