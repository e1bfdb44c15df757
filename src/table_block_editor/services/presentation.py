from ..types import SECTIONS
from .selection import (
    is_bottom_of_selection_range,
    is_cell_in_selection_range,
    is_empty_table_section,
    is_left_of_selection_range,
    is_right_of_selection_range,
    is_top_of_selection_range,
)

TABLE_CONTROLS = [
    "insert_row_before",
    "insert_row_after",
    "delete_row",
    "insert_column_before",
    "insert_column_after",
    "delete_column",
]


def _is_selected_cell(selection, section, row_idx, col_idx):
    return (
        selection is not None
        and selection.get("type") == "cell"
        and selection["section"] == section
        and selection["rowIndex"] == row_idx
        and selection["columnIndex"] == col_idx
    )


def get_cell_classes(selection, section, row_idx, col_idx):
    """
    Class names for one cell given the current selection.

    Edge classes are only emitted for cells inside a range selection, so a
    cell on a selected row but outside the selected columns gets no border.
    """
    classes = []

    if _is_selected_cell(selection, section, row_idx, col_idx):
        classes.append("is-selected-cell")

    is_in_range = (
        selection is not None
        and selection.get("type") == "range"
        and is_cell_in_selection_range(selection, section, row_idx, col_idx)
    )
    if not is_in_range:
        return classes

    classes.append("is-in-selected-range")
    if is_top_of_selection_range(selection, section, row_idx):
        classes.append("is-range-selection-top")
    if is_right_of_selection_range(selection, section, col_idx):
        classes.append("is-range-selection-right")
    if is_bottom_of_selection_range(selection, section, row_idx):
        classes.append("is-range-selection-bottom")
    if is_left_of_selection_range(selection, section, col_idx):
        classes.append("is-range-selection-left")

    return classes


def get_render_sections(attributes):
    # The head carries the table and column handles when present,
    # otherwise the body does
    is_empty_head = is_empty_table_section(attributes.get("head"))

    sections = []
    for section in SECTIONS:
        rows = attributes.get(section) or []
        if is_empty_table_section(rows):
            continue
        sections.append(
            {
                "type": section,
                "rows": rows,
                "isFirstTableSection": section == "head"
                or (section == "body" and is_empty_head),
                "isLastTableSection": section == "foot",
            }
        )
    return sections


def get_cell_handles(section_info, row_idx, col_idx):
    """Selection handles rendered inside a cell: "table", "row" and/or "column"."""
    is_first = section_info.get("isFirstTableSection", False)

    handles = []
    if is_first and row_idx == 0 and col_idx == 0:
        handles.append("table")
    if col_idx == 0:
        handles.append("row")
    if is_first and row_idx == 0:
        handles.append("column")
    return handles


def get_table_controls(selection):
    return [
        {"action": action, "isDisabled": not selection} for action in TABLE_CONTROLS
    ]


def get_table_classes(attributes):
    classes = []
    if attributes.get("hasFixedLayout"):
        classes.append("has-fixed-layout")
    return classes
