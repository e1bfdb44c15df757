import sys

import table_block_editor.api as api

EXPECTED_METHODS = [
    "change_cell_content",
    "create_table",
    "delete_column",
    "delete_row",
    "extract_structure",
    "focus_cell",
    "get_cell_classes",
    "get_cell_handles",
    "get_render_sections",
    "get_state",
    "get_table_classes",
    "get_table_controls",
    "initialize_table",
    "insert_column",
    "insert_column_after",
    "insert_column_before",
    "insert_row",
    "insert_row_after",
    "insert_row_before",
    "select_column",
    "select_row",
    "select_table",
    "set_initial_column_count",
    "set_initial_row_count",
    "toggle_fixed_layout",
    "toggle_footer_section",
    "toggle_header_section",
    "update_block_focus",
]


def verify_api():
    missing = []
    print("Verifying API surface area...")
    for method in EXPECTED_METHODS:
        if not hasattr(api, method):
            missing.append(method)
            print(f"Missing: {method}")
        else:
            print(f"Found: {method}")

    if missing:
        print(f"\nERROR: {len(missing)} methods missing from api.py")
        sys.exit(1)

    print("\nAPI Surface Verification Passed!")
    sys.exit(0)


if __name__ == "__main__":
    verify_api()
