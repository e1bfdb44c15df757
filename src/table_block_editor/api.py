from .context import EditorContext
from .services import editor as editor_service
from .services import presentation as presentation_service
from .utils_structure import extract_structure

__all__ = [
    "EditorContext",
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


def initialize_table(attributes_json, config_json):
    ctx = EditorContext.get_instance()
    return ctx.initialize_table(attributes_json, config_json)


def get_state():
    ctx = EditorContext.get_instance()
    return ctx.get_state()


def set_initial_row_count(initial_row_count):
    ctx = EditorContext.get_instance()
    return editor_service.set_initial_row_count(ctx, initial_row_count)


def set_initial_column_count(initial_column_count):
    ctx = EditorContext.get_instance()
    return editor_service.set_initial_column_count(ctx, initial_column_count)


def create_table(row_count=None, column_count=None):
    ctx = EditorContext.get_instance()
    return editor_service.create_table(ctx, row_count, column_count)


def toggle_fixed_layout():
    ctx = EditorContext.get_instance()
    return editor_service.toggle_fixed_layout(ctx)


def toggle_header_section():
    ctx = EditorContext.get_instance()
    return editor_service.toggle_header_section(ctx)


def toggle_footer_section():
    ctx = EditorContext.get_instance()
    return editor_service.toggle_footer_section(ctx)


def change_cell_content(content):
    ctx = EditorContext.get_instance()
    return editor_service.change_cell_content(ctx, content)


def insert_row(delta):
    ctx = EditorContext.get_instance()
    return editor_service.insert_row(ctx, delta)


def insert_row_before():
    """Wrapper for insert_row with a zero offset."""
    return insert_row(0)


def insert_row_after():
    """Wrapper for insert_row with an offset of one."""
    return insert_row(1)


def delete_row():
    ctx = EditorContext.get_instance()
    return editor_service.delete_row(ctx)


def insert_column(delta=0):
    ctx = EditorContext.get_instance()
    return editor_service.insert_column(ctx, delta)


def insert_column_before():
    """Wrapper for insert_column with a zero offset."""
    return insert_column(0)


def insert_column_after():
    """Wrapper for insert_column with an offset of one."""
    return insert_column(1)


def delete_column():
    ctx = EditorContext.get_instance()
    return editor_service.delete_column(ctx)


def select_table():
    ctx = EditorContext.get_instance()
    return editor_service.select_table(ctx)


def select_column(column_index):
    ctx = EditorContext.get_instance()
    return editor_service.select_column(ctx, column_index)


def select_row(section, row_index):
    ctx = EditorContext.get_instance()
    return editor_service.select_row(ctx, section, row_index)


def focus_cell(section, row_index, column_index):
    ctx = EditorContext.get_instance()
    return editor_service.focus_cell(ctx, section, row_index, column_index)


def update_block_focus(is_selected):
    ctx = EditorContext.get_instance()
    return editor_service.update_block_focus(ctx, is_selected)


def get_cell_classes(section, row_index, column_index):
    ctx = EditorContext.get_instance()
    return presentation_service.get_cell_classes(
        ctx.selection, section, row_index, column_index
    )


def get_render_sections():
    ctx = EditorContext.get_instance()
    return presentation_service.get_render_sections(ctx.attributes or {})


def get_cell_handles(section_info, row_index, column_index):
    return presentation_service.get_cell_handles(section_info, row_index, column_index)


def get_table_controls():
    ctx = EditorContext.get_instance()
    return presentation_service.get_table_controls(ctx.selection)


def get_table_classes():
    ctx = EditorContext.get_instance()
    return presentation_service.get_table_classes(ctx.attributes or {})
