"""Exceptions raised by the table state transforms."""


class TableBlockError(Exception):
    """Base exception for all table block errors."""

    pass


class InvalidDimension(TableBlockError, ValueError):
    """Raised when a table is requested with a non-positive row or column count."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class InvalidSection(TableBlockError, ValueError):
    """Raised for a section name other than head, body or foot."""

    def __init__(self, section):
        self.section = section
        super().__init__(f"Invalid table section: {section!r}")
