import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import TypeAdapter

from .services.state import merge_update
from .types import SECTIONS, Selection, TableAttributes, TableUpdate
from .utils_structure import extract_structure

LOGGER = logging.getLogger(__name__)

_ATTRIBUTES_ADAPTER = TypeAdapter(TableAttributes)


@dataclass
class EditorState:
    attributes: Optional[TableAttributes] = None
    selection: Selection = None
    config: Any = None
    is_selected: bool = False


class EditorContext:
    _instance = None
    _state = EditorState()

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = EditorContext()
        return cls._instance

    @property
    def attributes(self) -> Optional[TableAttributes]:
        return self._state.attributes

    @attributes.setter
    def attributes(self, value: Optional[TableAttributes]):
        self._state.attributes = value

    @property
    def selection(self) -> Selection:
        return self._state.selection

    @selection.setter
    def selection(self, value: Selection):
        self._state.selection = value

    @property
    def config(self) -> Any:
        return self._state.config

    @config.setter
    def config(self, value: Any):
        self._state.config = value

    @property
    def is_selected(self) -> bool:
        return self._state.is_selected

    @is_selected.setter
    def is_selected(self, value: bool):
        self._state.is_selected = value

    def update_state(
        self,
        attributes: Optional[TableAttributes] = None,
        selection: Selection = None,
        config: Any = None,
        is_selected: Optional[bool] = None,
    ):
        """Update any part of the state. Use clear_selection to drop a selection."""
        if attributes is not None:
            self._state.attributes = attributes
        if selection is not None:
            self._state.selection = selection
        if config is not None:
            self._state.config = config
        if is_selected is not None:
            self._state.is_selected = is_selected

    def update_attributes(self, update: TableUpdate) -> TableAttributes:
        """Merge a partial update into the current attributes."""
        current = self._state.attributes or {}
        self._state.attributes = merge_update(current, update)
        return self._state.attributes

    def set_selection(self, selection: Selection):
        self._state.selection = selection

    def clear_selection(self):
        self._state.selection = None

    def get_full_state_dict(self) -> str:
        """Return the full state as a JSON string for the host."""
        if self._state.attributes is None:
            return json.dumps({"attributes": None, "structure": None, "selection": None})

        return json.dumps(
            {
                "attributes": self._state.attributes,
                "structure": extract_structure(self._state.attributes),
                "selection": self._state.selection,
            }
        )

    def reset(self):
        self._state = EditorState()

    def get_state(self):
        return self.get_full_state_dict()

    def initialize_table(self, attributes_json: str, config_json: str):
        self._state.config = config_json
        raw = json.loads(attributes_json) if attributes_json else {}

        # Host attributes we do not model (colors, class names) pass through
        _ATTRIBUTES_ADAPTER.validate_python(raw, strict=True)

        attributes = dict(raw)
        for section in SECTIONS:
            attributes.setdefault(section, [])

        self._state.attributes = attributes
        self._state.selection = None
        LOGGER.debug(
            "Initialized table with %s",
            {section: len(attributes[section]) for section in SECTIONS},
        )
