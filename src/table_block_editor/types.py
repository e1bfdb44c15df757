try:
    from typing_extensions import TypedDict
except ImportError:
    from typing import TypedDict

from typing import Any, Dict, List, Literal, Optional, Union

SectionName = Literal["head", "body", "foot"]

# Render order of the table sections
SECTIONS = ("head", "body", "foot")


# Cell
class _CellBase(TypedDict):
    content: Any
    tag: Literal["td", "th"]


class Cell(_CellBase, total=False):
    # Only meaningful for "th" cells
    scope: str


# Row
class Row(TypedDict):
    cells: List[Cell]


Section = List[Row]


# Root Block Attributes
class TableAttributes(TypedDict, total=False):
    head: Section
    body: Section
    foot: Section
    hasFixedLayout: bool


# Merge patch returned by the state transforms: only the touched keys
TableUpdate = Dict[str, Any]


# Selection
class Coordinate(TypedDict):
    section: SectionName
    rowIndex: int
    columnIndex: int


class CellSelection(TypedDict):
    type: Literal["cell"]
    section: SectionName
    rowIndex: int
    columnIndex: int


RangeSelection = TypedDict(
    "RangeSelection",
    {"type": Literal["range"], "from": Coordinate, "to": Coordinate},
)

Selection = Optional[Union[CellSelection, RangeSelection]]
