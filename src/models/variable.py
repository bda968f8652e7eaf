"""
Variable and collection data models

Mirror the host document's variable objects. A collection is one token
namespace; a variable is one named token holding a value per mode.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import uuid


@dataclass
class Mode:
    """Appearance mode inside a collection (e.g. Light/Dark)"""

    mode_id: str
    name: str


@dataclass
class Variable:
    """
    Named token

    Attributes:
        id: Unique identifier
        name: Slash-delimited path, unique within its collection
        collection_id: Owning collection
        resolved_type: "COLOR" for RGBA values, "FLOAT" for scalars
        values_by_mode: Mode id -> stored value
    """

    id: str = field(default_factory=lambda: f"VariableID:{uuid.uuid4().hex[:12]}")
    name: str = ""
    collection_id: str = ""
    resolved_type: str = "COLOR"
    values_by_mode: Dict[str, Any] = field(default_factory=dict)

    def value_for_mode(self, mode_id: str) -> Any:
        return self.values_by_mode.get(mode_id)


@dataclass
class VariableCollection:
    """
    Token namespace

    Holds its ordered modes and a path -> variable id index. The index is
    the only place path uniqueness is checked, so it must be updated on
    every variable creation.
    """

    id: str = field(default_factory=lambda: f"VariableCollectionId:{uuid.uuid4().hex[:12]}")
    name: str = ""
    modes: List[Mode] = field(default_factory=list)
    variable_ids: List[str] = field(default_factory=list)
    _index: Dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def default_mode_id(self) -> str:
        return self.modes[0].mode_id

    def mode_by_name(self, name: str) -> Optional[Mode]:
        for mode in self.modes:
            if mode.name == name:
                return mode
        return None

    def has_mode(self, mode_id: str) -> bool:
        return any(mode.mode_id == mode_id for mode in self.modes)

    def lookup(self, path: str) -> Optional[str]:
        """Variable id registered for a path, or None"""
        return self._index.get(path)

    def register(self, path: str, variable_id: str) -> None:
        self._index[path] = variable_id
        self.variable_ids.append(variable_id)

    @property
    def variable_count(self) -> int:
        return len(self.variable_ids)
