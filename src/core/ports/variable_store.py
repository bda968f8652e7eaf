# -*- coding: utf-8 -*-
"""
Variable Store Port Interface

The host document's variable API as seen by the synthesis engine:
collections (namespaces) with modes, and variables (tokens) with one
value per mode.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable

from models.variable import Variable, VariableCollection


@runtime_checkable
class IVariableStore(Protocol):
    """Host Variable Store Interface

    Current implementation: InMemoryVariableStore
    Write methods raise CreateOrUpdateError subclasses when the document
    cannot accept the write.
    """

    def create_collection(self, name: str) -> VariableCollection:
        """Create a collection with a single default mode"""
        ...

    def get_local_collections(self) -> List[VariableCollection]:
        ...

    def remove_collection(self, collection: VariableCollection) -> None:
        ...

    def add_mode(self, collection: VariableCollection, name: str) -> str:
        """Add a mode and return its id"""
        ...

    def rename_mode(self, collection: VariableCollection, mode_id: str, name: str) -> None:
        ...

    def create_variable(
        self, name: str, collection: VariableCollection, resolved_type: str = "COLOR"
    ) -> Variable:
        ...

    def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        ...

    def find_variable(self, collection: VariableCollection, name: str) -> Optional[Variable]:
        """Exact path lookup inside one collection"""
        ...

    def set_value_for_mode(self, variable: Variable, mode_id: str, value: Any) -> None:
        ...

    def list_variables(self, collection: VariableCollection) -> List[Variable]:
        ...
