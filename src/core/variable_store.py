# -*- coding: utf-8 -*-
"""
In-Memory Variable Store Module

Stands in for the host document's variable API. Collections keep a
path -> variable id index, so finding an existing token is a dictionary
lookup instead of a scan over every variable.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Any, Dict, List, Optional

from core.errors import ModeLimitError, StoreWriteError
from models.variable import Mode, Variable, VariableCollection

logger = logging.getLogger(__name__)

RESOLVED_TYPES = ("COLOR", "FLOAT", "STRING")


class InMemoryVariableStore:
    """
    In-Memory Variable Store

    Writes are serialized by one re-entrant lock. After close() (or when
    created read_only) every write raises StoreWriteError.

    Example:
        store = InMemoryVariableStore()
        collection = store.create_collection("SCS Primitive 1.0")
        store.rename_mode(collection, collection.default_mode_id, "Light")

        variable = store.create_variable("Brand Scale/1", collection)
        store.set_value_for_mode(variable, collection.default_mode_id, rgba)
    """

    def __init__(self, max_modes_per_collection: Optional[int] = None, read_only: bool = False):
        """
        Args:
            max_modes_per_collection: Mode limit per collection (None = unlimited).
                                      Hosts on restricted plans allow only one.
            read_only: Reject every write from the start
        """
        self._max_modes = max_modes_per_collection
        self._closed = read_only
        self._collections: Dict[str, VariableCollection] = {}
        self._variables: Dict[str, Variable] = {}
        self._write_lock = threading.RLock()

    # === Document state ===

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop accepting writes"""
        self._closed = True

    def reopen(self) -> None:
        self._closed = False

    def _check_writable(self, action: str) -> None:
        if self._closed:
            raise StoreWriteError(f"Document is closed, cannot {action}")

    # === Collections ===

    def create_collection(self, name: str) -> VariableCollection:
        with self._write_lock:
            self._check_writable(f"create collection '{name}'")
            collection = VariableCollection(name=name)
            collection.modes.append(Mode(mode_id=self._new_mode_id(), name="Mode 1"))
            self._collections[collection.id] = collection
            logger.debug("Created collection: %s", name)
            return collection

    def get_local_collections(self) -> List[VariableCollection]:
        return list(self._collections.values())

    def get_collection_by_name(self, name: str) -> Optional[VariableCollection]:
        for collection in self._collections.values():
            if collection.name == name:
                return collection
        return None

    def remove_collection(self, collection: VariableCollection) -> None:
        with self._write_lock:
            self._check_writable(f"remove collection '{collection.name}'")
            self._collections.pop(collection.id, None)
            for variable_id in collection.variable_ids:
                self._variables.pop(variable_id, None)

    def add_mode(self, collection: VariableCollection, name: str) -> str:
        with self._write_lock:
            self._check_writable(f"add mode '{name}'")
            if self._max_modes is not None and len(collection.modes) >= self._max_modes:
                raise ModeLimitError(collection.name, self._max_modes)
            mode = Mode(mode_id=self._new_mode_id(), name=name)
            collection.modes.append(mode)
            logger.debug("Added mode %s to %s", name, collection.name)
            return mode.mode_id

    def rename_mode(self, collection: VariableCollection, mode_id: str, name: str) -> None:
        with self._write_lock:
            self._check_writable(f"rename mode '{mode_id}'")
            for mode in collection.modes:
                if mode.mode_id == mode_id:
                    mode.name = name
                    return
            raise StoreWriteError(f"Mode {mode_id} not found in '{collection.name}'")

    # === Variables ===

    def create_variable(
        self, name: str, collection: VariableCollection, resolved_type: str = "COLOR"
    ) -> Variable:
        with self._write_lock:
            self._check_writable(f"create variable '{name}'")
            if resolved_type not in RESOLVED_TYPES:
                raise StoreWriteError(f"Unsupported variable type: {resolved_type}")
            if collection.id not in self._collections:
                raise StoreWriteError(f"Collection '{collection.name}' does not exist")
            if collection.lookup(name) is not None:
                raise StoreWriteError(f"Variable '{name}' already exists in '{collection.name}'")

            variable = Variable(name=name, collection_id=collection.id, resolved_type=resolved_type)
            self._variables[variable.id] = variable
            collection.register(name, variable.id)
            return variable

    def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        return self._variables.get(variable_id)

    def find_variable(self, collection: VariableCollection, name: str) -> Optional[Variable]:
        variable_id = collection.lookup(name)
        if variable_id is None:
            return None
        return self._variables.get(variable_id)

    def set_value_for_mode(self, variable: Variable, mode_id: str, value: Any) -> None:
        with self._write_lock:
            self._check_writable(f"set value of '{variable.name}'")
            collection = self._collections.get(variable.collection_id)
            if collection is None:
                raise StoreWriteError(f"Variable '{variable.name}' has no collection")
            if not collection.has_mode(mode_id):
                raise StoreWriteError(
                    f"Mode {mode_id} not found in '{collection.name}'"
                )
            variable.values_by_mode[mode_id] = value

    def list_variables(self, collection: VariableCollection) -> List[Variable]:
        return [
            self._variables[variable_id]
            for variable_id in collection.variable_ids
            if variable_id in self._variables
        ]

    @staticmethod
    def _new_mode_id() -> str:
        return f"mode:{uuid.uuid4().hex[:8]}"
