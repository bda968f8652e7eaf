"""
Documentation Service

Produces the rows of the color documentation table: one row per role
token, grouped by category, with the stored color rendered for display.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from core.color_math import normalize_hex, rgba_value_to_hex
from models.results import DocumentationRow
from models.rgba import RGBA
from models.variable import VariableCollection
from services.token_catalog import DIRECT_TOKENS, LITERAL, DirectToken

if TYPE_CHECKING:
    from core.ports.variable_store import IVariableStore

logger = logging.getLogger(__name__)

CATEGORIES = ("surface", "text", "background", "border")
MISSING_HEX = "#000000"

_GROUP_CATEGORIES = {
    "surface": "surface",
    "text-icon": "text",
    "background": "background",
    "border": "border",
}


def _display_name(path: str) -> str:
    """'surface/sf-neutral-primary' -> 'Sf-neutral-primary'"""
    leaf = path.rsplit("/", 1)[-1]
    return leaf[:1].upper() + leaf[1:]


class DocumentationService:
    """
    Documentation Service

    Rows are read from `collection` when it holds the role token (direct
    tier). Otherwise the value comes from the token's primitive source in
    `primitive_collection`, which is how the primitives path is documented.
    """

    def __init__(self, store: "IVariableStore"):
        self._store = store

    def build_rows(
        self,
        collection: VariableCollection,
        mode_id: str,
        primitive_collection: Optional[VariableCollection] = None,
        primitive_mode_id: Optional[str] = None,
    ) -> List[DocumentationRow]:
        rows = []
        for category in CATEGORIES:
            for token in DIRECT_TOKENS:
                if _GROUP_CATEGORIES[token.group] != category:
                    continue
                rows.append(DocumentationRow(
                    name=_display_name(token.path),
                    variable_path=token.path,
                    primitive_source=token.primitive_source,
                    category=category,
                    hex_value=self._hex_for(
                        token, collection, mode_id, primitive_collection, primitive_mode_id
                    ),
                ))

        logger.info("Built %d documentation rows for %s", len(rows), collection.name)
        return rows

    def _hex_for(
        self,
        token: DirectToken,
        collection: VariableCollection,
        mode_id: str,
        primitive_collection: Optional[VariableCollection],
        primitive_mode_id: Optional[str],
    ) -> str:
        value = self._value(collection, token.path, mode_id)
        if value is None and primitive_collection is not None:
            value = self._value(
                primitive_collection,
                token.primitive_source,
                primitive_mode_id or primitive_collection.default_mode_id,
            )
        if value is None and token.source == LITERAL:
            value = token.literal

        if not isinstance(value, RGBA):
            logger.debug("No color stored for %s, using %s", token.path, MISSING_HEX)
            return MISSING_HEX
        return normalize_hex(rgba_value_to_hex(value))

    def _value(self, collection: VariableCollection, path: str, mode_id: str):
        variable = self._store.find_variable(collection, path)
        if variable is None:
            return None
        return variable.value_for_mode(mode_id)
