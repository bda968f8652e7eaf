# -*- coding: utf-8 -*-
"""
Ports Interfaces Package

Defines the interfaces between the synthesis engine and its external
collaborators (host variable store, scale generator).

Design Principles:
- Use Protocol to define interfaces, supporting structural subtyping.
- Services depend on these interfaces rather than concrete implementations.
- Facilitates replacing with fake/mock during testing.
"""

from core.ports.variable_store import IVariableStore
from core.ports.scale_generator import IScaleGenerator

__all__ = [
    "IVariableStore",
    "IScaleGenerator",
]
