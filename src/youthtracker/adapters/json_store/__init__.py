"""JSON file persistence for the roster, intel and club stores."""

from __future__ import annotations

from .registry import load_club_registry
from .unit_of_work import JsonStoreUnitOfWork, load_intel, load_roster

__all__ = [
    "JsonStoreUnitOfWork",
    "load_club_registry",
    "load_intel",
    "load_roster",
]
