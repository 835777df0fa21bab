"""Public interface for the upstream delta adapter."""

from __future__ import annotations

from .extract import extract_json_object
from .source import FileDeltaProducer
from .translator import delta_report, parse_delta_text, rumour_to_payload

__all__ = [
    "FileDeltaProducer",
    "delta_report",
    "extract_json_object",
    "parse_delta_text",
    "rumour_to_payload",
]
