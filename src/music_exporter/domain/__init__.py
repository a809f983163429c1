"""Domain model and services of the exporter."""

from __future__ import annotations

from .catalog import DedupResult, deduplicate, merge_catalog, sort_catalog
from .errors import AuthorizationError, MusicExporterError, ParseError, TransportError
from .model import MusicRecord, Page, normalize_record, normalize_text
from .orchestrator import ExportResult, MergeOrchestrator, RunState
from .pagination import fetch_all_pages
from .platforms import Platform

__all__ = [
    "AuthorizationError",
    "DedupResult",
    "ExportResult",
    "MergeOrchestrator",
    "MusicExporterError",
    "MusicRecord",
    "Page",
    "ParseError",
    "Platform",
    "RunState",
    "TransportError",
    "deduplicate",
    "fetch_all_pages",
    "merge_catalog",
    "normalize_record",
    "normalize_text",
    "sort_catalog",
]
