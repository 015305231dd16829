"""In-memory case store, its read projections and storage adapters."""

from .case_store import CaseStore
from .projection import compute_stats, find_duplicates, visible_cases
from .storage import CaseStorage, JsonFileStorage
from .validation import validate_case_input

__all__ = [
    "CaseStorage",
    "CaseStore",
    "JsonFileStorage",
    "compute_stats",
    "find_duplicates",
    "validate_case_input",
    "visible_cases",
]
