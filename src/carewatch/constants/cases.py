"""Case document types, roles and capability sets."""

from __future__ import annotations

VALID_DOCUMENT_TYPES: frozenset[str] = frozenset({"case_note", "school_report", "medical_document"})
DEFAULT_DOCUMENT_TYPE: str = "case_note"

VALID_ROLES: frozenset[str] = frozenset({"user", "admin", "organization"})

# Roles allowed to edit or delete an existing case. Creation is open to every role.
EDITOR_ROLES: frozenset[str] = frozenset({"admin", "organization"})

DATE_FORMAT: str = "%Y-%m-%d"
