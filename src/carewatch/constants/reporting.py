"""Constants for terminal formatting of cases and statistics."""

from __future__ import annotations

SEVERITY_LABELS: dict[str, str] = {
    "serious": "Nghiêm trọng",
    "medium": "Vừa",
    "low": "Thấp",
}

DOCUMENT_TYPE_LABELS: dict[str, str] = {
    "case_note": "Ghi chú ca",
    "school_report": "Báo cáo trường học",
    "medical_document": "Hồ sơ y tế",
}

ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_GREEN: str = "\033[32m"
ANSI_BOLD: str = "\033[1m"
ANSI_RESET: str = "\033[0m"

SEVERITY_COLORS: dict[str, str] = {
    "serious": ANSI_RED,
    "medium": ANSI_YELLOW,
    "low": ANSI_GREEN,
}

SERIOUS_ALERT: str = "Cảnh báo: có ca nghiêm trọng đã được thông báo"
CONTENT_PREVIEW_CHARS: int = 60
