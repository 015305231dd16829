"""Human-readable stdout reporter."""

from __future__ import annotations

from collections.abc import Sequence

from carewatch.constants.branding import STATS_TITLE
from carewatch.constants.reporting import (
    ANSI_BOLD,
    ANSI_RESET,
    CONTENT_PREVIEW_CHARS,
    DOCUMENT_TYPE_LABELS,
    SERIOUS_ALERT,
    SEVERITY_COLORS,
    SEVERITY_LABELS,
)
from carewatch.model import Case, CaseStats, DetectionResult
from carewatch.types import Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def severity_label(severity: Severity) -> str:
    """Display label for a severity level."""
    return SEVERITY_LABELS.get(severity, severity)


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    if len(flat) <= CONTENT_PREVIEW_CHARS:
        return flat
    return flat[: CONTENT_PREVIEW_CHARS - 3] + "..."


class StdoutReporter:
    """Formats core results as plain or ANSI-colored text."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def _severity(self, severity: Severity) -> str:
        label = severity_label(severity)
        color = SEVERITY_COLORS.get(severity, "")
        return _colorize(label, color) if self.color and color else label

    def _bold(self, text: str) -> str:
        return _colorize(text, ANSI_BOLD) if self.color else text

    def render_detection(self, result: DetectionResult) -> str:
        lines = [
            f"Mức độ: {self._severity(result.level)}",
            result.reasoning,
        ]
        return "\n".join(lines)

    def render_case(self, case: Case) -> str:
        edited = f" (sửa bởi {case.last_edited_by})" if case.last_edited_by else ""
        notified = " [đã thông báo]" if case.notified else ""
        return (
            f"#{case.id} {case.date} {DOCUMENT_TYPE_LABELS.get(case.doc_type, case.doc_type)} | "
            f"{case.child.name}, {case.child.age}, {case.child.gender} | "
            f"{self._severity(case.prediction)}{notified} | "
            f"{_preview(case.content)} | tạo bởi {case.created_by}{edited}"
        )

    def render_cases(self, cases: Sequence[Case]) -> str:
        if not cases:
            return "Chưa có ca nào."
        return "\n".join(self.render_case(case) for case in cases)

    def render_stats(self, stats: CaseStats) -> str:
        lines = [
            self._bold(STATS_TITLE),
            f"  Tổng số ca: {stats.total}",
            f"  {self._severity('serious')}: {stats.serious}",
            f"  {self._severity('medium')}: {stats.medium}",
            f"  {self._severity('low')}: {stats.low}",
        ]
        if stats.has_serious:
            lines.append(_colorize(SERIOUS_ALERT, SEVERITY_COLORS["serious"]) if self.color else SERIOUS_ALERT)
        return "\n".join(lines)
