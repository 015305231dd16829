"""Tests for the stdout reporter."""

from __future__ import annotations

from dataclasses import replace

from carewatch.constants.reporting import ANSI_RED, SERIOUS_ALERT
from carewatch.detectors import classify
from carewatch.model import CaseStats
from carewatch.reporting import StdoutReporter, severity_label


def test_severity_labels() -> None:
    assert severity_label("serious") == "Nghiêm trọng"
    assert severity_label("medium") == "Vừa"
    assert severity_label("low") == "Thấp"


def test_render_detection_plain() -> None:
    output = StdoutReporter(color=False).render_detection(classify("Trẻ bị bầm tím 60%"))

    assert output == "Mức độ: Nghiêm trọng\nDetected: bầm tím 60%"


def test_render_detection_colored() -> None:
    output = StdoutReporter(color=True).render_detection(classify("bạo hành"))

    assert ANSI_RED in output


def test_render_case_line(make_case) -> None:
    case = make_case(42, prediction="serious", created_by="user", last_edited_by="admin")

    line = StdoutReporter(color=False).render_case(case)

    assert line.startswith("#42 2026-10-19 Ghi chú ca")
    assert "Nghiêm trọng [đã thông báo]" in line
    assert "tạo bởi user (sửa bởi admin)" in line


def test_long_content_is_truncated(make_case) -> None:
    case = replace(make_case(1), content="a " * 200)

    line = StdoutReporter(color=False).render_case(case)

    assert "..." in line
    assert len(line) < 200


def test_render_empty_case_list() -> None:
    assert StdoutReporter(color=False).render_cases([]) == "Chưa có ca nào."


def test_render_stats_with_alert() -> None:
    stats = CaseStats(total=3, serious=1, medium=1, low=1, has_serious=True)

    output = StdoutReporter(color=False).render_stats(stats)

    assert "Tổng số ca: 3" in output
    assert "Nghiêm trọng: 1" in output
    assert output.endswith(SERIOUS_ALERT)


def test_render_stats_without_alert() -> None:
    output = StdoutReporter(color=False).render_stats(CaseStats(total=1, low=1))

    assert SERIOUS_ALERT not in output
