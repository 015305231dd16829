"""Tests for visibility, duplicate correlation and statistics projections."""

from __future__ import annotations

from carewatch.model import ChildIdentity
from carewatch.store.projection import compute_stats, find_duplicates, visible_cases


def _mixed_cases(make_case):
    return [
        make_case(1, prediction="serious", created_by="user"),
        make_case(2, prediction="medium", created_by="user"),
        make_case(3, prediction="low", created_by="user", last_edited_by="admin"),
        make_case(4, prediction="serious", created_by="admin"),
        make_case(5, prediction="low", created_by="organization"),
        make_case(6, prediction="serious", created_by="user", last_edited_by="organization"),
        make_case(7, prediction="medium", created_by="admin", last_edited_by="organization"),
    ]


class TestVisibleCases:
    def test_organization_sees_only_serious(self, make_case) -> None:
        visible = visible_cases(_mixed_cases(make_case), "organization")

        assert [case.id for case in visible] == [1, 4, 6]
        assert all(case.prediction == "serious" for case in visible)

    def test_user_sees_only_unedited_user_cases(self, make_case) -> None:
        visible = visible_cases(_mixed_cases(make_case), "user")

        assert [case.id for case in visible] == [1, 2]

    def test_admin_hides_organization_touched_cases(self, make_case) -> None:
        visible = visible_cases(_mixed_cases(make_case), "admin")

        assert [case.id for case in visible] == [1, 2, 3, 4]

    def test_preserves_input_order(self, make_case) -> None:
        cases = [make_case(9), make_case(3), make_case(5)]

        assert [case.id for case in visible_cases(cases, "admin")] == [9, 3, 5]

    def test_empty_list(self) -> None:
        assert visible_cases([], "organization") == []


class TestFindDuplicates:
    def test_name_comparison_ignores_case(self, make_case) -> None:
        cases = [make_case(1, name="An", age=7, gender="nam")]

        duplicates = find_duplicates(cases, ChildIdentity(name="an", age=7, gender="nam"))

        assert [case.id for case in duplicates] == [1]

    def test_age_and_gender_must_match_exactly(self, make_case) -> None:
        cases = [
            make_case(1, name="An", age=8, gender="nam"),
            make_case(2, name="An", age=7, gender="nữ"),
        ]

        assert find_duplicates(cases, ChildIdentity(name="An", age=7, gender="nam")) == []

    def test_excludes_case_being_edited(self, make_case) -> None:
        cases = [make_case(1), make_case(2)]

        duplicates = find_duplicates(cases, ChildIdentity(name="An", age=7, gender="nam"), excluding_id=1)

        assert [case.id for case in duplicates] == [2]

    def test_reports_every_match(self, make_case) -> None:
        cases = [make_case(1, name="AN"), make_case(2, name="Bình"), make_case(3, name=" an ")]

        duplicates = find_duplicates(cases, ChildIdentity(name="An", age=7, gender="nam"))

        assert [case.id for case in duplicates] == [1, 3]


class TestComputeStats:
    def test_counts_by_severity(self, make_case) -> None:
        stats = compute_stats(_mixed_cases(make_case))

        assert (stats.total, stats.serious, stats.medium, stats.low) == (7, 3, 2, 2)
        assert stats.has_serious is True

    def test_empty_set(self) -> None:
        stats = compute_stats([])

        assert stats.to_dict() == {"total": 0, "serious": 0, "medium": 0, "low": 0, "has_serious": False}

    def test_has_serious_requires_notified(self, make_case) -> None:
        stats = compute_stats([make_case(1, prediction="serious", notified=False)])

        assert stats.serious == 1
        assert stats.has_serious is False

    def test_stats_follow_visibility(self, make_case) -> None:
        cases = _mixed_cases(make_case)

        for role in ("user", "admin", "organization"):
            visible = visible_cases(cases, role)
            assert compute_stats(visible).total == len(visible)
