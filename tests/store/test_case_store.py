"""Tests for CaseStore mutations, gating and read operations."""

from __future__ import annotations

import builtins
from collections.abc import Sequence
from datetime import datetime

import pytest

from carewatch.exceptions import NotFoundError, PermissionError, ValidationError
from carewatch.model import Case, ChildIdentity
from carewatch.store import CaseStore
from carewatch.store.storage import CaseStorage
from carewatch.types import LevelRule, RuleTable


class _Clock:
    def __init__(self, start: int = 1_000) -> None:
        self.value = start

    def __call__(self) -> int:
        return self.value


class _MemoryStorage(CaseStorage):
    def __init__(self, cases: Sequence[Case] = ()) -> None:
        self.saved: list[list[Case]] = []
        self._cases = list(cases)

    def load_all(self) -> list[Case]:
        return list(self._cases)

    def save_all(self, cases: Sequence[Case]) -> None:
        self.saved.append(list(cases))
        self._cases = list(cases)


class _FailingStorage(_MemoryStorage):
    def save_all(self, cases: Sequence[Case]) -> None:
        raise OSError("disk full")


@pytest.fixture()
def store() -> CaseStore:
    return CaseStore(clock=_Clock(), today=lambda: datetime(2026, 10, 19, 9, 30))


class TestCreateCase:
    def test_scratch_case_is_low_and_not_notified(self, store: CaseStore, case_input) -> None:
        case = store.create_case(case_input("vết xước nhẹ"), "user")

        assert case.prediction == "low"
        assert case.matched_keywords == ("xước nhẹ", "xước")
        assert case.extracted == "Detected: xước nhẹ, xước"
        assert case.notified is False
        assert case.created_by == "user"
        assert case.last_edited_by is None
        assert case.date == "2026-10-19"

    def test_serious_case_is_notified(self, store: CaseStore, case_input) -> None:
        case = store.create_case(case_input("Trẻ bị bầm tím 60%"), "admin")

        assert case.prediction == "serious"
        assert case.notified is True
        assert "bầm tím 60%" in case.matched_keywords

    def test_ids_are_strictly_increasing(self, store: CaseStore, case_input) -> None:
        first = store.create_case(case_input(), "user")
        second = store.create_case(case_input(), "user")

        assert second.id > first.id

    def test_newest_case_is_listed_first(self, store: CaseStore, case_input) -> None:
        first = store.create_case(case_input(), "user")
        second = store.create_case(case_input(), "user")

        assert [case.id for case in store.list_visible_cases("admin")] == [second.id, first.id]

    def test_invalid_input_leaves_store_unchanged(self, store: CaseStore, case_input) -> None:
        store.create_case(case_input(), "user")
        before = store.cases

        with pytest.raises(ValidationError):
            store.create_case(case_input(age="0"), "user")

        assert store.cases == before

    def test_uses_configured_rules(self, case_input) -> None:
        rules = RuleTable(levels=(("medium", LevelRule(keywords=("xước",))),))
        store = CaseStore(rules=rules)

        assert store.create_case(case_input("vết xước"), "user").prediction == "medium"


class TestUpdateCase:
    def test_recomputes_and_records_editor(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input("vết xước nhẹ"), "user")

        updated = store.update_case(created.id, case_input("Trẻ bị bạo hành", name="Bình"), "admin")

        assert updated.id == created.id
        assert updated.created_by == "user"
        assert updated.last_edited_by == "admin"
        assert updated.date == created.date
        assert updated.prediction == "serious"
        assert updated.notified is True
        assert updated.child.name == "Bình"
        assert store.get_case(created.id) == updated

    def test_edited_case_leaves_user_view(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input(), "user")

        store.update_case(created.id, case_input("vết trầy"), "admin")

        assert store.list_visible_cases("user") == []

    def test_organization_edit_hides_case_from_admin(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input(), "admin")

        store.update_case(created.id, case_input("bạo hành"), "organization")

        assert store.list_visible_cases("admin") == []
        assert [case.id for case in store.list_visible_cases("organization")] == [created.id]

    def test_user_cannot_edit(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input(), "user")
        before = store.cases

        with pytest.raises(PermissionError):
            store.update_case(created.id, case_input("bạo hành"), "user")

        assert store.cases == before

    def test_permission_checked_before_lookup(self, store: CaseStore, case_input) -> None:
        with pytest.raises(PermissionError):
            store.update_case(404, case_input(), "user")

    def test_missing_case(self, store: CaseStore, case_input) -> None:
        with pytest.raises(NotFoundError):
            store.update_case(404, case_input(), "admin")

    def test_invalid_input_leaves_case_unchanged(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input(), "user")

        with pytest.raises(ValidationError):
            store.update_case(created.id, case_input(""), "admin")

        assert store.get_case(created.id) == created


class TestDeleteCase:
    def test_admin_deletes(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input(), "user")

        store.delete_case(created.id, "admin")

        assert store.cases == []

    def test_user_cannot_delete(self, store: CaseStore, case_input) -> None:
        created = store.create_case(case_input(), "user")
        before = store.cases

        with pytest.raises(PermissionError):
            store.delete_case(created.id, "user")

        assert store.cases == before

    def test_permission_error_is_builtin_permission_error(self, store: CaseStore) -> None:
        with pytest.raises(builtins.PermissionError):
            store.delete_case(1, "user")

    def test_missing_case(self, store: CaseStore) -> None:
        with pytest.raises(NotFoundError, match="404"):
            store.delete_case(404, "organization")


class TestReads:
    def test_stats_match_visible_rows(self, store: CaseStore, case_input) -> None:
        store.create_case(case_input("bạo hành"), "user")
        store.create_case(case_input("bạo lực"), "user")
        store.create_case(case_input("xước"), "organization")

        for role in ("user", "admin", "organization"):
            rows = store.list_visible_cases(role)
            stats = store.compute_stats(role)
            assert stats.total == len(rows)

        org = store.compute_stats("organization")
        assert (org.total, org.serious, org.has_serious) == (1, 1, True)

    def test_find_duplicates_is_case_insensitive(self, store: CaseStore, case_input) -> None:
        first = store.create_case(case_input(name="An"), "user")

        duplicates = store.find_duplicates(ChildIdentity(name="an", age=7, gender="nam"))

        assert duplicates == [first]
        assert store.find_duplicates(ChildIdentity(name="an", age=7, gender="nam"), excluding_id=first.id) == []

    def test_cases_property_is_a_snapshot(self, store: CaseStore, case_input) -> None:
        store.create_case(case_input(), "user")

        snapshot = store.cases
        snapshot.clear()

        assert len(store.cases) == 1


class TestStorageIntegration:
    def test_loads_existing_cases_newest_first(self, make_case) -> None:
        storage = _MemoryStorage([make_case(5), make_case(9), make_case(7)])

        store = CaseStore(storage=storage)

        assert [case.id for case in store.cases] == [9, 7, 5]

    def test_saves_after_each_mutation(self, case_input) -> None:
        storage = _MemoryStorage()
        store = CaseStore(storage=storage, clock=_Clock())

        created = store.create_case(case_input(), "user")
        store.update_case(created.id, case_input("bạo lực"), "admin")
        store.delete_case(created.id, "admin")

        assert [len(snapshot) for snapshot in storage.saved] == [1, 1, 0]

    def test_next_id_continues_after_loaded_cases(self, make_case, case_input) -> None:
        store = CaseStore(storage=_MemoryStorage([make_case(5_000)]), clock=_Clock(1_000))

        assert store.create_case(case_input(), "user").id == 5_001

    def test_failed_save_leaves_store_unchanged(self, make_case, case_input) -> None:
        store = CaseStore(storage=_FailingStorage([make_case(1)]))
        before = store.cases

        with pytest.raises(OSError):
            store.create_case(case_input(), "user")

        assert store.cases == before
