"""Case store: the single owner and mutator of case records."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from carewatch.constants.cases import DATE_FORMAT, EDITOR_ROLES
from carewatch.detectors.severity import classify
from carewatch.exceptions import NotFoundError, PermissionError
from carewatch.model import Case, CaseInput, CaseStats, ChildIdentity
from carewatch.store.projection import compute_stats, find_duplicates, visible_cases
from carewatch.store.storage import CaseStorage
from carewatch.store.validation import validate_case_input
from carewatch.types import Role, RuleTable
from carewatch.types.config import DEFAULT_RULE_TABLE

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class CaseStore:
    """Holds the case list and exposes the create/update/delete/read operations.

    Cases are kept most-recent-first. Every failed call raises before the
    list is touched. When ``storage`` is given, the list is loaded from it on
    construction and saved back after each successful mutation.
    """

    def __init__(
        self,
        *,
        rules: RuleTable = DEFAULT_RULE_TABLE,
        storage: CaseStorage | None = None,
        clock: Callable[[], int] = _now_ms,
        today: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._rules = rules
        self._storage = storage
        self._clock = clock
        self._today = today
        self._cases: list[Case] = []
        if storage is not None:
            self._cases = sorted(storage.load_all(), key=lambda case: case.id, reverse=True)

    @property
    def cases(self) -> list[Case]:
        """Snapshot of every case, ignoring visibility."""
        return list(self._cases)

    def get_case(self, case_id: int) -> Case:
        for case in self._cases:
            if case.id == case_id:
                return case
        raise NotFoundError(case_id)

    def create_case(self, data: CaseInput, role: Role) -> Case:
        """Validate, classify and store a new case submitted by ``role``."""
        validated = validate_case_input(data)
        detection = classify(validated.content, self._rules)
        case = Case(
            id=self._next_id(),
            doc_type=validated.doc_type,
            child=validated.child,
            content=validated.content,
            extracted=detection.reasoning,
            prediction=detection.level,
            notified=detection.level == "serious",
            matched_keywords=detection.matched_keywords,
            date=self._today().strftime(DATE_FORMAT),
            created_by=role,
        )
        self._commit([case, *self._cases])
        logger.info("Created case %d (%s) as %s", case.id, case.prediction, role)
        return case

    def update_case(self, case_id: int, data: CaseInput, role: Role) -> Case:
        """Re-classify an existing case with new input; requires an editor role."""
        self._require_editor(role, "edit", case_id)
        current = self.get_case(case_id)
        validated = validate_case_input(data)
        detection = classify(validated.content, self._rules)
        updated = replace(
            current,
            doc_type=validated.doc_type,
            child=validated.child,
            content=validated.content,
            extracted=detection.reasoning,
            prediction=detection.level,
            notified=detection.level == "serious",
            matched_keywords=detection.matched_keywords,
            last_edited_by=role,
        )
        self._commit([updated if case is current else case for case in self._cases])
        logger.info("Updated case %d (%s) as %s", case_id, updated.prediction, role)
        return updated

    def delete_case(self, case_id: int, role: Role) -> None:
        """Remove a case; requires an editor role."""
        self._require_editor(role, "delete", case_id)
        current = self.get_case(case_id)
        self._commit([case for case in self._cases if case is not current])
        logger.info("Deleted case %d as %s", case_id, role)

    def list_visible_cases(self, role: Role) -> list[Case]:
        """Cases ``role`` may see, most recent first."""
        return visible_cases(self._cases, role)

    def compute_stats(self, role: Role) -> CaseStats:
        """Statistics over exactly the cases :meth:`list_visible_cases` returns."""
        return compute_stats(self.list_visible_cases(role))

    def find_duplicates(self, candidate: ChildIdentity, excluding_id: int | None = None) -> list[Case]:
        """Advisory lookup of prior cases about the same child."""
        return find_duplicates(self._cases, candidate, excluding_id)

    def _require_editor(self, role: Role, action: str, case_id: int) -> None:
        if role not in EDITOR_ROLES:
            logger.warning("Rejected %s of case %d by role %s", action, case_id, role)
            raise PermissionError(f"Role {role!r} cannot {action} cases")

    def _next_id(self) -> int:
        candidate = self._clock()
        if self._cases:
            candidate = max(candidate, max(case.id for case in self._cases) + 1)
        return candidate

    def _commit(self, cases: list[Case]) -> None:
        # Save before swapping so a storage failure leaves the store unchanged.
        if self._storage is not None:
            self._storage.save_all(cases)
        self._cases = cases
