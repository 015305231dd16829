"""Read projections over the case list: visibility, duplicates and statistics.

Every function here is pure. Listings and statistics both go through
:func:`visible_cases` so the two views never disagree.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from carewatch.model import Case, CaseStats, ChildIdentity
from carewatch.types import Role


def case_visible_to(case: Case, role: Role) -> bool:
    """Return whether ``role`` may see ``case`` in listings and statistics."""
    if role == "organization":
        return case.prediction == "serious"
    if role == "user":
        # A user's case drops out of the user view once a privileged role edits it.
        return case.created_by == "user" and case.last_edited_by is None
    # Admin view hides anything organization created or touched.
    return case.created_by != "organization" and case.last_edited_by != "organization"


def visible_cases(cases: Sequence[Case], role: Role) -> list[Case]:
    """Filter ``cases`` down to those ``role`` may see, preserving order."""
    return [case for case in cases if case_visible_to(case, role)]


def _same_child(left: ChildIdentity, right: ChildIdentity) -> bool:
    return (
        left.name.strip().lower() == right.name.strip().lower()
        and left.age == right.age
        and left.gender == right.gender
    )


def find_duplicates(
    cases: Sequence[Case],
    candidate: ChildIdentity,
    excluding_id: int | None = None,
) -> list[Case]:
    """Return cases about the same child as ``candidate``.

    Names compare case-insensitively; age and gender must match exactly.
    The case being edited (``excluding_id``) is never reported.
    """
    return [case for case in cases if case.id != excluding_id and _same_child(case.child, candidate)]


def compute_stats(cases: Sequence[Case]) -> CaseStats:
    """Count an already-filtered case set by severity."""
    counts = Counter(case.prediction for case in cases)
    return CaseStats(
        total=len(cases),
        serious=int(counts.get("serious", 0)),
        medium=int(counts.get("medium", 0)),
        low=int(counts.get("low", 0)),
        has_serious=any(case.prediction == "serious" and case.notified for case in cases),
    )
