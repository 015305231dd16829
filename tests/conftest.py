"""Shared pytest fixtures for Carewatch tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias
from pathlib import Path

import pytest

from carewatch.model import Case, CaseInput, ChildIdentity
from carewatch.types import Role, Severity

CaseFactory: TypeAlias = Callable[..., Case]


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding the JSON Schemas."""
    return Path(__file__).resolve().parents[1] / "schemas"


@pytest.fixture()
def make_case() -> CaseFactory:
    """Build a Case with sensible defaults; override any field by keyword."""

    def _make(
        case_id: int = 1,
        *,
        prediction: Severity = "low",
        created_by: Role = "user",
        last_edited_by: Role | None = None,
        name: str = "An",
        age: int = 7,
        gender: str = "nam",
        notified: bool | None = None,
    ) -> Case:
        return Case(
            id=case_id,
            doc_type="case_note",
            child=ChildIdentity(name=name, age=age, gender=gender),
            content="nội dung",
            extracted="",
            prediction=prediction,
            notified=(prediction == "serious") if notified is None else notified,
            matched_keywords=(),
            date="2026-10-19",
            created_by=created_by,
            last_edited_by=last_edited_by,
        )

    return _make


@pytest.fixture()
def case_input() -> Callable[..., CaseInput]:
    """Build a CaseInput, defaulting to a low-severity observation."""

    def _make(
        content: str = "vết xước nhẹ",
        *,
        name: str = "An",
        age: int | str = 7,
        gender: str = "nam",
        doc_type: str = "case_note",
    ) -> CaseInput:
        return CaseInput(doc_type=doc_type, name=name, age=age, gender=gender, content=content)

    return _make
