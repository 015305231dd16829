"""Immutable records shared by the detector, the case store and the reporters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from carewatch.types import DocumentType, JsonObject, Role, Severity


@dataclass(frozen=True)
class LevelMatch:
    """Outcome of matching one severity level's rule against normalized text."""

    found: bool
    matched_keywords: tuple[str, ...] = ()
    reasoning: str = ""


@dataclass(frozen=True)
class DetectionResult:
    """Severity classification of a piece of free text."""

    level: Severity
    matched_keywords: tuple[str, ...]
    reasoning: str

    def to_dict(self) -> JsonObject:
        return {
            "level": self.level,
            "matched_keywords": list(self.matched_keywords),
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class ChildIdentity:
    """Name, age and gender used to correlate cases about the same child."""

    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class CaseInput:
    """Raw submission fields as received from a form.

    ``age`` is accepted as an int or a digit string and checked by
    :func:`carewatch.store.validation.validate_case_input`.
    """

    doc_type: str
    name: str
    age: int | str
    gender: str
    content: str


@dataclass(frozen=True)
class Case:
    """One submitted observation plus its derived classification."""

    id: int
    doc_type: DocumentType
    child: ChildIdentity
    content: str
    extracted: str
    prediction: Severity
    notified: bool
    matched_keywords: tuple[str, ...]
    date: str
    created_by: Role
    last_edited_by: Role | None = None

    def to_dict(self) -> JsonObject:
        """Serialize to the JSON shape described by ``schemas/case.schema.json``."""
        return {
            "id": self.id,
            "doc_type": self.doc_type,
            "child": {
                "name": self.child.name,
                "age": self.child.age,
                "gender": self.child.gender,
            },
            "content": self.content,
            "extracted": self.extracted,
            "prediction": self.prediction,
            "notified": self.notified,
            "matched_keywords": list(self.matched_keywords),
            "date": self.date,
            "created_by": self.created_by,
            "last_edited_by": self.last_edited_by,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Case:
        """Rebuild a case from :meth:`to_dict` output.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` on malformed data;
        callers translate those into their own error type.
        """
        child = data["child"]
        return cls(
            id=int(data["id"]),
            doc_type=data["doc_type"],
            child=ChildIdentity(name=str(child["name"]), age=int(child["age"]), gender=str(child["gender"])),
            content=str(data["content"]),
            extracted=str(data["extracted"]),
            prediction=data["prediction"],
            notified=bool(data["notified"]),
            matched_keywords=tuple(str(kw) for kw in data.get("matched_keywords", [])),
            date=str(data["date"]),
            created_by=data["created_by"],
            last_edited_by=data.get("last_edited_by"),
        )


@dataclass(frozen=True)
class CaseStats:
    """Aggregate counts over a set of visible cases."""

    total: int = 0
    serious: int = 0
    medium: int = 0
    low: int = 0
    has_serious: bool = False

    def to_dict(self) -> JsonObject:
        return {
            "total": self.total,
            "serious": self.serious,
            "medium": self.medium,
            "low": self.low,
            "has_serious": self.has_serious,
        }
