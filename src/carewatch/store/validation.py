"""Input validation for case submissions."""

from __future__ import annotations

from dataclasses import dataclass

from carewatch.constants.cases import VALID_DOCUMENT_TYPES
from carewatch.exceptions import ValidationError
from carewatch.model import CaseInput, ChildIdentity
from carewatch.types import DocumentType


@dataclass(frozen=True)
class ValidatedInput:
    """Case input after trimming and type coercion."""

    doc_type: DocumentType
    child: ChildIdentity
    content: str


def _parse_age(value: int | str) -> int:
    if isinstance(value, bool):
        raise ValidationError("age must be a positive integer")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValidationError("age is required")
        if not text.isdecimal():
            raise ValidationError(f"age must be a positive integer, got {value!r}")
        value = int(text)
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"age must be a positive integer, got {value!r}")
    return value


def validate_case_input(data: CaseInput) -> ValidatedInput:
    """Check required fields and coerce ``age``; raise ValidationError on the first problem."""
    if data.doc_type not in VALID_DOCUMENT_TYPES:
        raise ValidationError(
            f"doc_type must be one of {sorted(VALID_DOCUMENT_TYPES)}, got {data.doc_type!r}"
        )
    name = data.name.strip()
    if not name:
        raise ValidationError("name is required")
    age = _parse_age(data.age)
    if not data.content.strip():
        raise ValidationError("content is required")

    return ValidatedInput(
        doc_type=data.doc_type,  # type: ignore[arg-type]
        child=ChildIdentity(name=name, age=age, gender=data.gender.strip()),
        content=data.content,
    )
