"""Storage adapters that load and save the whole case list."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from carewatch.constants.cases import VALID_DOCUMENT_TYPES, VALID_ROLES
from carewatch.constants.scoring import VALID_SEVERITIES
from carewatch.constants.store import STORE_FORMAT_VERSION, STORE_TEMP_PREFIX, STORE_TEMP_SUFFIX
from carewatch.exceptions import StorageError
from carewatch.io import load_json_file, write_json_atomic
from carewatch.model import Case

logger = logging.getLogger(__name__)


class CaseStorage(ABC):
    """Persistence collaborator for :class:`carewatch.store.CaseStore`."""

    @abstractmethod
    def load_all(self) -> list[Case]:
        """Return every stored case."""

    @abstractmethod
    def save_all(self, cases: Sequence[Case]) -> None:
        """Replace the stored cases with ``cases``."""


class JsonFileStorage(CaseStorage):
    """Stores cases as one JSON document, rewritten atomically on every save."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_all(self) -> list[Case]:
        if not self.path.exists():
            logger.debug("Case store %s does not exist yet", self.path)
            return []
        try:
            payload = load_json_file(self.path)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read case store at {self.path}: {exc}") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("cases"), list):
            raise StorageError(f"Case store at {self.path} must be a mapping with a `cases` list")
        version = payload.get("version")
        if version != STORE_FORMAT_VERSION:
            raise StorageError(f"Unsupported case store version {version!r} in {self.path}")

        cases = [self._parse_case(entry, index) for index, entry in enumerate(payload["cases"])]
        logger.info("Loaded %d case(s) from %s", len(cases), self.path)
        return cases

    def save_all(self, cases: Sequence[Case]) -> None:
        write_json_atomic(
            path=self.path,
            payload={
                "version": STORE_FORMAT_VERSION,
                "cases": [case.to_dict() for case in cases],
            },
            temp_prefix=STORE_TEMP_PREFIX,
            temp_suffix=STORE_TEMP_SUFFIX,
        )
        logger.debug("Saved %d case(s) to %s", len(cases), self.path)

    def _parse_case(self, entry: object, index: int) -> Case:
        if not isinstance(entry, dict):
            raise StorageError(f"Case #{index} in {self.path} is not a mapping")
        self._check_field_types(entry, index)
        try:
            case = Case.from_dict(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Case #{index} in {self.path} is malformed: {exc}") from exc

        if case.prediction not in VALID_SEVERITIES:
            raise StorageError(f"Case #{index} in {self.path} has unknown prediction {case.prediction!r}")
        if case.doc_type not in VALID_DOCUMENT_TYPES:
            raise StorageError(f"Case #{index} in {self.path} has unknown doc_type {case.doc_type!r}")
        if case.created_by not in VALID_ROLES or case.last_edited_by not in (None, *VALID_ROLES):
            raise StorageError(f"Case #{index} in {self.path} references an unknown role")
        return case

    def _check_field_types(self, entry: dict[str, object], index: int) -> None:
        """Reject values that ``Case.from_dict`` would silently coerce."""
        where = f"Case #{index} in {self.path}"
        if "notified" in entry and not isinstance(entry["notified"], bool):
            raise StorageError(f"{where} has a non-boolean `notified`")
        child = entry.get("child")
        if isinstance(child, dict) and "age" in child:
            age = child["age"]
            if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
                raise StorageError(f"{where} has invalid child age {age!r}")
        keywords = entry.get("matched_keywords", [])
        if not isinstance(keywords, list) or not all(isinstance(keyword, str) for keyword in keywords):
            raise StorageError(f"{where} has `matched_keywords` that is not a list of strings")
