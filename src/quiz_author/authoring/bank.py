from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from quiz_author.data_models import QuizRecord
from quiz_author.errors import RecordValidationError

logger = logging.getLogger(__name__)

RecordLike = Union[QuizRecord, Mapping[str, Any]]


def coerce_record(item: RecordLike, position: int = 0) -> QuizRecord:
    """Validate a decoded payload into a record; records pass through unchanged."""
    if isinstance(item, QuizRecord):
        return item
    if not isinstance(item, Mapping):
        raise RecordValidationError(
            f"Item {position} is a {type(item).__name__}, expected an object", position
        )
    try:
        return QuizRecord.model_validate(dict(item))
    except ValidationError as exc:
        raise RecordValidationError(f"Item {position} is not a valid question: {exc}", position) from exc


class QuestionBank:
    """
    Ordered in-memory collection of quiz records.

    This is the batch-insert target for bulk imports. Records are immutable, so
    updates and visibility toggles replace entries rather than editing them.
    Indexes are positions in insertion order and shift after `remove`.
    """

    def __init__(self, records: Optional[Iterable[RecordLike]] = None):
        self._records: List[QuizRecord] = []
        if records is not None:
            self.add_many(records)

    @property
    def records(self) -> Tuple[QuizRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[QuizRecord]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> QuizRecord:
        return self._records[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._records):
            raise IndexError(f"No question at index {index} (bank holds {len(self._records)})")

    def add(self, record: RecordLike) -> QuizRecord:
        validated = coerce_record(record)
        self._records.append(validated)
        return validated

    def update(self, index: int, record: RecordLike) -> QuizRecord:
        self._check_index(index)
        validated = coerce_record(record)
        self._records[index] = validated
        return validated

    def remove(self, index: int) -> QuizRecord:
        self._check_index(index)
        return self._records.pop(index)

    def add_many(self, items: Iterable[RecordLike]) -> List[QuizRecord]:
        """
        Insert a batch of records or decoded payloads.

        Every item is validated before anything is inserted, so an invalid
        item leaves the bank unchanged. Duplicates are not detected.
        """
        validated = [coerce_record(item, position) for position, item in enumerate(items)]
        self._records.extend(validated)
        logger.info("Added %d questions (bank size %d)", len(validated), len(self._records))
        return validated

    def toggle_subject(self, subject: str, active: bool) -> int:
        """Set visibility for every question in a subject; returns how many were changed."""
        changed = 0
        for idx, record in enumerate(self._records):
            if record.subject == subject and record.is_active != active:
                self._records[idx] = record.with_active(active)
                changed += 1
        return changed

    def subjects(self) -> List[str]:
        """Distinct subjects in first-seen order."""
        return list(dict.fromkeys(record.subject for record in self._records))

    def subject_visibility(self) -> Dict[str, bool]:
        """Map each subject to the visibility of its first question."""
        visibility: Dict[str, bool] = {}
        for record in self._records:
            visibility.setdefault(record.subject, record.is_active)
        return visibility

    def search(self, query: str = "", subject: Optional[str] = None) -> List[Tuple[int, QuizRecord]]:
        """Return (index, record) pairs whose prompt or subject contains `query`, case-insensitively."""
        needle = query.lower()
        matches: List[Tuple[int, QuizRecord]] = []
        for idx, record in enumerate(self._records):
            if subject is not None and record.subject != subject:
                continue
            if needle in record.prompt.lower() or needle in record.subject.lower():
                matches.append((idx, record))
        return matches
