from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from quiz_author.authoring import QuestionBank
from quiz_author.config import Settings, load_settings
from quiz_author.data_models import QuizRecord
from quiz_author.ingestion import Mode, detect_mode, ingest
from quiz_author.utils.logging import configure_logging, get_logger

logger = logging.getLogger(__name__)
events = get_logger(__name__)

_CONFIGURED_MODES = {"json": Mode.JSON, "text": Mode.PLAIN_TEXT}


@dataclass
class BulkImportResult:
    """Outcome of one bulk import: the records inserted and the path that read them."""

    mode: Mode
    records: List[QuizRecord]

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


class QuizAuthoringSystem:
    """
    Facade wiring configuration, logging and the question bank around ingestion.

    `bulk_import` is the operation behind the bulk-add form: parse the pasted
    text (or JSON), then hand whatever was recognized to the bank in one batch.

    Attributes
    ----------
    settings : Settings
        Configuration loaded from YAML, supplying the default subject and mode.
    bank : QuestionBank
        Batch-insert target for imported questions.
    """

    def __init__(self, settings: Settings, bank: Optional[QuestionBank] = None):
        self.settings = settings
        configure_logging(settings.logging.level, settings.logging.use_json)
        self.bank = bank if bank is not None else QuestionBank()

    @classmethod
    def from_config(cls, config_path: str | Path | None = None) -> "QuizAuthoringSystem":
        return cls(load_settings(config_path))

    def resolve_mode(self, text: str, mode: Optional[Mode] = None) -> Mode:
        if mode is not None:
            return mode
        configured = _CONFIGURED_MODES.get(self.settings.ingestion.mode)
        return configured if configured is not None else detect_mode(text)

    def bulk_import(
        self,
        text: str,
        subject: Optional[str] = None,
        mode: Optional[Mode] = None,
    ) -> BulkImportResult:
        """
        Parse bulk input and add the recognized questions to the bank.

        Raises `DecodeError` for malformed JSON and `RecordValidationError` when
        a JSON item is not a valid question; in both cases the bank is unchanged.
        An empty result leaves the bank untouched.
        """
        resolved_subject = subject if subject is not None else self.settings.ingestion.default_subject
        selected = self.resolve_mode(text, mode)
        parsed = ingest(text, resolved_subject, selected)
        if not parsed:
            logger.info("Bulk import recognized no questions (%s mode)", selected.value)
            return BulkImportResult(mode=selected, records=[])
        inserted = self.bank.add_many(parsed)
        events.info("bulk_import", mode=selected.value, added=len(inserted), bank_size=len(self.bank))
        return BulkImportResult(mode=selected, records=inserted)
