from __future__ import annotations

from typing import Sequence

from quiz_author.data_models import OPTION_COUNT, QuizRecord
from quiz_author.errors import IncompleteRecordError


def build_record(
    subject: str,
    prompt: str,
    options: Sequence[str],
    correct_index: int = 0,
) -> QuizRecord:
    """Build one question from form input; every field must be filled in."""
    if len(options) != OPTION_COUNT:
        raise IncompleteRecordError(f"Expected {OPTION_COUNT} options, got {len(options)}")
    cleaned_options = [option.strip() for option in options]
    if not subject.strip() or not prompt.strip() or not all(cleaned_options):
        raise IncompleteRecordError("Subject, question and all four options are required.")
    if not 0 <= correct_index < OPTION_COUNT:
        raise IncompleteRecordError(f"correct_index must be between 0 and {OPTION_COUNT - 1}")
    return QuizRecord(
        subject=subject.strip(),
        prompt=prompt.strip(),
        options=cleaned_options,
        correct_index=correct_index,
        is_active=True,
    )
