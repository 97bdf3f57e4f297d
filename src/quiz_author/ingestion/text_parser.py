from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from quiz_author.data_models import OPTION_COUNT, QuizRecord
from quiz_author.ingestion.markers import (
    BLOCK_SEPARATOR,
    CORRECT_ANSWER_MARKER,
    FALLBACK_SUBJECT,
    NUMBERING_PREFIX,
    OPTION_LINE,
    trim,
)

logger = logging.getLogger(__name__)


@dataclass
class _BlockState:
    """Options collected while scanning one block."""

    options: List[str] = field(default_factory=list)
    correct_index: Optional[int] = None

    def start_option(self, content: str) -> None:
        content = trim(content)
        if CORRECT_ANSWER_MARKER in content:
            content = trim(content.replace(CORRECT_ANSWER_MARKER, "", 1))
            # Options past the fourth are dropped, so a marker there cannot win.
            if len(self.options) < OPTION_COUNT:
                self.correct_index = len(self.options)
        self.options.append(content)

    def continue_option(self, line: str) -> None:
        self.options[-1] = f"{self.options[-1]} {line}"

    def finalized_options(self) -> List[str]:
        padded = self.options + [""] * (OPTION_COUNT - len(self.options))
        return padded[:OPTION_COUNT]


def split_blocks(text: str) -> List[str]:
    """Split bulk text into candidate question blocks on blank lines."""
    return BLOCK_SEPARATOR.split(trim(text))


def clean_lines(block: str) -> List[str]:
    return [trim(line) for line in block.split("\n") if trim(line)]


def strip_numbering(line: str) -> str:
    """Remove a leading enumeration prefix like `1.`, `IV)` or `១.` from a prompt line."""
    return NUMBERING_PREFIX.sub("", line, count=1)


def resolve_subject(default_subject: Optional[str]) -> str:
    subject = trim(default_subject or "")
    return subject or FALLBACK_SUBJECT


def parse_block(lines: List[str], subject: str) -> Optional[QuizRecord]:
    """
    Build a record from the cleaned lines of a single block.

    The first line is the prompt. Each later line either starts a new option or
    continues the previous one; lines seen before the first option are dropped.
    Returns None when no option line was recognized.
    """
    prompt = strip_numbering(lines[0])
    state = _BlockState()
    for line in lines[1:]:
        match = OPTION_LINE.match(line)
        if match:
            state.start_option(match.group(2))
        elif state.options:
            state.continue_option(line)

    if not state.options:
        return None

    return QuizRecord(
        subject=subject,
        prompt=prompt,
        options=state.finalized_options(),
        correct_index=state.correct_index or 0,
        is_active=True,
    )


def parse_plain_text(text: str, default_subject: Optional[str] = "") -> List[QuizRecord]:
    """
    Parse free-form bulk text into quiz records.

    Never raises for malformed input. Blocks with fewer than two lines or
    without any recognizable option are skipped, so the result may be empty.
    """
    subject = resolve_subject(default_subject)
    records: List[QuizRecord] = []
    for block_idx, block in enumerate(split_blocks(text)):
        lines = clean_lines(block)
        if len(lines) < 2:
            if lines:
                logger.debug("Skipping block %d: no option lines", block_idx)
            continue
        record = parse_block(lines, subject)
        if record is None:
            logger.debug("Skipping block %d: no recognizable options", block_idx)
            continue
        records.append(record)
    return records
