from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Optional

from quiz_author.ingestion.json_ingestor import parse_json
from quiz_author.ingestion.markers import UTF8_BOM, trim
from quiz_author.ingestion.text_parser import parse_plain_text

logger = logging.getLogger(__name__)

JSON_LEADING_CHARS = ("[", "{")


class Mode(str, Enum):
    """How a bulk input should be read."""

    JSON = "json"
    PLAIN_TEXT = "text"


def detect_mode(text: str) -> Mode:
    """Treat input whose first non-blank character opens an array or object as JSON."""
    return Mode.JSON if trim(text).startswith(JSON_LEADING_CHARS) else Mode.PLAIN_TEXT


def ingest(text: str, default_subject: Optional[str] = "", mode: Optional[Mode] = None) -> List[Any]:
    """
    Route bulk input to the JSON ingestor or the plain-text parser.

    A leading byte order mark is dropped. Blank input returns an empty list
    without running either path. An empty list otherwise means nothing was
    recognized; JSON syntax errors raise `DecodeError`.
    """
    if text.startswith(UTF8_BOM):
        text = text[1:]
    if not trim(text):
        return []
    selected = mode if mode is not None else detect_mode(text)
    logger.debug("Ingesting %d characters as %s", len(text), selected.value)
    if selected is Mode.JSON:
        return parse_json(text)
    return parse_plain_text(text, default_subject)
