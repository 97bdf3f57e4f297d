"""
Quiz Author.

Bulk ingestion of loosely formatted question text (or JSON) into validated
multiple-choice records, plus the in-memory question bank that receives them.
"""

from .config.loader import load_settings
from .data_models import QuizRecord
from .errors import DecodeError
from .ingestion import Mode, ingest, parse_json, parse_plain_text

__all__ = [
    "DecodeError",
    "Mode",
    "QuizRecord",
    "ingest",
    "load_settings",
    "parse_json",
    "parse_plain_text",
]
