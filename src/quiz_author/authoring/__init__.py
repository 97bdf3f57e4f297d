from .bank import QuestionBank, coerce_record
from .entry import build_record

__all__ = ["QuestionBank", "build_record", "coerce_record"]
