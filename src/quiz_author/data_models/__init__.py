from .question import OPTION_COUNT, QuizRecord

__all__ = ["OPTION_COUNT", "QuizRecord"]
