from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

OPTION_COUNT = 4


class QuizRecord(BaseModel):
    """Single multiple-choice question as stored in a question bank.

    Attribute names are Pythonic; the aliases are the keys used by exported
    question files, so payloads from either side validate.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject: str = Field(..., min_length=1)
    prompt: str = Field(..., alias="question")
    options: Tuple[str, ...]
    correct_index: int = Field(0, alias="correct", ge=0, lt=OPTION_COUNT)
    is_active: bool = Field(True, alias="isActive")

    @field_validator("options")
    @classmethod
    def validate_options(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(value) != OPTION_COUNT:
            raise ValueError(f"options must contain exactly {OPTION_COUNT} entries")
        return value

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with the exported-file keys (`question`, `correct`, `isActive`)."""
        payload = self.model_dump(by_alias=True)
        payload["options"] = list(self.options)
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "QuizRecord":
        return cls.model_validate(payload)

    def with_active(self, active: bool) -> "QuizRecord":
        return self.model_copy(update={"is_active": active})
