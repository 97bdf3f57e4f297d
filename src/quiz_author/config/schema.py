from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class IngestionConfig(BaseModel):
    """Defaults applied to bulk imports when the caller does not override them."""

    default_subject: str = Field("", description="Subject for parsed questions; blank uses the fallback label.")
    mode: Literal["auto", "json", "text"] = Field(
        "auto", description="auto sniffs the first character; json or text forces a path."
    )


class LoggingConfig(BaseModel):
    """Controls for logging output and format."""

    level: str = Field("INFO")
    use_json: bool = False

    @field_validator("level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return value.upper()


class Settings(BaseModel):
    """Top-level project configuration."""

    project_name: str = Field("Quiz Author")
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
