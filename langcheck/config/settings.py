"""Checker settings model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LANG_DIR = "src/main/resources/assets/serverutils/lang"


class CheckerSettings(BaseModel):
    """Settings for a single consistency check run."""

    model_config = ConfigDict(extra="forbid")

    lang_dir: Path = Field(
        default=Path(DEFAULT_LANG_DIR),
        description="Directory containing the language files",
    )
    extension: str = Field(default=".json", description="Language file extension")
    reference: Optional[str] = Field(
        default=None,
        description="Reference file name or language code; first file by name if unset",
    )
    allow_empty: bool = Field(
        default=False, description="Treat a directory without language files as success"
    )
    collect_errors: bool = Field(
        default=False, description="Keep going after a file fails to load and report all failures"
    )
    debug: bool = False
    verbose: bool = False

    @field_validator("extension")
    @classmethod
    def normalize_extension(cls, value: str) -> str:
        value = value.strip()
        if not value or value == ".":
            raise ValueError("extension must not be empty")
        if not value.startswith("."):
            value = f".{value}"
        return value

    @field_validator("reference")
    @classmethod
    def blank_reference_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value
