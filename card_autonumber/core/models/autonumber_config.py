"""
AutoNumberConfig model holding the settings of a numbering run.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from card_autonumber.core.errors import ConfigurationError

STDIN_SOURCE = "stdin"


class AutoNumberConfig(BaseModel):
    """
    Settings for one numbering run.

    Attributes:
        auto_number_file: Deck file to number, or "stdin"
        log_level: Log level name for the application logger
        log_format: "json" or "text"
    """

    auto_number_file: str | None = None
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "text"

    @field_validator("auto_number_file")
    @classmethod
    def check_file_not_blank(cls, v):
        """Treat a blank path as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        """Validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level '{v}'")
        return level

    def require_source(self) -> str:
        """
        Return the configured deck source.

        Raises:
            ConfigurationError: If no auto-number file is configured
        """
        if self.auto_number_file is None:
            raise ConfigurationError("auto_number file is not set in config")
        return self.auto_number_file

    class Config:
        json_schema_extra = {
            "example": {
                "auto_number_file": "decks/biology.typ",
                "log_level": "INFO",
                "log_format": "json",
            }
        }
