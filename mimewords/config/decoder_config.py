"""Configuration models for header decoding."""

import logging

from pydantic import BaseModel, Field, field_validator


class DecoderSettings(BaseModel):
    """Settings of the encoded-word decoder."""

    max_encoded_word_length: int = 255
    charset_aliases: dict[str, str] = Field(default_factory=dict)

    @field_validator("max_encoded_word_length")
    def validate_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Length must be positive")
        return v


class HeaderFieldsConfig(BaseModel):
    """Which header fields are decoded, and in which mode."""

    text_fields: list[str] = Field(
        default_factory=lambda: ["Subject", "Comments", "Content-Description"]
    )
    address_fields: list[str] = Field(
        default_factory=lambda: ["From", "To", "Cc", "Reply-To", "Sender"]
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level")
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    header_fields: HeaderFieldsConfig = Field(default_factory=HeaderFieldsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
