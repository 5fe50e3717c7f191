"""Pydantic models for payloadgen.yaml configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PayloadConfig(BaseModel):
    """Payload generation settings."""

    model_config = ConfigDict(extra="forbid")

    size: int = Field(default=1024, description="Payload size in bytes", ge=1)
    kind: str = Field(
        default="random",
        description="Content kind: 'random' (pseudo-random bytes) or 'text' (lorem ipsum)",
    )
    hash: bool = Field(default=False, description="Compute SHA-256 hash of each payload")
    count: int = Field(default=1, description="Number of payloads to generate", ge=1)


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level",
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="Log output format",
    )


class PayloadgenConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    payload: PayloadConfig = Field(default_factory=PayloadConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
