"""Configuration management for Schema Bridge."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel): # Nested under Config (BaseSettings)
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")

class ConversionConfig(BaseModel):
    """Configuration for descriptor to OpenAPI conversion."""

    explicit_default_presence: bool = Field(
        default=False,
        description="Emit any default other than None. When False, falsy defaults (0, '', False) are dropped.",
    )
    pattern_style: Literal["source", "literal"] = Field(
        default="source",
        description="Render 'matches' patterns as their source text or as a delimited /source/flags literal.",
    )


class Config(BaseSettings):
    """Main configuration for Schema Bridge. Loads from environment variables prefixed with SCHEMA_BRIDGE_."""

    model_config = SettingsConfigDict(
        env_prefix='SCHEMA_BRIDGE_',
        env_nested_delimiter='__', # e.g., SCHEMA_BRIDGE_CONVERSION__PATTERN_STYLE
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Note: This does not layer with environment variables.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
