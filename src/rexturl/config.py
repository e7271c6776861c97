"""
Configuration management for rexturl.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
    """Configuration for URL parsing."""

    default_scheme: str = Field(
        default="https", description="Scheme assumed when the input has no '://'"
    )
    require_scheme: bool = Field(
        default=False,
        description="Reject inputs without an explicit scheme instead of defaulting",
    )

    model_config = SettingsConfigDict(env_prefix="PARSER_")


class OutputConfig(BaseSettings):
    """Configuration for output writers."""

    null_value: str = Field(
        default="\\N", description="Value printed for missing fields in plain/tabular output"
    )
    default_template: str = Field(
        default="{scheme}://{host}{path}",
        description="Template used by the custom format when none is given",
    )

    # SQL output
    sql_table: str = Field(default="urls", description="Table name for SQL output")
    sql_dialect: str = Field(
        default="postgres", description="SQL dialect: postgres, mysql, sqlite or generic"
    )

    model_config = SettingsConfigDict(env_prefix="OUTPUT_")


class ProcessingConfig(BaseSettings):
    """Configuration for batch processing."""

    max_workers: int = Field(
        default=4, description="Number of worker threads for parsing inputs"
    )
    parallel_threshold: int = Field(
        default=64,
        description="Minimum number of inputs before work is spread over threads",
    )

    model_config = SettingsConfigDict(env_prefix="PROCESSING_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)

    # Global settings
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
