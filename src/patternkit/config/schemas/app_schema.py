"""Main application configuration schema."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig

OUTPUT_FORMATS = ("text", "json", "yaml", "table")


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output_format: str = Field("text", description="Default CLI output format")
    demo_seed: Optional[int] = Field(None, description="Seed for the demo flower generator")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """
        Validate output format.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If format is not supported
        """
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {list(OUTPUT_FORMATS)}")
        return v


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate raw configuration data into an AppConfig."""
    return AppConfig.model_validate(data)
