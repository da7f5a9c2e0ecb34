import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueryKitBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="QUERYKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    app_env: str = Field(
        default="dev",
        description="Application deployment environment (e.g., dev, qa, prod, local)"
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level used by setup_logging()"
    )
    log_json: bool = Field(
        default=True,
        description="Emit logs as one JSON object per line. Disable for human readable local output."
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names.

        Args:
            v: The configured level name

        Returns:
            Upper-cased level name
        """
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Invalid log level '{v}'. "
                f"Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return level

    @property
    def is_production(self) -> bool:
        return self.app_env.lower().startswith("prod")
