import logging
import os
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``LAMBDAUTILS_*`` environment variables."""
        values = {}

        level = os.getenv("LAMBDAUTILS_LOG_LEVEL") or os.getenv("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level

        log_format = os.getenv("LAMBDAUTILS_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        datefmt = os.getenv("LAMBDAUTILS_LOG_DATEFMT")
        if datefmt:
            values["LOG_DATEFMT"] = datefmt

        return cls(**values)


settings = Settings.load()
