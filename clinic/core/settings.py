from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from clinic.core.exceptions import ConfigurationError
from clinic.core.log import DEFAULT_LEVEL, LEVELS

DEFAULT_BOOTSTRAP_USERNAME = "admin"
DEFAULT_BOOTSTRAP_PASSWORD = "admin123"
DEFAULT_MAX_PATIENT_ID = 1_000_000

_ENV_FIELDS = {
    "bootstrap_username": "CLINIC_BOOTSTRAP_USERNAME",
    "bootstrap_password": "CLINIC_BOOTSTRAP_PASSWORD",
    "max_patient_id": "CLINIC_MAX_PATIENT_ID",
    "log_level": "CLINIC_LOG_LEVEL",
}


class Settings(BaseModel):
    bootstrap_username: str = DEFAULT_BOOTSTRAP_USERNAME
    bootstrap_password: str = DEFAULT_BOOTSTRAP_PASSWORD
    max_patient_id: int = Field(default=DEFAULT_MAX_PATIENT_ID, ge=1)
    log_level: str = DEFAULT_LEVEL

    @field_validator("bootstrap_username", "bootstrap_password")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper() or DEFAULT_LEVEL
        if level not in LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Build settings from the environment, after reading an optional .env file.

    Variables already present in the environment take precedence over the file.
    """
    if env_file is not None:
        if not env_file.is_file():
            raise ConfigurationError(f"env file not found: {env_file}")
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    values = {}
    for field_name, env_name in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None:
            values[field_name] = raw
    try:
        return Settings(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{_ENV_FIELDS.get(str(error['loc'][0]), error['loc'][0])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"invalid configuration: {problems}") from exc


__all__ = [
    "Settings",
    "load_settings",
    "DEFAULT_BOOTSTRAP_USERNAME",
    "DEFAULT_BOOTSTRAP_PASSWORD",
    "DEFAULT_MAX_PATIENT_ID",
]
