from __future__ import annotations

import pytest
from loguru import logger

CLINIC_ENV_VARS = (
    "CLINIC_BOOTSTRAP_USERNAME",
    "CLINIC_BOOTSTRAP_PASSWORD",
    "CLINIC_MAX_PATIENT_ID",
    "CLINIC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _drop_loguru_sinks():
    # sinks bound to a captured stream must not outlive the test
    yield
    logger.remove()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Unset CLINIC_* variables and restore them (including values a .env adds) afterwards."""
    for name in CLINIC_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
