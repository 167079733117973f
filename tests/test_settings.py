import pytest

from clinic.core.exceptions import ConfigurationError
from clinic.core.settings import (
    DEFAULT_BOOTSTRAP_PASSWORD,
    DEFAULT_BOOTSTRAP_USERNAME,
    DEFAULT_MAX_PATIENT_ID,
    load_settings,
)


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = load_settings()
    assert settings.bootstrap_username == DEFAULT_BOOTSTRAP_USERNAME
    assert settings.bootstrap_password == DEFAULT_BOOTSTRAP_PASSWORD
    assert settings.max_patient_id == DEFAULT_MAX_PATIENT_ID
    assert settings.log_level == "WARNING"


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("CLINIC_BOOTSTRAP_USERNAME", "chief")
    clean_env.setenv("CLINIC_MAX_PATIENT_ID", "500")
    clean_env.setenv("CLINIC_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.bootstrap_username == "chief"
    assert settings.max_patient_id == 500
    assert settings.log_level == "DEBUG"


def test_env_file_is_read_but_environment_wins(tmp_path, clean_env: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text(
        "CLINIC_BOOTSTRAP_USERNAME=from_file\nCLINIC_BOOTSTRAP_PASSWORD=file_pw\n",
        encoding="utf-8",
    )
    clean_env.setenv("CLINIC_BOOTSTRAP_PASSWORD", "env_pw")

    settings = load_settings(env_path)
    assert settings.bootstrap_username == "from_file"
    assert settings.bootstrap_password == "env_pw"


def test_missing_env_file(tmp_path, clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "absent.env")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CLINIC_MAX_PATIENT_ID", "lots"),
        ("CLINIC_MAX_PATIENT_ID", "0"),
        ("CLINIC_BOOTSTRAP_USERNAME", ""),
        ("CLINIC_LOG_LEVEL", "loud"),
    ],
)
def test_invalid_values(clean_env: pytest.MonkeyPatch, name: str, value: str) -> None:
    clean_env.setenv(name, value)
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings()
    assert name in str(excinfo.value)
