import pytest
from pydantic import ValidationError
from lambdautils.core.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "LAMBDAUTILS_LOG_LEVEL",
        "LOG_LEVEL",
        "LAMBDAUTILS_LOG_FORMAT",
        "LAMBDAUTILS_LOG_DATEFMT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert "%(message)s" in settings.LOG_FORMAT
    assert settings.LOG_DATEFMT == "%Y-%m-%d %H:%M:%S"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LAMBDAUTILS_LOG_LEVEL", "debug")
    monkeypatch.setenv("LAMBDAUTILS_LOG_FORMAT", "%(message)s")
    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(message)s"


def test_generic_log_level_fallback(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert Settings.load().LOG_LEVEL == "WARNING"

    monkeypatch.setenv("LAMBDAUTILS_LOG_LEVEL", "ERROR")
    assert Settings.load().LOG_LEVEL == "ERROR"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LAMBDAUTILS_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings.load()
