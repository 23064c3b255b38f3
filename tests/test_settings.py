"""Settings tests."""

import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_defaults():
    settings = Settings()

    assert settings.default_lang == "en"
    assert settings.locale_dir is None
    assert settings.strict_locales is False
    assert settings.tracing_enabled is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_LANG", "zh-cn")
    monkeypatch.setenv("STRICT_LOCALES", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.default_lang == "zh-cn"
    assert settings.strict_locales is True
    assert settings.log_level == "DEBUG"


def test_lang_is_normalized():
    assert Settings(default_lang=" zh-CN ").default_lang == "zh-cn"


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("DEFAULT_LANG=cs\n", encoding="utf-8")

    assert Settings().default_lang == "cs"


def test_log_level_must_be_known(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
        Settings()
