from __future__ import annotations

from todo_api.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True
    assert dev.seed_demo_data is True

    test_profile = Settings(environment="test")
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False
    assert test_profile.seed_demo_data is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.log_level == "INFO"
    assert ci_profile.seed_demo_data is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="testing").environment == "test"
    assert Settings(environment="unknown").environment == "development"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TODO_API_LOG_LEVEL", "error")
    assert Settings(environment="test").log_level == "ERROR"

    monkeypatch.setenv("TODO_API_SEED_DEMO_DATA", "true")
    assert Settings(environment="test").seed_demo_data is True


def test_list_and_prefix_settings_are_coerced(monkeypatch) -> None:
    monkeypatch.setenv("TODO_API_CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
    settings = Settings(environment="test", upload_url_prefix="media/")
    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
    assert settings.upload_url_prefix == "/media"
    assert settings.password_min_length == 6


def test_cors_lists_accept_json_arrays_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TODO_API_CORS_ALLOW_METHODS", '["GET", "POST"]')
    monkeypatch.setenv("TODO_API_CORS_ALLOW_HEADERS", "X-Request-ID")
    settings = Settings(environment="test")
    assert settings.cors_allow_methods == ["GET", "POST"]
    assert settings.cors_allow_headers == ["X-Request-ID"]
    assert settings.cors_allow_origins == ["*"]
