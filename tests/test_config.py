import pytest

from sample_app.config import Settings, SettingsError, get_settings, load_settings

ENV_VARS = ("PORT", "APP_VERSION", "ENVIRONMENT", "APP_ENV", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.version == "v1.0.0"
    assert settings.environment == "development"
    assert settings.is_production is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_VERSION", "v9.9.9")
    monkeypatch.setenv("ENVIRONMENT", "prod-eu")
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.port == 8080
    assert settings.version == "v9.9.9"
    assert settings.environment == "prod-eu"
    assert settings.is_production is True
    assert settings.log_level == "debug"


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_VERSION", "")
    monkeypatch.setenv("PORT", "")

    settings = load_settings()

    assert settings.version == "v1.0.0"
    assert settings.port == 3000


@pytest.mark.parametrize("raw", ["abc", "0", "70000"])
def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("PORT", raw)

    with pytest.raises(SettingsError, match="PORT"):
        load_settings()


def test_settings_are_immutable() -> None:
    settings = Settings()

    with pytest.raises(AttributeError):
        settings.version = "v2"  # type: ignore[misc]


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_start_time_is_utc() -> None:
    assert Settings().start_time.utcoffset().total_seconds() == 0


@pytest.mark.parametrize("raw, expected", [("WARN", "warning"), ("Fatal", "critical"), ("trace", "trace")])
def test_log_level_aliases_are_normalised(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)

    assert load_settings().log_level == expected


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(SettingsError, match="LOG_LEVEL"):
        load_settings()
