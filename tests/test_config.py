"""Tests for settings helpers."""

from pantry_tracker.config import Settings, parse_timezone


def test_parse_timezone_known_name() -> None:
    assert parse_timezone("Asia/Shanghai").key == "Asia/Shanghai"


def test_parse_timezone_falls_back_to_utc() -> None:
    assert parse_timezone("Mars/Olympus").key == "UTC"
    assert parse_timezone("").key == "UTC"
    assert parse_timezone(None).key == "UTC"


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("EXPIRING_SOON_DAYS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.expiring_soon_days == 3
    assert settings.storage_table == "kv_store"
    assert settings.openai_store is False


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("EXPIRING_SOON_DAYS", "5")
    monkeypatch.setenv("TIMEZONE", "Asia/Shanghai")

    settings = Settings(_env_file=None)

    assert settings.expiring_soon_days == 5
    assert settings.timezone == "Asia/Shanghai"
