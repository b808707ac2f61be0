from pathlib import Path

import pytest

from voice_expense.core import settings


def test_read_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "# comment line\n"
        "LOG_LEVEL: debug  # trailing comment\n"
        "EXPENSES_FILE: \"my expenses.json\"\n"
        "EMPTY:\n"
        "not a pair\n"
        "BROKEN: \"unterminated\n",
        encoding="utf-8",
    )

    values = settings.read_config_file(str(config))

    assert values == {"LOG_LEVEL": "debug", "EXPENSES_FILE": "my expenses.json"}


def test_read_missing_config_file(tmp_path: Path) -> None:
    assert settings.read_config_file(str(tmp_path / "absent.yaml")) == {}
    assert settings.read_config_file(None) == {}


def test_get_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    assert settings.get_env_int("PORT", 8000, min_value=1) == 9000
    monkeypatch.setenv("PORT", "zero")
    assert settings.get_env_int("PORT", 8000) == 8000
    monkeypatch.setenv("PORT", "0")
    assert settings.get_env_int("PORT", 8000, min_value=1) == 8000


def test_block_high_amounts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLOCK_HIGH_AMOUNTS", raising=False)
    assert settings.block_high_amounts() is True
    monkeypatch.setenv("BLOCK_HIGH_AMOUNTS", "off")
    assert settings.block_high_amounts() is False
    monkeypatch.setenv("BLOCK_HIGH_AMOUNTS", "maybe")
    assert settings.block_high_amounts() is True


def test_expenses_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("EXPENSES_FILE", "voice.json")
    assert settings.get_expenses_path() == str(tmp_path / "voice.json")
