"""Tests for configuration and .env loading."""
import os
import pytest
from datetime import date

from src.utils import env
from src.utils.constants import (
    AUTOMATION_LEVEL_LABELS,
    DEPARTMENTS,
    EVENT_DATE_END,
    EVENT_DATE_START,
    get_event_date_range,
    get_registrations_file,
)


class TestFixedEnumerations:
    """Fixed configuration values."""

    def test_six_departments(self):
        assert len(DEPARTMENTS) == 6
        assert "TI" in DEPARTMENTS

    def test_automation_level_labels(self):
        assert AUTOMATION_LEVEL_LABELS == {"baixo": "Baixo", "medio": "Médio", "alto": "Alto"}

    def test_default_event_range(self):
        assert (EVENT_DATE_START, EVENT_DATE_END) == (date(2025, 1, 15), date(2025, 1, 20))


class TestGetEventDateRange:
    """Tests for get_event_date_range."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("EVENT_DATE_START", raising=False)
        monkeypatch.delenv("EVENT_DATE_END", raising=False)

    def test_defaults(self):
        assert get_event_date_range() == (date(2025, 1, 15), date(2025, 1, 20))

    def test_override(self, monkeypatch):
        monkeypatch.setenv("EVENT_DATE_START", "2026-03-02")
        monkeypatch.setenv("EVENT_DATE_END", "2026-03-06")
        assert get_event_date_range() == (date(2026, 3, 2), date(2026, 3, 6))

    def test_partial_override(self, monkeypatch):
        monkeypatch.setenv("EVENT_DATE_END", "2025-01-31")
        assert get_event_date_range() == (date(2025, 1, 15), date(2025, 1, 31))

    def test_malformed_override_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("EVENT_DATE_START", "15/01/2025")
        assert get_event_date_range() == (date(2025, 1, 15), date(2025, 1, 20))
        assert "Invalid event date override" in caplog.text

    def test_inverted_override_falls_back(self, monkeypatch):
        monkeypatch.setenv("EVENT_DATE_START", "2025-02-01")
        monkeypatch.setenv("EVENT_DATE_END", "2025-01-01")
        assert get_event_date_range() == (date(2025, 1, 15), date(2025, 1, 20))


class TestRegistrationsFile:
    """Tests for get_registrations_file."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("REGISTRATIONS_FILE", raising=False)
        assert get_registrations_file() == "data/registrations.json"

    def test_override(self, monkeypatch):
        monkeypatch.setenv("REGISTRATIONS_FILE", "/tmp/other.json")
        assert get_registrations_file() == "/tmp/other.json"


class TestLoadEnv:
    """Tests for load_env."""

    @pytest.fixture(autouse=True)
    def reset_loader(self):
        env._reset_env_loaded()
        yield
        env._reset_env_loaded()

    def test_reads_values_without_overriding(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\n"
            "HR_TEST_NEW='from-file'\n"
            "HR_TEST_EXISTING=from-file\n"
            "not a pair\n",
            encoding="utf-8",
        )
        monkeypatch.delenv("HR_TEST_NEW", raising=False)
        monkeypatch.setenv("HR_TEST_EXISTING", "from-env")

        env.load_env(str(env_file))

        assert os.environ["HR_TEST_NEW"] == "from-file"
        assert os.environ["HR_TEST_EXISTING"] == "from-env"
        monkeypatch.delenv("HR_TEST_NEW")

    def test_missing_file_is_ignored(self, tmp_path):
        env.load_env(str(tmp_path / "absent.env"))

    def test_loads_only_once(self, tmp_path, monkeypatch):
        first = tmp_path / "first.env"
        first.write_text("HR_TEST_ONCE=first\n", encoding="utf-8")
        second = tmp_path / "second.env"
        second.write_text("HR_TEST_ONCE=second\n", encoding="utf-8")
        monkeypatch.delenv("HR_TEST_ONCE", raising=False)

        env.load_env(str(first))
        monkeypatch.delenv("HR_TEST_ONCE")
        env.load_env(str(second))

        assert "HR_TEST_ONCE" not in os.environ

    def test_blank_keys_and_quotes(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text('=orphan\nHR_TEST_QUOTED="a=b"\n', encoding="utf-8")
        monkeypatch.delenv("HR_TEST_QUOTED", raising=False)

        env.load_env(str(env_file))

        assert os.environ["HR_TEST_QUOTED"] == "a=b"
        assert "" not in os.environ
        monkeypatch.delenv("HR_TEST_QUOTED")
