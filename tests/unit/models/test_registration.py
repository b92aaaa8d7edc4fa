"""Tests for Registration model."""
import pytest

from src.models.registration import Registration


@pytest.fixture
def stored_row():
    """A registration as persisted in the JSON store."""
    return {
        "id": "3f2a9c",
        "full_name": "Ana Silva",
        "corporate_email": "ana@acme.com",
        "department": "TI",
        "automation_level": "medio",
        "needs_accessibility": True,
        "accessibility_detail": "Intérprete de Libras",
        "participation_day": "2025-01-16",
        "notes": None,
        "created_at": "2025-01-10T09:30:00-03:00",
    }


class TestRegistrationModel:
    """Tests for Registration dataclass."""

    def test_from_dict_round_trips_through_to_dict(self, stored_row):
        """Stored rows load and serialize back to the same shape."""
        registration = Registration.from_dict(stored_row)
        assert registration.to_dict() == stored_row

    def test_from_dict_tolerates_missing_optional_fields(self, stored_row):
        """Older rows without optional keys still load."""
        for key in ("accessibility_detail", "notes", "needs_accessibility"):
            stored_row.pop(key)

        registration = Registration.from_dict(stored_row)

        assert registration.needs_accessibility is False
        assert registration.accessibility_detail is None
        assert registration.notes is None

    def test_from_dict_requires_core_fields(self, stored_row):
        stored_row.pop("full_name")
        with pytest.raises(KeyError):
            Registration.from_dict(stored_row)

    @pytest.mark.parametrize("flag", ["false", "true", 0, 1, None])
    def test_from_dict_rejects_non_boolean_accessibility_flag(self, stored_row, flag):
        """Stored flags are taken as-is, never coerced with bool()."""
        stored_row["needs_accessibility"] = flag
        with pytest.raises(ValueError):
            Registration.from_dict(stored_row)

    def test_form_values_excludes_store_fields(self, stored_row):
        """Edit form receives only the editable fields."""
        values = Registration.from_dict(stored_row).form_values()

        assert "id" not in values
        assert "created_at" not in values
        assert values["full_name"] == "Ana Silva"
        assert values["participation_day"] == "2025-01-16"
