"""Unit tests for storage_service."""
import json
import os
import pytest
from unittest.mock import patch

from src.services.storage_service import load_json, lock_file, save_json


@pytest.fixture
def json_file(tmp_path):
    """A JSON file with Portuguese text."""
    path = tmp_path / "registrations.json"
    path.write_text(json.dumps({"registrations": [{"full_name": "João"}]}, ensure_ascii=False), encoding="utf-8")
    return str(path)


class TestLoadJson:
    """Test load_json function."""

    def test_load_valid_json(self, json_file):
        data = load_json(json_file)
        assert data["registrations"][0]["full_name"] == "João"

    def test_missing_file_raises_without_default(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_json(str(tmp_path / "missing.json"))

    def test_missing_file_returns_copy_of_default(self, tmp_path):
        default = {"registrations": []}

        data = load_json(str(tmp_path / "missing.json"), default=default)
        data["registrations"].append("x")

        assert default == {"registrations": []}

    def test_malformed_json_raises_error(self, tmp_path):
        path = tmp_path / "malformed.json"
        path.write_text("{invalid json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError, match="Malformed JSON"):
            load_json(str(path))

    def test_permission_error_after_retries(self, json_file):
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError, match="after 2 attempts"):
                load_json(json_file, retry_count=2, retry_delay=0)


class TestSaveJson:
    """Test save_json function."""

    def test_save_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "data.json"

        save_json(str(path), {"registrations": []})

        assert json.loads(path.read_text(encoding="utf-8")) == {"registrations": []}

    def test_save_keeps_unicode_readable(self, tmp_path):
        path = tmp_path / "data.json"

        save_json(str(path), {"department": "Operações"})

        assert "Operações" in path.read_text(encoding="utf-8")

    def test_save_creates_backup(self, json_file):
        save_json(json_file, {"registrations": []}, backup=True)

        with open(f"{json_file}.backup", encoding="utf-8") as f:
            assert json.load(f)["registrations"][0]["full_name"] == "João"

    def test_save_without_backup(self, json_file):
        save_json(json_file, {"registrations": []}, backup=False)
        assert not os.path.exists(f"{json_file}.backup")

    def test_no_temp_files_left_behind(self, tmp_path):
        path = tmp_path / "data.json"
        save_json(str(path), {"a": 1})
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_write_failure_raises_ioerror_and_cleans_up(self, tmp_path):
        path = tmp_path / "data.json"

        with patch("src.services.storage_service.os.replace", side_effect=OSError("rename failed")):
            with pytest.raises(IOError, match="Failed to write file"):
                save_json(str(path), {"a": 1})

        assert list(tmp_path.iterdir()) == []


class TestLockFile:
    """Test lock_file context manager."""

    def test_lock_works_before_data_file_exists(self, tmp_path):
        path = tmp_path / "data" / "registrations.json"

        with lock_file(str(path)):
            save_json(str(path), {"registrations": []})

        assert path.exists()

    def test_lock_is_reentrant_across_sequential_blocks(self, json_file):
        with lock_file(json_file):
            pass
        with lock_file(json_file):
            data = load_json(json_file)
        assert "registrations" in data

    @pytest.mark.skipif(os.name == "nt", reason="flock semantics")
    def test_lock_times_out_when_held(self, json_file):
        """A second, independent lock on the same path times out."""
        import fcntl

        with open(f"{json_file}.lock", "a+") as holder:
            fcntl.flock(holder.fileno(), fcntl.LOCK_EX)
            with pytest.raises(TimeoutError):
                with lock_file(json_file, timeout=0.1):
                    pass
            fcntl.flock(holder.fileno(), fcntl.LOCK_UN)
