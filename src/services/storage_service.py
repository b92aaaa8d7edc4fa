"""Low-level JSON file I/O with atomic writes and a sidecar lock file."""
import json
import os
import shutil
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

if sys.platform != "win32":
    import fcntl


def load_json(
    file_path: str,
    default: Optional[Dict[str, Any]] = None,
    retry_count: int = 3,
    retry_delay: float = 0.1,
) -> Dict[str, Any]:
    """
    Load and parse a UTF-8 JSON file.

    Args:
        file_path: Path to JSON file
        default: Returned (as a copy) when the file doesn't exist; if None,
            a missing file raises FileNotFoundError
        retry_count: Attempts for transient permission errors
        retry_delay: Seconds between attempts

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist and no default given
        json.JSONDecodeError: If JSON is malformed
        PermissionError: If file not readable after retries
    """
    if not os.path.exists(file_path):
        if default is not None:
            return json.loads(json.dumps(default))
        raise FileNotFoundError(f"File not found: {file_path}")

    for attempt in range(retry_count):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except PermissionError:
            if attempt < retry_count - 1:
                time.sleep(retry_delay)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Malformed JSON in {file_path}: {e.msg}", e.doc, e.pos
            ) from e

    raise PermissionError(f"Cannot read file after {retry_count} attempts: {file_path}")


def save_json(file_path: str, data: Dict[str, Any], backup: bool = True) -> None:
    """
    Write data to a JSON file atomically (temp file + rename).

    Args:
        file_path: Destination path; parent directories are created
        data: Dictionary to save
        backup: Copy the previous version to <file_path>.backup first

    Raises:
        IOError: If the backup or the write fails
    """
    dir_path = os.path.dirname(file_path) or "."
    os.makedirs(dir_path, exist_ok=True)

    if backup and os.path.exists(file_path):
        try:
            shutil.copy2(file_path, f"{file_path}.backup")
        except OSError as e:
            raise IOError(f"Failed to create backup: {e}") from e

    temp_fd, temp_path = tempfile.mkstemp(dir=dir_path, prefix=".tmp_", suffix=".json")
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, file_path)
    except OSError as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Hold an exclusive lock on <file_path>.lock for the duration of the block.

    The data file itself need not exist yet, so the first write to an
    empty store can be locked like any other.

    Usage:
        with lock_file("data/registrations.json"):
            data = load_json("data/registrations.json", default={...})
            ...
            save_json("data/registrations.json", data)

    Raises:
        TimeoutError: If the lock isn't acquired within timeout seconds
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path) or "."
    os.makedirs(dir_path, exist_ok=True)
    deadline = time.time() + timeout

    if sys.platform == "win32":
        while True:
            try:
                lock_fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_RDWR)
                break
            except FileExistsError:
                if time.time() > deadline:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)
        try:
            yield
        finally:
            os.close(lock_fd)
            try:
                os.remove(lock_path)
            except OSError:
                pass
    else:
        with open(lock_path, "a+") as handle:
            while True:
                try:
                    fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                    break
                except OSError:
                    if time.time() > deadline:
                        raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                    time.sleep(0.05)
            try:
                yield
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
