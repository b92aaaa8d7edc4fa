"""Environment loading from an optional .env file."""
import os
from pathlib import Path


_ENV_LOADED = False


def _parse_line(raw_line: str):
    """Return (key, value) for a KEY=VALUE line, or None for anything else."""
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    key, value = line.split("=", 1)
    key = key.strip()
    if not key:
        return None
    return key, value.strip().strip('"\'')


def load_env(env_path: str = ".env") -> None:
    """
    Load KEY=VALUE pairs from a .env file into os.environ once per process.

    Variables already present in the environment are never overwritten.
    Blank lines, comments and lines without "=" are ignored.
    """
    global _ENV_LOADED

    if _ENV_LOADED:
        return
    _ENV_LOADED = True

    path = Path(env_path)
    if not path.exists():
        return

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        pair = _parse_line(raw_line)
        if pair:
            os.environ.setdefault(*pair)


def _reset_env_loaded() -> None:
    """Allow tests to re-read a .env file."""
    global _ENV_LOADED
    _ENV_LOADED = False
