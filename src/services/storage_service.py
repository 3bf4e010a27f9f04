"""Low-level JSON file I/O with atomic writes and file locking."""
import json
import os
import shutil
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl


def load_json(file_path: str, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load and parse a UTF-8 JSON file.

    Args:
        file_path: Path to JSON file
        default: Returned (as a copy) when the file doesn't exist; if None,
            a missing file raises

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist and no default given
        json.JSONDecodeError: If JSON is malformed
    """
    if not os.path.exists(file_path):
        if default is not None:
            return json.loads(json.dumps(default))
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Malformed JSON in {file_path}: {e.msg}",
                e.doc,
                e.pos
            )


def save_json(file_path: str, data: Dict[str, Any], backup: bool = True) -> None:
    """
    Save data to a JSON file atomically.

    The data is written to a temp file in the same directory, fsynced and
    renamed over the target, so readers never see a partial file.

    Args:
        file_path: Path to JSON file
        data: Dictionary to save
        backup: If True, copy the current file to ``<file>.backup`` first

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
    except (OSError, TypeError, ValueError) as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}") from e


def _try_lock(fd: int) -> bool:
    try:
        if sys.platform == "win32":
            msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)
        else:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        return True
    except OSError:
        return False


def _unlock(fd: int) -> None:
    if sys.platform == "win32":
        msvcrt.locking(fd, msvcrt.LK_UNLCK, 1)
    else:
        fcntl.flock(fd, fcntl.LOCK_UN)


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Hold an exclusive lock for ``file_path`` via a ``<file>.lock`` sidecar.

    The target itself need not exist yet, so the first insert into a new
    store is serialized like any other.

    Usage:
        with lock_file("data/registrations.json"):
            data = load_json("data/registrations.json", default={})
            ...
            save_json("data/registrations.json", data)

    Raises:
        TimeoutError: If the lock isn't acquired within ``timeout`` seconds
    """
    lock_path = f"{file_path}.lock"
    lock_dir = os.path.dirname(lock_path)
    if lock_dir:
        os.makedirs(lock_dir, exist_ok=True)

    fd = os.open(lock_path, os.O_CREAT | os.O_RDWR)
    try:
        deadline = time.monotonic() + timeout
        while not _try_lock(fd):
            if time.monotonic() > deadline:
                raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
            time.sleep(0.05)

        try:
            yield
        finally:
            _unlock(fd)
    finally:
        os.close(fd)
