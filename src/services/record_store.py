"""Attendee record store backed by a single local key-value slot."""
import json
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from src.models.attendee import Attendee
from src.utils.config import get_storage_path
from src.utils.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Durable list of attendees. Pure data access, no validation."""

    @abstractmethod
    def load(self) -> List[Attendee]:
        """Return every stored attendee in insertion order; never raises."""

    @abstractmethod
    def save(self, records: List[Attendee]) -> None:
        """Overwrite the stored list with ``records``."""


def parse_records(data: Any) -> List[Attendee]:
    """
    Convert the persisted JSON value into attendees.

    Raises:
        PersistenceError: If the value isn't a list of well-formed attendees
    """
    if not isinstance(data, list):
        raise PersistenceError(f"Expected a list of attendees, got {type(data).__name__}")

    records = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise PersistenceError(f"Attendee #{index} is not an object")
        try:
            records.append(Attendee.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Attendee #{index} is malformed: {e}") from e
    return records


def write_json_atomic(path: Path, data: Any, backup: bool = True) -> None:
    """
    Replace ``path`` with ``data`` serialized as UTF-8 JSON.

    The content goes to a temp file in the same directory first and is then
    renamed over the target, so readers see the old blob or the new one.

    Raises:
        IOError: If the backup or the write fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if backup and path.exists():
        try:
            shutil.copy2(path, path.with_name(path.name + ".backup"))
        except OSError as e:
            raise IOError(f"Failed to create backup of {path}: {e}") from e

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_name, path)
    except Exception as e:
        if os.path.exists(temp_name):
            os.remove(temp_name)
        raise IOError(f"Failed to write file {path}: {e}") from e


class JsonFileRecordStore(RecordStore):
    """
    Store attendees as a JSON array in one file on the local device.

    There is no locking: two processes writing at once may overwrite each
    other's last write.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_storage_path()

    def load(self) -> List[Attendee]:
        if not self.path.exists():
            return []

        try:
            with self.path.open("r", encoding="utf-8") as f:
                return parse_records(json.load(f))
        # UnicodeDecodeError covers blobs that aren't UTF-8 text at all
        except (json.JSONDecodeError, UnicodeDecodeError, PersistenceError) as e:
            logger.error(f"Error parsing attendees data in {self.path}: {e}")
            return []
        except OSError as e:
            logger.error(f"Cannot read attendees data from {self.path}: {e}")
            return []

    def save(self, records: List[Attendee]) -> None:
        write_json_atomic(self.path, [record.to_dict() for record in records], backup=True)


class InMemoryRecordStore(RecordStore):
    """Process-local store used in tests and previews."""

    def __init__(self, records: Optional[List[Attendee]] = None):
        self._records: List[Attendee] = list(records or [])

    def load(self) -> List[Attendee]:
        return list(self._records)

    def save(self, records: List[Attendee]) -> None:
        self._records = list(records)


def get_default_store() -> RecordStore:
    """Store used by the Streamlit app."""
    return JsonFileRecordStore()
