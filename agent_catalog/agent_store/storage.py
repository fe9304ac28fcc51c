"""File-based agent store. One JSON array in one file, rewritten in full on every change."""

import json
import threading
from pathlib import Path
from typing import Any

from ..config import get_agents_file
from ..errors import (
    DataCorruptError,
    InvalidAgentError,
    InvalidStoreError,
    StoreIOError,
    StoreMissingError,
)
from ..logger import get_logger, log_info, log_warning

logger = get_logger("agent_catalog.store")

# Serializes every read and read-modify-write within this process.
# Other processes editing the file directly are not coordinated.
_store_lock = threading.RLock()


def get_store_path() -> Path:
    """Path of the backing JSON document (AGENTS_FILE or repo default)."""
    return get_agents_file()


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


def read_store() -> list[Any]:
    """
    Read and parse the backing file, raising on every abnormal condition.

    Returns:
        The stored array, in stored order

    Raises:
        StoreMissingError: file does not exist
        DataCorruptError: content is not parseable JSON
        InvalidStoreError: content is JSON but not an array
        StoreIOError: any other filesystem failure
    """
    path = get_store_path()
    with _store_lock:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise StoreMissingError(path) from e
        except UnicodeDecodeError as e:
            raise DataCorruptError(path, str(e)) from e
        except OSError as e:
            raise StoreIOError(path, "read") from e

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise DataCorruptError(path, str(e)) from e

    if not isinstance(data, list):
        raise InvalidStoreError(path, type(data).__name__)
    return data


def load_all() -> list[Any]:
    """
    Load every stored record for read paths.

    A missing file or a non-array document both read as an empty store.
    Invalid JSON and other I/O failures propagate.
    """
    try:
        return read_store()
    except (StoreMissingError, InvalidStoreError):
        return []


def load_for_append() -> list[Any]:
    """
    Load the store as the starting point of a submission.

    Missing file -> empty list (the write creates it).
    Non-array document -> warning, then empty list (the write replaces it).
    Invalid JSON -> DataCorruptError; corrupt data is never appended to.
    """
    try:
        return read_store()
    except StoreMissingError as e:
        log_info(logger, "Agent store not found, creating a new one", path=str(e.path))
        return []
    except InvalidStoreError as e:
        log_warning(
            logger,
            "Agent store does not contain a JSON array, initializing with an empty array",
            path=str(e.path),
            found_type=e.found_type,
        )
        return []


def save_all(records: list[Any]) -> None:
    """
    Overwrite the backing file with the full record list.

    Serialized as pretty-printed JSON (2-space indent) with each record's
    keys in their authored order.

    Raises:
        InvalidAgentError: a record holds NaN or Infinity; nothing is written
        StoreIOError: the file could not be written
    """
    path = get_store_path()
    try:
        content = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise InvalidAgentError(str(e)) from e
    with _store_lock:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StoreIOError(path, "write") from e


def append_agent(record: dict[str, Any]) -> dict[str, Any]:
    """
    Append one record to the end of the store (read-modify-write).

    The whole cycle holds the store lock, so concurrent submissions in this
    process are applied one after another instead of overwriting each other.

    Args:
        record: Prepared agent record

    Returns:
        The stored record
    """
    with _store_lock:
        agents = load_for_append()
        agents.append(record)
        save_all(agents)
    log_info(logger, "Agent submitted", name=record.get("name"), total=len(agents))
    return record
