"""Store I/O: load, save and locate the JSON state file."""
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from examcoach.models.store import StudyStore


logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
STATE_FILENAME = "examcoach.json"


def default_store_path() -> Path:
    """State file location: $EXAMCOACH_STATE_DIR or storage/state under the project."""
    state_dir = os.getenv("EXAMCOACH_STATE_DIR")
    if state_dir:
        return Path(state_dir) / STATE_FILENAME
    return PROJECT_ROOT / "storage" / "state" / STATE_FILENAME


def load_store(store_path: Path) -> Optional[StudyStore]:
    """Load store from JSON file. Returns None if not found or invalid."""
    if not store_path.exists():
        return None

    try:
        data = json.loads(store_path.read_text(encoding="utf-8"))
        return StudyStore(**data)
    except Exception as e:
        logger.warning(f"Could not read store {store_path}: {e}")
        return None


def open_store(store_path: Path) -> StudyStore:
    """Load the store, or start an empty one when there is nothing usable."""
    store = load_store(store_path)
    if store is None:
        logger.info(f"Starting new store at {store_path}")
        store = StudyStore()
    return store


def save_store(store: StudyStore, store_path: Path) -> None:
    """Save store to JSON file atomically (write temp then replace)."""
    store_path.parent.mkdir(parents=True, exist_ok=True)
    store.saved_at = datetime.now(timezone.utc).isoformat()

    temp_path = store_path.with_suffix(".tmp")
    temp_path.write_text(store.model_dump_json(indent=2), encoding="utf-8")

    temp_path.replace(store_path)
    logger.debug(f"Saved store to {store_path}")
