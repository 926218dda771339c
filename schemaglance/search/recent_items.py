from upath import UPath

from schemaglance.commons.io_utils import read_json, save_json
from schemaglance.commons.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_RECENT_ITEMS = 20


class RecentItemsStore:
    """Most-recently-selected display names, most recent first."""

    def __init__(self, max_items: int = DEFAULT_MAX_RECENT_ITEMS, storage_path: UPath | None = None) -> None:
        self._max_items = max_items
        self._storage_path = storage_path
        self._items: list[str] = []

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def add(self, display_name: str) -> None:
        deduplicated_items = [item for item in self._items if item != display_name]
        self._items = [display_name, *deduplicated_items][: self._max_items]
        self._persist()

    def clear(self) -> None:
        self._items = []

        if self._storage_path is None:
            return
        try:
            self._storage_path.unlink(missing_ok=True)
        except OSError as error:
            logger.error(f"Failed to clear recent items at {self._storage_path}: {error}")

    def load(self) -> None:
        if self._storage_path is None or not self._storage_path.exists():
            return

        try:
            stored_items = read_json(self._storage_path)
        except (OSError, ValueError) as error:
            logger.error(f"Failed to load recent items from {self._storage_path}: {error}")
            return

        if not isinstance(stored_items, list) or not all(isinstance(item, str) for item in stored_items):
            logger.error(f"Recent items file {self._storage_path} does not contain a list of names, ignoring it")
            return

        self._items = stored_items[: self._max_items]

    def _persist(self) -> None:
        if self._storage_path is None:
            return

        try:
            save_json(self._items, self._storage_path)
        except OSError as error:
            logger.error(f"Failed to save recent items to {self._storage_path}: {error}")
