import asyncio

from schemaglance.commons.logging_utils import get_logger
from schemaglance.schema.domain.model import Column, Table
from schemaglance.search.domain.model import SearchResult
from schemaglance.search.ranking import SchemaSearchEngine
from schemaglance.search.recent_items import RecentItemsStore

logger = get_logger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.05


class SearchSession:
    """
    Search state of the application shell: current query, ranked results and keyboard selection.

    `set_query` debounces ranking on the running event loop. Each call cancels the pending timer and bumps the
    query token; a timer firing for an outdated token does not touch the results.
    """

    def __init__(
        self,
        engine: SchemaSearchEngine,
        recent_items_store: RecentItemsStore,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._engine = engine
        self._recent_items_store = recent_items_store
        self._debounce_seconds = debounce_seconds

        self._tables: list[Table] = []
        self._columns: list[Column] = []

        self._pending_search: asyncio.TimerHandle | None = None
        self._query_token = 0

        self.query = ""
        self.results: list[SearchResult] = []
        self.selected_index = 0
        self.is_searching = False

    def set_schema(self, tables: list[Table], columns: list[Column]) -> None:
        self._tables = tables
        self._columns = columns
        self._engine.invalidate_index()

    def _cancel_pending_search(self) -> None:
        if self._pending_search is not None:
            self._pending_search.cancel()
            self._pending_search = None

    def _reset_results(self) -> None:
        self.results = []
        self.selected_index = 0
        self.is_searching = False

    def set_query(self, query: str) -> None:
        """Must be called from within a running event loop."""
        self.query = query
        self._query_token += 1
        self._cancel_pending_search()

        if not query.strip():
            self._reset_results()
            return

        self.is_searching = True
        self._pending_search = asyncio.get_running_loop().call_later(
            self._debounce_seconds, self._run_scheduled_search, self._query_token, query
        )

    def _run_scheduled_search(self, query_token: int, query: str) -> None:
        self._pending_search = None

        if query_token != self._query_token:
            logger.debug(f"Dropping outdated search for '{query}'")
            return

        self.search(query)

    def search(self, query: str) -> None:
        if not query.strip():
            self._reset_results()
            return

        self.results = self._engine.search(
            query, self._tables, self._columns, recent_items=self._recent_items_store.items
        )
        self.selected_index = 0
        self.is_searching = False

    def select_next(self) -> None:
        if len(self.results) == 0:
            return
        self.selected_index = (self.selected_index + 1) % len(self.results)

    def select_prev(self) -> None:
        if len(self.results) == 0:
            return
        self.selected_index = len(self.results) - 1 if self.selected_index == 0 else self.selected_index - 1

    def select_index(self, index: int) -> None:
        if 0 <= index < len(self.results):
            self.selected_index = index

    @property
    def selected_result(self) -> SearchResult | None:
        if 0 <= self.selected_index < len(self.results):
            return self.results[self.selected_index]
        return None

    def confirm_selection(self) -> SearchResult | None:
        selected_result = self.selected_result
        if selected_result is not None:
            self._recent_items_store.add(selected_result.display_name)
        return selected_result

    def clear(self) -> None:
        self._cancel_pending_search()
        self._query_token += 1
        self.query = ""
        self._reset_results()
