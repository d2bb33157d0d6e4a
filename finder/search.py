"""
Search & sort controller for the root search view.

The controller owns the free-text query, the sort key and the sort direction.
Search flow: set_query() -> Debouncer (quiet interval) -> gateway.search_by_name()
-> held results -> sort_recipes() -> recipes (visible, sorted copy).

Guarantees:
- A query that trims to empty clears the results at once and never calls the gateway
- At most one search is pending per quiet interval; the pending search always reads
  the latest query when it fires
- Each query change bumps a generation counter; a response for an older generation
  is discarded, so a slow stale response cannot overwrite a newer query's results
- Changing sort key/order re-sorts the held results without re-fetching
- Gateway failures are logged and treated as "no results"; loading is always cleared
"""

import logging
import threading
from typing import List, Optional

from finder.config import FinderConfig
from finder.connectors.base import BaseRecipeGateway
from finder.models import Recipe
from finder.navigation import NavigationContext
from finder.scheduling import Debouncer, Scheduler, ThreadingScheduler
from finder.sorting import (
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    sort_recipes,
    validate_sort_by,
    validate_sort_order,
)

logger = logging.getLogger(__name__)


class SearchController:
    """
    State for the debounced search-as-you-type view.

    Args:
        gateway: Recipe data gateway used for name searches
        scheduler: Timer source for the debounce (default: ThreadingScheduler)
        debounce_seconds: Quiet interval (default: FinderConfig.get_debounce_seconds())
    """
    origin = "search"

    def __init__(
        self,
        gateway: BaseRecipeGateway,
        scheduler: Optional[Scheduler] = None,
        debounce_seconds: Optional[float] = None,
    ) -> None:
        self.gateway = gateway
        if debounce_seconds is None:
            debounce_seconds = FinderConfig.get_debounce_seconds()
        self._debouncer = Debouncer(scheduler or ThreadingScheduler(), debounce_seconds)
        self._lock = threading.RLock()

        self.query = ""
        self.sort_by = DEFAULT_SORT_BY
        self.sort_order = DEFAULT_SORT_ORDER
        self.loading = False
        # Query whose response is currently held (None until a search settles)
        self.settled_query: Optional[str] = None
        self._results: List[Recipe] = []
        self._generation = 0

    # -- query -------------------------------------------------------------

    def set_query(self, query: str) -> None:
        """
        Update the query and (re)start the debounce timer.

        An empty (or whitespace-only) query clears the results immediately.
        """
        with self._lock:
            if query == self.query:
                return
            self.query = query
            self._generation += 1

            if not query.strip():
                self._debouncer.cancel()
                self._results = []
                self.loading = False
                self.settled_query = query
                logger.debug("Empty query: results cleared without a search")
                return

        self._debouncer.schedule(self._run_search)

    @property
    def has_pending_search(self) -> bool:
        return self._debouncer.pending

    def _run_search(self) -> None:
        with self._lock:
            query = self.query
            generation = self._generation
            if not query.strip():
                self._results = []
                self.loading = False
                return
            self.loading = True

        logger.info("Search request: query=%r", query)
        try:
            results = self.gateway.search_by_name(query)
        except Exception as e:
            logger.error("Search for %r failed: %s", query, e, exc_info=True)
            results = []

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale results for %r (generation %d, current %d)",
                             query, generation, self._generation)
                return
            self._results = list(results)
            self.settled_query = query
            self.loading = False
        logger.info("Search %r returned %d recipes", query, len(results))

    # -- sorting -----------------------------------------------------------

    def set_sort_by(self, sort_by: str) -> None:
        """Change the sort field ("name", "category" or "area"). Does not re-fetch."""
        with self._lock:
            self.sort_by = validate_sort_by(sort_by)

    def set_sort_order(self, sort_order: str) -> None:
        """Change the sort direction ("asc" or "desc"). Does not re-fetch."""
        with self._lock:
            self.sort_order = validate_sort_order(sort_order)

    # -- derived views -----------------------------------------------------

    @property
    def results(self) -> List[Recipe]:
        """Results in the order the gateway returned them (a copy)."""
        with self._lock:
            return list(self._results)

    @property
    def recipes(self) -> List[Recipe]:
        """The visible, freshly sorted result sequence."""
        with self._lock:
            return sort_recipes(self._results, self.sort_by, self.sort_order)

    @property
    def no_results(self) -> bool:
        """True when a non-empty query has settled with nothing to show."""
        with self._lock:
            return (
                bool(self.query.strip())
                and not self.loading
                and not self.has_pending_search
                and self.settled_query == self.query
                and not self._results
            )

    def navigation_context(self) -> NavigationContext:
        """Capture the visible sequence for the detail navigator."""
        return NavigationContext(recipes=tuple(self.recipes), origin=self.origin)
