"""
Filter controller for the gallery view.

The gallery eagerly loads a base recipe collection plus the full category and area
lists, then narrows the base collection by two independent multi-select axes.

Load flow: load() -> [search_by_name(seed), list_categories(), list_areas()] in parallel
-> per-source status ("ok" / "error") -> recompute().

A failing source is logged and left empty; the other sources still load. The visible
sequence is always recomputed with filter_recipes() after any state change and
preserves the base collection's order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, FrozenSet, List, Optional, TypeVar

from finder.config import FinderConfig
from finder.connectors.base import BaseRecipeGateway
from finder.filtering import filter_recipes, toggle
from finder.models import Recipe
from finder.navigation import NavigationContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_OK = "ok"
STATUS_ERROR = "error"


class FilterController:
    """
    State for the gallery/filter view.

    Args:
        gateway: Recipe data gateway
        seed_query: Name search used to load the base collection
                    (default: FinderConfig.get_gallery_seed_query())
    """
    origin = "gallery"

    def __init__(self, gateway: BaseRecipeGateway, seed_query: Optional[str] = None) -> None:
        self.gateway = gateway
        self.seed_query = seed_query or FinderConfig.get_gallery_seed_query()

        self.base_recipes: List[Recipe] = []
        self.categories: List[str] = []
        self.areas: List[str] = []
        self.selected_categories: FrozenSet[str] = frozenset()
        self.selected_areas: FrozenSet[str] = frozenset()
        self.filtered: List[Recipe] = []
        self.load_status: Dict[str, str] = {}
        self.loaded = False

    def _load_one(self, name: str, fetch: Callable[[], List[T]]) -> List[T]:
        try:
            items = list(fetch())
        except Exception as e:
            logger.error("Gallery failed to load %s: %s", name, e, exc_info=True)
            self.load_status[name] = STATUS_ERROR
            return []
        self.load_status[name] = STATUS_OK
        logger.info("Gallery loaded %d %s", len(items), name)
        return items

    def load(self) -> None:
        """
        Load the base collection, categories and areas concurrently.

        Never raises; check load_status for per-source results.
        """
        logger.info("Gallery load: seed_query=%r", self.seed_query)
        self.load_status = {}
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="gallery-load") as pool:
            recipes_future = pool.submit(
                self._load_one, "recipes", lambda: self.gateway.search_by_name(self.seed_query)
            )
            categories_future = pool.submit(self._load_one, "categories", self.gateway.list_categories)
            areas_future = pool.submit(self._load_one, "areas", self.gateway.list_areas)

            self.base_recipes = recipes_future.result()
            self.categories = categories_future.result()
            self.areas = areas_future.result()

        self.loaded = True
        self.recompute()

    def recompute(self) -> List[Recipe]:
        """Rebuild the visible sequence from base collection and both selections."""
        self.filtered = filter_recipes(self.base_recipes, self.selected_categories, self.selected_areas)
        logger.debug("Gallery filter: categories=%s areas=%s -> %d/%d recipes",
                     sorted(self.selected_categories), sorted(self.selected_areas),
                     len(self.filtered), len(self.base_recipes))
        return self.filtered

    def toggle_category(self, category: str) -> None:
        self.selected_categories = toggle(self.selected_categories, category)
        self.recompute()

    def toggle_area(self, area: str) -> None:
        self.selected_areas = toggle(self.selected_areas, area)
        self.recompute()

    def clear_filters(self) -> None:
        """Empty both selections, restoring the full base collection."""
        self.selected_categories = frozenset()
        self.selected_areas = frozenset()
        self.recompute()

    @property
    def has_filters(self) -> bool:
        return bool(self.selected_categories or self.selected_areas)

    def navigation_context(self) -> NavigationContext:
        """Capture the filtered sequence for the detail navigator."""
        return NavigationContext(recipes=tuple(self.filtered), origin=self.origin)
