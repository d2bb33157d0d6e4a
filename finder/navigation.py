"""
Detail navigator: prev/next stepping through the list a user came from.

When a recipe is opened from a list view, that view hands over a NavigationContext
holding its ordered recipe sequence. The navigator keeps that same sequence for
every previous()/next() step; stepping only changes the index and re-fetches the
target recipe's full detail (list entries are summaries).

Opening a recipe without a context (e.g. a direct link) degrades to a single-item
sequence containing just the fetched recipe.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from finder.connectors.base import BaseRecipeGateway
from finder.models import Recipe

logger = logging.getLogger(__name__)

STATUS_EMPTY = "empty"
STATUS_READY = "ready"
STATUS_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class NavigationContext:
    """
    List context handed from a list view to the detail view.

    Attributes:
        recipes: Ordered recipe sequence captured when the detail view was opened
        origin: View that launched the detail view ("search", "gallery"), or None
    """
    recipes: Tuple[Recipe, ...] = ()
    origin: Optional[str] = None

    def index_of(self, recipe_id: str) -> Optional[int]:
        for i, recipe in enumerate(self.recipes):
            if recipe.id == recipe_id:
                return i
        return None


class DetailNavigator:
    """
    State for the detail view.

    Attributes:
        recipe_id: Id of the recipe currently shown (or requested)
        recipe: Full recipe, or None when not (yet) found
        sequence: The captured ordered recipe sequence
        index: Position of the current recipe within sequence
        status: "empty" before open(), then "ready" or "not_found"
    """

    def __init__(self, gateway: BaseRecipeGateway) -> None:
        self.gateway = gateway
        self.recipe_id: Optional[str] = None
        self.recipe: Optional[Recipe] = None
        self.sequence: Tuple[Recipe, ...] = ()
        self.index = 0
        self.status = STATUS_EMPTY
        self.context: Optional[NavigationContext] = None

    def _fetch(self, recipe_id: str) -> Optional[Recipe]:
        try:
            return self.gateway.get_by_id(recipe_id)
        except Exception as e:
            logger.error("Failed to fetch recipe %r: %s", recipe_id, e, exc_info=True)
            return None

    def open(self, recipe_id: str, context: Optional[NavigationContext] = None) -> Optional[Recipe]:
        """
        Fetch a recipe in full and position the navigator on it.

        Args:
            recipe_id: Recipe to show
            context: List context from the launching view (optional)

        Returns:
            The fetched Recipe, or None when it could not be found.
        """
        self.recipe_id = recipe_id
        self.context = context
        recipe = self._fetch(recipe_id)
        self.recipe = recipe

        if recipe is None:
            logger.warning("Recipe %r not found", recipe_id)
            self.status = STATUS_NOT_FOUND
            self.sequence = context.recipes if context is not None else ()
            self.index = 0
            return None

        if context is not None:
            self.sequence = context.recipes
            index = context.index_of(recipe_id)
            if index is None:
                logger.warning("Recipe %r is not in the list context (%d items); defaulting to index 0",
                               recipe_id, len(context.recipes))
                index = 0
            self.index = index
        else:
            self.sequence = (recipe,)
            self.index = 0

        self.status = STATUS_READY
        return recipe

    @property
    def has_previous(self) -> bool:
        return self.status == STATUS_READY and self.index > 0

    @property
    def has_next(self) -> bool:
        return self.status == STATUS_READY and self.index < len(self.sequence) - 1

    def _step(self, offset: int) -> Optional[Recipe]:
        target = self.sequence[self.index + offset]
        # Carry the same sequence forward; origin is preserved for back()
        context = NavigationContext(
            recipes=self.sequence,
            origin=self.context.origin if self.context is not None else None,
        )
        return self.open(target.id, context)

    def previous(self) -> Optional[Recipe]:
        """Step to the previous recipe in the captured sequence. No-op when disabled."""
        if not self.has_previous:
            return self.recipe
        return self._step(-1)

    def next(self) -> Optional[Recipe]:
        """Step to the next recipe in the captured sequence. No-op when disabled."""
        if not self.has_next:
            return self.recipe
        return self._step(1)

    def back(self) -> Optional[str]:
        """
        Return the view the user came from ("search", "gallery"), or None for a direct link.

        No fetch happens; the list views keep their own state.
        """
        return self.context.origin if self.context is not None else None

    @property
    def position_label(self) -> str:
        if not self.sequence:
            return ""
        return f"{self.index + 1} of {len(self.sequence)}"
