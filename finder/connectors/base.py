"""
Base gateway abstract class for recipe data sources.

This module defines the abstract base class that every recipe data gateway must
implement. The list controllers and the detail navigator only talk to this
interface, so a different recipe API (or an in-memory fake in tests) can be
swapped in without touching them.

All gateways must:
- Provide search_by_name, get_by_id, list_categories and list_areas
- Normalize raw records into finder.models.Recipe
- Report absence as an empty list / None, and failures as GatewayError
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from finder.models import Recipe


class GatewayError(RuntimeError):
    """Raised when a gateway call fails (transport, HTTP status or unparseable response)."""


class BaseRecipeGateway(ABC):
    """
    Abstract base class for all recipe gateways.

    All operations are read-only. None of them retry or cache; callers decide
    how to degrade when a GatewayError is raised.

    Attributes:
        source: String identifier for the data source (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def search_by_name(self, text: str) -> List[Recipe]:
        """
        Search recipes whose name matches the given text.

        Args:
            text: Free-text search (e.g., "arrabiata")

        Returns:
            List of Recipe summaries in the order the source returned them.
            Empty list if nothing matches.
        """
        pass

    @abstractmethod
    def get_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """
        Fetch a single recipe in full, including flattened ingredients.

        Returns:
            The Recipe, or None if the source has no record for the id.
        """
        pass

    @abstractmethod
    def list_categories(self) -> List[str]:
        """Return every category name known to the source."""
        pass

    @abstractmethod
    def list_areas(self) -> List[str]:
        """Return every area (cuisine) name known to the source."""
        pass
