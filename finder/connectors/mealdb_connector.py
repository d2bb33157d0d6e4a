"""
TheMealDB gateway.

This connector interfaces with the public TheMealDB JSON API to look up recipes
and normalizes them into finder.models.Recipe.

The connector:
- Calls search.php, lookup.php and list.php with requests
- Treats a null/missing "meals" field as absence (empty list or None)
- Flattens the 20 numbered strIngredientN/strMeasureN fields into ordered Ingredient lines
- Skips (and logs) records that are missing an id or name
- Raises GatewayError for transport failures, non-2xx responses and invalid JSON

Base URL and API key come from MEALDB_BASE_URL / MEALDB_API_KEY (see finder.config).
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from finder.config import MealDBConfig
from finder.models import Ingredient, Recipe

from .base import BaseRecipeGateway, GatewayError

logger = logging.getLogger(__name__)

# TheMealDB records carry exactly this many numbered ingredient/measure slots
MAX_INGREDIENT_FIELDS = 20


def _clean(value: Any) -> str:
    """Trim a raw string field; None and non-strings become ''."""
    if value is None:
        return ""
    return str(value).strip()


def extract_ingredients(raw: Dict[str, Any]) -> List[Ingredient]:
    """
    Flatten strIngredient1..20 / strMeasure1..20 into ordered ingredient lines.

    Positions whose ingredient name is empty after trimming are skipped. The
    measure is trimmed and may be empty.

    Examples:
        >>> extract_ingredients({"strIngredient1": " Eggs ", "strMeasure1": "2",
        ...                      "strIngredient2": "", "strMeasure2": "1 tsp"})
        [Ingredient(name='Eggs', measure='2')]
    """
    ingredients: List[Ingredient] = []
    for i in range(1, MAX_INGREDIENT_FIELDS + 1):
        name = _clean(raw.get(f"strIngredient{i}"))
        if not name:
            continue
        ingredients.append(Ingredient(name=name, measure=_clean(raw.get(f"strMeasure{i}"))))
    return ingredients


def normalize_meal(raw: Dict[str, Any]) -> Recipe:
    """
    Map a raw TheMealDB meal record into a Recipe.

    Raises:
        ValidationError: If the record has no usable id or name.
    """
    return Recipe(
        id=_clean(raw.get("idMeal")),
        name=_clean(raw.get("strMeal")),
        thumbnail_url=_clean(raw.get("strMealThumb")) or None,
        category=_clean(raw.get("strCategory")),
        area=_clean(raw.get("strArea")),
        instructions=raw.get("strInstructions") or "",
        tags=_clean(raw.get("strTags")) or None,
        ingredients=tuple(extract_ingredients(raw)),
    )


class MealDBConnector(BaseRecipeGateway):
    """
    Gateway for TheMealDB.

    Each public method issues exactly one GET request. There is no retry,
    caching or rate limiting.
    """
    source = "mealdb"

    def __init__(
        self,
        api_root: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            api_root: Full API root including key (optional, defaults to MealDBConfig.get_api_root())
            timeout: Request timeout in seconds (optional, defaults to MealDBConfig.get_timeout())
            session: Optional requests.Session to reuse connections
        """
        self.api_root = (api_root or MealDBConfig.get_api_root()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()
        self.session = session

    def _get_json(self, endpoint: str, params: Dict[str, str]) -> Dict[str, Any]:
        url = f"{self.api_root}/{endpoint}"
        getter = self.session.get if self.session is not None else requests.get
        logger.debug("GET %s params=%r", url, params)
        try:
            response = getter(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise GatewayError(f"TheMealDB request timed out: {endpoint}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise GatewayError(f"TheMealDB returned HTTP {status} for {endpoint}") from e
        except requests.exceptions.RequestException as e:
            raise GatewayError(f"TheMealDB request failed for {endpoint}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError(f"TheMealDB returned invalid JSON for {endpoint}") from e
        if not isinstance(data, dict):
            raise GatewayError(f"Unexpected TheMealDB payload for {endpoint}: {type(data).__name__}")
        return data

    @staticmethod
    def _meals(data: Dict[str, Any]) -> List[Dict[str, Any]]:
        # "meals" is null when there are no matches
        meals = data.get("meals")
        if not meals:
            return []
        return [m for m in meals if isinstance(m, dict)]

    def _normalize_all(self, meals: List[Dict[str, Any]]) -> List[Recipe]:
        recipes: List[Recipe] = []
        for raw in meals:
            try:
                recipes.append(normalize_meal(raw))
            except ValidationError as e:
                logger.warning("Skipping malformed meal record %s: %s",
                               str(raw.get("idMeal"))[:40], e.errors()[:1])
        return recipes

    def search_by_name(self, text: str) -> List[Recipe]:
        data = self._get_json("search.php", {"s": text})
        meals = self._meals(data)
        recipes = self._normalize_all(meals)
        logger.info("TheMealDB search %r: raw_count=%d normalized=%d", text, len(meals), len(recipes))
        return recipes

    def get_by_id(self, recipe_id: str) -> Optional[Recipe]:
        data = self._get_json("lookup.php", {"i": recipe_id})
        meals = self._meals(data)
        if not meals:
            logger.warning("TheMealDB has no recipe with id %r", recipe_id)
            return None
        try:
            return normalize_meal(meals[0])
        except ValidationError as e:
            logger.warning("Malformed lookup record for id %r: %s", recipe_id, e.errors()[:1])
            return None

    def list_categories(self) -> List[str]:
        data = self._get_json("list.php", {"c": "list"})
        return [name for name in (_clean(m.get("strCategory")) for m in self._meals(data)) if name]

    def list_areas(self) -> List[str]:
        data = self._get_json("list.php", {"a": "list"})
        return [name for name in (_clean(m.get("strArea")) for m in self._meals(data)) if name]
