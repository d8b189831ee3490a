"""Spoonacular recipe API client.

Searches are cached per (query, number) in an injected TTLCache and every
outgoing request is counted against an injected RateLimiter. Responses are
converted into the local Recipe model.

Example usage:
    >>> from smartplates.integrations.spoonacular import SpoonacularClient
    >>> client = SpoonacularClient(api_key="...")
    >>> for recipe in client.search_recipes("pasta", number=5):
    ...     print(recipe.title)
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from smartplates.core.cache import TTLCache
from smartplates.core.config import SpoonacularConfig
from smartplates.core.rate_limiter import RateLimiter
from smartplates.models.recipe import Recipe, RecipeIngredient

_LOGGER = logging.getLogger(__name__)

SOURCE_NAME = "spoonacular"


class SpoonacularError(Exception):
    """Base class for Spoonacular client errors."""


class RateLimitExceeded(SpoonacularError):
    """The local rate limiter refused the request."""

    def __init__(self, retry_after: float) -> None:
        super().__init__(f"Rate limit reached, retry in {retry_after:.0f}s")
        self.retry_after = retry_after


class UpstreamAPIError(SpoonacularError):
    """The API answered with an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _convert_ingredient(data: dict) -> RecipeIngredient | None:
    name = (data.get("name") or data.get("originalName") or data.get("original") or "").strip()
    if not name:
        return None
    return RecipeIngredient(
        name=name,
        amount=float(data.get("amount") or 1.0),
        unit=data.get("unit") or "",
        original_name=data.get("originalName") or data.get("original"),
    )


def recipe_from_api(data: dict) -> Recipe:
    """Convert a Spoonacular recipe payload into a Recipe."""
    raw_ingredients = data.get("extendedIngredients")
    if raw_ingredients is None:
        # complexSearch with fillIngredients splits them up
        raw_ingredients = (data.get("usedIngredients") or []) + (data.get("missedIngredients") or [])

    external_id = data.get("id")
    return Recipe(
        title=data.get("title", ""),
        source=SOURCE_NAME,
        source_url=data.get("sourceUrl"),
        external_id=str(external_id) if external_id is not None else None,
        servings=data.get("servings"),
        ready_in_minutes=data.get("readyInMinutes"),
        ingredients=[
            ingredient
            for ingredient in map(_convert_ingredient, raw_ingredients)
            if ingredient is not None
        ],
        instructions=data.get("instructions"),
        image_url=data.get("image"),
    )


class SpoonacularClient:
    """Thin client for the endpoints SmartPlates uses."""

    def __init__(
        self,
        api_key: str,
        cache: TTLCache | None = None,
        rate_limiter: RateLimiter | None = None,
        session: requests.Session | None = None,
        base_url: str = SpoonacularConfig.BASE_URL,
        timeout: int = SpoonacularConfig.TIMEOUT,
    ) -> None:
        if not api_key:
            raise ValueError(
                "Spoonacular API key not configured. "
                "Please set SPOONACULAR_API_KEY in .env file."
            )

        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self.cache = cache if cache is not None else TTLCache(
            max_entries=SpoonacularConfig.CACHE_MAX_ENTRIES,
            default_ttl=SpoonacularConfig.CACHE_TTL_SECONDS,
        )
        self.rate_limiter = rate_limiter

        if session is None:
            session = requests.Session()
            retries = Retry(
                total=3,
                backoff_factor=1.0,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            session.mount("https://", HTTPAdapter(max_retries=retries))
        self._session = session

    def _get(self, path: str, params: dict) -> requests.Response:
        if self.rate_limiter is not None and not self.rate_limiter.can_make_request(SOURCE_NAME):
            raise RateLimitExceeded(self.rate_limiter.get_reset_time(SOURCE_NAME))

        try:
            return self._session.get(
                f"{self._base_url}{path}",
                params={**params, "apiKey": self._api_key},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise UpstreamAPIError(f"Spoonacular request failed: {e}") from e

    @staticmethod
    def _cache_key(query: str, number: int) -> str:
        return f"search:{' '.join(query.lower().split())}:{number}"

    def search_recipes(self, query: str, number: int = 10) -> list[Recipe]:
        """Search recipes by free text.

        Args:
            query: Search text
            number: Maximum results (1-100)

        Returns:
            Matching recipes with ingredients

        Raises:
            RateLimitExceeded: If the local rate limit is reached
            UpstreamAPIError: On HTTP or network errors
        """
        number = max(1, min(number, 100))
        key = self._cache_key(query, number)

        cached = self.cache.get(key)
        if cached is not None:
            _LOGGER.debug("Spoonacular cache hit: %s", key)
            return list(cached)

        response = self._get(
            "/recipes/complexSearch",
            {
                "query": query,
                "number": number,
                "addRecipeInformation": "true",
                "fillIngredients": "true",
            },
        )
        if not response.ok:
            raise UpstreamAPIError(
                f"Spoonacular search failed with status {response.status_code}",
                status_code=response.status_code,
            )

        results = [recipe_from_api(item) for item in response.json().get("results", [])]
        self.cache.set(key, tuple(results))
        _LOGGER.info("Spoonacular search %r: %s results", query, len(results))
        return results

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Fetch full recipe information, None if the recipe does not exist."""
        key = f"recipe:{recipe_id}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        response = self._get(f"/recipes/{recipe_id}/information", {"includeNutrition": "false"})
        if response.status_code == 404:
            return None
        if not response.ok:
            raise UpstreamAPIError(
                f"Spoonacular recipe {recipe_id} failed with status {response.status_code}",
                status_code=response.status_code,
            )

        recipe = recipe_from_api(response.json())
        self.cache.set(key, recipe)
        return recipe
