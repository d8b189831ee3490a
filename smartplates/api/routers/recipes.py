"""Recipe API endpoints: stored recipes, fuzzy search and external lookup."""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query, status

from smartplates.api.auth import verify_token
from smartplates.api.schemas.recipes import RecipeListResponse, RecipeSearchResponse
from smartplates.core.config import SpoonacularConfig
from smartplates.core.database import create_recipe, get_all_recipes, get_recipe
from smartplates.core.rate_limiter import RateLimiter
from smartplates.integrations.spoonacular import (
    RateLimitExceeded,
    SpoonacularClient,
    UpstreamAPIError,
)
from smartplates.models.recipe import Recipe, RecipeCreate
from smartplates.search.fuzzy import filter_recipes_by_difficulty, fuzzy_search_recipes

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_spoonacular_client() -> SpoonacularClient | None:
    """Shared upstream client, None when no API key is configured."""
    if not SpoonacularConfig.is_configured():
        return None
    return SpoonacularClient(
        api_key=SpoonacularConfig.API_KEY,
        rate_limiter=RateLimiter(
            max_requests=SpoonacularConfig.RATE_LIMIT_REQUESTS,
            window_seconds=SpoonacularConfig.RATE_LIMIT_WINDOW_SECONDS,
            key_prefix="spoonacular",
        ),
    )


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED)
def create_recipe_endpoint(
    request: RecipeCreate,
    _token: str = Depends(verify_token),
) -> Recipe:
    """Store a new recipe.

    Ingredients may be given as structured objects or as plain lines
    like "200 g flour", which are parsed into amount, unit and name.
    """
    recipe = create_recipe(request)
    _LOGGER.info("Recipe created: id=%s title=%r", recipe.id, recipe.title)
    return recipe


@router.get("", response_model=RecipeListResponse)
def list_recipes(_token: str = Depends(verify_token)) -> RecipeListResponse:
    """List all stored recipes."""
    recipes = get_all_recipes()
    return RecipeListResponse(count=len(recipes), recipes=recipes)


@router.get("/search", response_model=RecipeSearchResponse)
def search_recipes(
    q: str = Query("", description="Search text, typos are tolerated"),
    difficulty: str | None = Query(None, pattern="^(easy|medium|hard)$"),
    _token: str = Depends(verify_token),
) -> RecipeSearchResponse:
    """Typo-tolerant search over stored recipe titles and ingredients.

    An empty query returns every recipe (optionally filtered by difficulty).
    """
    recipes = fuzzy_search_recipes(get_all_recipes(), q)
    recipes = filter_recipes_by_difficulty(recipes, difficulty)
    return RecipeSearchResponse(
        query=q,
        difficulty=difficulty,
        count=len(recipes),
        recipes=recipes,
    )


@router.get("/external", response_model=RecipeListResponse)
def search_external_recipes(
    q: str = Query(..., min_length=1),
    number: int = Query(10, ge=1, le=100),
    client: SpoonacularClient | None = Depends(get_spoonacular_client),
    _token: str = Depends(verify_token),
) -> RecipeListResponse:
    """Search the Spoonacular recipe API.

    Returns 503 if no API key is configured, 429 if the local rate limit
    is reached and 502 if the upstream API fails.
    """
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Spoonacular API key not configured. Set SPOONACULAR_API_KEY.",
        )

    try:
        recipes = client.search_recipes(q, number=number)
    except RateLimitExceeded as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
            headers={"Retry-After": str(int(e.retry_after) + 1)},
        )
    except UpstreamAPIError as e:
        _LOGGER.error("Spoonacular search failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )

    return RecipeListResponse(count=len(recipes), recipes=recipes)


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe_endpoint(
    recipe_id: int,
    _token: str = Depends(verify_token),
) -> Recipe:
    """Get a stored recipe by ID."""
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe with ID {recipe_id} not found",
        )
    return recipe
