import logging
from typing import Any

import httpx

from domain.errors import RecipeNotFound, RecipeSourceError
from domain.models import Range, Recipe, RecipeFilter
from domain.repository import RecipesRepository


logger = logging.getLogger(__name__)


BASE_URL = "https://api.edamam.com/api/recipes/v2"
TIMEOUT = 20

NUTRIENT_CODES = {
    "carbs": "CHOCDF",
    "protein": "PROCNT",
    "fat": "FAT",
}


def range_param(bounds: Range) -> str | None:
    match bounds.minimum, bounds.maximum:
        case None, None:
            return None
        case low, None:
            return f"{low}+"
        case None, high:
            return f"{high}"
        case low, high:
            return f"{low}-{high}"


def search_params(recipe_filter: RecipeFilter) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = [("type", "public")]
    if recipe_filter.name:
        params.append(("q", recipe_filter.name))
    calories = range_param(recipe_filter.calories)
    if calories is not None:
        params.append(("calories", calories))
    for field, code in NUTRIENT_CODES.items():
        value = range_param(getattr(recipe_filter, field))
        if value is not None:
            params.append((f"nutrients[{code}]", value))
    return params


def recipe_id_from_uri(uri: str) -> str:
    _, _, recipe_id = uri.partition("#recipe_")
    return recipe_id or uri


def recipe_from_hit(data: dict[str, Any]) -> Recipe:
    """Edamam reports totals for the whole dish, we keep values per serving."""
    servings = max(int(data.get("yield") or 1), 1)
    nutrients = data.get("totalNutrients") or {}

    def per_serving(code: str) -> float:
        quantity = (nutrients.get(code) or {}).get("quantity") or 0.0
        return round(float(quantity) / servings, 1)

    return Recipe(
        id=recipe_id_from_uri(data["uri"]),
        name=data["label"],
        calories=round(float(data.get("calories") or 0.0) / servings, 1),
        carbs=per_serving("CHOCDF"),
        protein=per_serving("PROCNT"),
        fat=per_serving("FAT"),
        servings=servings,
        url=data.get("url") or "",
        image=data.get("image") or "",
        ingredients=list(data.get("ingredientLines") or []),
    )


class EdamamRecipeSource:
    """Searches the Edamam recipe API and caches hits in the local repository."""

    def __init__(
        self,
        *,
        cache: RecipesRepository,
        app_id: str,
        app_key: str,
        client: httpx.AsyncClient | None = None,
        limit: int = 20,
    ) -> None:
        self.cache = cache
        self.app_id = app_id
        self.app_key = app_key
        self.client = httpx.AsyncClient(timeout=TIMEOUT) if client is None else client
        self.limit = limit

    @property
    def credentials(self) -> list[tuple[str, str]]:
        return [("app_id", self.app_id), ("app_key", self.app_key)]

    async def request(self, url: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        try:
            resp = await self.client.get(url, params=params + self.credentials)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise RecipeNotFound(url) from e
            raise RecipeSourceError(
                f"Edamam answered {e.response.status_code} for {url}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RecipeSourceError(f"Could not query Edamam: {e!r}") from e

    async def search(self, recipe_filter: RecipeFilter) -> list[Recipe]:
        data = await self.request(BASE_URL, search_params(recipe_filter))
        try:
            recipes = [recipe_from_hit(hit["recipe"]) for hit in data.get("hits", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise RecipeSourceError(f"Unexpected Edamam response: {e!r}") from e
        recipes = recipes[: self.limit]
        for recipe in recipes:
            await self.cache.upsert(recipe)
        logger.info("Edamam returned %d recipes", len(recipes))
        return recipes

    async def get(self, recipe_id: str) -> Recipe:
        try:
            return await self.cache.get(recipe_id)
        except RecipeNotFound:
            logger.info("Recipe %s not cached, asking Edamam", recipe_id)
        data = await self.request(f"{BASE_URL}/{recipe_id}", [("type", "public")])
        try:
            recipe = recipe_from_hit(data["recipe"])
        except (KeyError, TypeError, ValueError) as e:
            raise RecipeSourceError(f"Unexpected Edamam response: {e!r}") from e
        await self.cache.upsert(recipe)
        return recipe

    async def aclose(self) -> None:
        await self.client.aclose()
