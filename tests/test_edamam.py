from typing import Any

import httpx
import pytest

from domain.edamam import (
    EdamamRecipeSource,
    range_param,
    recipe_from_hit,
    recipe_id_from_uri,
    search_params,
)
from domain.errors import RecipeNotFound, RecipeSourceError
from domain.models import Range, RecipeFilter
from domain.repository import RecipesRepository


HIT = {
    "uri": "http://www.edamam.com/ontologies/edamam.owl#recipe_b79327d05b8e5b838ad6cfd9576b30b6",
    "label": "Chicken Vesuvio",
    "image": "https://edamam-product-images.s3.amazonaws.com/web-img/e42/e42f9.jpg",
    "url": "http://www.seriouseats.com/recipes/2011/12/chicken-vesuvio-recipe.html",
    "yield": 4.0,
    "calories": 4228.0,
    "ingredientLines": ["1/2 cup olive oil", "5 cloves garlic, peeled"],
    "totalNutrients": {
        "CHOCDF": {"label": "Carbs", "quantity": 175.2, "unit": "g"},
        "PROCNT": {"label": "Protein", "quantity": 226.4, "unit": "g"},
        "FAT": {"label": "Fat", "quantity": 274.8, "unit": "g"},
    },
}


def client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "bounds,expected",
    (
        (Range(), None),
        (Range(100, None), "100+"),
        (Range(None, 600), "600"),
        (Range(100, 600), "100-600"),
    ),
)
def test_range_param(bounds: Range, expected: str | None) -> None:
    assert range_param(bounds) == expected


def test_search_params() -> None:
    params = search_params(
        RecipeFilter(name="chicken", calories=Range(100, 600), fat=Range(None, 20))
    )
    assert params == [
        ("type", "public"),
        ("q", "chicken"),
        ("calories", "100-600"),
        ("nutrients[FAT]", "20"),
    ]


def test_recipe_from_hit_is_per_serving() -> None:
    recipe = recipe_from_hit(HIT)
    assert recipe.id == "b79327d05b8e5b838ad6cfd9576b30b6"
    assert recipe.name == "Chicken Vesuvio"
    assert recipe.servings == 4
    assert (recipe.calories, recipe.carbs, recipe.protein, recipe.fat) == (
        1057.0,
        43.8,
        56.6,
        68.7,
    )
    assert recipe.ingredients == HIT["ingredientLines"]


def test_recipe_id_from_uri_without_fragment() -> None:
    assert recipe_id_from_uri("abc") == "abc"


@pytest.mark.asyncio
async def test_search_caches_hits(database) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"hits": [{"recipe": HIT}]})

    cache = RecipesRepository(database)
    source = EdamamRecipeSource(
        cache=cache, app_id="id", app_key="key", client=client_for(handler)
    )

    got = await source.search(RecipeFilter(name="chicken"))

    assert [r.name for r in got] == ["Chicken Vesuvio"]
    params: dict[str, Any] = dict(requests[0].url.params)
    assert params["q"] == "chicken"
    assert params["app_id"] == "id"
    assert params["app_key"] == "key"
    assert (await cache.get(got[0].id)).name == "Chicken Vesuvio"

    assert (await source.get(got[0].id)).name == "Chicken Vesuvio"
    assert len(requests) == 1
    await source.aclose()


@pytest.mark.asyncio
async def test_get_fetches_uncached(database) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/missing"):
            return httpx.Response(404, json={})
        return httpx.Response(200, json={"recipe": HIT})

    source = EdamamRecipeSource(
        cache=RecipesRepository(database), app_id="id", app_key="key", client=client_for(handler)
    )
    recipe = await source.get("b79327d05b8e5b838ad6cfd9576b30b6")
    assert recipe.name == "Chicken Vesuvio"

    with pytest.raises(RecipeNotFound):
        await source.get("missing")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    (
        httpx.Response(401, json={"message": "Unauthorized app_id = id"}),
        httpx.Response(200, content=b"<html>not json</html>"),
        httpx.Response(200, json={"hits": [{"nope": {}}]}),
    ),
)
async def test_search_failures(database, response: httpx.Response) -> None:
    source = EdamamRecipeSource(
        cache=RecipesRepository(database),
        app_id="id",
        app_key="key",
        client=client_for(lambda request: response),
    )
    with pytest.raises(RecipeSourceError):
        await source.search(RecipeFilter(name="chicken"))


@pytest.mark.asyncio
async def test_search_network_error(database) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    source = EdamamRecipeSource(
        cache=RecipesRepository(database), app_id="id", app_key="key", client=client_for(handler)
    )
    with pytest.raises(RecipeSourceError):
        await source.search(RecipeFilter(name="chicken"))
