from dataclasses import dataclass
import logging
from typing import Protocol

from domain.errors import RecipeNotFound
from domain.models import Recipe


logger = logging.getLogger(__name__)


@dataclass
class SaveRecipeInputData:
    username: str
    recipe_id: str


@dataclass
class SaveRecipeOutputData:
    recipe: Recipe
    use_case_failed: bool = False


class RecipeLookup(Protocol):
    async def get(self, recipe_id: str) -> Recipe: ...


class SavedRecipesDataAccess(Protocol):
    async def contains(self, username: str, recipe_id: str) -> bool: ...

    async def add(self, username: str, recipe_id: str) -> bool: ...

    async def list(self, username: str) -> list[Recipe]: ...


class SaveRecipeOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: SaveRecipeOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...


class SaveRecipeInteractor:
    def __init__(
        self,
        recipes: RecipeLookup,
        saved_recipes: SavedRecipesDataAccess,
        presenter: SaveRecipeOutputBoundary,
    ) -> None:
        self.recipes = recipes
        self.saved_recipes = saved_recipes
        self.presenter = presenter

    async def execute(self, input_data: SaveRecipeInputData) -> None:
        try:
            recipe = await self.recipes.get(input_data.recipe_id)
        except RecipeNotFound:
            self.presenter.prepare_fail_view("Recipe not found.")
            return

        if await self.saved_recipes.contains(
            input_data.username, recipe.id
        ) or not await self.saved_recipes.add(input_data.username, recipe.id):
            self.presenter.prepare_fail_view("Recipe already saved.")
            return

        logger.info("%s saved %s", input_data.username, recipe.id)
        self.presenter.prepare_success_view(SaveRecipeOutputData(recipe=recipe))
