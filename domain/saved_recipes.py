from dataclasses import dataclass, field
from typing import Protocol

from domain.errors import RecipeNotFound
from domain.models import Recipe, Review
from domain.save_recipe import RecipeLookup, SavedRecipesDataAccess


NOT_SAVED = "Only saved recipes can be reviewed."


@dataclass
class SavedRecipesOutputData:
    username: str
    recipes: list[Recipe] = field(default_factory=list)
    use_case_failed: bool = False


@dataclass
class ReviewSelectionOutputData:
    recipe: Recipe
    review: Review | None = None
    use_case_failed: bool = False


class ReviewLookup(Protocol):
    async def get(self, username: str, recipe_id: str) -> Review | None: ...


class SavedRecipesOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: SavedRecipesOutputData) -> None: ...

    def prepare_review_view(self, output_data: ReviewSelectionOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...

    def switch_to_profile_view(self) -> None: ...


class SavedRecipesInteractor:
    def __init__(
        self,
        recipes: RecipeLookup,
        saved_recipes: SavedRecipesDataAccess,
        reviews: ReviewLookup,
        presenter: SavedRecipesOutputBoundary,
    ) -> None:
        self.recipes = recipes
        self.saved_recipes = saved_recipes
        self.reviews = reviews
        self.presenter = presenter

    async def execute(self, username: str) -> None:
        recipes = await self.saved_recipes.list(username)
        self.presenter.prepare_success_view(
            SavedRecipesOutputData(username=username, recipes=recipes)
        )

    async def select_for_review(self, username: str, recipe_id: str) -> None:
        if not await self.saved_recipes.contains(username, recipe_id):
            self.presenter.prepare_fail_view(NOT_SAVED)
            return
        try:
            recipe = await self.recipes.get(recipe_id)
        except RecipeNotFound:
            self.presenter.prepare_fail_view("Recipe not found.")
            return
        review = await self.reviews.get(username, recipe_id)
        self.presenter.prepare_review_view(
            ReviewSelectionOutputData(recipe=recipe, review=review)
        )

    def switch_to_profile_view(self) -> None:
        self.presenter.switch_to_profile_view()
