from dataclasses import dataclass
import logging
from typing import Protocol

from domain.errors import RecipeNotFound
from domain.models import Review
from domain.save_recipe import RecipeLookup, SavedRecipesDataAccess
from domain.saved_recipes import NOT_SAVED


logger = logging.getLogger(__name__)


INVALID_RATING = "Rating must be a whole number between 1 and 5."


@dataclass
class RecipeReviewInputData:
    username: str
    recipe_id: str
    rating: str
    comment: str = ""


@dataclass
class RecipeReviewOutputData:
    recipe_name: str
    rating: int
    comment: str
    use_case_failed: bool = False


class ReviewsDataAccess(Protocol):
    async def upsert(self, review: Review) -> None: ...


class RecipeReviewOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: RecipeReviewOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...

    def switch_to_saved_recipes_view(self) -> None: ...


def parse_rating(rating: str) -> int | None:
    rating = rating.strip()
    if not rating.isascii() or not rating.isdigit():
        return None
    value = int(rating)
    return value if 1 <= value <= 5 else None


class RecipeReviewInteractor:
    def __init__(
        self,
        recipes: RecipeLookup,
        saved_recipes: SavedRecipesDataAccess,
        reviews: ReviewsDataAccess,
        presenter: RecipeReviewOutputBoundary,
    ) -> None:
        self.recipes = recipes
        self.saved_recipes = saved_recipes
        self.reviews = reviews
        self.presenter = presenter

    async def execute(self, input_data: RecipeReviewInputData) -> None:
        rating = parse_rating(input_data.rating)
        if rating is None:
            self.presenter.prepare_fail_view(INVALID_RATING)
            return

        if not await self.saved_recipes.contains(
            input_data.username, input_data.recipe_id
        ):
            self.presenter.prepare_fail_view(NOT_SAVED)
            return

        try:
            recipe = await self.recipes.get(input_data.recipe_id)
        except RecipeNotFound:
            self.presenter.prepare_fail_view("Recipe not found.")
            return

        comment = input_data.comment.strip()
        await self.reviews.upsert(
            Review(
                username=input_data.username,
                recipe_id=recipe.id,
                rating=rating,
                comment=comment,
            )
        )
        logger.info("%s rated %s %d/5", input_data.username, recipe.id, rating)
        self.presenter.prepare_success_view(
            RecipeReviewOutputData(recipe_name=recipe.name, rating=rating, comment=comment)
        )

    def switch_to_saved_recipes_view(self) -> None:
        self.presenter.switch_to_saved_recipes_view()
