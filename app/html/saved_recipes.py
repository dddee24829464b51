from jinja2 import Environment

from app.controllers import RecipeReviewController, SavedRecipesController
from app.html.base import Form, UnknownAction, View, field
from app.view_models import (
    PropertyChangeEvent,
    RecipeReviewState,
    RecipeReviewViewModel,
    SavedRecipesState,
    SavedRecipesViewModel,
)
from domain.login import CurrentUser


class SavedRecipesView(View[SavedRecipesState]):
    template_name = "saved-recipes.html"

    def __init__(
        self,
        saved_recipes_view_model: SavedRecipesViewModel,
        *,
        environment: Environment,
    ) -> None:
        super().__init__(saved_recipes_view_model, environment=environment)
        self.saved_recipes_controller: SavedRecipesController | None = None

    def set_saved_recipes_controller(
        self, saved_recipes_controller: SavedRecipesController
    ) -> None:
        self.saved_recipes_controller = saved_recipes_controller

    async def act(self, action: str, form: Form) -> None:
        assert self.saved_recipes_controller is not None
        match action:
            case "review":
                await self.saved_recipes_controller.select_for_review(
                    self.state.username, field(form, "recipe_id")
                )
            case "profile":
                self.saved_recipes_controller.switch_to_profile_view()
            case _:
                raise UnknownAction(action)


class RecipeReviewView(View[RecipeReviewState]):
    template_name = "recipe-review.html"

    def __init__(
        self,
        recipe_review_view_model: RecipeReviewViewModel,
        current_user: CurrentUser,
        *,
        environment: Environment,
    ) -> None:
        super().__init__(recipe_review_view_model, environment=environment)
        self.current_user = current_user
        self.recipe_review_controller: RecipeReviewController | None = None

    def set_recipe_review_controller(
        self, recipe_review_controller: RecipeReviewController
    ) -> None:
        self.recipe_review_controller = recipe_review_controller

    def property_change(self, event: PropertyChangeEvent) -> None:
        state: RecipeReviewState = event.new_value
        if event.property_name == "review":
            self.notices.append(f"Thanks for reviewing {state.recipe_name}.")

    async def act(self, action: str, form: Form) -> None:
        assert self.recipe_review_controller is not None
        match action:
            case "submit":
                state = self.state
                state.rating = field(form, "rating")
                state.comment = field(form, "comment")
                self.view_model.set_state(state)
                await self.recipe_review_controller.execute(
                    self.current_user.get_current_username() or "",
                    state.recipe_id,
                    state.rating,
                    state.comment,
                )
            case "back":
                self.recipe_review_controller.switch_to_saved_recipes_view()
            case _:
                raise UnknownAction(action)
