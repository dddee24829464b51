from jinja2 import Environment

from app.controllers import RecipeSearchController, SaveRecipeController
from app.html.base import Form, UnknownAction, View, field
from app.view_models import (
    PropertyChangeEvent,
    RecipeSearchState,
    RecipeSearchViewModel,
    SearchResultsState,
    SearchResultsViewModel,
)
from domain.login import CurrentUser


FILTER_FIELDS = (
    "recipe_name",
    "cal_min",
    "cal_max",
    "carb_min",
    "carb_max",
    "protein_min",
    "protein_max",
    "fat_min",
    "fat_max",
)

# (label, minimum field, maximum field)
RANGES = (
    ("Calories (kcal)", "cal_min", "cal_max"),
    ("Carbohydrates (g)", "carb_min", "carb_max"),
    ("Protein (g)", "protein_min", "protein_max"),
    ("Fat (g)", "fat_min", "fat_max"),
)


class RecipeSearchView(View[RecipeSearchState]):
    template_name = "recipe-search.html"
    ranges = RANGES

    def __init__(
        self,
        recipe_search_view_model: RecipeSearchViewModel,
        *,
        environment: Environment,
    ) -> None:
        super().__init__(recipe_search_view_model, environment=environment)
        self.recipe_search_controller: RecipeSearchController | None = None

    def set_recipe_search_controller(
        self, recipe_search_controller: RecipeSearchController
    ) -> None:
        self.recipe_search_controller = recipe_search_controller

    async def act(self, action: str, form: Form) -> None:
        assert self.recipe_search_controller is not None
        match action:
            case "search":
                state = self.state
                for name in FILTER_FIELDS:
                    setattr(state, name, field(form, name))
                self.view_model.set_state(state)
                await self.recipe_search_controller.execute(
                    *(getattr(state, name) for name in FILTER_FIELDS)
                )
            case "results":
                self.recipe_search_controller.switch_to_search_results_view()
            case "profile":
                self.recipe_search_controller.switch_to_profile_view()
            case _:
                raise UnknownAction(action)


class SearchResultsView(View[SearchResultsState]):
    template_name = "search-results.html"

    def __init__(
        self,
        search_results_view_model: SearchResultsViewModel,
        current_user: CurrentUser,
        *,
        environment: Environment,
    ) -> None:
        super().__init__(search_results_view_model, environment=environment)
        self.current_user = current_user
        self.recipe_search_controller: RecipeSearchController | None = None
        self.save_recipe_controller: SaveRecipeController | None = None

    def set_recipe_search_controller(
        self, recipe_search_controller: RecipeSearchController
    ) -> None:
        self.recipe_search_controller = recipe_search_controller

    def set_save_recipe_controller(
        self, save_recipe_controller: SaveRecipeController
    ) -> None:
        self.save_recipe_controller = save_recipe_controller

    def property_change(self, event: PropertyChangeEvent) -> None:
        state: SearchResultsState = event.new_value
        if event.property_name == "saved":
            self.notices.append(f"Saved {state.saved_recipe}.")

    async def act(self, action: str, form: Form) -> None:
        match action:
            case "save":
                assert self.save_recipe_controller is not None
                await self.save_recipe_controller.execute(
                    self.current_user.get_current_username() or "",
                    field(form, "recipe_id"),
                )
            case "back":
                assert self.recipe_search_controller is not None
                self.recipe_search_controller.switch_to_search_view()
            case "profile":
                assert self.recipe_search_controller is not None
                self.recipe_search_controller.switch_to_profile_view()
            case _:
                raise UnknownAction(action)
