from jinja2 import Environment

from app.controllers import (
    ChangePasswordController,
    LogoutController,
    RecipeSearchController,
    SavedRecipesController,
)
from app.html.base import Form, UnknownAction, View, field
from app.view_models import ProfileState, ProfileViewModel, PropertyChangeEvent


class ProfileView(View[ProfileState]):
    """The view for when the user is logged in."""

    template_name = "profile.html"

    def __init__(
        self, profile_view_model: ProfileViewModel, *, environment: Environment
    ) -> None:
        super().__init__(profile_view_model, environment=environment)
        self.username = ""
        self.change_password_controller: ChangePasswordController | None = None
        self.logout_controller: LogoutController | None = None
        self.recipe_search_controller: RecipeSearchController | None = None
        self.saved_recipes_controller: SavedRecipesController | None = None

    def set_change_password_controller(
        self, change_password_controller: ChangePasswordController
    ) -> None:
        self.change_password_controller = change_password_controller

    def set_logout_controller(self, logout_controller: LogoutController) -> None:
        self.logout_controller = logout_controller

    def set_recipe_search_controller(
        self, recipe_search_controller: RecipeSearchController
    ) -> None:
        self.recipe_search_controller = recipe_search_controller

    def set_saved_recipes_controller(
        self, saved_recipes_controller: SavedRecipesController
    ) -> None:
        self.saved_recipes_controller = saved_recipes_controller

    def property_change(self, event: PropertyChangeEvent) -> None:
        state: ProfileState = event.new_value
        if event.property_name == "state":
            self.username = state.username
        elif event.property_name == "password":
            self.notices.append(f"password updated for {state.username}")

    def set_password(self, password: str) -> None:
        state = self.state
        state.password = password
        self.view_model.set_state(state)

    async def act(self, action: str, form: Form) -> None:
        match action:
            case "change-password":
                assert self.change_password_controller is not None
                self.set_password(field(form, "password"))
                state = self.state
                await self.change_password_controller.execute(
                    state.username, state.password
                )
            case "log-out":
                assert self.logout_controller is not None
                await self.logout_controller.execute(self.state.username)
            case "recipe-search":
                assert self.recipe_search_controller is not None
                self.recipe_search_controller.switch_to_search_view()
            case "saved-recipes":
                assert self.saved_recipes_controller is not None
                await self.saved_recipes_controller.execute(self.state.username)
            case _:
                raise UnknownAction(action)
