from app.view_models import (
    LoginState,
    LoginViewModel,
    ProfileState,
    ProfileViewModel,
    RecipeReviewState,
    RecipeReviewViewModel,
    RecipeSearchState,
    RecipeSearchViewModel,
    SavedRecipesState,
    SavedRecipesViewModel,
    SearchResultsState,
    SearchResultsViewModel,
    SignupState,
    SignupViewModel,
    ViewManagerModel,
)
from domain.change_password import ChangePasswordOutputData
from domain.login import LoginOutputData
from domain.logout import LogoutOutputData
from domain.recipe_search import RecipeSearchOutputData
from domain.review_recipe import RecipeReviewOutputData
from domain.save_recipe import SaveRecipeOutputData
from domain.saved_recipes import ReviewSelectionOutputData, SavedRecipesOutputData
from domain.signup import SignupOutputData


class SignupPresenter:
    def __init__(
        self,
        view_manager: ViewManagerModel,
        signup_view_model: SignupViewModel,
        login_view_model: LoginViewModel,
    ) -> None:
        self.view_manager = view_manager
        self.signup_view_model = signup_view_model
        self.login_view_model = login_view_model

    def prepare_success_view(self, output_data: SignupOutputData) -> None:
        self.login_view_model.set_state(LoginState(username=output_data.username))
        self.login_view_model.fire_property_changed()

        self.signup_view_model.set_state(SignupState())
        self.signup_view_model.fire_property_changed()

        self.view_manager.switch_to(self.login_view_model.view_name)

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.signup_view_model.state
        state.error = error_message
        self.signup_view_model.fire_property_changed()

    def switch_to_login_view(self) -> None:
        self.view_manager.switch_to(self.login_view_model.view_name)


class LoginPresenter:
    def __init__(
        self,
        view_manager: ViewManagerModel,
        login_view_model: LoginViewModel,
        profile_view_model: ProfileViewModel,
        signup_view_model: SignupViewModel,
    ) -> None:
        self.view_manager = view_manager
        self.login_view_model = login_view_model
        self.profile_view_model = profile_view_model
        self.signup_view_model = signup_view_model

    def prepare_success_view(self, output_data: LoginOutputData) -> None:
        self.profile_view_model.set_state(ProfileState(username=output_data.username))
        self.profile_view_model.fire_property_changed()

        self.login_view_model.set_state(LoginState())
        self.login_view_model.fire_property_changed()

        self.view_manager.switch_to(self.profile_view_model.view_name)

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.login_view_model.state
        state.password = ""
        state.error = error_message
        self.login_view_model.fire_property_changed()

    def switch_to_signup_view(self) -> None:
        self.view_manager.switch_to(self.signup_view_model.view_name)


class ChangePasswordPresenter:
    def __init__(self, profile_view_model: ProfileViewModel) -> None:
        self.profile_view_model = profile_view_model

    def prepare_success_view(self, output_data: ChangePasswordOutputData) -> None:
        state = self.profile_view_model.state
        state.password = ""
        state.password_error = None
        self.profile_view_model.fire_property_changed("password")

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.profile_view_model.state
        state.password_error = error_message
        self.profile_view_model.fire_property_changed()


class LogoutPresenter:
    """Clears every signed-in view and goes back to the login view."""

    def __init__(
        self,
        view_manager: ViewManagerModel,
        login_view_model: LoginViewModel,
        profile_view_model: ProfileViewModel,
        recipe_search_view_model: RecipeSearchViewModel,
        search_results_view_model: SearchResultsViewModel,
        saved_recipes_view_model: SavedRecipesViewModel,
        recipe_review_view_model: RecipeReviewViewModel,
    ) -> None:
        self.view_manager = view_manager
        self.login_view_model = login_view_model
        self.profile_view_model = profile_view_model
        self.recipe_search_view_model = recipe_search_view_model
        self.search_results_view_model = search_results_view_model
        self.saved_recipes_view_model = saved_recipes_view_model
        self.recipe_review_view_model = recipe_review_view_model

    def prepare_success_view(self, output_data: LogoutOutputData) -> None:
        self.profile_view_model.set_state(ProfileState())
        self.profile_view_model.fire_property_changed()

        self.recipe_search_view_model.set_state(RecipeSearchState())
        self.search_results_view_model.set_state(SearchResultsState())
        self.saved_recipes_view_model.set_state(SavedRecipesState())
        self.recipe_review_view_model.set_state(RecipeReviewState())

        self.login_view_model.set_state(LoginState(username=output_data.username))
        self.login_view_model.fire_property_changed()

        self.view_manager.switch_to(self.login_view_model.view_name)

    def prepare_fail_view(self, error_message: str) -> None:
        self.login_view_model.state.error = error_message
        self.login_view_model.fire_property_changed()
        self.view_manager.switch_to(self.login_view_model.view_name)


class RecipeSearchPresenter:
    def __init__(
        self,
        view_manager: ViewManagerModel,
        recipe_search_view_model: RecipeSearchViewModel,
        search_results_view_model: SearchResultsViewModel,
        profile_view_model: ProfileViewModel,
    ) -> None:
        self.view_manager = view_manager
        self.recipe_search_view_model = recipe_search_view_model
        self.search_results_view_model = search_results_view_model
        self.profile_view_model = profile_view_model

    def prepare_success_view(self, output_data: RecipeSearchOutputData) -> None:
        self.search_results_view_model.set_state(
            SearchResultsState(recipes=output_data.recipes)
        )
        self.search_results_view_model.fire_property_changed()

        self.recipe_search_view_model.state.error = None
        self.recipe_search_view_model.fire_property_changed()

        self.view_manager.switch_to(self.search_results_view_model.view_name)

    def prepare_fail_view(self, error_message: str) -> None:
        self.recipe_search_view_model.state.error = error_message
        self.recipe_search_view_model.fire_property_changed()

    def switch_to_results_view(self) -> None:
        self.view_manager.switch_to(self.search_results_view_model.view_name)

    def switch_to_profile_view(self) -> None:
        self.view_manager.switch_to(self.profile_view_model.view_name)

    def switch_to_search_view(self) -> None:
        self.view_manager.switch_to(self.recipe_search_view_model.view_name)


class SaveRecipePresenter:
    def __init__(self, search_results_view_model: SearchResultsViewModel) -> None:
        self.search_results_view_model = search_results_view_model

    def prepare_success_view(self, output_data: SaveRecipeOutputData) -> None:
        state = self.search_results_view_model.state
        state.saved_recipe = output_data.recipe.name
        state.error = None
        self.search_results_view_model.fire_property_changed("saved")

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.search_results_view_model.state
        state.saved_recipe = None
        state.error = error_message
        self.search_results_view_model.fire_property_changed()


class SavedRecipesPresenter:
    def __init__(
        self,
        view_manager: ViewManagerModel,
        saved_recipes_view_model: SavedRecipesViewModel,
        recipe_review_view_model: RecipeReviewViewModel,
        profile_view_model: ProfileViewModel,
    ) -> None:
        self.view_manager = view_manager
        self.saved_recipes_view_model = saved_recipes_view_model
        self.recipe_review_view_model = recipe_review_view_model
        self.profile_view_model = profile_view_model

    def prepare_success_view(self, output_data: SavedRecipesOutputData) -> None:
        self.saved_recipes_view_model.set_state(
            SavedRecipesState(username=output_data.username, recipes=output_data.recipes)
        )
        self.saved_recipes_view_model.fire_property_changed()
        self.view_manager.switch_to(self.saved_recipes_view_model.view_name)

    def prepare_review_view(self, output_data: ReviewSelectionOutputData) -> None:
        review = output_data.review
        self.recipe_review_view_model.set_state(
            RecipeReviewState(
                recipe_id=output_data.recipe.id,
                recipe_name=output_data.recipe.name,
                rating="" if review is None else str(review.rating),
                comment="" if review is None else review.comment,
            )
        )
        self.recipe_review_view_model.fire_property_changed()
        self.view_manager.switch_to(self.recipe_review_view_model.view_name)

    def prepare_fail_view(self, error_message: str) -> None:
        self.saved_recipes_view_model.state.error = error_message
        self.saved_recipes_view_model.fire_property_changed()

    def switch_to_profile_view(self) -> None:
        self.view_manager.switch_to(self.profile_view_model.view_name)


class RecipeReviewPresenter:
    def __init__(
        self,
        view_manager: ViewManagerModel,
        recipe_review_view_model: RecipeReviewViewModel,
        saved_recipes_view_model: SavedRecipesViewModel,
    ) -> None:
        self.view_manager = view_manager
        self.recipe_review_view_model = recipe_review_view_model
        self.saved_recipes_view_model = saved_recipes_view_model

    def prepare_success_view(self, output_data: RecipeReviewOutputData) -> None:
        state = self.recipe_review_view_model.state
        state.rating = str(output_data.rating)
        state.comment = output_data.comment
        state.error = None
        self.recipe_review_view_model.fire_property_changed("review")

    def prepare_fail_view(self, error_message: str) -> None:
        self.recipe_review_view_model.state.error = error_message
        self.recipe_review_view_model.fire_property_changed()

    def switch_to_saved_recipes_view(self) -> None:
        self.view_manager.switch_to(self.saved_recipes_view_model.view_name)
