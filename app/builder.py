"""Wires views, presenters, interactors and controllers for one UI session."""

from jinja2 import Environment

from app.controllers import (
    ChangePasswordController,
    LoginController,
    LogoutController,
    RecipeReviewController,
    RecipeSearchController,
    SaveRecipeController,
    SavedRecipesController,
    SignupController,
)
from app.html.accounts import LoginView, SignupView
from app.html.profile import ProfileView
from app.html.recipe_search import RecipeSearchView, SearchResultsView
from app.html.saved_recipes import RecipeReviewView, SavedRecipesView
from app.html.view_manager import ViewManager
from app.presenters import (
    ChangePasswordPresenter,
    LoginPresenter,
    LogoutPresenter,
    RecipeReviewPresenter,
    RecipeSearchPresenter,
    SaveRecipePresenter,
    SavedRecipesPresenter,
    SignupPresenter,
)
from app.sessions import SessionUser, UISession
from app.view_models import (
    LoginViewModel,
    ProfileViewModel,
    RecipeReviewViewModel,
    RecipeSearchViewModel,
    SavedRecipesViewModel,
    SearchResultsViewModel,
    SignupViewModel,
    ViewManagerModel,
)
from domain.change_password import ChangePasswordInteractor
from domain.login import LoginInteractor
from domain.logout import LogoutInteractor
from domain.recipe_search import RecipeSearchDataAccess, RecipeSearchInteractor
from domain.repository import ReviewsRepository, SavedRecipesRepository, UsersRepository
from domain.review_recipe import RecipeReviewInteractor
from domain.save_recipe import RecipeLookup, SaveRecipeInteractor
from domain.saved_recipes import SavedRecipesInteractor
from domain.signup import SignupInteractor


class DataAccess:
    """The data access objects shared by every session."""

    def __init__(
        self,
        *,
        users: UsersRepository,
        recipes: RecipeLookup,
        recipe_search: RecipeSearchDataAccess,
        saved_recipes: SavedRecipesRepository,
        reviews: ReviewsRepository,
    ) -> None:
        self.users = users
        self.recipes = recipes
        self.recipe_search = recipe_search
        self.saved_recipes = saved_recipes
        self.reviews = reviews


class AppBuilder:
    def __init__(self, data_access: DataAccess, *, environment: Environment) -> None:
        self.data = data_access
        self.env = environment
        self.current_user = SessionUser()
        self.view_manager_model = ViewManagerModel()

        self.signup_view_model = SignupViewModel()
        self.login_view_model = LoginViewModel()
        self.profile_view_model = ProfileViewModel()
        self.recipe_search_view_model = RecipeSearchViewModel()
        self.search_results_view_model = SearchResultsViewModel()
        self.saved_recipes_view_model = SavedRecipesViewModel()
        self.recipe_review_view_model = RecipeReviewViewModel()

        self.signup_view = SignupView(self.signup_view_model, environment=environment)
        self.login_view = LoginView(self.login_view_model, environment=environment)
        self.profile_view = ProfileView(self.profile_view_model, environment=environment)
        self.recipe_search_view = RecipeSearchView(
            self.recipe_search_view_model, environment=environment
        )
        self.search_results_view = SearchResultsView(
            self.search_results_view_model, self.current_user, environment=environment
        )
        self.saved_recipes_view = SavedRecipesView(
            self.saved_recipes_view_model, environment=environment
        )
        self.recipe_review_view = RecipeReviewView(
            self.recipe_review_view_model, self.current_user, environment=environment
        )

    def add_signup_use_case(self) -> "AppBuilder":
        presenter = SignupPresenter(
            self.view_manager_model, self.signup_view_model, self.login_view_model
        )
        interactor = SignupInteractor(self.data.users, presenter)
        self.signup_view.set_signup_controller(SignupController(interactor))
        return self

    def add_login_use_case(self) -> "AppBuilder":
        presenter = LoginPresenter(
            self.view_manager_model,
            self.login_view_model,
            self.profile_view_model,
            self.signup_view_model,
        )
        interactor = LoginInteractor(self.data.users, self.current_user, presenter)
        self.login_view.set_login_controller(LoginController(interactor))
        return self

    def add_change_password_use_case(self) -> "AppBuilder":
        presenter = ChangePasswordPresenter(self.profile_view_model)
        interactor = ChangePasswordInteractor(self.data.users, presenter)
        self.profile_view.set_change_password_controller(
            ChangePasswordController(interactor)
        )
        return self

    def add_logout_use_case(self) -> "AppBuilder":
        presenter = LogoutPresenter(
            self.view_manager_model,
            self.login_view_model,
            self.profile_view_model,
            self.recipe_search_view_model,
            self.search_results_view_model,
            self.saved_recipes_view_model,
            self.recipe_review_view_model,
        )
        interactor = LogoutInteractor(self.current_user, presenter)
        self.profile_view.set_logout_controller(LogoutController(interactor))
        return self

    def add_recipe_search_use_case(self) -> "AppBuilder":
        presenter = RecipeSearchPresenter(
            self.view_manager_model,
            self.recipe_search_view_model,
            self.search_results_view_model,
            self.profile_view_model,
        )
        interactor = RecipeSearchInteractor(self.data.recipe_search, presenter)
        controller = RecipeSearchController(interactor)
        self.recipe_search_view.set_recipe_search_controller(controller)
        self.search_results_view.set_recipe_search_controller(controller)
        self.profile_view.set_recipe_search_controller(controller)
        return self

    def add_save_recipe_use_case(self) -> "AppBuilder":
        presenter = SaveRecipePresenter(self.search_results_view_model)
        interactor = SaveRecipeInteractor(
            self.data.recipes, self.data.saved_recipes, presenter
        )
        self.search_results_view.set_save_recipe_controller(
            SaveRecipeController(interactor)
        )
        return self

    def add_saved_recipes_use_case(self) -> "AppBuilder":
        presenter = SavedRecipesPresenter(
            self.view_manager_model,
            self.saved_recipes_view_model,
            self.recipe_review_view_model,
            self.profile_view_model,
        )
        interactor = SavedRecipesInteractor(
            self.data.recipes, self.data.saved_recipes, self.data.reviews, presenter
        )
        controller = SavedRecipesController(interactor)
        self.saved_recipes_view.set_saved_recipes_controller(controller)
        self.profile_view.set_saved_recipes_controller(controller)
        return self

    def add_review_recipe_use_case(self) -> "AppBuilder":
        presenter = RecipeReviewPresenter(
            self.view_manager_model,
            self.recipe_review_view_model,
            self.saved_recipes_view_model,
        )
        interactor = RecipeReviewInteractor(
            self.data.recipes, self.data.saved_recipes, self.data.reviews, presenter
        )
        self.recipe_review_view.set_recipe_review_controller(
            RecipeReviewController(interactor)
        )
        return self

    def build(self) -> UISession:
        view_manager = ViewManager(
            self.view_manager_model,
            [
                self.signup_view,
                self.login_view,
                self.profile_view,
                self.recipe_search_view,
                self.search_results_view,
                self.saved_recipes_view,
                self.recipe_review_view,
            ],
        )
        self.view_manager_model.switch_to(self.login_view.view_name)
        return UISession(view_manager, self.current_user)


def build_session(data_access: DataAccess, *, environment: Environment) -> UISession:
    return (
        AppBuilder(data_access, environment=environment)
        .add_signup_use_case()
        .add_login_use_case()
        .add_change_password_use_case()
        .add_logout_use_case()
        .add_recipe_search_use_case()
        .add_save_recipe_use_case()
        .add_saved_recipes_use_case()
        .add_review_recipe_use_case()
        .build()
    )
