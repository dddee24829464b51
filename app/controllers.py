"""Controllers turn what the user typed into input data for a use case."""

from domain.change_password import ChangePasswordInputData, ChangePasswordInteractor
from domain.login import LoginInputData, LoginInteractor
from domain.logout import LogoutInputData, LogoutInteractor
from domain.recipe_search import RecipeSearchInputBoundary, RecipeSearchInputData
from domain.review_recipe import RecipeReviewInputData, RecipeReviewInteractor
from domain.save_recipe import SaveRecipeInputData, SaveRecipeInteractor
from domain.saved_recipes import SavedRecipesInteractor
from domain.signup import SignupInputData, SignupInteractor


class SignupController:
    def __init__(self, interactor: SignupInteractor) -> None:
        self.interactor = interactor

    async def execute(self, username: str, password: str, repeat_password: str) -> None:
        await self.interactor.execute(
            SignupInputData(
                username=username, password=password, repeat_password=repeat_password
            )
        )

    def switch_to_login_view(self) -> None:
        self.interactor.switch_to_login_view()


class LoginController:
    def __init__(self, interactor: LoginInteractor) -> None:
        self.interactor = interactor

    async def execute(self, username: str, password: str) -> None:
        await self.interactor.execute(LoginInputData(username=username, password=password))

    def switch_to_signup_view(self) -> None:
        self.interactor.switch_to_signup_view()


class ChangePasswordController:
    def __init__(self, interactor: ChangePasswordInteractor) -> None:
        self.interactor = interactor

    async def execute(self, username: str, password: str) -> None:
        await self.interactor.execute(
            ChangePasswordInputData(username=username, password=password)
        )


class LogoutController:
    def __init__(self, interactor: LogoutInteractor) -> None:
        self.interactor = interactor

    async def execute(self, username: str) -> None:
        await self.interactor.execute(LogoutInputData(username=username))


class RecipeSearchController:
    def __init__(self, interactor: RecipeSearchInputBoundary) -> None:
        self.interactor = interactor

    async def execute(
        self,
        recipe_name: str | None,
        cal_min: str | None,
        cal_max: str | None,
        carb_min: str | None,
        carb_max: str | None,
        protein_min: str | None,
        protein_max: str | None,
        fat_min: str | None,
        fat_max: str | None,
    ) -> None:
        await self.interactor.execute(
            RecipeSearchInputData(
                recipe_name=recipe_name,
                cal_min=cal_min,
                cal_max=cal_max,
                carb_min=carb_min,
                carb_max=carb_max,
                protein_min=protein_min,
                protein_max=protein_max,
                fat_min=fat_min,
                fat_max=fat_max,
            )
        )

    def switch_to_search_results_view(self) -> None:
        self.interactor.switch_to_search_results_view()

    def switch_to_profile_view(self) -> None:
        self.interactor.switch_to_profile_view()

    def switch_to_search_view(self) -> None:
        self.interactor.switch_to_search_view()


class SaveRecipeController:
    def __init__(self, interactor: SaveRecipeInteractor) -> None:
        self.interactor = interactor

    async def execute(self, username: str, recipe_id: str) -> None:
        await self.interactor.execute(
            SaveRecipeInputData(username=username, recipe_id=recipe_id)
        )


class SavedRecipesController:
    def __init__(self, interactor: SavedRecipesInteractor) -> None:
        self.interactor = interactor

    async def execute(self, username: str) -> None:
        await self.interactor.execute(username)

    async def select_for_review(self, username: str, recipe_id: str) -> None:
        await self.interactor.select_for_review(username, recipe_id)

    def switch_to_profile_view(self) -> None:
        self.interactor.switch_to_profile_view()


class RecipeReviewController:
    def __init__(self, interactor: RecipeReviewInteractor) -> None:
        self.interactor = interactor

    async def execute(
        self, username: str, recipe_id: str, rating: str, comment: str
    ) -> None:
        await self.interactor.execute(
            RecipeReviewInputData(
                username=username, recipe_id=recipe_id, rating=rating, comment=comment
            )
        )

    def switch_to_saved_recipes_view(self) -> None:
        self.interactor.switch_to_saved_recipes_view()
