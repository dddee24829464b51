from pathlib import Path
from typing import Any, AsyncIterator

from databases import Database
import pytest
import pytest_asyncio

from domain.errors import RecipeNotFound, RecipeSourceError, UserNotFound
from domain.models import Range, Recipe, RecipeFilter, Review, User
from domain.repository import create_tables


class Recorder:
    """Stands in for any presenter, remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def record(self, name: str, arg: Any = None) -> None:
        self.calls.append((name, arg))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    @property
    def failures(self) -> list[str]:
        return [arg for name, arg in self.calls if name == "prepare_fail_view"]

    def prepare_success_view(self, output_data: Any) -> None:
        self.record("prepare_success_view", output_data)

    def prepare_fail_view(self, error_message: str) -> None:
        self.record("prepare_fail_view", error_message)

    def prepare_review_view(self, output_data: Any) -> None:
        self.record("prepare_review_view", output_data)

    def switch_to_results_view(self) -> None:
        self.record("switch_to_results_view")

    def switch_to_profile_view(self) -> None:
        self.record("switch_to_profile_view")

    def switch_to_search_view(self) -> None:
        self.record("switch_to_search_view")

    def switch_to_login_view(self) -> None:
        self.record("switch_to_login_view")

    def switch_to_signup_view(self) -> None:
        self.record("switch_to_signup_view")

    def switch_to_saved_recipes_view(self) -> None:
        self.record("switch_to_saved_recipes_view")


def within(bounds: Range, value: float) -> bool:
    if bounds.minimum is not None and value < bounds.minimum:
        return False
    return bounds.maximum is None or value <= bounds.maximum


def matches(recipe_filter: RecipeFilter, recipe: Recipe) -> bool:
    """Same rules as the SQL search: name substring, inclusive ranges."""
    if recipe_filter.name and recipe_filter.name.lower() not in recipe.name.lower():
        return False
    return (
        within(recipe_filter.calories, recipe.calories)
        and within(recipe_filter.carbs, recipe.carbs)
        and within(recipe_filter.protein, recipe.protein)
        and within(recipe_filter.fat, recipe.fat)
    )


class FakeRecipes:
    def __init__(self, recipes: list[Recipe]) -> None:
        self.recipes = {r.id: r for r in recipes}
        self.filters: list[RecipeFilter] = []
        self.broken = False

    async def search(self, recipe_filter: RecipeFilter) -> list[Recipe]:
        self.filters.append(recipe_filter)
        if self.broken:
            raise RecipeSourceError("down")
        return [r for r in self.recipes.values() if matches(recipe_filter, r)]

    async def get(self, recipe_id: str) -> Recipe:
        try:
            return self.recipes[recipe_id]
        except KeyError:
            raise RecipeNotFound(recipe_id)


class FakeUsers:
    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    async def exists(self, username: str) -> bool:
        return username in self.users

    async def get(self, username: str) -> User:
        try:
            return self.users[username]
        except KeyError:
            raise UserNotFound(username)

    async def add(self, user: User) -> bool:
        if user.username in self.users:
            return False
        self.users[user.username] = user
        return True

    async def change_password(self, user: User) -> None:
        self.users[user.username] = user


class FakeCurrentUser:
    def __init__(self, username: str | None = None) -> None:
        self.username = username

    def get_current_username(self) -> str | None:
        return self.username

    def set_current_username(self, username: str | None) -> None:
        self.username = username


class FakeSavedRecipes:
    def __init__(self, recipes: FakeRecipes) -> None:
        self.recipes = recipes
        self.saved: dict[str, list[str]] = {}

    async def contains(self, username: str, recipe_id: str) -> bool:
        return recipe_id in self.saved.get(username, [])

    async def add(self, username: str, recipe_id: str) -> bool:
        if recipe_id in self.saved.get(username, []):
            return False
        self.saved.setdefault(username, []).insert(0, recipe_id)
        return True

    async def list(self, username: str) -> list[Recipe]:
        return [self.recipes.recipes[i] for i in self.saved.get(username, [])]


class FakeReviews:
    def __init__(self) -> None:
        self.reviews: dict[tuple[str, str], Review] = {}

    async def upsert(self, review: Review) -> None:
        self.reviews[(review.username, review.recipe_id)] = review

    async def get(self, username: str, recipe_id: str) -> Review | None:
        return self.reviews.get((username, recipe_id))


def make_recipe(id: str, name: str, calories: float, carbs: float, protein: float, fat: float) -> Recipe:
    return Recipe(
        id=id,
        name=name,
        calories=calories,
        carbs=carbs,
        protein=protein,
        fat=fat,
        servings=2,
        ingredients=["salt", "pepper"],
    )


@pytest.fixture
def sample_recipes() -> list[Recipe]:
    return [
        make_recipe("caesar", "Chicken Caesar Salad", 420, 14, 36, 24),
        make_recipe("lasagne", "Beef Lasagne", 690, 48, 38, 37),
        make_recipe("soup", "Red Lentil Soup", 260, 38, 15, 5),
        make_recipe("parfait", "Greek Yogurt Parfait", 240, 30, 17, 6),
    ]


@pytest.fixture
def presenter() -> Recorder:
    return Recorder()


@pytest.fixture
def recipes(sample_recipes: list[Recipe]) -> FakeRecipes:
    return FakeRecipes(sample_recipes)


@pytest.fixture
def users() -> FakeUsers:
    return FakeUsers()


@pytest.fixture
def current_user() -> FakeCurrentUser:
    return FakeCurrentUser()


@pytest.fixture
def saved_recipes(recipes: FakeRecipes) -> FakeSavedRecipes:
    return FakeSavedRecipes(recipes)


@pytest.fixture
def reviews() -> FakeReviews:
    return FakeReviews()


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'recipes.db'}"


@pytest_asyncio.fixture
async def database(db_url: str) -> AsyncIterator[Database]:
    db = Database(db_url)
    await db.connect()
    await create_tables(db)
    yield db
    await db.disconnect()
