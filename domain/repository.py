from datetime import datetime, timezone
import json
import logging
from pathlib import Path
import sqlite3
from typing import Any

from databases import Database
from databases.interfaces import Record

from domain.errors import RecipeNotFound, UserNotFound
from domain.models import Range, Recipe, RecipeFilter, Review, User


logger = logging.getLogger(__name__)


CREATE_TABLES = (
    """
    CREATE TABLE IF NOT EXISTS users (
        username VARCHAR(64) PRIMARY KEY,
        password_hash VARCHAR(256) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS recipes (
        id VARCHAR(64) PRIMARY KEY,
        name VARCHAR(256) NOT NULL,
        calories REAL NOT NULL,
        carbs REAL NOT NULL,
        protein REAL NOT NULL,
        fat REAL NOT NULL,
        servings INTEGER NOT NULL DEFAULT 1,
        url VARCHAR(1024) NOT NULL DEFAULT '',
        image VARCHAR(1024) NOT NULL DEFAULT '',
        ingredients TEXT NOT NULL DEFAULT '[]'
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS saved_recipes (
        username VARCHAR(64) NOT NULL REFERENCES users (username),
        recipe_id VARCHAR(64) NOT NULL REFERENCES recipes (id),
        saved_at VARCHAR(64) NOT NULL,
        PRIMARY KEY (username, recipe_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS reviews (
        username VARCHAR(64) NOT NULL REFERENCES users (username),
        recipe_id VARCHAR(64) NOT NULL REFERENCES recipes (id),
        rating INTEGER NOT NULL,
        comment TEXT NOT NULL DEFAULT '',
        created_at VARCHAR(64) NOT NULL,
        PRIMARY KEY (username, recipe_id)
    )
    """,
)


GET_USER = "SELECT * FROM users WHERE username = :username"

ADD_USER = """
INSERT INTO users (username, password_hash) VALUES (:username, :password_hash)
"""

CHANGE_PASSWORD = """
UPDATE users SET password_hash = :password_hash WHERE username = :username
"""

GET_RECIPE = "SELECT * FROM recipes WHERE id = :id"

COUNT_RECIPES = "SELECT COUNT(*) FROM recipes"

UPSERT_RECIPE = """
INSERT INTO recipes (id, name, calories, carbs, protein, fat, servings, url, image, ingredients)
VALUES (:id, :name, :calories, :carbs, :protein, :fat, :servings, :url, :image, :ingredients)
ON CONFLICT (id) DO UPDATE SET
    name = excluded.name,
    calories = excluded.calories,
    carbs = excluded.carbs,
    protein = excluded.protein,
    fat = excluded.fat,
    servings = excluded.servings,
    url = excluded.url,
    image = excluded.image,
    ingredients = excluded.ingredients
"""

CONTAINS_SAVED = """
SELECT 1 FROM saved_recipes WHERE username = :username AND recipe_id = :recipe_id
"""

ADD_SAVED = """
INSERT INTO saved_recipes (username, recipe_id, saved_at)
VALUES (:username, :recipe_id, :saved_at)
"""

LIST_SAVED = """
SELECT r.* FROM saved_recipes s JOIN recipes r ON r.id = s.recipe_id
WHERE s.username = :username
ORDER BY s.saved_at DESC, s.rowid DESC
"""

UPSERT_REVIEW = """
INSERT INTO reviews (username, recipe_id, rating, comment, created_at)
VALUES (:username, :recipe_id, :rating, :comment, :created_at)
ON CONFLICT (username, recipe_id) DO UPDATE SET
    rating = excluded.rating,
    comment = excluded.comment,
    created_at = excluded.created_at
"""

GET_REVIEW = """
SELECT * FROM reviews WHERE username = :username AND recipe_id = :recipe_id
"""

RECIPE_REVIEWS = """
SELECT * FROM reviews WHERE recipe_id = :recipe_id ORDER BY created_at DESC
"""


async def create_tables(db: Database) -> None:
    for query in CREATE_TABLES:
        await db.execute(query=query)  # pyright: ignore[reportUnknownMemberType]


def recipe_from_record(record: Record) -> Recipe:
    return Recipe(
        id=record["id"],
        name=record["name"],
        calories=record["calories"],
        carbs=record["carbs"],
        protein=record["protein"],
        fat=record["fat"],
        servings=record["servings"],
        url=record["url"],
        image=record["image"],
        ingredients=json.loads(record["ingredients"]),
    )


def review_from_record(record: Record) -> Review:
    return Review(
        username=record["username"],
        recipe_id=record["recipe_id"],
        rating=record["rating"],
        comment=record["comment"],
        created_at=datetime.fromisoformat(record["created_at"]),
    )


def range_conditions(
    column: str, bounds: Range, values: dict[str, Any]
) -> list[str]:
    conditions: list[str] = []
    if bounds.minimum is not None:
        values[f"{column}_min"] = bounds.minimum
        conditions.append(f"{column} >= :{column}_min")
    if bounds.maximum is not None:
        values[f"{column}_max"] = bounds.maximum
        conditions.append(f"{column} <= :{column}_max")
    return conditions


class UsersRepository:
    """Users repository."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def exists(self, username: str) -> bool:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_USER, values={"username": username}
        )
        return result is not None

    async def get(self, username: str) -> User:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_USER, values={"username": username}
        )
        if result is None:
            raise UserNotFound(username)
        return User(username=result["username"], password_hash=result["password_hash"])

    async def add(self, user: User) -> bool:
        """False when the username is already taken."""
        try:
            await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                ADD_USER,
                values={"username": user.username, "password_hash": user.password_hash},
            )
        except sqlite3.IntegrityError:
            logger.info("User %s already exists", user.username)
            return False
        return True

    async def change_password(self, user: User) -> None:
        if not await self.exists(user.username):
            raise UserNotFound(user.username)
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            CHANGE_PASSWORD,
            values={"username": user.username, "password_hash": user.password_hash},
        )


class RecipesRepository:
    """Recipes repository. Also the local recipe source for searches."""

    def __init__(self, db: Database, *, limit: int = 20) -> None:
        self.db = db
        self.limit = limit

    async def get(self, recipe_id: str) -> Recipe:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_RECIPE, values={"id": recipe_id}
        )
        if result is None:
            raise RecipeNotFound(recipe_id)
        return recipe_from_record(result)

    async def upsert(self, recipe: Recipe) -> None:
        values = recipe.to_dict()
        values["ingredients"] = json.dumps(recipe.ingredients)
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            UPSERT_RECIPE, values=values
        )

    async def count(self) -> int:
        result = await self.db.fetch_val(  # pyright: ignore[reportUnknownMemberType]
            COUNT_RECIPES
        )
        return int(result or 0)

    async def search(self, recipe_filter: RecipeFilter) -> list[Recipe]:
        values: dict[str, Any] = {"limit": self.limit}
        conditions: list[str] = []
        if recipe_filter.name:
            values["name"] = recipe_filter.name.lower()
            conditions.append("instr(lower(name), :name) > 0")
        conditions += range_conditions("calories", recipe_filter.calories, values)
        conditions += range_conditions("carbs", recipe_filter.carbs, values)
        conditions += range_conditions("protein", recipe_filter.protein, values)
        conditions += range_conditions("fat", recipe_filter.fat, values)

        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        query = f"SELECT * FROM recipes {where} ORDER BY name LIMIT :limit"
        result = await self.db.fetch_all(  # pyright: ignore[reportUnknownMemberType]
            query, values=values
        )
        return [recipe_from_record(r) for r in result]

    async def load(self, path: Path) -> int:
        """Seed an empty table from a JSON list of recipes."""
        if await self.count():
            return 0
        with open(path) as f:
            data = json.load(f)
        recipes = [Recipe.from_dict(d) for d in data]
        async with self.db.transaction():
            for recipe in recipes:
                await self.upsert(recipe)
        logger.info("Loaded %d recipes from %s", len(recipes), path)
        return len(recipes)


class SavedRecipesRepository:
    """A user's saved recipes, newest first."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def contains(self, username: str, recipe_id: str) -> bool:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            CONTAINS_SAVED, values={"username": username, "recipe_id": recipe_id}
        )
        return result is not None

    async def add(self, username: str, recipe_id: str) -> bool:
        """False when the recipe was already saved."""
        try:
            await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                ADD_SAVED,
                values={
                    "username": username,
                    "recipe_id": recipe_id,
                    "saved_at": datetime.now(timezone.utc).isoformat(),
                },
            )
        except sqlite3.IntegrityError:
            logger.info("%s already saved %s", username, recipe_id)
            return False
        return True

    async def list(self, username: str) -> list[Recipe]:
        result = await self.db.fetch_all(  # pyright: ignore[reportUnknownMemberType]
            LIST_SAVED, values={"username": username}
        )
        return [recipe_from_record(r) for r in result]


class ReviewsRepository:
    """One review per user and recipe."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def upsert(self, review: Review) -> None:
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            UPSERT_REVIEW,
            values={
                "username": review.username,
                "recipe_id": review.recipe_id,
                "rating": review.rating,
                "comment": review.comment,
                "created_at": review.created_at.isoformat(),
            },
        )

    async def get(self, username: str, recipe_id: str) -> Review | None:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_REVIEW, values={"username": username, "recipe_id": recipe_id}
        )
        return None if result is None else review_from_record(result)

    async def for_recipe(self, recipe_id: str) -> list[Review]:
        result = await self.db.fetch_all(  # pyright: ignore[reportUnknownMemberType]
            RECIPE_REVIEWS, values={"recipe_id": recipe_id}
        )
        return [review_from_record(r) for r in result]
