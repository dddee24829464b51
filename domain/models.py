import base64
from datetime import datetime, timezone
import hashlib
import hmac
import secrets
from typing import Any

import markdown2  # pyright: ignore[reportMissingTypeStubs]


PASSWORD_ALGORITHM = "pbkdf2_sha256"
PASSWORD_ITERATIONS = 120_000


def hash_password(password: str, *, iterations: int = PASSWORD_ITERATIONS) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
    )
    encoded = base64.b64encode(digest).decode("ascii")
    return f"{PASSWORD_ALGORITHM}${iterations}${salt}${encoded}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        algorithm, iterations, salt, encoded = password_hash.split("$", 3)
    except ValueError:
        return False
    if algorithm != PASSWORD_ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), int(iterations)
    )
    return hmac.compare_digest(base64.b64encode(digest).decode("ascii"), encoded)


class Recipe:
    def __init__(
        self,
        *,
        id: str,
        name: str,
        calories: float,
        carbs: float,
        protein: float,
        fat: float,
        servings: int = 1,
        url: str = "",
        image: str = "",
        ingredients: list[str] | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self.calories = calories
        self.carbs = carbs
        self.protein = protein
        self.fat = fat
        self.servings = servings
        self.url = url
        self.image = image
        self.ingredients = [] if ingredients is None else ingredients

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name={self.name})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "calories": self.calories,
            "carbs": self.carbs,
            "protein": self.protein,
            "fat": self.fat,
            "servings": self.servings,
            "url": self.url,
            "image": self.image,
            "ingredients": list(self.ingredients),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            calories=float(data["calories"]),
            carbs=float(data["carbs"]),
            protein=float(data["protein"]),
            fat=float(data["fat"]),
            servings=int(data.get("servings") or 1),
            url=data.get("url") or "",
            image=data.get("image") or "",
            ingredients=list(data.get("ingredients") or []),
        )


class User:
    def __init__(self, *, username: str, password_hash: str) -> None:
        self.username = username
        self.password_hash = password_hash

    def __repr__(self) -> str:
        return f"<User(username={self.username})>"

    @classmethod
    def create(cls, username: str, password: str) -> "User":
        return cls(username=username, password_hash=hash_password(password))

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def set_password(self, password: str) -> None:
        self.password_hash = hash_password(password)


class Review:
    def __init__(
        self,
        *,
        username: str,
        recipe_id: str,
        rating: int,
        comment: str = "",
        created_at: datetime | None = None,
    ) -> None:
        self.username = username
        self.recipe_id = recipe_id
        self.rating = rating
        self.comment = comment
        self.created_at = (
            datetime.now(timezone.utc) if created_at is None else created_at
        )

    def __repr__(self) -> str:
        return (
            f"<Review(username={self.username}, recipe_id={self.recipe_id}, "
            f"rating={self.rating})>"
        )

    @property
    def comment_html(self) -> str:
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.comment, safe_mode="escape"
        )


class Range:
    """Inclusive integer bounds, either side may be open."""

    def __init__(self, minimum: int | None = None, maximum: int | None = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def __repr__(self) -> str:
        return f"<Range(minimum={self.minimum}, maximum={self.maximum})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (self.minimum, self.maximum) == (other.minimum, other.maximum)

    @property
    def is_bounded(self) -> bool:
        return self.minimum is not None or self.maximum is not None


class RecipeFilter:
    def __init__(
        self,
        *,
        name: str = "",
        calories: Range | None = None,
        carbs: Range | None = None,
        protein: Range | None = None,
        fat: Range | None = None,
    ) -> None:
        self.name = name
        self.calories = Range() if calories is None else calories
        self.carbs = Range() if carbs is None else carbs
        self.protein = Range() if protein is None else protein
        self.fat = Range() if fat is None else fat

    def __repr__(self) -> str:
        return (
            f"<RecipeFilter(name={self.name!r}, calories={self.calories}, "
            f"carbs={self.carbs}, protein={self.protein}, fat={self.fat})>"
        )
