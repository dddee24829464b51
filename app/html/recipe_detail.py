from jinja2 import Environment
from markupsafe import Markup

from domain.models import Recipe, Review


class RecipeDetail:
    def __init__(
        self,
        recipe: Recipe,
        reviews: list[Review],
        *,
        environment: Environment,
        template_name: str = "recipe-detail.html",
    ) -> None:
        self.recipe = recipe
        self.reviews = reviews
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return self.recipe.name

    @property
    def nutrients(self) -> list[tuple[str, str]]:
        return [
            ("Calories", f"{self.recipe.calories:g} kcal"),
            ("Carbohydrates", f"{self.recipe.carbs:g} g"),
            ("Protein", f"{self.recipe.protein:g} g"),
            ("Fat", f"{self.recipe.fat:g} g"),
        ]

    @property
    def average_rating(self) -> float | None:
        if not self.reviews:
            return None
        return round(sum(r.rating for r in self.reviews) / len(self.reviews), 1)

    def comment(self, review: Review) -> Markup:
        return Markup(review.comment_html)

    def render(self) -> str:
        return self.env.get_template(self.name).render(recipe=self)
