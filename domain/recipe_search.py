"""Search recipes by name and nutrient ranges.

Every filter arrives as the raw string typed into the search form. A blank
string means the filter is not used. Ranges are checked before anything is
sent to the data source, and the first problem found is the one reported.
"""

from dataclasses import dataclass, field
import logging
import re
from typing import Protocol

from domain.errors import RecipeSourceError
from domain.models import Range, Recipe, RecipeFilter


logger = logging.getLogger(__name__)


INTEGER = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -(2**31), 2**31 - 1

NO_FILTERS = "At least one filter parameter must be provided."
NO_RESULTS = "No recipes found for the given filters."
SOURCE_UNAVAILABLE = "Recipe search is unavailable right now. Please try again later."


def invalid_range_message(nutrient: str) -> str:
    return f"Invalid {nutrient} range: Minimum cannot be greater than maximum."


@dataclass
class RecipeSearchInputData:
    recipe_name: str | None = None
    cal_min: str | None = None
    cal_max: str | None = None
    carb_min: str | None = None
    carb_max: str | None = None
    protein_min: str | None = None
    protein_max: str | None = None
    fat_min: str | None = None
    fat_max: str | None = None

    def parameters(self) -> list[str | None]:
        return [
            self.recipe_name,
            self.cal_min,
            self.cal_max,
            self.carb_min,
            self.carb_max,
            self.protein_min,
            self.protein_max,
            self.fat_min,
            self.fat_max,
        ]


@dataclass
class RecipeSearchOutputData:
    recipes: list[Recipe] = field(default_factory=list)
    use_case_failed: bool = False


class RecipeSearchDataAccess(Protocol):
    async def search(self, recipe_filter: RecipeFilter) -> list[Recipe]: ...


class RecipeSearchOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: RecipeSearchOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...

    def switch_to_results_view(self) -> None: ...

    def switch_to_profile_view(self) -> None: ...

    def switch_to_search_view(self) -> None: ...


class RecipeSearchInputBoundary(Protocol):
    async def execute(self, input_data: RecipeSearchInputData) -> None: ...

    def switch_to_search_results_view(self) -> None: ...

    def switch_to_profile_view(self) -> None: ...

    def switch_to_search_view(self) -> None: ...


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def all_blank(parameters: list[str | None]) -> bool:
    return all(is_blank(p) for p in parameters)


def parse_bound(value: str | None) -> int | None:
    """Parse one side of a range. Blank is unbounded.

    Raises ValueError for anything that is not a plain 32-bit integer.
    """
    if value is None or not value.strip():
        return None
    value = value.strip()
    if not INTEGER.fullmatch(value):
        raise ValueError(f"Not an integer: {value!r}")
    bound = int(value)
    if not INT_MIN <= bound <= INT_MAX:
        raise ValueError(f"Out of range: {value!r}")
    return bound


def parse_range(minimum: str | None, maximum: str | None) -> Range | None:
    """Returns None when the bounds do not form a valid range."""
    try:
        low, high = parse_bound(minimum), parse_bound(maximum)
    except ValueError:
        return None
    if low is not None and high is not None and low > high:
        return None
    return Range(low, high)


class RecipeSearchInteractor:
    def __init__(
        self,
        recipe_data_access: RecipeSearchDataAccess,
        presenter: RecipeSearchOutputBoundary,
    ) -> None:
        self.recipe_data_access = recipe_data_access
        self.presenter = presenter

    async def execute(self, input_data: RecipeSearchInputData) -> None:
        if all_blank(input_data.parameters()):
            self.fail(NO_FILTERS)
            return

        ranges: dict[str, Range] = {}
        for key, nutrient, low, high in (
            ("calories", "calorie", input_data.cal_min, input_data.cal_max),
            ("carbs", "carbohydrate", input_data.carb_min, input_data.carb_max),
            ("protein", "protein", input_data.protein_min, input_data.protein_max),
            ("fat", "fat", input_data.fat_min, input_data.fat_max),
        ):
            parsed = parse_range(low, high)
            if parsed is None:
                self.fail(invalid_range_message(nutrient))
                return
            ranges[key] = parsed

        recipe_filter = RecipeFilter(
            name=(input_data.recipe_name or "").strip(),
            **ranges,
        )

        try:
            recipes = await self.recipe_data_access.search(recipe_filter)
        except RecipeSourceError:
            logger.exception("Recipe search failed for %r", recipe_filter)
            self.fail(SOURCE_UNAVAILABLE)
            return

        if not recipes:
            self.fail(NO_RESULTS)
            return

        logger.info("Found %d recipes for %r", len(recipes), recipe_filter)
        self.presenter.prepare_success_view(
            RecipeSearchOutputData(recipes=recipes, use_case_failed=False)
        )

    def fail(self, error_message: str) -> None:
        logger.info("Recipe search rejected: %s", error_message)
        self.presenter.prepare_fail_view(error_message)

    def switch_to_search_results_view(self) -> None:
        self.presenter.switch_to_results_view()

    def switch_to_profile_view(self) -> None:
        self.presenter.switch_to_profile_view()

    def switch_to_search_view(self) -> None:
        self.presenter.switch_to_search_view()
