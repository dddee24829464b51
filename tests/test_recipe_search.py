import pytest

from domain.models import Range
from domain.recipe_search import (
    RecipeSearchInputData,
    RecipeSearchInteractor,
    RecipeSearchOutputData,
    parse_bound,
    parse_range,
)


@pytest.mark.parametrize(
    "value,expected",
    (
        (None, None),
        ("", None),
        ("   ", None),
        ("0", 0),
        ("250", 250),
        (" 250 ", 250),
        ("+5", 5),
        ("-3", -3),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ),
)
def test_parse_bound(value: str | None, expected: int | None) -> None:
    assert parse_bound(value) == expected


@pytest.mark.parametrize(
    "value",
    (
        "abc",
        "1.5",
        "1_000",
        "1e3",
        "--1",
        "5 0",
        "2147483648",
        "-2147483649",
        "99999999999999999999",
    ),
)
def test_parse_bound_rejects_non_integers(value: str) -> None:
    with pytest.raises(ValueError):
        parse_bound(value)


@pytest.mark.parametrize(
    "low,high,expected",
    (
        ("100", "200", Range(100, 200)),
        ("200", "200", Range(200, 200)),
        ("100", "", Range(100, None)),
        ("", "200", Range(None, 200)),
        (None, None, Range()),
        ("300", "200", None),
        ("abc", "200", None),
        ("100", "abc", None),
        ("abc", "", None),
    ),
)
def test_parse_range(low: str | None, high: str | None, expected: Range | None) -> None:
    assert parse_range(low, high) == expected


@pytest.mark.asyncio
async def test_all_parameters_blank(recipes, presenter) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(RecipeSearchInputData(recipe_name="  ", cal_min=""))
    assert presenter.failures == ["At least one filter parameter must be provided."]
    assert recipes.filters == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "input_data,message",
    (
        (
            RecipeSearchInputData(cal_min="500", cal_max="100"),
            "Invalid calorie range: Minimum cannot be greater than maximum.",
        ),
        (
            RecipeSearchInputData(carb_min="50", carb_max="10"),
            "Invalid carbohydrate range: Minimum cannot be greater than maximum.",
        ),
        (
            RecipeSearchInputData(protein_min="x", protein_max="10"),
            "Invalid protein range: Minimum cannot be greater than maximum.",
        ),
        (
            RecipeSearchInputData(fat_min="10", fat_max="1"),
            "Invalid fat range: Minimum cannot be greater than maximum.",
        ),
        (
            RecipeSearchInputData(cal_max="99999999999999999999"),
            "Invalid calorie range: Minimum cannot be greater than maximum.",
        ),
        (
            RecipeSearchInputData(recipe_name="soup", fat_min="-99999999999"),
            "Invalid fat range: Minimum cannot be greater than maximum.",
        ),
    ),
)
async def test_invalid_ranges(recipes, presenter, input_data, message) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(input_data)
    assert presenter.failures == [message]
    assert recipes.filters == []


@pytest.mark.asyncio
async def test_first_invalid_range_wins(recipes, presenter) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(
        RecipeSearchInputData(cal_min="9", cal_max="1", fat_min="9", fat_max="1")
    )
    assert presenter.calls == [
        (
            "prepare_fail_view",
            "Invalid calorie range: Minimum cannot be greater than maximum.",
        )
    ]


@pytest.mark.asyncio
async def test_open_ranges_reach_the_data_source(recipes, presenter) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(RecipeSearchInputData(cal_max="300", protein_min="16"))

    (recipe_filter,) = recipes.filters
    assert recipe_filter.name == ""
    assert recipe_filter.calories == Range(None, 300)
    assert recipe_filter.protein == Range(16, None)
    assert not recipe_filter.carbs.is_bounded
    assert not recipe_filter.fat.is_bounded

    name, output = presenter.calls[0]
    assert name == "prepare_success_view"
    assert isinstance(output, RecipeSearchOutputData)
    assert [r.id for r in output.recipes] == ["parfait"]
    assert output.use_case_failed is False


@pytest.mark.asyncio
async def test_name_only(recipes, presenter) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(RecipeSearchInputData(recipe_name=" lasagne "))
    assert recipes.filters[0].name == "lasagne"
    (_, output), = presenter.calls
    assert [r.name for r in output.recipes] == ["Beef Lasagne"]


@pytest.mark.asyncio
async def test_no_recipes_found(recipes, presenter) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(RecipeSearchInputData(recipe_name="pavlova"))
    assert presenter.failures == ["No recipes found for the given filters."]


@pytest.mark.asyncio
async def test_data_source_failure(recipes, presenter) -> None:
    recipes.broken = True
    interactor = RecipeSearchInteractor(recipes, presenter)
    await interactor.execute(RecipeSearchInputData(recipe_name="soup"))
    assert presenter.failures == [
        "Recipe search is unavailable right now. Please try again later."
    ]


def test_switches(recipes, presenter) -> None:
    interactor = RecipeSearchInteractor(recipes, presenter)
    interactor.switch_to_search_results_view()
    interactor.switch_to_profile_view()
    interactor.switch_to_search_view()
    assert presenter.names == [
        "switch_to_results_view",
        "switch_to_profile_view",
        "switch_to_search_view",
    ]
