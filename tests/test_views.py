from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
import pytest

from app.config import Config
from app.html.base import UnknownAction
from app.html.profile import ProfileView
from app.html.view_manager import ViewManager
from app.presenters import ChangePasswordPresenter, RecipeSearchPresenter
from app.view_models import (
    ProfileState,
    ProfileViewModel,
    PropertyChangeEvent,
    RecipeSearchViewModel,
    SearchResultsViewModel,
    ViewManagerModel,
    ViewModel,
)
from domain.change_password import ChangePasswordOutputData
from domain.recipe_search import RecipeSearchOutputData


@pytest.fixture
def environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(Config().html_dir),
        autoescape=select_autoescape(),
    )


class FakeController:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def __getattr__(self, name: str):
        async def call(*args: Any) -> None:
            self.calls.append((name, args))

        def switch(*args: Any) -> None:
            self.calls.append((name, args))

        return switch if name.startswith("switch_") else call


def test_property_change_listeners() -> None:
    view_model = ViewModel("thing", {"n": 1})
    events: list[PropertyChangeEvent] = []
    view_model.add_property_change_listener(events.append)

    view_model.set_state({"n": 2})
    assert events == []

    view_model.fire_property_changed()
    view_model.fire_property_changed("other")
    assert [(e.property_name, e.new_value) for e in events] == [
        ("state", {"n": 2}),
        ("other", {"n": 2}),
    ]
    assert events[0].source is view_model

    view_model.remove_property_change_listener(events.append)
    view_model.fire_property_changed()
    assert len(events) == 2


def test_view_manager_follows_model(environment) -> None:
    model = ViewManagerModel()
    profile_view = ProfileView(ProfileViewModel(), environment=environment)
    manager = ViewManager(model, [profile_view])

    model.switch_to("profile")

    assert manager.active_view is profile_view
    assert manager.view_for("profile") is profile_view
    assert manager.view_for("nope") is None


def test_profile_view_reacts_to_state_and_password(environment) -> None:
    view_model = ProfileViewModel()
    view = ProfileView(view_model, environment=environment)

    view_model.set_state(ProfileState(username="alice"))
    view_model.fire_property_changed()
    assert view.username == "alice"
    assert view.notices == []

    ChangePasswordPresenter(view_model).prepare_success_view(
        ChangePasswordOutputData(username="alice")
    )
    assert view.pop_notices() == ["password updated for alice"]
    assert view.pop_notices() == []


def test_profile_view_renders(environment) -> None:
    view_model = ProfileViewModel()
    view = ProfileView(view_model, environment=environment)
    view_model.set_state(ProfileState(username="<alice>"))
    view_model.fire_property_changed()
    ChangePasswordPresenter(view_model).prepare_fail_view("New password cannot be empty.")

    html = view.render(notices=["hello"])

    assert '<span id="username">&lt;alice&gt;</span>' in html
    assert "New password cannot be empty." in html
    assert "Change Password" in html
    assert "Log Out" in html
    assert "hello" in html


@pytest.mark.asyncio
async def test_profile_view_actions(environment) -> None:
    view_model = ProfileViewModel()
    view = ProfileView(view_model, environment=environment)
    view_model.set_state(ProfileState(username="alice"))
    change_password, logout, search, saved = (FakeController() for _ in range(4))
    view.set_change_password_controller(change_password)  # type: ignore[arg-type]
    view.set_logout_controller(logout)  # type: ignore[arg-type]
    view.set_recipe_search_controller(search)  # type: ignore[arg-type]
    view.set_saved_recipes_controller(saved)  # type: ignore[arg-type]

    await view.act("change-password", {"password": "s3cret"})
    await view.act("log-out", {})
    await view.act("recipe-search", {})
    await view.act("saved-recipes", {})

    assert view_model.state.password == "s3cret"
    assert change_password.calls == [("execute", ("alice", "s3cret"))]
    assert logout.calls == [("execute", ("alice",))]
    assert search.calls == [("switch_to_search_view", ())]
    assert saved.calls == [("execute", ("alice",))]

    with pytest.raises(UnknownAction):
        await view.act("self-destruct", {})


def test_recipe_search_presenter(sample_recipes) -> None:
    manager = ViewManagerModel("recipe search")
    search_view_model = RecipeSearchViewModel()
    results_view_model = SearchResultsViewModel()
    presenter = RecipeSearchPresenter(
        manager, search_view_model, results_view_model, ProfileViewModel()
    )

    presenter.prepare_fail_view("No recipes found for the given filters.")
    assert search_view_model.state.error == "No recipes found for the given filters."
    assert manager.active_view == "recipe search"

    presenter.prepare_success_view(RecipeSearchOutputData(recipes=sample_recipes))
    assert search_view_model.state.error is None
    assert results_view_model.state.recipes == sample_recipes
    assert manager.active_view == "search results"

    presenter.switch_to_profile_view()
    assert manager.active_view == "profile"
    presenter.switch_to_results_view()
    assert manager.active_view == "search results"
    presenter.switch_to_search_view()
    assert manager.active_view == "recipe search"
