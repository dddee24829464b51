"""View state plus a small property-change mechanism.

A presenter updates the state of a view model and then fires a property
change. Views subscribe to the view models they render.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeAlias, TypeVar

from domain.models import Recipe


@dataclass
class PropertyChangeEvent:
    source: object
    property_name: str
    old_value: Any
    new_value: Any


PropertyChangeListener: TypeAlias = Callable[[PropertyChangeEvent], None]

T = TypeVar("T")


class ViewModel(Generic[T]):
    def __init__(self, view_name: str, state: T) -> None:
        self.view_name = view_name
        self._state = state
        self._listeners: list[PropertyChangeListener] = []

    @property
    def state(self) -> T:
        return self._state

    def set_state(self, state: T) -> None:
        self._state = state

    def add_property_change_listener(self, listener: PropertyChangeListener) -> None:
        self._listeners.append(listener)

    def remove_property_change_listener(self, listener: PropertyChangeListener) -> None:
        self._listeners.remove(listener)

    def fire_property_changed(self, property_name: str = "state") -> None:
        event = PropertyChangeEvent(
            source=self,
            property_name=property_name,
            old_value=None,
            new_value=self._state,
        )
        for listener in list(self._listeners):
            listener(event)


class ViewManagerModel(ViewModel[str]):
    """The state is the name of the active view."""

    def __init__(self, active_view: str = "") -> None:
        super().__init__("view manager", active_view)

    @property
    def active_view(self) -> str:
        return self.state

    def switch_to(self, view_name: str) -> None:
        self.set_state(view_name)
        self.fire_property_changed()


@dataclass
class SignupState:
    username: str = ""
    password: str = ""
    repeat_password: str = ""
    error: str | None = None


@dataclass
class LoginState:
    username: str = ""
    password: str = ""
    error: str | None = None


@dataclass
class ProfileState:
    username: str = ""
    password: str = ""
    password_error: str | None = None


@dataclass
class RecipeSearchState:
    recipe_name: str = ""
    cal_min: str = ""
    cal_max: str = ""
    carb_min: str = ""
    carb_max: str = ""
    protein_min: str = ""
    protein_max: str = ""
    fat_min: str = ""
    fat_max: str = ""
    error: str | None = None


@dataclass
class SearchResultsState:
    recipes: list[Recipe] = field(default_factory=list)
    saved_recipe: str | None = None
    error: str | None = None


@dataclass
class SavedRecipesState:
    username: str = ""
    recipes: list[Recipe] = field(default_factory=list)
    error: str | None = None


@dataclass
class RecipeReviewState:
    recipe_id: str = ""
    recipe_name: str = ""
    rating: str = ""
    comment: str = ""
    error: str | None = None


class SignupViewModel(ViewModel[SignupState]):
    def __init__(self) -> None:
        super().__init__("sign up", SignupState())


class LoginViewModel(ViewModel[LoginState]):
    def __init__(self) -> None:
        super().__init__("log in", LoginState())


class ProfileViewModel(ViewModel[ProfileState]):
    def __init__(self) -> None:
        super().__init__("profile", ProfileState())


class RecipeSearchViewModel(ViewModel[RecipeSearchState]):
    def __init__(self) -> None:
        super().__init__("recipe search", RecipeSearchState())


class SearchResultsViewModel(ViewModel[SearchResultsState]):
    def __init__(self) -> None:
        super().__init__("search results", SearchResultsState())


class SavedRecipesViewModel(ViewModel[SavedRecipesState]):
    def __init__(self) -> None:
        super().__init__("saved recipes", SavedRecipesState())


class RecipeReviewViewModel(ViewModel[RecipeReviewState]):
    def __init__(self) -> None:
        super().__init__("recipe review", RecipeReviewState())
