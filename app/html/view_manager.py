from collections.abc import Iterable

from app.html.base import View
from app.view_models import PropertyChangeEvent, ViewManagerModel


class ViewManager:
    """Keeps track of which view is showing, like a card layout."""

    def __init__(
        self, view_manager_model: ViewManagerModel, views: Iterable[View]
    ) -> None:
        self.view_manager_model = view_manager_model
        self.views = {view.view_name: view for view in views}
        self.active = view_manager_model.active_view
        self.view_manager_model.add_property_change_listener(self.property_change)

    def property_change(self, event: PropertyChangeEvent) -> None:
        if event.property_name == "state":
            self.active = event.new_value

    @property
    def active_view(self) -> View:
        return self.views[self.active]

    def view_for(self, slug: str) -> View | None:
        for view in self.views.values():
            if view.slug == slug:
                return view
        return None

    def pop_notices(self) -> list[str]:
        notices: list[str] = []
        for view in self.views.values():
            notices += view.pop_notices()
        return notices

    def render(self) -> str:
        return self.active_view.render(notices=self.pop_notices())
