from collections.abc import Mapping
from typing import Any, Generic, TypeAlias, TypeVar

from jinja2 import Environment

from app.view_models import PropertyChangeEvent, ViewModel


Form: TypeAlias = Mapping[str, Any]

T = TypeVar("T")


class UnknownAction(ValueError):
    pass


def field(form: Form, name: str) -> str:
    value = form.get(name, "")
    return value if isinstance(value, str) else ""


class View(Generic[T]):
    """Renders one view model and forwards button presses to controllers.

    Dialog messages are queued in `notices` until the page is rendered.
    """

    template_name: str = ""

    def __init__(self, view_model: ViewModel[T], *, environment: Environment) -> None:
        self.view_model = view_model
        self.env = environment
        self.notices: list[str] = []
        self.view_model.add_property_change_listener(self.property_change)

    @property
    def view_name(self) -> str:
        return self.view_model.view_name

    @property
    def slug(self) -> str:
        return self.view_name.replace(" ", "-")

    @property
    def state(self) -> T:
        return self.view_model.state

    def property_change(self, event: PropertyChangeEvent) -> None:
        pass

    async def act(self, action: str, form: Form) -> None:
        raise UnknownAction(f"{self.view_name} has no action {action!r}")

    def pop_notices(self) -> list[str]:
        notices, self.notices = self.notices, []
        return notices

    def render(self, **context: Any) -> str:
        return self.env.get_template(self.template_name).render(
            view=self, state=self.state, **context
        )
